# infrastructure/ffmpeg/modes/trim_both_ends_mode.py
# Cut both ends at once: seek past the head, keep everything up to the tail.

from typing import List, Optional, Tuple

from application.ports.trim_mode_port import ITrimMode
from trimmer.errors import ValidationError
from trimmer.utils import format_seconds


class TrimBothEndsMode(ITrimMode):
    """Remove `trim_start` from the start and `trim_end` from the end (codec copy)."""

    @property
    def mode_id(self) -> str:
        return "trim"

    @property
    def display_name(self) -> str:
        return "Trim both ends"

    @property
    def summary(self) -> str:
        return "Cut TRIM_START from the start and TRIM_END from the end."

    @property
    def param_names(self) -> Tuple[str, ...]:
        return ("trim_start", "trim_end")

    @property
    def needs_duration(self) -> bool:
        return True

    def check_duration(self, params: Tuple[float, ...], duration: float) -> None:
        trim_start, trim_end = params
        total_trim: float = trim_start + trim_end
        if duration <= total_trim:
            raise ValidationError(
                "Duration too short for trimming.",
                hint=f"The input lasts {duration:.3f}s; cannot cut {total_trim:.3f}s in total.",
            )

    def build_args(
        self,
        input_path: str,
        output_path: str,
        params: Tuple[float, ...],
        duration: Optional[float] = None,
    ) -> List[str]:
        trim_start, trim_end = params
        return [
            "-ss", format_seconds(trim_start),
            "-i", input_path,
            "-t", format_seconds(duration - trim_start - trim_end),
            "-c", "copy",
            output_path,
        ]
