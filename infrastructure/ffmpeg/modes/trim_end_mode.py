# infrastructure/ffmpeg/modes/trim_end_mode.py
# Cut the last N seconds: keep `duration - seconds` of the input.

from typing import List, Optional, Tuple

from application.ports.trim_mode_port import ITrimMode
from trimmer.errors import ValidationError
from trimmer.utils import format_seconds


class TrimEndMode(ITrimMode):
    """Remove `seconds` from the end of the input (codec copy)."""

    @property
    def mode_id(self) -> str:
        return "trim-end"

    @property
    def display_name(self) -> str:
        return "Trim end"

    @property
    def summary(self) -> str:
        return "Cut SECONDS from the end of the input."

    @property
    def param_names(self) -> Tuple[str, ...]:
        return ("seconds",)

    @property
    def needs_duration(self) -> bool:
        return True

    def check_duration(self, params: Tuple[float, ...], duration: float) -> None:
        (seconds,) = params
        if duration <= seconds:
            raise ValidationError(
                "Duration too short.",
                hint=f"The input lasts {duration:.3f}s; cannot cut {seconds:.3f}s from its end.",
            )

    def build_args(
        self,
        input_path: str,
        output_path: str,
        params: Tuple[float, ...],
        duration: Optional[float] = None,
    ) -> List[str]:
        (seconds,) = params
        return [
            "-i", input_path,
            "-c", "copy",
            "-t", format_seconds(duration - seconds),
            output_path,
        ]
