# infrastructure/ffmpeg/modes/trim_start_mode.py
# Cut the first N seconds: seek past them and stream-copy the rest.

from typing import List, Optional, Tuple

from application.ports.trim_mode_port import ITrimMode
from trimmer.utils import format_seconds


class TrimStartMode(ITrimMode):
    """Remove `seconds` from the start of the input (codec copy)."""

    @property
    def mode_id(self) -> str:
        return "trim-start"

    @property
    def display_name(self) -> str:
        return "Trim start"

    @property
    def summary(self) -> str:
        return "Cut SECONDS from the start of the input."

    @property
    def param_names(self) -> Tuple[str, ...]:
        return ("seconds",)

    def build_args(
        self,
        input_path: str,
        output_path: str,
        params: Tuple[float, ...],
        duration: Optional[float] = None,
    ) -> List[str]:
        (seconds,) = params
        return [
            "-ss", format_seconds(seconds),
            "-i", input_path,
            "-c", "copy",
            output_path,
        ]
