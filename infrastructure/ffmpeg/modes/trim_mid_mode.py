# infrastructure/ffmpeg/modes/trim_mid_mode.py
# Cut a window out of the middle. Needs a filter graph, so ffmpeg re-encodes.

from typing import List, Optional, Tuple

from application.ports.trim_mode_port import ITrimMode
from trimmer.errors import ValidationError
from trimmer.utils import format_seconds

# Drop frames/samples inside [start, end] and re-time the rest continuously
VIDEO_FILTER: str = "select='not(between(t,{start},{end}))',setpts=N/FRAME_RATE/TB"
AUDIO_FILTER: str = "aselect='not(between(t,{start},{end}))',asetpts=N/SR/TB"


class TrimMidMode(ITrimMode):
    """Remove the segment between `start_cut` and `end_cut` (re-encode)."""

    @property
    def mode_id(self) -> str:
        return "trim-mid"

    @property
    def display_name(self) -> str:
        return "Trim middle"

    @property
    def summary(self) -> str:
        return "Cut the segment between START_CUT and END_CUT (re-encodes)."

    @property
    def param_names(self) -> Tuple[str, ...]:
        return ("start_cut", "end_cut")

    def check_params(self, params: Tuple[float, ...]) -> None:
        super().check_params(params)
        start_cut, end_cut = params
        if start_cut >= end_cut:
            raise ValidationError(
                "start_cut must be less than end_cut.",
                hint=f"Got start_cut={start_cut} and end_cut={end_cut}.",
            )

    def build_args(
        self,
        input_path: str,
        output_path: str,
        params: Tuple[float, ...],
        duration: Optional[float] = None,
    ) -> List[str]:
        start: str = format_seconds(params[0])
        end: str = format_seconds(params[1])
        return [
            "-i", input_path,
            "-vf", VIDEO_FILTER.format(start=start, end=end),
            "-af", AUDIO_FILTER.format(start=start, end=end),
            output_path,
        ]
