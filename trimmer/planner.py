# trimmer/planner.py
# Maps a TrimRequestDTO to the exact ffmpeg command that performs it.

import logging
from typing import Dict, Iterable, Optional

from application.dto.trim_dto import ExternalCommandDTO, TrimRequestDTO
from application.ports.media_prober_port import IMediaProber
from application.ports.trim_mode_port import ITrimMode
from infrastructure.ffmpeg.modes import (
    TrimStartMode,
    TrimEndMode,
    TrimMidMode,
    TrimBothEndsMode,
)
from trimmer.errors import UsageError
from trimmer.utils import DEFAULT_SUFFIX, get_ffmpeg_name, resolve_output_path

logger = logging.getLogger("ezff")

# ── Mode Registry ────────────────────────────────────────────────────
# Maps CLI verbs to mode instances, in the order the usage text lists them.
MODE_REGISTRY: Dict[str, ITrimMode] = {
    mode.mode_id: mode
    for mode in (TrimStartMode(), TrimEndMode(), TrimMidMode(), TrimBothEndsMode())
}


def get_mode(mode_id: str, registry: Optional[Dict[str, ITrimMode]] = None) -> ITrimMode:
    """Look up a trim mode by verb, raising UsageError for unknown verbs."""
    modes: Dict[str, ITrimMode] = registry if registry is not None else MODE_REGISTRY
    try:
        return modes[mode_id]
    except KeyError as exc:
        raise UsageError(
            f"Unknown command: '{mode_id}'.",
            hint=f"Choose one of: {', '.join(modes)}",
        ) from exc


class CommandPlanner:
    """
    Validate a trim request and build its ffmpeg command.

    The duration is probed only for modes that need it, and only after the
    duration-independent checks have passed. When the request carries no
    output path, one is derived from the input with `suffix`.
    """

    def __init__(
        self,
        prober: IMediaProber,
        ffmpeg: Optional[str] = None,
        suffix: str = DEFAULT_SUFFIX,
        modes: Optional[Iterable[ITrimMode]] = None,
    ) -> None:
        self.prober: IMediaProber = prober
        self.ffmpeg: str = ffmpeg or get_ffmpeg_name()
        self.suffix: str = suffix
        self.modes: Dict[str, ITrimMode] = (
            {m.mode_id: m for m in modes} if modes is not None else MODE_REGISTRY
        )

    def plan(self, request: TrimRequestDTO) -> ExternalCommandDTO:
        mode: ITrimMode = get_mode(request.mode, self.modes)

        params = tuple(request.parameters)
        if len(params) != len(mode.param_names):
            raise UsageError(
                f"{mode.mode_id} expects {len(mode.param_names)} time value(s) "
                f"({', '.join(mode.param_names)}), got {len(params)}."
            )
        mode.check_params(params)

        duration: Optional[float] = None
        if mode.needs_duration:
            duration = self.prober.probe(request.input_path)
            mode.check_duration(params, duration)

        output_path: str = request.output_path or resolve_output_path(
            request.input_path, self.suffix
        )

        command = ExternalCommandDTO(
            program=self.ffmpeg,
            args=tuple(mode.build_args(request.input_path, output_path, params, duration)),
            output_path=output_path,
        )
        logger.debug("planned %s: %s", mode.mode_id, command.argv)
        return command
