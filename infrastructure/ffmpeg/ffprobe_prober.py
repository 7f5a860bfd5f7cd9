# infrastructure/ffmpeg/ffprobe_prober.py
# Implementation of IMediaProber using the ffprobe binary.

import logging
import math
import subprocess
from typing import List, Optional

from application.ports.media_prober_port import IMediaProber
from trimmer.errors import ProbeError
from trimmer.utils import get_ffprobe_name

logger = logging.getLogger("ezff")


class FFprobeProber(IMediaProber):
    """Read the container-level duration with `ffprobe -show_entries format=duration`."""

    def __init__(self, ffprobe: Optional[str] = None) -> None:
        self.ffprobe: str = ffprobe or get_ffprobe_name()

    def build_args(self, input_path: str) -> List[str]:
        # Quiet logging, bare number on stdout: no section header, no key
        return [
            self.ffprobe,
            "-v", "quiet",
            "-show_entries", "format=duration",
            "-of", "csv=p=0",
            input_path,
        ]

    def probe(self, input_path: str) -> float:
        cmd: List[str] = self.build_args(input_path)
        logger.debug("probing duration: %s", cmd)

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
        except OSError as exc:
            raise ProbeError(
                f"Error getting duration: could not run '{self.ffprobe}': {exc}",
                hint="Install FFmpeg (ffprobe ships with it) or set EZFF_FFPROBE.",
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise ProbeError(
                f"Error getting duration: {self.ffprobe} exited with status "
                f"{exc.returncode} for '{input_path}'.",
                hint="Check that the input exists and is a media file.",
            ) from exc

        raw: str = result.stdout.strip()
        try:
            duration: float = float(raw)
        except ValueError as exc:
            raise ProbeError(
                f"Error getting duration: unexpected ffprobe output {raw!r} for '{input_path}'.",
                hint="The container may not report a duration.",
            ) from exc

        if not math.isfinite(duration) or duration < 0:
            raise ProbeError(
                f"Error getting duration: invalid duration {raw!r} for '{input_path}'."
            )

        logger.debug("duration of %s: %.6f s", input_path, duration)
        return duration
