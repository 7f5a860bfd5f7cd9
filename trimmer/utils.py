import math
import os
import warnings
from typing import Tuple

# pydub warns at import time when ffmpeg is missing; the CLI reports that
# itself after parsing, honouring --quiet.
with warnings.catch_warnings():
    warnings.simplefilter("ignore", RuntimeWarning)
    from pydub.utils import which

from trimmer.errors import UsageError

# Suffix appended to the input name when no --output is given
DEFAULT_SUFFIX: str = "_trim"

# Digits after the decimal point for every time value handed to ffmpeg
TIME_PRECISION: int = 6

# Environment overrides for the external binaries
FFMPEG_ENV_VAR: str = "EZFF_FFMPEG"
FFPROBE_ENV_VAR: str = "EZFF_FFPROBE"


# Tool discovery

def get_ffmpeg_name() -> str:
    """Return the ffmpeg executable: $EZFF_FFMPEG, else the one on PATH."""
    return os.environ.get(FFMPEG_ENV_VAR) or which("ffmpeg") or "ffmpeg"


def get_ffprobe_name() -> str:
    """Return the ffprobe executable: $EZFF_FFPROBE, else the one on PATH."""
    return os.environ.get(FFPROBE_ENV_VAR) or which("ffprobe") or "ffprobe"


# Time helpers

def format_seconds(value: float) -> str:
    """
    Format a time value for ffmpeg as fixed-point with six decimals.

    Example: 90      →  '90.000000'
    Example: 1.25    →  '1.250000'

    %-formatting ignores the process locale, so the separator is always '.'.
    """
    return "%.*f" % (TIME_PRECISION, value)


def parse_seconds(raw: str, name: str) -> float:
    """Parse a command-line number of seconds, raising UsageError when invalid."""
    try:
        value: float = float(raw)
    except (TypeError, ValueError) as exc:
        raise UsageError(
            f"Invalid {name}: '{raw}'.",
            hint=f"{name} must be a number of seconds, e.g. 12.5",
        ) from exc

    if not math.isfinite(value):
        raise UsageError(
            f"Invalid {name}: '{raw}'.",
            hint=f"{name} must be a finite number of seconds.",
        )
    return value


# Path helpers

def split_extension(base: str) -> Tuple[str, str]:
    """
    Split a file name at its last dot; the extension keeps the dot.

    Example: clip.mp4   →  ('clip', '.mp4')
    Example: .mp4       →  ('', '.mp4')
    Example: recording  →  ('recording', '')

    Unlike os.path.splitext, a leading dot also starts an extension.
    """
    dot: int = base.rfind(".")
    if dot < 0:
        return base, ""
    return base[:dot], base[dot:]


def resolve_output_path(input_path: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """
    Derive an output path next to the input that does not exist yet.

    Example: clip.mp4  →  clip_trim.mp4
    Example: clip.mp4  →  clip_trim1.mp4   (clip_trim.mp4 already exists)
    Example: clip.mp4  →  clip_trim2.mp4   (clip_trim1.mp4 exists as well)

    Nothing is created on disk. Another process may still create the same
    path before ffmpeg writes it.
    """
    directory: str
    base: str
    directory, base = os.path.split(input_path)
    name: str
    ext: str
    name, ext = split_extension(base)

    candidate: str = os.path.join(directory, f"{name}{suffix}{ext}")
    index: int = 1
    while os.path.lexists(candidate):
        candidate = os.path.join(directory, f"{name}{suffix}{index}{ext}")
        index += 1
    return candidate
