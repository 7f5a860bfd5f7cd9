# trimmer/errors.py
# Error kinds raised while planning or running a trim.
# Every kind is terminal: the CLI reports it once and exits with status 1.

from typing import Optional


class TrimError(Exception):
    """Base class for all ezff failures. `hint` is shown under the message."""

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.hint: Optional[str] = hint


class UsageError(TrimError):
    """Missing or malformed command-line arguments, or an unknown verb."""

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        usage: Optional[str] = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.usage: Optional[str] = usage


class ValidationError(TrimError, ValueError):
    """Trim parameters are inconsistent with each other or with the duration."""


class ProbeError(TrimError):
    """The duration of the input could not be obtained from ffprobe."""


class ExecutionError(TrimError):
    """ffmpeg could not be started or exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        returncode: Optional[int] = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: Optional[int] = returncode
