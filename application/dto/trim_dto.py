# application/dto/trim_dto.py
# Data Transfer Objects for one trim invocation: the request built from the
# command line and the ffmpeg command planned from it.

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class TrimRequestDTO:
    """Single trim request, parsed once from the command line."""
    mode: str                          # trim-start | trim-end | trim-mid | trim
    input_path: str
    parameters: Tuple[float, ...] = ()
    output_path: Optional[str] = None  # None = derive from input_path


@dataclass(frozen=True)
class ExternalCommandDTO:
    """One planned invocation of the media-processing binary."""
    program: str
    args: Tuple[str, ...]
    output_path: str

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]
