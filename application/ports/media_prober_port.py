# application/ports/media_prober_port.py
# Port interface for looking up the total duration of a media file.

from abc import ABC, abstractmethod


class IMediaProber(ABC):
    """Abstract base class for duration probes."""

    @abstractmethod
    def probe(self, input_path: str) -> float:
        """
        Return the container duration of `input_path` in seconds.

        Raises:
            ProbeError: the probe could not run or its output was unusable.
        """
        ...
