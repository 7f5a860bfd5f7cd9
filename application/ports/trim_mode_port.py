# application/ports/trim_mode_port.py
# Port interface for the trim modes. Each mode owns its validation rules
# and the exact ffmpeg argument list it produces.

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from trimmer.errors import ValidationError


class ITrimMode(ABC):
    """Abstract base class for all trim modes (one per CLI verb)."""

    @property
    @abstractmethod
    def mode_id(self) -> str:
        """CLI verb selecting this mode (e.g., 'trim-start', 'trim')."""
        ...

    @property
    def display_name(self) -> str:
        """Human-readable name for the mode."""
        return self.mode_id

    @property
    def summary(self) -> str:
        """One-line help text for the verb."""
        return self.display_name

    @property
    @abstractmethod
    def param_names(self) -> Tuple[str, ...]:
        """Names of the numeric positional arguments, in command-line order."""
        ...

    @property
    def needs_duration(self) -> bool:
        """True when build_args needs the probed duration of the input."""
        return False

    def check_params(self, params: Tuple[float, ...]) -> None:
        """
        Validate parameters that do not depend on the input's duration.

        The default rule rejects negative times.
        """
        for name, value in zip(self.param_names, params):
            if value < 0:
                raise ValidationError(
                    f"{name} must not be negative. Got: {value}.",
                    hint="Times are given in seconds from the start of the input.",
                )

    def check_duration(self, params: Tuple[float, ...], duration: float) -> None:
        """Validate parameters against the probed duration (no-op by default)."""

    @abstractmethod
    def build_args(
        self,
        input_path: str,
        output_path: str,
        params: Tuple[float, ...],
        duration: Optional[float] = None,
    ) -> List[str]:
        """
        Build the ffmpeg arguments (program name excluded) for this mode.

        Args:
            input_path:  Source media file.
            output_path: Destination, always the final argument.
            params:      Validated parameters, ordered as param_names.
            duration:    Probed duration; None unless needs_duration.

        Returns:
            Argument list in the fixed order ffmpeg expects.
        """
        ...
