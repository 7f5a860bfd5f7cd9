from .trim_start_mode import TrimStartMode
from .trim_end_mode import TrimEndMode
from .trim_mid_mode import TrimMidMode
from .trim_both_ends_mode import TrimBothEndsMode

__all__ = [
    "TrimStartMode",
    "TrimEndMode",
    "TrimMidMode",
    "TrimBothEndsMode",
]
