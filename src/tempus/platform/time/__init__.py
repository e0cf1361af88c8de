from .clock_factory import build_clock
from .fixed_clock import FixedClock
from .system_clock import SystemClock

__all__ = [
    "FixedClock",
    "SystemClock",
    "build_clock",
]
