"""
tempus: UTC-only timestamps, serialization formats and an injectable Clock.

    from tempus import Clock, FixedClock, PointInTime, SystemClock, TimeUnit
"""

from tempus.application.ports import Clock
from tempus.platform.time import FixedClock, SystemClock
from tempus.shared_kernel.errors import (
    CanNotCreatePointInTimeError,
    PointInTimeErrorKind,
    TimeError,
)
from tempus.shared_kernel.primitives import PointInTime, TimeUnit

__all__ = [
    "CanNotCreatePointInTimeError",
    "Clock",
    "FixedClock",
    "PointInTime",
    "PointInTimeErrorKind",
    "SystemClock",
    "TimeError",
    "TimeUnit",
]
