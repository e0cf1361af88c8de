"""
Shared Kernel time primitives.

    from tempus.shared_kernel.primitives import PointInTime, TimeUnit
"""

from .point_in_time import PointInTime
from .time_unit import TimeUnit

__all__ = [
    "PointInTime",
    "TimeUnit",
]
