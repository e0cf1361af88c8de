from __future__ import annotations

from typing import Protocol

from tempus.shared_kernel.primitives import PointInTime


class Clock(Protocol):
    """
    Clock: the only source of "current time" for code that needs it.

    Time-dependent code receives a Clock instead of reading the system time,
    so tests can substitute a fixed value.

    Contract:
    - now() -> PointInTime, always UTC, never fails

    Related:
      - src/tempus/platform/time/system_clock.py
      - src/tempus/platform/time/fixed_clock.py
    """

    def now(self) -> PointInTime:
        ...
