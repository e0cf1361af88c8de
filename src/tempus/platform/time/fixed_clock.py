from __future__ import annotations

from tempus.application.ports.clock import Clock
from tempus.shared_kernel.primitives import PointInTime


class FixedClock(Clock):
    """
    FixedClock: deterministic `Clock` returning the same PointInTime on every call.

    Related:
      - src/tempus/application/ports/clock.py
      - src/tempus/platform/time/clock_factory.py
    """

    def __init__(self, now_value: PointInTime) -> None:
        """Store fixed value returned by `now()` calls."""
        if not isinstance(now_value, PointInTime):
            raise TypeError(f"FixedClock requires a PointInTime, got {type(now_value).__name__}")
        self._now_value = now_value

    @classmethod
    def from_serialized_string(cls, text: str) -> FixedClock:
        """
        Build clock from a message-format literal, e.g. "2024-03-07 10:28:55.437286+0000".

        Raises:
            CanNotCreatePointInTimeError: If `text` is not a valid UTC message timestamp.
        """
        return cls(PointInTime.from_serialized_string(text))

    def now(self) -> PointInTime:
        """Return preconfigured timestamp."""
        return self._now_value

    def __repr__(self) -> str:
        return f"FixedClock({str(self._now_value)!r})"
