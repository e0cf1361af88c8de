from __future__ import annotations

from datetime import datetime, timezone

from tempus.application.ports.clock import Clock
from tempus.shared_kernel.primitives import PointInTime


class SystemClock(Clock):
    """
    SystemClock: platform implementation of `Clock` backed by the system wall clock.

    Stateless; one instance can be shared process-wide. For tests use `FixedClock`.

    Related:
      - src/tempus/application/ports/clock.py
      - src/tempus/platform/time/fixed_clock.py
    """

    def now(self) -> PointInTime:
        """
        Return current instant in UTC.

        Args:
            None.
        Returns:
            PointInTime: Current UTC instant.
        Assumptions:
            System clock is reasonably synchronized.
        Raises:
            None.
        Side Effects:
            Reads system wall clock.
        """
        return PointInTime.from_zoned_value(datetime.now(timezone.utc))
