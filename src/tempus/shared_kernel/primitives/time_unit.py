from __future__ import annotations

from datetime import timedelta
from enum import Enum


class TimeUnit(str, Enum):
    """
    TimeUnit: units accepted by `PointInTime.plus`.

    Duration units map to an exact `timedelta`; calendar units shift the
    month field (day-of-month is clamped to the end of the target month).

    Related: .point_in_time.PointInTime.plus
    """

    MICROS = "micros"
    MILLIS = "millis"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    HALF_DAYS = "half_days"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"

    @property
    def is_calendar_based(self) -> bool:
        return self in _MONTHS_PER_UNIT

    def to_timedelta(self, amount: int) -> timedelta:
        """
        Exact duration of `amount` units.

        Raises:
            ValueError: For calendar units, which have no fixed length.
        """
        step = _DURATION_PER_UNIT.get(self)
        if step is None:
            raise ValueError(f"{self.name} has no fixed duration")
        return step * amount

    def to_months(self, amount: int) -> int:
        """
        Number of calendar months in `amount` units.

        Raises:
            ValueError: For duration units.
        """
        months = _MONTHS_PER_UNIT.get(self)
        if months is None:
            raise ValueError(f"{self.name} is not a calendar unit")
        return months * amount


_DURATION_PER_UNIT = {
    TimeUnit.MICROS: timedelta(microseconds=1),
    TimeUnit.MILLIS: timedelta(milliseconds=1),
    TimeUnit.SECONDS: timedelta(seconds=1),
    TimeUnit.MINUTES: timedelta(minutes=1),
    TimeUnit.HOURS: timedelta(hours=1),
    TimeUnit.HALF_DAYS: timedelta(hours=12),
    TimeUnit.DAYS: timedelta(days=1),
    TimeUnit.WEEKS: timedelta(weeks=1),
}

_MONTHS_PER_UNIT = {
    TimeUnit.MONTHS: 1,
    TimeUnit.YEARS: 12,
    TimeUnit.DECADES: 120,
    TimeUnit.CENTURIES: 1200,
    TimeUnit.MILLENNIA: 12000,
}
