from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Callable

from ..errors import CanNotCreatePointInTimeError
from ..zones import UTC, is_utc_zone
from .time_unit import TimeUnit
from .timestamp_formats import (
    format_message,
    format_mysql,
    format_rfc3339,
    parse_iso8601_format,
    parse_message_format,
    parse_mysql_format,
    parse_rfc3339_format,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class PointInTime:
    """
    PointInTime: immutable instant in UTC with microsecond precision.

    Rules:
    - the wrapped datetime must carry a fixed zero offset; anything else
      (naive, non-zero offset, named region zone) is rejected
    - every factory funnels through `__post_init__`, so no live instance is
      ever outside UTC
    - "modifications" such as `plus` return new instances

    Related:
      - src/tempus/shared_kernel/primitives/timestamp_formats.py
      - src/tempus/application/ports/clock.py
    """

    value: datetime

    def __post_init__(self) -> None:
        dt = self.value
        if not isinstance(dt, datetime):
            raise TypeError(f"PointInTime requires a datetime, got {type(dt).__name__}")
        if not is_utc_zone(dt.tzinfo):
            raise CanNotCreatePointInTimeError.from_incompatible_zone(dt)
        if dt.tzinfo is not UTC:
            # -00:00 and other zero-offset timezone objects collapse to timezone.utc
            object.__setattr__(self, "value", dt.replace(tzinfo=UTC))

    @classmethod
    def from_instant(cls, instant: datetime) -> PointInTime:
        """
        Wrap an absolute instant, converting it to UTC.

        Args:
            instant: Timezone-aware datetime in any zone.
        Returns:
            PointInTime: Same instant expressed in UTC.
        Assumptions:
            Aware datetimes denote absolute instants regardless of their zone.
        Raises:
            TypeError: If `instant` is naive; a naive datetime is not an instant.
        Side Effects:
            None.
        """
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise TypeError("PointInTime.from_instant requires a timezone-aware datetime (naive datetime is forbidden)")  # noqa: E501
        return cls(instant.astimezone(UTC))

    @classmethod
    def from_zoned_value(cls, value: datetime, zone: tzinfo | None = None) -> PointInTime:
        """
        Wrap a datetime that must already be expressed in UTC.

        No implicit conversion happens: a non-UTC zone is an error, not a hint.

        Args:
            value: Datetime to wrap.
            zone: Zone of `value`; defaults to `value.tzinfo`. When given, the
              wall-clock fields of a naive `value` are read in this zone.
        Returns:
            PointInTime: Wrapped value.
        Assumptions:
            An aware `value` keeps its own zone; `zone` never relabels it.
        Raises:
            CanNotCreatePointInTimeError: Kind `zone_incompatibility` when the
              zone of `value` or `zone` is not UTC.
        Side Effects:
            None.
        """
        if zone is not None:
            if value.tzinfo is not None and not is_utc_zone(value.tzinfo):
                raise CanNotCreatePointInTimeError.from_incompatible_zone(value)
            value = value.replace(tzinfo=zone)
        return cls(value)

    @classmethod
    def from_serialized_string(cls, text: str) -> PointInTime:
        """
        Parse message serialization format, e.g. "2024-03-07 10:28:55.437286+0000".
        """
        return cls._parse(text, parse_message_format, format_name="message")

    @classmethod
    def from_rfc3339_string(cls, text: str) -> PointInTime:
        """
        Parse RFC3339 with microseconds and offset, e.g. "2024-03-07T10:28:55.437286+00:00".
        """
        return cls._parse(text, parse_rfc3339_format, format_name="rfc3339")

    @classmethod
    def from_mysql_string(cls, text: str) -> PointInTime:
        """
        Parse MySQL DATETIME(6) text, e.g. "2024-03-07 10:28:55.437286".

        The text has no zone; its wall-clock value is taken as UTC.
        """
        return cls._parse(text, parse_mysql_format, format_name="mysql", zone=UTC)

    @classmethod
    def from_iso8601_string(cls, text: str) -> PointInTime:
        """
        Parse general ISO-8601 extended text, e.g. "1985-04-12T23:20:50.52Z".
        """
        return cls._parse(text, parse_iso8601_format, format_name="iso8601")

    @classmethod
    def _parse(
        cls,
        text: str,
        parser: Callable[[str], datetime],
        *,
        format_name: str,
        zone: tzinfo | None = None,
    ) -> PointInTime:
        try:
            parsed = parser(text)
        except ValueError as error:
            log.debug("rejected %s timestamp %r: %s", format_name, text, error)
            raise CanNotCreatePointInTimeError.from_invalid_string_format(text, error) from error
        return cls.from_zoned_value(parsed, zone)

    def plus(self, amount: int, unit: TimeUnit) -> PointInTime:
        """
        Return a new PointInTime offset by `amount` units (negative amounts subtract).

        Calendar units (months and larger) clamp the day to the end of the
        target month: 2024-01-31 plus 1 month is 2024-02-29.

        Raises:
            OverflowError: If the result falls outside years 1..9999.
        """
        if unit.is_calendar_based:
            return PointInTime(_add_months(self.value, unit.to_months(amount)))
        return PointInTime(self.value + unit.to_timedelta(amount))

    def equals(self, other: PointInTime) -> bool:
        return self.value == other.value

    def is_before(self, other: PointInTime) -> bool:
        return self.value < other.value

    def is_after(self, other: PointInTime) -> bool:
        return self.value > other.value

    def duration_between(self, other: PointInTime) -> timedelta:
        """Signed elapsed time from this instant to `other` (positive when `other` is later)."""
        return other.value - self.value

    def to_date(self) -> date:
        """UTC calendar date of this instant."""
        return self.value.date()

    def to_datetime(self) -> datetime:
        return self.value

    def to_serialized_string(self) -> str:
        """
        Message serialization format, e.g. "2024-03-07 10:28:55.437286+0000".
        """
        return format_message(self.value)

    def to_mysql_string(self) -> str:
        """
        MySQL DATETIME(6) text in UTC, e.g. "2024-03-07 10:28:55.437286".
        """
        return format_mysql(self.value)

    def to_rfc3339_string(self) -> str:
        """
        RFC3339 text in UTC, e.g. "2024-03-07T10:28:55.437286+00:00".
        """
        return format_rfc3339(self.value)

    def __str__(self) -> str:
        return self.to_serialized_string()


def _add_months(value: datetime, months: int) -> datetime:
    month_index = value.year * 12 + (value.month - 1) + months
    year, month_zero_based = divmod(month_index, 12)
    if not 1 <= year <= 9999:
        raise OverflowError(f"year {year} is out of range")
    month = month_zero_based + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)
