"""
Pure parse/format functions for the supported timestamp text encodings.

Docs:
  - message:  `YYYY-MM-DD HH:MM:SS.ffffff+HHMM`   e.g. 2024-03-07 10:28:55.437286+0000
  - mysql:    `YYYY-MM-DD HH:MM:SS.ffffff`        e.g. 2024-03-07 10:28:55.437286
  - rfc3339:  `YYYY-MM-DDTHH:MM:SS.ffffff+HH:MM`  e.g. 2024-03-07T10:28:55.437286+00:00
  - iso8601:  extended ISO-8601, input only       e.g. 1985-04-12T23:20:50.52Z
Related: .point_in_time.PointInTime

Parsers return the datetime exactly as written (zone validation is the caller's
job) and raise `ValueError` on any textual or calendar deviation. Parsing never
consults `strptime`, locale or the system zone.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from ..zones import format_offset

_DATE = r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
_TIME = r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})\.(?P<fraction>[0-9]{6})"

_MESSAGE_RE = re.compile(_DATE + " " + _TIME + r"(?P<offset>[+-][0-9]{4})", re.ASCII)
_MYSQL_RE = re.compile(_DATE + " " + _TIME, re.ASCII)
_RFC3339_RE = re.compile(_DATE + "T" + _TIME + r"(?P<offset>[+-][0-9]{2}:[0-9]{2})", re.ASCII)
_ISO8601_RE = re.compile(
    _DATE
    + r"[Tt](?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})"
    + r"(?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]{1,9}))?)?"
    + r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2}(?::[0-9]{2})?)",
    re.ASCII,
)

# Widest offset accepted on input, matching common zone databases.
_MAX_OFFSET = timedelta(hours=18)


def parse_message_format(text: str) -> datetime:
    """Parse `YYYY-MM-DD HH:MM:SS.ffffff±HHMM` into an aware datetime."""
    match = _require_match(_MESSAGE_RE, text, layout="YYYY-MM-DD HH:MM:SS.ffffff+HHMM")
    return _build_datetime(match, tz=_parse_offset(match.group("offset")))


def parse_mysql_format(text: str) -> datetime:
    """Parse `YYYY-MM-DD HH:MM:SS.ffffff` into a naive datetime."""
    match = _require_match(_MYSQL_RE, text, layout="YYYY-MM-DD HH:MM:SS.ffffff")
    return _build_datetime(match, tz=None)


def parse_rfc3339_format(text: str) -> datetime:
    """Parse `YYYY-MM-DDTHH:MM:SS.ffffff±HH:MM` into an aware datetime."""
    match = _require_match(_RFC3339_RE, text, layout="YYYY-MM-DDTHH:MM:SS.ffffff+HH:MM")
    return _build_datetime(match, tz=_parse_offset(match.group("offset")))


def parse_iso8601_format(text: str) -> datetime:
    """
    Parse extended ISO-8601 date-time with a mandatory `Z` or numeric offset.

    Seconds are optional and the fraction may carry 1..9 digits; digits past the
    sixth are truncated toward zero.
    """
    match = _require_match(_ISO8601_RE, text, layout="YYYY-MM-DDTHH:MM[:SS[.f...]](Z|+HH:MM)")
    return _build_datetime(match, tz=_parse_offset(match.group("offset")))


def format_message(value: datetime) -> str:
    return f"{_format_local(value, separator=' ')}{format_offset(_utcoffset(value), separator='')}"


def format_mysql(value: datetime) -> str:
    return _format_local(value, separator=" ")


def format_rfc3339(value: datetime) -> str:
    return f"{_format_local(value, separator='T')}{format_offset(_utcoffset(value), separator=':')}"


def _require_match(pattern: re.Pattern[str], text: str, *, layout: str) -> re.Match[str]:
    if not isinstance(text, str):
        raise ValueError(f"timestamp must be a string, got {type(text).__name__}")
    match = pattern.fullmatch(text)
    if match is None:
        raise ValueError(f"text {text!r} does not match layout {layout}")
    return match


def _build_datetime(match: re.Match[str], *, tz: timezone | None) -> datetime:
    """
    Assemble datetime from named regex groups.

    Raises:
        ValueError: If any field is outside its calendar range.
    """
    second = match.group("second")
    fraction = match.group("fraction") or ""
    return datetime(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(second) if second is not None else 0,
        int(fraction[:6].ljust(6, "0")),
        tzinfo=tz,
    )


def _parse_offset(raw: str) -> timezone:
    """
    Parse `Z`, `±HHMM`, `±HH:MM` or `±HH:MM:SS` into a fixed timezone.

    Raises:
        ValueError: If minutes/seconds exceed 59 or the offset exceeds 18 hours.
    """
    if raw in ("Z", "z"):
        return timezone.utc

    sign = -1 if raw[0] == "-" else 1
    digits = raw[1:].replace(":", "")
    hours = int(digits[0:2])
    minutes = int(digits[2:4])
    seconds = int(digits[4:6]) if len(digits) > 4 else 0
    if minutes > 59 or seconds > 59:
        raise ValueError(f"invalid offset {raw!r}")
    offset = timedelta(hours=hours, minutes=minutes, seconds=seconds)
    if offset > _MAX_OFFSET:
        raise ValueError(f"offset {raw!r} is out of range +/-18:00")
    return timezone(sign * offset)


def _format_local(value: datetime, *, separator: str) -> str:
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}{separator}"
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}.{value.microsecond:06d}"
    )


def _utcoffset(value: datetime) -> timedelta:
    offset = value.utcoffset()
    if offset is None:
        raise ValueError("cannot format offset of a naive datetime")
    return offset
