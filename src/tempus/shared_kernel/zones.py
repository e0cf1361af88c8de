"""
UTC zone helpers shared by primitives and errors.

Only fixed `datetime.timezone` offsets of zero count as UTC. Named region
zones are rejected even when their current offset is zero, so no implicit
zone conversion can slip through.
"""

from __future__ import annotations

from datetime import timedelta, timezone, tzinfo

UTC = timezone.utc

_ZERO = timedelta(0)


def is_utc_zone(zone: tzinfo | None) -> bool:
    """Return True when `zone` is a fixed zero offset."""
    return isinstance(zone, timezone) and zone.utcoffset(None) == _ZERO


def describe_zone(zone: tzinfo | None) -> str:
    """
    Render a zone identifier for error messages.

    Fixed offsets render as `UTC` (zero) or `+HH:MM`; named zones render by key;
    a missing zone renders as `naive`.
    """
    if zone is None:
        return "naive"
    if isinstance(zone, timezone):
        offset = zone.utcoffset(None)
        if offset == _ZERO:
            return "UTC"
        return format_offset(offset, separator=":")
    key = getattr(zone, "key", None)
    if isinstance(key, str) and key:
        return key
    return str(zone)


def format_offset(offset: timedelta, *, separator: str) -> str:
    """Render a UTC offset as `+HH:MM` (or `+HHMM`), with seconds appended when present."""
    sign = "-" if offset < _ZERO else "+"
    total_seconds = abs(int(offset.total_seconds()))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    rendered = f"{sign}{hours:02d}{separator}{minutes:02d}"
    if seconds:
        rendered += f"{separator}{seconds:02d}"
    return rendered
