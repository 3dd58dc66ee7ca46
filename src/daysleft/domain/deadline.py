"""Deadline parsing.

Accepts ISO 8601 date-times with either a ``T`` or a space separator, and
bare dates (midnight). Naive values are pinned to a configured IANA
timezone so the same string always names the same instant.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE = "UTC"


class InvalidDeadline(ValueError):
    """Raised when a deadline string or its timezone cannot be understood."""


class MissingDeadline(InvalidDeadline):
    """Raised when no deadline was passed and none is configured."""


def resolve_timezone(name: str) -> tzinfo:
    """Look up an IANA timezone by *name*."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown timezone: {name!r}"
        raise InvalidDeadline(msg) from exc


def parse_instant(value: str) -> datetime:
    """Parse ISO 8601 *value*, leaving a value without an offset naive."""
    text = value.strip()
    if not text:
        msg = "Date-time is empty"
        raise InvalidDeadline(msg)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        msg = f"Invalid date-time {value!r}: expected ISO 8601 (YYYY-MM-DD[THH:MM[:SS]])"
        raise InvalidDeadline(msg) from exc


def parse_deadline(value: str, tz: str = DEFAULT_TIMEZONE) -> datetime:
    """Parse *value* into a timezone-aware datetime.

    An explicit UTC offset in *value* wins over *tz*.
    """
    parsed = parse_instant(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=resolve_timezone(tz))
    return parsed
