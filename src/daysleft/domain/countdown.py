"""Countdown arithmetic and the "N days" label.

Duration decomposition uses a milliseconds-based floor chain:

- ``days`` is the floored quotient of the total by one day.
- ``hours``/``minutes``/``seconds`` take the floored quotient by their unit,
  then a remainder whose sign follows the dividend.

A past deadline therefore yields zero or negative components throughout.

INVARIANT: Nothing here reads the clock. ``now`` is always an argument.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

_ONE_MS = timedelta(milliseconds=1)


class Duration(BaseModel):
    """Signed span until a deadline, decomposed into calendar-style units."""

    model_config = {"frozen": True}

    total_ms: int
    days: int
    hours: int
    minutes: int
    seconds: int

    @property
    def passed(self) -> bool:
        """True once the deadline is behind ``now``."""
        return self.total_ms < 0


def _signed_mod(value: int, modulus: int) -> int:
    """Remainder of *value* by *modulus*, carrying the sign of *value*."""
    rem = abs(value) % modulus
    return -rem if value < 0 else rem


def compute_duration(deadline: datetime, now: datetime) -> Duration:
    """Decompose ``deadline - now`` into days, hours, minutes, and seconds.

    Both instants must be comparable (both aware, or both naive).
    Any ordering is accepted; a deadline in the past gives a negative total.
    """
    total_ms = (deadline - now) // _ONE_MS
    return Duration(
        total_ms=total_ms,
        days=total_ms // MS_PER_DAY,
        hours=_signed_mod(total_ms // MS_PER_HOUR, 24),
        minutes=_signed_mod(total_ms // MS_PER_MINUTE, 60),
        seconds=_signed_mod(total_ms // MS_PER_SECOND, 60),
    )


def display_days(duration: Duration) -> int:
    """Day count shown to readers.

    The day in progress counts as one, and a passed deadline clamps to zero.
    """
    return max(0, duration.days + 1)


def pluralize(count: int, noun: str, suffix: str = "s") -> str:
    """Return ``"{count} {noun}"``, adding *suffix* unless *count* is 1."""
    return f"{count} {noun}{suffix if count != 1 else ''}"


def render_days_remaining(duration: Duration) -> str:
    """Render *duration* as ``"1 day"`` or ``"N days"``."""
    return pluralize(display_days(duration), "day")
