"""BaseService — foundation for daysleft services.

Every service receives the resolved settings and a clock at construction
time. The clock is the only source of "now"; tests inject a fixed one.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from daysleft.domain.deadline import resolve_timezone

if TYPE_CHECKING:
    from daysleft.config.settings import DaysLeftSettings

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current wall-clock instant in UTC."""
    return datetime.now(UTC)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CountdownService(BaseService):
            def days_remaining(self) -> ServiceResult:
                now = self._now()
                ...
    """

    def __init__(self, settings: DaysLeftSettings, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock = clock or system_clock
        self._clock_source = "system" if clock is None else "fixed"

    def _now(self, tz: str | None = None) -> datetime:
        """Read the clock. A naive reading is taken in *tz*, else the configured timezone."""
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=resolve_timezone(tz or self._settings.countdown.timezone))
        return now
