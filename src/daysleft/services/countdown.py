"""CountdownService — compute the remaining time and render it to targets.

Pipeline for every operation: RESOLVE DEADLINE → READ CLOCK → COMPUTE →
RENDER. ``update_element`` adds a final WRITE step.

INVARIANT: A failed update writes nothing. Targets and deadlines are
resolved before any text is produced.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from daysleft.domain.countdown import (
    Duration,
    compute_duration,
    display_days,
    render_days_remaining,
)
from daysleft.domain.deadline import (
    InvalidDeadline,
    MissingDeadline,
    parse_deadline,
    resolve_timezone,
)
from daysleft.infrastructure.document import HtmlDocument, TargetNotFound, TextSink
from daysleft.services.base import BaseService
from daysleft.services.result import ServiceResult

logger = logging.getLogger(__name__)

DeadlineInput = str | datetime | None


class CountdownService(BaseService):
    """Countdown operations consumed by the CLI."""

    # ── Helpers ──────────────────────────────────────────────────────

    def _deadline(self, deadline: DeadlineInput, zone: str) -> datetime:
        """Resolve *deadline* (argument first, then config) to an aware instant."""
        if isinstance(deadline, datetime):
            if deadline.tzinfo is None:
                return deadline.replace(tzinfo=resolve_timezone(zone))
            return deadline
        value = deadline if deadline is not None else self._settings.countdown.deadline
        if value is None:
            msg = "No deadline given and none configured in [countdown] deadline"
            raise MissingDeadline(msg)
        return parse_deadline(value, zone)

    def _meta(self, tz: str | None) -> dict[str, Any]:
        """Where "now", the timezone and the settings came from."""
        config_path = self._settings.config_path
        return {
            "clock": self._clock_source,
            "timezone": tz or self._settings.countdown.timezone,
            "config_path": str(config_path) if config_path else None,
        }

    def _measure(
        self, op: str, deadline: DeadlineInput, tz: str | None
    ) -> tuple[datetime, datetime, Duration] | ServiceResult:
        """Resolve the deadline and clock, or return the failure result."""
        zone = tz or self._settings.countdown.timezone
        try:
            when = self._deadline(deadline, zone)
            now = self._now(zone)
        except MissingDeadline as exc:
            return ServiceResult.failure(op, "NO_DEADLINE", str(exc))
        except InvalidDeadline as exc:
            return ServiceResult.failure(
                op, "INVALID_DEADLINE", str(exc), deadline=str(deadline) if deadline else None
            )
        duration = compute_duration(when, now)
        logger.debug(
            "Computed duration until %s: %d ms (%d days)",
            when.isoformat(),
            duration.total_ms,
            duration.days,
        )
        return when, now, duration

    # ── Operations ───────────────────────────────────────────────────

    def duration(self, deadline: DeadlineInput = None, *, tz: str | None = None) -> ServiceResult:
        """Full day/hour/minute/second breakdown until the deadline."""
        op = "duration"
        measured = self._measure(op, deadline, tz)
        if isinstance(measured, ServiceResult):
            return measured
        when, now, dur = measured
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "deadline": when.isoformat(),
                "now": now.isoformat(),
                "total_ms": dur.total_ms,
                "days": dur.days,
                "hours": dur.hours,
                "minutes": dur.minutes,
                "seconds": dur.seconds,
                "passed": dur.passed,
            },
            meta=self._meta(tz),
        )

    def days_remaining(
        self, deadline: DeadlineInput = None, *, tz: str | None = None
    ) -> ServiceResult:
        """Render the ``"N days"`` label without writing it anywhere."""
        op = "days_remaining"
        measured = self._measure(op, deadline, tz)
        if isinstance(measured, ServiceResult):
            return measured
        when, now, dur = measured
        warnings: list[str] = []
        if dur.passed:
            warnings.append(f"Deadline {when.isoformat()} has passed")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "label": render_days_remaining(dur),
                "display_days": display_days(dur),
                "days": dur.days,
                "deadline": when.isoformat(),
                "now": now.isoformat(),
            },
            warnings=warnings,
            meta=self._meta(tz),
        )

    def update_element(
        self,
        target: TextSink,
        deadline: DeadlineInput = None,
        *,
        tz: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Compute the label and write it as *target*'s text."""
        op = "update_element"
        measured = self._measure(op, deadline, tz)
        if isinstance(measured, ServiceResult):
            return measured
        when, _now, dur = measured
        label = render_days_remaining(dur)

        try:
            target.set_text(label)
        except OSError as exc:
            logger.warning("Failed to write countdown label: %s", exc)
            return ServiceResult.failure(op, "WRITE_FAILED", f"Failed to write label: {exc}")

        logger.info("Rendered %r", label)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                **(extra or {}),
                "label": label,
                "display_days": display_days(dur),
                "deadline": when.isoformat(),
            },
            meta=self._meta(tz),
        )

    def update_document(
        self,
        path: str | Path | None = None,
        element_id: str | None = None,
        deadline: DeadlineInput = None,
        *,
        tz: str | None = None,
    ) -> ServiceResult:
        """Resolve an element in an HTML document and update it in place."""
        op = "update_element"
        doc_path = self._settings.resolve_path(path or self._settings.page.document)
        target_id = element_id or self._settings.page.target

        if not doc_path.is_file():
            return ServiceResult.failure(
                op, "DOCUMENT_NOT_FOUND", f"Document not found: {doc_path}", path=str(doc_path)
            )
        try:
            document = HtmlDocument.load(doc_path)
            target = document.target(target_id)
        except TargetNotFound as exc:
            return ServiceResult.failure(
                op, "TARGET_NOT_FOUND", str(exc), path=str(doc_path), target=target_id
            )
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult.failure(
                op, "DOCUMENT_UNREADABLE", f"Cannot read {doc_path}: {exc}", path=str(doc_path)
            )

        return self.update_element(
            target,
            deadline,
            tz=tz,
            extra={"path": str(doc_path), "target": target_id},
        )
