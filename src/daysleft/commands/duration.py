"""Command: full breakdown of the time remaining."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from daysleft.commands._base import DaysCommand, deadline_options

if TYPE_CHECKING:
    from daysleft.commands._context import AppContext


@click.command(
    cls=DaysCommand,
    examples="""\
  daysleft duration
  daysleft duration --deadline 2023-06-06
  daysleft --json duration""",
)
@deadline_options
@click.pass_obj
def duration(app: AppContext, deadline: str | None, tz: str | None) -> None:
    """Show days, hours, minutes, and seconds until the deadline."""
    app.emit(app.countdown.duration(deadline, tz=tz))
