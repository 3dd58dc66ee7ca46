"""Command: print the "N days" label."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from daysleft.commands._base import DaysCommand, deadline_options

if TYPE_CHECKING:
    from daysleft.commands._context import AppContext


@click.command(
    cls=DaysCommand,
    examples="""\
  daysleft days
  daysleft -q days
  daysleft days --deadline 2023-06-06T00:00:00
  daysleft days --deadline "2023-06-06 00:00" --tz Europe/London
  daysleft --json days""",
)
@deadline_options
@click.pass_obj
def days(app: AppContext, deadline: str | None, tz: str | None) -> None:
    """Show the days remaining until the deadline."""
    app.emit(app.countdown.days_remaining(deadline, tz=tz))
