"""Command: write the label into an element of an HTML page."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from daysleft.commands._base import DaysCommand, deadline_options

if TYPE_CHECKING:
    from daysleft.commands._context import AppContext


@click.command(
    cls=DaysCommand,
    examples="""\
  daysleft update
  daysleft update www/home.html
  daysleft update www/home.html --target days
  daysleft update index.html --deadline 2023-06-06T00:00:00""",
)
@click.argument("document", required=False, type=click.Path(dir_okay=False))
@click.option(
    "-t",
    "--target",
    "element_id",
    default=None,
    help="Element id that receives the label (default: [page] target).",
)
@deadline_options
@click.pass_obj
def update(
    app: AppContext,
    document: str | None,
    element_id: str | None,
    deadline: str | None,
    tz: str | None,
) -> None:
    """Render the countdown into DOCUMENT (default: [page] document)."""
    app.emit(app.countdown.update_document(document, element_id, deadline, tz=tz))
