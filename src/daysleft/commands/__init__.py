"""Subcommand modules for daysleft.

Provides register_commands() which uses deferred imports to keep
``daysleft --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from daysleft.commands.days import days
    from daysleft.commands.duration import duration
    from daysleft.commands.update import update

    cli.add_command(days)
    cli.add_command(duration)
    cli.add_command(update)
