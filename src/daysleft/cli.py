"""Root CLI group for daysleft with global flags and command registration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from daysleft import __version__
from daysleft.commands import register_commands
from daysleft.commands._context import AppContext
from daysleft.config.settings import DaysLeftSettings
from daysleft.domain.deadline import InvalidDeadline, parse_instant

if TYPE_CHECKING:
    from daysleft.services.base import Clock


def _fixed_clock(value: str | None) -> Clock | None:
    """Build a clock pinned to *value*, or None to use the wall clock.

    A value without an offset stays naive; the service reads it in the
    command's timezone, the same one the deadline is read in.
    """
    if value is None:
        return None
    try:
        instant = parse_instant(value)
    except InvalidDeadline as exc:
        raise click.BadParameter(str(exc), param_hint="'--now'") from exc
    return lambda: instant


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="daysleft")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (the bare label).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--log",
    "log_file",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also append log output to this file.",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--now",
    default=None,
    help=(
        "Pretend the current time is this ISO 8601 instant. "
        "Without an offset it is read in the same timezone as the deadline."
    ),
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    log_file: Path | None,
    config_path: str | None,
    now: str | None,
) -> None:
    """daysleft — countdown to a fixed deadline."""
    settings = DaysLeftSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        log_file=log_file,
    )
    clock = _fixed_clock(now)
    ctx.obj = AppContext(settings, clock=clock)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
