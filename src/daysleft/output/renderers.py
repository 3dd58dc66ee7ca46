"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
In verbose mode each one ends with the result's ``meta`` block.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from daysleft.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from daysleft.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Label-producing ops print the bare label so it can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if "label" in d:
        return str(d["label"])
    return f"{d['days']}d {d['hours']}h {d['minutes']}m {d['seconds']}s"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="days.ok")
    op = Text(f"  {result.op}", style="days.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="days.key")
    if key == "label":
        v = Text(str(value), style="days.label")
    elif key == "path":
        v = Text(str(value), style="days.path")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="days.error")
    op = Text(f"  {result.op}", style="days.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Countdown renderers ───────────────────────────────────────────────


def _render_days(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """The label, with deadline/clock detail when verbose."""
    _status_line(console, result)
    _field(console, "label", result.data["label"])
    if verbose:
        for key in ("days", "display_days", "deadline", "now"):
            if key in result.data:
                _field(console, key, result.data[key])
        _render_meta(console, result)


def _render_duration(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Unit breakdown as a one-row table."""
    data = result.data
    _status_line(console, result)
    _field(console, "deadline", data["deadline"])
    if data.get("passed"):
        console.print(Text("  deadline has passed", style="days.passed"))

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    for unit in ("days", "hours", "minutes", "seconds"):
        table.add_column(unit, justify="right")
    table.add_row(*(str(data[unit]) for unit in ("days", "hours", "minutes", "seconds")))
    console.print(table)

    if verbose:
        _field(console, "now", data["now"])
        _field(console, "total_ms", data["total_ms"])
        _render_meta(console, result)


def _render_update(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Where the label went and what it says."""
    data = result.data
    _status_line(console, result)
    if "path" in data:
        _field(console, "path", data["path"])
        _field(console, "target", data["target"])
    _field(console, "label", data["label"])
    if verbose:
        _field(console, "deadline", data["deadline"])
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "days_remaining": _render_days,
    "duration": _render_duration,
    "update_element": _render_update,
}
