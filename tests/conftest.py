"""Shared pytest fixtures and test helpers for daysleft tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from daysleft.config.models import CountdownConfig
from daysleft.config.settings import DaysLeftSettings

DEADLINE = "2023-06-06T00:00:00"

PAGE_HTML = (
    "<html><body>"
    '<p>Only <span id="days">? days</span> to go</p>'
    "</body></html>"
)


def fixed_clock(*args: int) -> Callable[[], datetime]:
    """Clock that always reads ``datetime(*args, tzinfo=UTC)``."""
    instant = datetime(*args, tzinfo=UTC)
    return lambda: instant


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's DAYSLEFT_* environment out of tests."""
    for name in list(os.environ):
        if name.startswith("DAYSLEFT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after each test.

    CLI invocations reconfigure logging; handlers they install must not
    outlive the test.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("daysleft")
    app_level = app.level
    yield
    for handler in root.handlers[:]:
        if handler not in original_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> DaysLeftSettings:
    """Settings rooted at a temp dir with the deadline configured."""
    return DaysLeftSettings.from_cli(
        root=tmp_path,
        countdown=CountdownConfig(deadline=DEADLINE),
    )


@pytest.fixture
def page(tmp_path: Path) -> Path:
    """An HTML page with a ``days`` element, at the default document path."""
    path = tmp_path / "www" / "home.html"
    path.parent.mkdir()
    path.write_text(PAGE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir holding a daysleft.toml with the deadline.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    (tmp_path / "daysleft.toml").write_text(
        f'[countdown]\ndeadline = "{DEADLINE}"\ntimezone = "UTC"\n',
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
