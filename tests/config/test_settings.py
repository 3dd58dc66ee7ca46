"""Tests for DaysLeftSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from daysleft.config.settings import DaysLeftSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = DaysLeftSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_file is None
        assert settings.countdown.deadline is None
        assert settings.countdown.timezone == "UTC"
        assert settings.page.target == "days"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DaysLeftSettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "daysleft.toml").write_text(
            '[countdown]\ndeadline = "2023-06-06T00:00:00"\ntimezone = "Europe/London"\n'
        )
        settings = DaysLeftSettings.from_cli(root=tmp_path)
        assert settings.countdown.deadline == "2023-06-06T00:00:00"
        assert settings.countdown.timezone == "Europe/London"
        assert settings.page.document == "www/home.html"  # default preserved

    def test_root_follows_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "daysleft.toml").write_text("")
        child = tmp_path / "www"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = DaysLeftSettings.from_cli()
        assert settings.root == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[page]\ntarget = "countdown"\n')
        settings = DaysLeftSettings.from_cli(config_path=str(custom), root=tmp_path)
        assert settings.page.target == "countdown"
        assert settings.config_path == custom

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="not found"):
            DaysLeftSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "daysleft.toml").write_text("[countdown\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DaysLeftSettings.from_cli(root=tmp_path)


class TestEnvAndFlags:
    def test_env_nested(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DAYSLEFT_COUNTDOWN__DEADLINE", "2024-01-01")
        settings = DaysLeftSettings.from_cli(root=tmp_path)
        assert settings.countdown.deadline == "2024-01-01"

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = DaysLeftSettings.from_cli(
            root=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_none_flag_does_not_mask_toml(self, tmp_path: Path) -> None:
        (tmp_path / "daysleft.toml").write_text('log_file = "logs/days.log"\n')
        settings = DaysLeftSettings.from_cli(root=tmp_path, log_file=None)
        assert settings.log_file == Path("logs/days.log")


class TestResolvePath:
    def test_relative_joins_root(self, tmp_path: Path) -> None:
        settings = DaysLeftSettings.from_cli(root=tmp_path)
        assert settings.resolve_path("www/home.html") == tmp_path / "www" / "home.html"

    def test_absolute_kept(self, tmp_path: Path) -> None:
        settings = DaysLeftSettings.from_cli(root=tmp_path / "a")
        target = tmp_path / "b" / "page.html"
        assert settings.resolve_path(target) == target
