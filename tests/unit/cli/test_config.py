"""Unit tests for the config CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from rootkeeper.cli.main import app
from rootkeeper.core.settings import load_settings

runner = CliRunner()


@pytest.fixture
def settings_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME into tmp_path and return the settings file path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path / "rootkeeper" / "settings.toml"


class TestConfigShow:
    """Tests for rootkeeper config show."""

    def test_show_defaults(self, settings_path: Path) -> None:
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "recycle_bin" in result.stdout
        assert "not set" in result.stdout

    def test_show_invalid_settings(self, settings_path: Path) -> None:
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("recycle_bin = [oops")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Failed to load settings" in result.output


class TestConfigRecycleBin:
    """Tests for rootkeeper config recycle-bin."""

    def test_show_unset(self, settings_path: Path) -> None:
        result = runner.invoke(app, ["config", "recycle-bin"])

        assert result.exit_code == 0
        assert "No recycle bin configured" in result.stdout

    def test_set_and_show(self, settings_path: Path) -> None:
        result = runner.invoke(app, ["config", "recycle-bin", "/media/.trash"])

        assert result.exit_code == 0
        assert load_settings(settings_path).recycle_bin == "/media/.trash"

        shown = runner.invoke(app, ["config", "recycle-bin"])
        assert "/media/.trash" in shown.stdout

    def test_clear(self, settings_path: Path) -> None:
        runner.invoke(app, ["config", "recycle-bin", "/media/.trash"])

        result = runner.invoke(app, ["config", "recycle-bin", "--clear"])

        assert result.exit_code == 0
        assert load_settings(settings_path).recycle_bin is None

    def test_path_and_clear_conflict(self, settings_path: Path) -> None:
        result = runner.invoke(app, ["config", "recycle-bin", "/x", "--clear"])

        assert result.exit_code == 1
        assert not settings_path.exists()


class TestGlobalOptions:
    """Tests for the top-level callback."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "rootkeeper version" in result.stdout

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])

        assert "Usage" in result.output
