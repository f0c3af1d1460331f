"""Tests for settings loading and saving."""

import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rootkeeper.core.pathing import PathFlavor
from rootkeeper.core.settings import (
    Settings,
    SettingsError,
    SettingsParseError,
    load_settings,
    save_settings,
)


class TestSettingsModel:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.recycle_bin is None
        assert settings.path_flavor == "auto"
        assert settings.store_path is None

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_recycle_bin_is_unset(self, value: str) -> None:
        assert Settings(recycle_bin=value).recycle_bin is None

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            Settings.model_validate({"recyclebin": "/trash"})

    def test_rejects_unknown_flavor(self) -> None:
        with pytest.raises(ValidationError):
            Settings(path_flavor="dos")  # type: ignore[arg-type]

    def test_explicit_flavor(self) -> None:
        assert Settings(path_flavor="windows").effective_flavor == PathFlavor.WINDOWS

    def test_auto_flavor_follows_host(self) -> None:
        with patch("rootkeeper.core.settings.host_flavor", return_value=PathFlavor.WINDOWS):
            assert Settings().effective_flavor == PathFlavor.WINDOWS

    def test_effective_paths_use_overrides(self, tmp_path: Path) -> None:
        settings = Settings(store_path=tmp_path / "s.json", inventory_path=tmp_path / "i.toml")

        assert settings.effective_store_path == tmp_path / "s.json"
        assert settings.effective_inventory_path == tmp_path / "i.toml"

    def test_effective_paths_default(self) -> None:
        with (
            patch("rootkeeper.core.settings.get_store_path", return_value=Path("/x/store.json")),
            patch("rootkeeper.core.settings.get_inventory_path", return_value=Path("/x/lib.toml")),
        ):
            settings = Settings()
            assert settings.effective_store_path == Path("/x/store.json")
            assert settings.effective_inventory_path == Path("/x/lib.toml")


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path / "settings.toml") == Settings()

    def test_loads_values(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text('recycle_bin = "/media/.trash"\npath_flavor = "posix"\n')

        settings = load_settings(path)

        assert settings.recycle_bin == "/media/.trash"
        assert settings.effective_flavor == PathFlavor.POSIX

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text("recycle_bin = [unclosed")

        with pytest.raises(SettingsParseError):
            load_settings(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text('unknown = "value"\n')

        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)


class TestSaveSettings:
    """Tests for save_settings."""

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "settings.toml"
        settings = Settings(recycle_bin="/media/.trash", store_path=tmp_path / "store.json")

        saved = save_settings(settings, path)

        assert saved == path
        assert load_settings(path) == settings

    def test_omits_unset_fields(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"

        save_settings(Settings(), path)

        with open(path, "rb") as f:
            assert tomllib.load(f) == {"path_flavor": "auto"}

    def test_write_failure(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        with (
            patch("rootkeeper.core.settings.os.replace", side_effect=OSError("read-only")),
            pytest.raises(SettingsError, match="Failed to write settings"),
        ):
            save_settings(Settings(), path)

        assert not path.exists()
        assert list(tmp_path.glob("*.tmp")) == []
