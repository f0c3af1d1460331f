"""Application settings and their TOML persistence.

Settings are stored in ~/.config/rootkeeper/settings.toml. A missing file
is not an error: every field has a default, so a fresh install works
without any configuration.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rootkeeper.core.paths import get_inventory_path, get_settings_path, get_store_path
from rootkeeper.core.pathing import PathFlavor, host_flavor

logger = logging.getLogger(__name__)

PathFlavorSetting = Literal["auto", "posix", "windows"]


class Settings(BaseModel):
    """User settings for rootkeeper.

    Attributes:
        recycle_bin: Directory excluded from unmapped folder results (None = disabled).
        path_flavor: Path syntax rules to apply ("auto" follows the running host).
        store_path: Override for the root folder store file.
        inventory_path: Override for the library inventory file.
    """

    model_config = ConfigDict(extra="forbid")

    recycle_bin: Annotated[
        str | None,
        Field(description="Recycle bin directory excluded from scans"),
    ] = None
    path_flavor: Annotated[
        PathFlavorSetting,
        Field(description="Path syntax rules (auto, posix, windows)"),
    ] = "auto"
    store_path: Annotated[
        Path | None,
        Field(description="Root folder store file (None = default state path)"),
    ] = None
    inventory_path: Annotated[
        Path | None,
        Field(description="Library inventory file (None = default data path)"),
    ] = None

    @field_validator("recycle_bin", mode="before")
    @classmethod
    def blank_recycle_bin_is_unset(cls, v: object) -> object:
        """Treat an empty or whitespace-only recycle bin as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def effective_flavor(self) -> PathFlavor:
        """Resolve "auto" to the running host's flavor."""
        if self.path_flavor == "auto":
            return host_flavor()
        return PathFlavor(self.path_flavor)

    @property
    def effective_store_path(self) -> Path:
        """Root folder store file, falling back to the XDG default."""
        return self.store_path or get_store_path()

    @property
    def effective_inventory_path(self) -> Path:
        """Library inventory file, falling back to the XDG default."""
        return self.inventory_path or get_inventory_path()


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Settings file. If None, uses the default settings path.

    Returns:
        Validated Settings; defaults when the file does not exist.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or fails validation.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file atomically.

    Args:
        settings: Settings to persist.
        path: Target file. If None, uses the default settings path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_settings_to_dict(settings), f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def _settings_to_dict(settings: Settings) -> dict[str, Any]:
    """Convert Settings to a TOML-serializable dictionary.

    TOML has no null, so unset optional fields are omitted.
    """
    data: dict[str, Any] = {"path_flavor": settings.path_flavor}
    if settings.recycle_bin is not None:
        data["recycle_bin"] = settings.recycle_bin
    if settings.store_path is not None:
        data["store_path"] = str(settings.store_path)
    if settings.inventory_path is not None:
        data["inventory_path"] = str(settings.inventory_path)
    return data
