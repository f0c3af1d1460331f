"""Shared types and helpers for CLI commands.

This module provides the output format choice and the wiring that
builds a RootFolderManager from the user's settings.
"""

from enum import Enum
from pathlib import Path

import typer

from rootkeeper.core.settings import Settings, SettingsError, load_settings
from rootkeeper.providers import (
    JsonRootFolderRepository,
    LocalDiskProvider,
    SettingsConfigProvider,
    TomlInventoryProvider,
)
from rootkeeper.rootfolders.service import RootFolderManager
from rootkeeper.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def require_settings(settings_path: Path | None = None) -> Settings:
    """Load settings or exit with a readable error.

    Raises:
        typer.Exit: If the settings file is invalid.
    """
    try:
        return load_settings(settings_path)
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e


def create_manager(settings: Settings | None = None) -> RootFolderManager:
    """Build a RootFolderManager backed by the local providers.

    Args:
        settings: Settings to use. If None, loads them from the settings file.

    Returns:
        Manager wired to the JSON store, local disk, TOML inventory and settings.
    """
    if settings is None:
        settings = require_settings()

    return RootFolderManager(
        repository=JsonRootFolderRepository(settings.effective_store_path),
        disk=LocalDiskProvider(),
        inventory=TomlInventoryProvider(settings.effective_inventory_path),
        config=SettingsConfigProvider(settings),
        flavor=settings.effective_flavor,
    )
