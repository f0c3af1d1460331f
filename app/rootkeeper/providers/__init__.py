"""Collaborator interfaces and their local implementations.

This module exports the provider interfaces consumed by the root folder
manager together with the filesystem-backed implementations.
"""

from rootkeeper.providers.base import (
    ConfigProvider,
    DiskAccessProvider,
    InventoryProvider,
    RootFolderRepository,
)
from rootkeeper.providers.config import SettingsConfigProvider
from rootkeeper.providers.disk import LocalDiskProvider
from rootkeeper.providers.inventory import (
    InventoryError,
    InventoryParseError,
    TomlInventoryProvider,
)
from rootkeeper.providers.repository import JsonRootFolderRepository

__all__ = [
    "ConfigProvider",
    "DiskAccessProvider",
    "InventoryError",
    "InventoryParseError",
    "InventoryProvider",
    "JsonRootFolderRepository",
    "LocalDiskProvider",
    "RootFolderRepository",
    "SettingsConfigProvider",
    "TomlInventoryProvider",
]
