"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from unittest.mock import MagicMock

import pytest

from rootkeeper.core.pathing import PathFlavor
from rootkeeper.providers.base import (
    ConfigProvider,
    DiskAccessProvider,
    InventoryProvider,
    RootFolderRepository,
)
from rootkeeper.rootfolders.models import RootFolder
from rootkeeper.rootfolders.service import RootFolderManager


@pytest.fixture
def mock_disk() -> MagicMock:
    """Disk provider where every folder exists and is writable."""
    disk = MagicMock(spec=DiskAccessProvider)
    disk.folder_exists.return_value = True
    disk.folder_writable.return_value = True
    disk.get_directories.return_value = []
    disk.folder_last_modified.return_value = None
    disk.get_available_space.return_value = None
    disk.get_total_space.return_value = None
    return disk


@pytest.fixture
def mock_repository() -> MagicMock:
    """Empty root folder repository that assigns id 1 on insert."""
    repository = MagicMock(spec=RootFolderRepository)
    repository.all.return_value = []
    repository.insert.side_effect = lambda folder: RootFolder(path=folder.path, id=1)
    return repository


@pytest.fixture
def mock_inventory() -> MagicMock:
    """Inventory with no library items."""
    inventory = MagicMock(spec=InventoryProvider)
    inventory.all_paths.return_value = {}
    return inventory


@pytest.fixture
def mock_config() -> MagicMock:
    """Configuration with no recycle bin."""
    config = MagicMock(spec=ConfigProvider)
    config.recycle_bin_path.return_value = None
    return config


@pytest.fixture
def make_manager(
    mock_repository: MagicMock,
    mock_disk: MagicMock,
    mock_inventory: MagicMock,
    mock_config: MagicMock,
):
    """Factory building a RootFolderManager over the mock providers."""

    def _make(flavor: PathFlavor = PathFlavor.POSIX) -> RootFolderManager:
        return RootFolderManager(
            repository=mock_repository,
            disk=mock_disk,
            inventory=mock_inventory,
            config=mock_config,
            flavor=flavor,
        )

    return _make


@pytest.fixture
def manager(make_manager) -> RootFolderManager:
    """RootFolderManager using POSIX path rules over the mock providers."""
    return make_manager()
