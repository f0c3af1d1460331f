"""Root folder management.

Validates and registers root folders, and computes for each one the
immediate subdirectories that are not yet tracked as library items.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from rootkeeper.core.pathing import (
    PathFlavor,
    folder_name,
    host_flavor,
    is_parent_or_same,
    is_valid_path,
    parent_path,
    paths_equal,
    relative_path,
)
from rootkeeper.rootfolders.errors import (
    DirectoryNotFoundError,
    DuplicateRootFolderError,
    FolderNotWritableError,
    InvalidRootFolderPathError,
)
from rootkeeper.rootfolders.models import RootFolder, UnmappedFolder
from rootkeeper.rootfolders.special import is_special_folder

if TYPE_CHECKING:
    from rootkeeper.providers.base import (
        ConfigProvider,
        DiskAccessProvider,
        InventoryProvider,
        RootFolderRepository,
    )

logger = logging.getLogger(__name__)


class RootFolderManager:
    """Add, remove and inspect registered root folders.

    The manager keeps no state between calls; everything lives in the
    repository. Provider failures propagate to the caller unchanged.

    Args:
        repository: Root folder store.
        disk: Filesystem access.
        inventory: Paths already owned by library items.
        config: Application configuration (recycle bin).
        flavor: Path syntax rules. Defaults to the running host's.

    Example:
        >>> manager = RootFolderManager(repo, LocalDiskProvider(), inventory, config)
        >>> folder = manager.add(RootFolder(path="/media/tv"))
        >>> for unmapped in manager.get(folder.id, include_unmapped=True).unmapped_folders:
        ...     print(unmapped.name)
    """

    def __init__(
        self,
        repository: RootFolderRepository,
        disk: DiskAccessProvider,
        inventory: InventoryProvider,
        config: ConfigProvider,
        *,
        flavor: PathFlavor | None = None,
    ) -> None:
        self._repository = repository
        self._disk = disk
        self._inventory = inventory
        self._config = config
        self._flavor = flavor if flavor is not None else host_flavor()

    @property
    def flavor(self) -> PathFlavor:
        return self._flavor

    def add(self, folder: RootFolder) -> RootFolder:
        """Validate and register a new root folder.

        Checks run in this order and the first failure wins: path syntax,
        existence, duplication, writability. Nothing is stored unless all
        checks pass.

        Args:
            folder: Root folder to add; its id is ignored.

        Returns:
            The stored root folder with its assigned id.

        Raises:
            InvalidRootFolderPathError: If the path is empty or malformed.
            DirectoryNotFoundError: If the directory does not exist.
            DuplicateRootFolderError: If the path is already registered.
            FolderNotWritableError: If the directory is not writable.
        """
        path = folder.path
        if not path or not is_valid_path(path, self._flavor):
            raise InvalidRootFolderPathError(path)

        if not self._disk.folder_exists(path):
            raise DirectoryNotFoundError(path)

        if any(existing.path == path for existing in self._repository.all()):
            raise DuplicateRootFolderError(path)

        if not self._disk.folder_writable(path):
            raise FolderNotWritableError(path)

        stored = self._repository.insert(RootFolder(path=path))
        logger.info("Added root folder %d: %s", stored.id, stored.path)
        return stored

    def remove(self, folder_id: int) -> None:
        """Delete a root folder record. Nothing on disk is touched."""
        self._repository.delete(folder_id)
        logger.info("Removed root folder %d", folder_id)

    def get_all(self, include_unmapped: bool = False) -> list[RootFolder]:
        """Return every registered root folder.

        Args:
            include_unmapped: Also scan each folder for unmapped subdirectories.
        """
        folders = self._repository.all()
        if not include_unmapped:
            return folders
        return [self._with_unmapped(folder) for folder in folders]

    def get(
        self,
        folder_id: int,
        include_unmapped: bool = False,
        include_details: bool = False,
    ) -> RootFolder:
        """Return a single root folder.

        Args:
            folder_id: Id of the root folder.
            include_unmapped: Attach the unmapped folder scan.
            include_details: Attach accessibility and volume space.

        Raises:
            RootFolderNotFoundError: If no root folder has this id.
        """
        folder = self._repository.get(folder_id)
        if include_details:
            folder = self._with_details(folder)
        if include_unmapped:
            folder = self._with_unmapped(folder)
        return folder

    def get_unmapped_folders(self, path: str) -> list[UnmappedFolder]:
        """Scan a root folder for subdirectories not owned by library items.

        A subdirectory is skipped when its name is a special folder, when it
        is the configured recycle bin, or when a library item lives at or
        beneath it. Results keep the order reported by the disk provider.

        Args:
            path: Root folder path to scan.

        Returns:
            Unmapped folders in disk provider order.

        Raises:
            OSError: If the root folder cannot be listed.
        """
        directories = self._disk.get_directories(path)
        item_paths = [p for p in self._inventory.all_paths().values() if p]
        recycle_bin = self._config.recycle_bin_path()

        unmapped: list[UnmappedFolder] = []
        for directory in directories:
            name = folder_name(directory, self._flavor)

            if is_special_folder(name):
                logger.debug("Skipping special folder: %s", directory)
                continue

            if recycle_bin and paths_equal(directory, recycle_bin, self._flavor):
                logger.debug("Skipping recycle bin: %s", directory)
                continue

            if any(is_parent_or_same(directory, item, self._flavor) for item in item_paths):
                continue

            unmapped.append(
                UnmappedFolder(
                    name=name,
                    path=directory,
                    relative_path=relative_path(directory, path, self._flavor),
                    last_modified=self._disk.folder_last_modified(directory),
                )
            )

        logger.debug("Found %d unmapped folder(s) in %s", len(unmapped), path)
        return unmapped

    def get_best_root_folder_path(self, path: str) -> str:
        """Find the registered root folder that contains a path.

        The deepest matching root folder wins. When no root folder contains
        the path, its parent directory is returned instead.

        Args:
            path: Path of a library item folder.

        Returns:
            Root folder path, or the parent directory of path.
        """
        candidates = [
            folder.path
            for folder in self._repository.all()
            if folder.path and is_parent_or_same(folder.path, path, self._flavor)
        ]
        if candidates:
            return max(candidates, key=len)

        parent = parent_path(path, self._flavor)
        logger.debug("No root folder contains %s, using parent %s", path, parent)
        return parent

    def _with_unmapped(self, folder: RootFolder) -> RootFolder:
        unmapped = self.get_unmapped_folders(str(folder.path))
        return replace(folder, unmapped_folders=tuple(unmapped))

    def _with_details(self, folder: RootFolder) -> RootFolder:
        path = str(folder.path)
        if not self._disk.folder_exists(path):
            logger.warning("Root folder %d is not accessible: %s", folder.id, path)
            return replace(folder, accessible=False)
        return replace(
            folder,
            accessible=True,
            free_space=self._disk.get_available_space(path),
            total_space=self._disk.get_total_space(path),
        )
