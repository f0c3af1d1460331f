"""Abstract base classes for root folder collaborators.

The root folder manager touches the outside world only through these
interfaces: the disk, the root folder store, the library inventory and
the application configuration.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from rootkeeper.rootfolders.models import RootFolder


class DiskAccessProvider(ABC):
    """Read-only view of the filesystem.

    Example:
        >>> disk = LocalDiskProvider()
        >>> if disk.folder_exists("/media/tv"):
        ...     for child in disk.get_directories("/media/tv"):
        ...         print(child)
    """

    @abstractmethod
    def folder_exists(self, path: str) -> bool:
        """Check if path is an existing directory."""

    @abstractmethod
    def folder_writable(self, path: str) -> bool:
        """Check if new files can be created inside the directory."""

    @abstractmethod
    def get_directories(self, path: str) -> list[str]:
        """List the absolute paths of the immediate subdirectories of path.

        Raises:
            OSError: If path does not exist or cannot be listed.
        """

    @abstractmethod
    def folder_last_modified(self, path: str) -> datetime | None:
        """Return the directory's modification time, or None if unavailable."""

    @abstractmethod
    def get_available_space(self, path: str) -> int | None:
        """Return free bytes on the volume holding path, or None if unavailable."""

    @abstractmethod
    def get_total_space(self, path: str) -> int | None:
        """Return total bytes of the volume holding path, or None if unavailable."""


class RootFolderRepository(ABC):
    """Durable storage of root folder records."""

    @abstractmethod
    def all(self) -> list[RootFolder]:
        """Return every stored root folder."""

    @abstractmethod
    def get(self, folder_id: int) -> RootFolder:
        """Return the root folder with the given id.

        Raises:
            RootFolderNotFoundError: If no record has this id.
        """

    @abstractmethod
    def insert(self, folder: RootFolder) -> RootFolder:
        """Store a new root folder and return it with its assigned id."""

    @abstractmethod
    def delete(self, folder_id: int) -> None:
        """Delete the root folder with the given id."""


class InventoryProvider(ABC):
    """Paths already owned by managed library items."""

    @abstractmethod
    def all_paths(self) -> dict[str, str]:
        """Return a mapping of library item key to absolute item path."""


class ConfigProvider(ABC):
    """Application configuration lookups."""

    @abstractmethod
    def recycle_bin_path(self) -> str | None:
        """Return the configured recycle bin directory (None or "" = disabled)."""
