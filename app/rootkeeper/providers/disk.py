"""Local filesystem implementation of DiskAccessProvider."""

import logging
import os
import shutil
import tempfile
from datetime import UTC, datetime
from pathlib import Path

from rootkeeper.providers.base import DiskAccessProvider

logger = logging.getLogger(__name__)


class LocalDiskProvider(DiskAccessProvider):
    """Queries the filesystem of the running host.

    Listing failures propagate as OSError. Timestamp and space lookups are
    best effort and return None when the underlying call fails.
    """

    def folder_exists(self, path: str) -> bool:
        return Path(path).is_dir()

    def folder_writable(self, path: str) -> bool:
        """Check writability by creating and removing a probe file."""
        try:
            with tempfile.NamedTemporaryFile(dir=path, prefix=".rootkeeper-write-test-"):
                pass
        except OSError as e:
            logger.debug("Write probe failed for %s: %s", path, e)
            return False
        return True

    def get_directories(self, path: str) -> list[str]:
        with os.scandir(path) as entries:
            return sorted(entry.path for entry in entries if entry.is_dir())

    def folder_last_modified(self, path: str) -> datetime | None:
        try:
            stat = Path(path).stat()
        except OSError as e:
            logger.warning("Cannot read modification time of %s: %s", path, e)
            return None
        return datetime.fromtimestamp(stat.st_mtime, tz=UTC)

    def get_available_space(self, path: str) -> int | None:
        try:
            return shutil.disk_usage(path).free
        except OSError as e:
            logger.warning("Cannot determine free space for %s: %s", path, e)
            return None

    def get_total_space(self, path: str) -> int | None:
        try:
            return shutil.disk_usage(path).total
        except OSError as e:
            logger.warning("Cannot determine total space for %s: %s", path, e)
            return None
