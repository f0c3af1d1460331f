"""JSON file implementation of RootFolderRepository.

Storage location: ~/.local/state/rootkeeper/root-folders.json

File layout::

    {"next_id": 3, "root_folders": [{"id": 1, "path": "/media/tv"}, ...]}

Ids are never reused: next_id only grows, even after deletions.
"""

import json
import logging
import os
import threading
from dataclasses import replace
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from rootkeeper.core.paths import get_store_path
from rootkeeper.providers.base import RootFolderRepository
from rootkeeper.rootfolders.errors import (
    DuplicateRootFolderError,
    RootFolderNotFoundError,
    RootFolderStoreError,
)
from rootkeeper.rootfolders.models import RootFolder

logger = logging.getLogger(__name__)


class JsonRootFolderRepository(RootFolderRepository):
    """Stores root folder records in a single JSON document.

    Every operation reads the file fresh and every mutation rewrites it
    atomically, holding an instance lock for the read-modify-write cycle.

    Attributes:
        store_path: JSON file holding the records.
    """

    def __init__(self, store_path: Path | None = None) -> None:
        """Initialize the repository.

        Args:
            store_path: Optional override for the store file.
                        Default: ~/.local/state/rootkeeper/root-folders.json
        """
        self._store_path = store_path if store_path is not None else get_store_path()
        self._lock = threading.Lock()

    @property
    def store_path(self) -> Path:
        return self._store_path

    def all(self) -> list[RootFolder]:
        with self._lock:
            return self._read()[1]

    def get(self, folder_id: int) -> RootFolder:
        with self._lock:
            _, folders = self._read()
        for folder in folders:
            if folder.id == folder_id:
                return folder
        raise RootFolderNotFoundError(folder_id)

    def insert(self, folder: RootFolder) -> RootFolder:
        """Store a new root folder.

        The path uniqueness check is repeated under the lock so that two
        concurrent inserts of the same path cannot both succeed.

        Raises:
            DuplicateRootFolderError: If the path is already stored.
            RootFolderStoreError: If the store cannot be read or written.
        """
        with self._lock:
            next_id, folders = self._read()
            if any(existing.path == folder.path for existing in folders):
                raise DuplicateRootFolderError(str(folder.path))

            stored = replace(
                folder,
                id=next_id,
                unmapped_folders=None,
                accessible=None,
                free_space=None,
                total_space=None,
            )
            folders.append(stored)
            self._write(next_id + 1, folders)

        logger.debug("Stored root folder %d: %s", stored.id, stored.path)
        return stored

    def delete(self, folder_id: int) -> None:
        """Delete a root folder; a missing id is a no-op."""
        with self._lock:
            next_id, folders = self._read()
            remaining = [f for f in folders if f.id != folder_id]
            if len(remaining) == len(folders):
                logger.debug("Root folder %d not in store, nothing to delete", folder_id)
                return
            self._write(next_id, remaining)

    def _read(self) -> tuple[int, list[RootFolder]]:
        """Load the store contents.

        Returns:
            Tuple of (next_id, folders). A missing file is an empty store.

        Raises:
            RootFolderStoreError: If the file is unreadable or corrupt.
        """
        if not self._store_path.exists():
            return 1, []

        try:
            data = json.loads(self._store_path.read_text(encoding="utf-8"))
            folders = [RootFolder.from_record(record) for record in data.get("root_folders", [])]
            highest = max((f.id for f in folders), default=0)
            next_id = max(int(data.get("next_id", 1)), highest + 1)
        except OSError as e:
            raise RootFolderStoreError(f"Failed to read root folder store: {e}") from e
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            raise RootFolderStoreError(
                f"Corrupt root folder store {self._store_path}: {e}"
            ) from e

        return next_id, folders

    def _write(self, next_id: int, folders: list[RootFolder]) -> None:
        """Atomically replace the store contents.

        Raises:
            RootFolderStoreError: If the file cannot be written.
        """
        data: dict[str, Any] = {
            "next_id": next_id,
            "root_folders": [f.to_record() for f in folders],
        }

        tmp_path: Path | None = None
        try:
            self._store_path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self._store_path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                json.dump(data, f, indent=2)
            os.replace(str(tmp_path), str(self._store_path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise RootFolderStoreError(f"Failed to write root folder store: {e}") from e
