"""Root folder domain models.

This module defines the registered root folder record and the
ephemeral unmapped folder entries computed when a root is inspected.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class UnmappedFolder:
    """Immediate subdirectory of a root folder not tracked by the library.

    Never persisted; recomputed on every inspection.

    Attributes:
        name: Final path segment of the folder.
        path: Absolute path of the folder.
        relative_path: Path relative to the owning root folder.
        last_modified: Last modification time (None if unavailable).
    """

    name: str
    path: str
    relative_path: str
    last_modified: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "name": self.name,
            "path": self.path,
            "relative_path": self.relative_path,
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
        }


@dataclass(frozen=True, slots=True)
class RootFolder:
    """Top-level directory registered for library scanning.

    Only id and path are persisted. The remaining attributes are computed
    on demand and stay None unless the caller asked for them.

    Attributes:
        path: Absolute directory path; unique among stored root folders.
        id: Store-assigned identifier (0 = not yet persisted).
        unmapped_folders: Subdirectories not tracked by the library.
        accessible: Whether the directory currently exists.
        free_space: Available bytes on the containing volume.
        total_space: Total bytes of the containing volume.
    """

    path: str | None
    id: int = 0
    unmapped_folders: tuple[UnmappedFolder, ...] | None = None
    accessible: bool | None = None
    free_space: int | None = None
    total_space: int | None = None

    @property
    def is_persisted(self) -> bool:
        """Check if the store has assigned an id."""
        return self.id > 0

    def to_record(self) -> dict[str, Any]:
        """Serialize the persisted fields for storage."""
        return {"id": self.id, "path": self.path}

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> RootFolder:
        """Deserialize a stored record.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If the id is not an integer.
        """
        return cls(path=data["path"], id=int(data["id"]))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output, including computed fields."""
        result: dict[str, Any] = {
            "id": self.id,
            "path": self.path,
            "accessible": self.accessible,
            "free_space": self.free_space,
            "total_space": self.total_space,
        }
        if self.unmapped_folders is not None:
            result["unmapped_folders"] = [u.to_dict() for u in self.unmapped_folders]
        return result
