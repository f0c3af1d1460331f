"""Root folder error taxonomy.

Every error raised by the root folder manager derives from RootFolderError
and carries an ErrorKind. Where a builtin exception has the same meaning
the error also derives from it, so callers may catch either.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure category of a root folder operation."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PERMISSION_DENIED = "permission_denied"
    STORAGE = "storage"


class RootFolderError(Exception):
    """Base exception for root folder errors."""

    kind: ErrorKind


class InvalidRootFolderPathError(RootFolderError, ValueError):
    """Raised when a path is empty or not a valid absolute path."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, path: str | None) -> None:
        self.path = path
        super().__init__(f"Invalid root folder path: {path!r}")


class DirectoryNotFoundError(RootFolderError, LookupError):
    """Raised when the directory being added does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Directory does not exist: {path}")


class RootFolderNotFoundError(RootFolderError, LookupError):
    """Raised when no root folder has the requested id."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, folder_id: int) -> None:
        self.folder_id = folder_id
        super().__init__(f"Root folder not found: {folder_id}")


class DuplicateRootFolderError(RootFolderError):
    """Raised when a root folder with the same path is already registered."""

    kind = ErrorKind.CONFLICT

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Root folder already exists: {path}")


class FolderNotWritableError(RootFolderError, PermissionError):
    """Raised when the directory being added is not writable."""

    kind = ErrorKind.PERMISSION_DENIED

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Folder is not writable: {path}")


class RootFolderStoreError(RootFolderError):
    """Raised when the root folder store cannot be read or written."""

    kind = ErrorKind.STORAGE
