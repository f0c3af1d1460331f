"""Root folder registry module.

This module provides the root folder models, the error taxonomy, the
special folder denylist, and the manager that validates registrations
and computes unmapped folders.
"""

from rootkeeper.rootfolders.errors import (
    DirectoryNotFoundError,
    DuplicateRootFolderError,
    ErrorKind,
    FolderNotWritableError,
    InvalidRootFolderPathError,
    RootFolderError,
    RootFolderNotFoundError,
    RootFolderStoreError,
)
from rootkeeper.rootfolders.models import RootFolder, UnmappedFolder
from rootkeeper.rootfolders.service import RootFolderManager
from rootkeeper.rootfolders.special import SPECIAL_FOLDER_NAMES, is_special_folder

__all__ = [
    "SPECIAL_FOLDER_NAMES",
    "DirectoryNotFoundError",
    "DuplicateRootFolderError",
    "ErrorKind",
    "FolderNotWritableError",
    "InvalidRootFolderPathError",
    "RootFolderError",
    "RootFolderManager",
    "RootFolderNotFoundError",
    "RootFolderStoreError",
    "RootFolder",
    "UnmappedFolder",
    "is_special_folder",
]
