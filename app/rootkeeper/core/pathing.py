"""Host-aware path syntax rules.

Root folders may be registered from either a POSIX or a Windows host,
so separator and case handling are driven by a PathFlavor instead of
the running interpreter's os.path module.
"""

import os
import re
from enum import Enum
from pathlib import PurePath, PurePosixPath, PureWindowsPath


class PathFlavor(str, Enum):
    """Path syntax conventions of a host operating system.

    Attributes:
        POSIX: Forward-slash separated, case-sensitive, rooted at "/".
        WINDOWS: Backslash separated, case-insensitive, drive or UNC rooted.
    """

    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def separator(self) -> str:
        """Primary directory separator for this flavor."""
        return "\\" if self is PathFlavor.WINDOWS else "/"

    @property
    def case_sensitive(self) -> bool:
        """Whether path comparisons honour case."""
        return self is PathFlavor.POSIX


_WINDOWS_INVALID_CHARS = frozenset('"<>|\0' + "".join(chr(c) for c in range(1, 32)))
_POSIX_INVALID_CHARS = frozenset("\0")

# Drive-rooted ("C:\", "C:/") or UNC with either slash ("\\server\share", "//server/share")
_WINDOWS_ROOT = re.compile(r"^(?:[A-Za-z]:[\\/]|[\\/]{2})")


def host_flavor() -> PathFlavor:
    """Return the path flavor of the running interpreter."""
    return PathFlavor.WINDOWS if os.name == "nt" else PathFlavor.POSIX


def _pure(path: str, flavor: PathFlavor) -> PurePath:
    if flavor is PathFlavor.WINDOWS:
        return PureWindowsPath(path)
    return PurePosixPath(path)


def is_valid_path(path: str | None, flavor: PathFlavor) -> bool:
    """Check whether a string is a syntactically valid absolute path.

    POSIX paths must start with "/" and contain no NUL byte. Windows paths
    must be drive or UNC rooted, contain none of the reserved characters,
    and carry no leading or trailing whitespace in any segment.

    Args:
        path: Candidate path.
        flavor: Host conventions to validate against.

    Returns:
        True if the path is usable as a root folder path.
    """
    if not path or not path.strip():
        return False

    if flavor is PathFlavor.WINDOWS:
        if any(ch in _WINDOWS_INVALID_CHARS for ch in path):
            return False
        if not _WINDOWS_ROOT.match(path):
            return False
        segments = [s for s in re.split(r"[\\/]", path) if s]
        return all(segment == segment.strip() for segment in segments)

    if any(ch in _POSIX_INVALID_CHARS for ch in path):
        return False
    return path.startswith("/")


def trim_separator(path: str, flavor: PathFlavor) -> str:
    """Strip trailing separators, leaving a bare root untouched."""
    separators = "\\/" if flavor is PathFlavor.WINDOWS else "/"
    trimmed = path.rstrip(separators)
    if not trimmed:
        return path[:1]
    if flavor is PathFlavor.WINDOWS and re.fullmatch(r"[A-Za-z]:", trimmed):
        return trimmed + "\\"
    return trimmed


def _comparable(path: str, flavor: PathFlavor) -> str:
    trimmed = trim_separator(path, flavor)
    if flavor is PathFlavor.WINDOWS:
        return trimmed.replace("/", "\\").casefold()
    return trimmed


def paths_equal(first: str, second: str, flavor: PathFlavor) -> bool:
    """Compare two paths ignoring trailing separators (and case on Windows)."""
    return _comparable(first, flavor) == _comparable(second, flavor)


def is_parent_or_same(parent: str, child: str, flavor: PathFlavor) -> bool:
    """Check whether child equals parent or lies somewhere beneath it.

    Args:
        parent: Candidate ancestor directory.
        child: Path to test.
        flavor: Host conventions for separators and case.

    Returns:
        True if child == parent or child starts with parent plus a separator.
    """
    parent_cmp = _comparable(parent, flavor)
    child_cmp = _comparable(child, flavor)
    if child_cmp == parent_cmp:
        return True
    prefix = parent_cmp if parent_cmp.endswith(flavor.separator) else parent_cmp + flavor.separator
    return child_cmp.startswith(prefix)


def folder_name(path: str, flavor: PathFlavor) -> str:
    """Return the final segment of a path."""
    return _pure(trim_separator(path, flavor), flavor).name


def parent_path(path: str, flavor: PathFlavor) -> str:
    """Return the parent directory of a path."""
    return str(_pure(trim_separator(path, flavor), flavor).parent)


def relative_path(path: str, root: str, flavor: PathFlavor) -> str:
    """Return path relative to root, or path unchanged if it is not beneath root."""
    if not is_parent_or_same(root, path, flavor):
        return path
    root_len = len(trim_separator(root, flavor))
    return trim_separator(path, flavor)[root_len:].lstrip("\\/")
