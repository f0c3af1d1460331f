"""Special folder names that are never reported as unmapped.

Operating systems, NAS appliances and media tools drop housekeeping
directories into library roots. They are matched by final path segment,
case-insensitively.
"""

SPECIAL_FOLDER_NAMES: frozenset[str] = frozenset(
    {
        # Windows
        "$recycle.bin",
        "system volume information",
        "recycler",
        # Linux / ext filesystems
        "lost+found",
        # macOS / AFP
        ".appledb",
        ".appledesktop",
        ".appledouble",
        # NAS and tooling metadata
        "@eadir",
        ".grab",
    }
)


def is_special_folder(name: str) -> bool:
    """Check if a folder name is a special system or application folder.

    Args:
        name: Final path segment of the folder.

    Returns:
        True if the name matches a special folder, ignoring case.
    """
    return name.lower() in SPECIAL_FOLDER_NAMES
