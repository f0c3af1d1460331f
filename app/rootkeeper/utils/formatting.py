"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from rootkeeper.core.theme import get_theme

if TYPE_CHECKING:
    from rootkeeper.rootfolders.models import RootFolder, UnmappedFolder


def _detect_color_system() -> str | None:
    """Return "truecolor" for interactive terminals, None to let Rich auto-detect."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string ("-" when unknown)."""
    if size_bytes is None:
        return "-"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} PB"


def create_root_folder_table(folders: list[RootFolder], title: str = "Root Folders") -> Table:
    """Create a table listing root folders.

    The Unmapped column is shown only when at least one folder was scanned.

    Args:
        folders: Root folders to display.
        title: Table title.

    Returns:
        Rich Table with one row per root folder.
    """
    show_unmapped = any(f.unmapped_folders is not None for f in folders)

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("ID", justify="right", width=6)
    table.add_column("Path", style="folder_path", no_wrap=True)
    if show_unmapped:
        table.add_column("Unmapped", justify="right", style="unmapped")

    for folder in folders:
        row = [str(folder.id), str(folder.path)]
        if show_unmapped:
            count = len(folder.unmapped_folders) if folder.unmapped_folders is not None else 0
            row.append(str(count))
        table.add_row(*row)

    return table


def create_unmapped_table(unmapped: tuple[UnmappedFolder, ...]) -> Table:
    """Create a table listing unmapped folders of a single root."""
    table = Table(
        title="Unmapped Folders",
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Name", style="unmapped", no_wrap=True)
    table.add_column("Path", style="muted")
    table.add_column("Last Modified", style="info")

    for folder in unmapped:
        modified = folder.last_modified.strftime("%Y-%m-%d %H:%M") if folder.last_modified else "-"
        table.add_row(folder.name, folder.path, modified)

    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
