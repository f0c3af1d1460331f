"""Unit tests for console formatting helpers."""

from datetime import datetime

import pytest
from rich.console import Console

from rootkeeper.core.theme import get_theme
from rootkeeper.rootfolders.models import RootFolder, UnmappedFolder
from rootkeeper.utils.formatting import (
    create_root_folder_table,
    create_unmapped_table,
    format_size,
)


def _render(renderable) -> str:
    console = Console(width=120, color_system=None, theme=get_theme())
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (None, "-"),
            (0, "0 B"),
            (512, "512 B"),
            (2048, "2.0 KB"),
            (5 * 1024**3, "5.0 GB"),
            (3 * 1024**5, "3.0 PB"),
        ],
    )
    def test_format_size(self, size: int | None, expected: str) -> None:
        assert format_size(size) == expected


class TestRootFolderTable:
    """Tests for create_root_folder_table."""

    def test_unscanned_folders_have_no_unmapped_column(self) -> None:
        table = create_root_folder_table([RootFolder(path="/media/tv", id=1)])

        assert [c.header for c in table.columns] == ["ID", "Path"]

    def test_scanned_folders_show_counts(self) -> None:
        unmapped = UnmappedFolder(name="A", path="/media/tv/A", relative_path="A")
        folders = [
            RootFolder(path="/media/tv", id=1, unmapped_folders=(unmapped,)),
            RootFolder(path="/media/movies", id=2),
        ]

        table = create_root_folder_table(folders)
        output = _render(table)

        assert [c.header for c in table.columns] == ["ID", "Path", "Unmapped"]
        assert "/media/movies" in output


class TestUnmappedTable:
    """Tests for create_unmapped_table."""

    def test_rows_include_modification_time(self) -> None:
        folders = (
            UnmappedFolder(
                name="Show A",
                path="/media/tv/Show A",
                relative_path="Show A",
                last_modified=datetime(2024, 3, 1, 12, 30),
            ),
            UnmappedFolder(name="Show B", path="/media/tv/Show B", relative_path="Show B"),
        )

        output = _render(create_unmapped_table(folders))

        assert "2024-03-01 12:30" in output
        assert "Show B" in output
        assert create_unmapped_table(folders).row_count == 2
