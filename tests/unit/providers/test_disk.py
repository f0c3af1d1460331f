"""Tests for LocalDiskProvider."""

from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from rootkeeper.providers.disk import LocalDiskProvider


@pytest.fixture
def disk() -> LocalDiskProvider:
    return LocalDiskProvider()


class TestFolderChecks:
    """Tests for folder_exists and folder_writable."""

    def test_folder_exists(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        assert disk.folder_exists(str(tmp_path)) is True

    def test_missing_folder(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        assert disk.folder_exists(str(tmp_path / "missing")) is False

    def test_file_is_not_a_folder(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        assert disk.folder_exists(str(file_path)) is False

    def test_writable_folder(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        """The write probe succeeds and leaves nothing behind."""
        assert disk.folder_writable(str(tmp_path)) is True
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_folder(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        with patch(
            "rootkeeper.providers.disk.tempfile.NamedTemporaryFile",
            side_effect=PermissionError("read-only"),
        ):
            assert disk.folder_writable(str(tmp_path)) is False

    def test_missing_folder_is_not_writable(
        self, disk: LocalDiskProvider, tmp_path: Path
    ) -> None:
        assert disk.folder_writable(str(tmp_path / "missing")) is False


class TestGetDirectories:
    """Tests for get_directories."""

    def test_lists_only_directories(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        (tmp_path / "Series2").mkdir()
        (tmp_path / "Series1").mkdir()
        (tmp_path / "notes.txt").write_text("x")

        result = disk.get_directories(str(tmp_path))

        assert result == [str(tmp_path / "Series1"), str(tmp_path / "Series2")]

    def test_does_not_recurse(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        (tmp_path / "Series1" / "Season 1").mkdir(parents=True)

        assert disk.get_directories(str(tmp_path)) == [str(tmp_path / "Series1")]

    def test_missing_folder_raises(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            disk.get_directories(str(tmp_path / "missing"))


class TestBestEffortLookups:
    """Tests for timestamp and space lookups."""

    def test_last_modified(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        result = disk.folder_last_modified(str(tmp_path))

        assert isinstance(result, datetime)
        assert result.tzinfo is not None

    def test_last_modified_missing(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        assert disk.folder_last_modified(str(tmp_path / "missing")) is None

    def test_space(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        free = disk.get_available_space(str(tmp_path))
        total = disk.get_total_space(str(tmp_path))

        assert free is not None and total is not None
        assert 0 <= free <= total

    def test_space_missing_folder(self, disk: LocalDiskProvider, tmp_path: Path) -> None:
        assert disk.get_available_space(str(tmp_path / "missing")) is None
        assert disk.get_total_space(str(tmp_path / "missing")) is None
