"""
Tests for core data models.

Modified: 2025-11-09
"""

import os
from pathlib import Path

import pytest

from fanger.core.models import (
    Clipboard,
    ClipboardItem,
    Entry,
    EntryKind,
    JobKind,
    JobOptions,
    SortOption,
    SortType,
    WorkerJob,
    natural_key,
)
from tests.utils import create_test_entry


def sorted_names(option: SortOption, entries):
    return [entry.name for entry in option.sort_entries(entries)]


class TestEntry:
    """Test Entry model."""

    def test_from_path_file(self, tmp_path):
        """Test creating an entry for a regular file."""
        path = tmp_path / "hello.txt"
        path.write_text("hello")

        entry = Entry.from_path(path)

        assert entry.name == "hello.txt"
        assert entry.kind == EntryKind.FILE
        assert entry.size == 5
        assert entry.is_dir is False
        assert entry.selected is False

    def test_from_path_directory(self, tmp_path):
        """Test creating an entry for a directory."""
        path = tmp_path / "sub"
        path.mkdir()

        entry = Entry.from_path(path)

        assert entry.kind == EntryKind.DIR
        assert entry.is_dir is True

    def test_symlink_to_directory_counts_as_directory(self, tmp_path):
        """Test that a link to a directory is listed as a link but behaves like a dir."""
        (tmp_path / "target").mkdir()
        link = tmp_path / "link"
        os.symlink(tmp_path / "target", link)

        entry = Entry.from_path(link)

        assert entry.kind == EntryKind.SYMLINK
        assert entry.is_dir is True

    def test_dangling_symlink(self, tmp_path):
        """Test that a dangling link is a plain (non-directory) entry."""
        link = tmp_path / "dangling"
        os.symlink(tmp_path / "missing", link)

        entry = Entry.from_path(link)

        assert entry.kind == EntryKind.SYMLINK
        assert entry.is_dir is False

    def test_from_path_missing(self, tmp_path):
        """Test that a missing path raises OSError."""
        with pytest.raises(OSError):
            Entry.from_path(tmp_path / "nope")

    def test_extension(self):
        """Test extension extraction."""
        assert create_test_entry("archive.tar.GZ").extension == "gz"
        assert create_test_entry(".bashrc").extension == ""
        assert create_test_entry("README").extension == ""

    def test_is_hidden(self):
        """Test dotfile detection."""
        assert create_test_entry(".env").is_hidden
        assert not create_test_entry("env").is_hidden

    def test_format_size(self):
        """Test size formatting."""
        assert create_test_entry("a", size=512).format_size() == "512B"
        assert create_test_entry("b", size=2048).format_size() == "2.0K"
        assert create_test_entry("c", size=3 * 1024 * 1024).format_size() == "3.0M"
        assert create_test_entry("d", is_dir=True).format_size() == "-"

    def test_format_mode(self, tmp_path):
        """Test permission formatting."""
        path = tmp_path / "script.sh"
        path.write_text("")
        os.chmod(path, 0o755)

        assert Entry.from_path(path).format_mode() == "-rwxr-xr-x"


class TestSortType:
    """Test SortType parsing."""

    def test_parse_known(self):
        assert SortType.parse("size") == SortType.SIZE
        assert SortType.parse("natural") == SortType.NATURAL

    def test_parse_unknown(self):
        assert SortType.parse("color") is None


class TestSortOption:
    """Test sorting of directory listings."""

    def test_natural_key(self):
        """Test that numbers compare numerically."""
        assert natural_key("file2") < natural_key("file10")

    def test_natural_sort(self):
        """Test natural order is the default."""
        entries = [create_test_entry(n) for n in ("file10", "file2", "file1")]

        assert sorted_names(SortOption(), entries) == ["file1", "file2", "file10"]

    def test_lexical_sort(self):
        """Test plain string order."""
        entries = [create_test_entry(n) for n in ("file10", "file2", "file1")]
        option = SortOption(sort_method=SortType.LEXICAL)

        assert sorted_names(option, entries) == ["file1", "file10", "file2"]

    def test_size_ties_fall_back_to_name(self):
        """Test that equal keys are ordered by name."""
        entries = [
            create_test_entry("b", size=5),
            create_test_entry("a", size=5),
            create_test_entry("c", size=1),
        ]
        option = SortOption(sort_method=SortType.SIZE)

        assert sorted_names(option, entries) == ["c", "a", "b"]

    def test_mtime_sort(self):
        """Test ordering by modification time."""
        entries = [
            create_test_entry("new", modified=300.0),
            create_test_entry("old", modified=100.0),
        ]
        option = SortOption(sort_method=SortType.MTIME)

        assert sorted_names(option, entries) == ["old", "new"]

    def test_ext_sort(self):
        """Test ordering by extension, entries without one first."""
        entries = [create_test_entry(n) for n in ("b.txt", "a.md", "c")]
        option = SortOption(sort_method=SortType.EXT)

        assert sorted_names(option, entries) == ["c", "a.md", "b.txt"]

    def test_directories_first(self):
        """Test that directories lead even when their names sort later."""
        entries = [
            create_test_entry("aaa"),
            create_test_entry("zzz", is_dir=True),
        ]

        assert sorted_names(SortOption(), entries) == ["zzz", "aaa"]
        assert sorted_names(SortOption(directories_first=False), entries) == ["aaa", "zzz"]

    def test_reverse_keeps_directories_first(self):
        """Test that reversing flips order inside each group only."""
        entries = [
            create_test_entry("a"),
            create_test_entry("b"),
            create_test_entry("dir", is_dir=True),
        ]
        option = SortOption(reverse=True)

        assert sorted_names(option, entries) == ["dir", "b", "a"]

    def test_case_sensitivity(self):
        """Test case-insensitive default and case-sensitive option."""
        entries = [create_test_entry("B"), create_test_entry("a")]
        option = SortOption(sort_method=SortType.LEXICAL)

        assert sorted_names(option, entries) == ["a", "B"]
        option.case_sensitive = True
        assert sorted_names(option, entries) == ["B", "a"]


class TestClipboard:
    """Test Clipboard model."""

    def test_copy(self):
        """Test copying paths."""
        clipboard = Clipboard()
        clipboard.copy([Path("/a"), Path("/b")])

        assert len(clipboard.items) == 2
        assert clipboard.get_operation() == "copy"
        assert not clipboard.is_empty()

    def test_cut(self):
        """Test cutting paths."""
        clipboard = Clipboard()
        clipboard.cut([Path("/a")])

        assert len(clipboard.items) == 1
        assert clipboard.get_operation() == "cut"
        assert clipboard.paste() == [ClipboardItem(path=Path("/a"), operation="cut")]

    def test_paste_does_not_clear(self):
        """Test that paste leaves the clipboard intact."""
        clipboard = Clipboard()
        clipboard.copy([Path("/a")])

        clipboard.paste()

        assert len(clipboard.items) == 1

    def test_clear(self):
        """Test clearing clipboard."""
        clipboard = Clipboard()
        clipboard.copy([Path("/a")])

        clipboard.clear()

        assert clipboard.is_empty()
        assert clipboard.get_operation() is None

    def test_new_operation_replaces_old(self):
        """Test that cutting replaces a previous copy."""
        clipboard = Clipboard()
        clipboard.copy([Path("/a"), Path("/b")])
        clipboard.cut([Path("/c")])

        assert len(clipboard.items) == 1
        assert clipboard.get_operation() == "cut"


class TestWorkerJob:
    """Test WorkerJob model."""

    def test_copy_touches_destination_only(self):
        job = WorkerJob(kind=JobKind.COPY, sources=[Path("/src/a")], destination=Path("/dst"))

        assert job.touched_paths() == {Path("/dst")}

    def test_move_touches_source_parents(self):
        job = WorkerJob(
            kind=JobKind.MOVE,
            sources=[Path("/src/a"), Path("/other/b")],
            destination=Path("/dst"),
        )

        assert job.touched_paths() == {Path("/dst"), Path("/src"), Path("/other")}

    def test_delete_touches_source_parents(self):
        job = WorkerJob(kind=JobKind.DELETE, sources=[Path("/src/a")])

        assert job.touched_paths() == {Path("/src")}

    def test_describe(self):
        job = WorkerJob(kind=JobKind.DELETE, sources=[Path("/a"), Path("/b")])

        assert job.describe() == "delete 2 items"

    def test_default_options(self):
        options = JobOptions()

        assert options.overwrite is False
        assert options.skip_exist is False
