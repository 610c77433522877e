"""
Tests for cached directory columns.

Created: 2025-11-09
"""

import pytest

from fanger.core.column import DirColumn, read_dir_list
from fanger.core.exceptions import FileSystemError
from fanger.core.models import SortOption
from tests.utils import bump_mtime, names


def load(path, show_hidden=False):
    return DirColumn.load(path, SortOption(), show_hidden)


class TestReadDirList:
    """Test raw directory listing."""

    def test_hidden_files_filtered(self, tree):
        listed = {entry.name for entry in read_dir_list(tree, show_hidden=False)}

        assert ".hidden" not in listed
        assert "alpha" in listed

    def test_hidden_files_shown(self, tree):
        listed = {entry.name for entry in read_dir_list(tree, show_hidden=True)}

        assert ".hidden" in listed

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileSystemError) as exc_info:
            read_dir_list(tmp_path / "missing", show_hidden=False)

        assert "No such file or directory" in str(exc_info.value)


class TestDirColumn:
    """Test listing, cursor and selection."""

    def test_load_sorted(self, tree):
        column = load(tree)

        assert names(column) == ["alpha", "beta", "file1.txt", "file2.txt", "file10.txt", "notes.md"]
        assert column.index == 0

    def test_cursor_clamps(self, tree):
        column = load(tree)

        column.move_by(100)
        assert column.index == len(column) - 1

        column.move_by(-100)
        assert column.index == 0

    def test_empty_directory(self, tree):
        column = load(tree / "beta")

        assert len(column) == 0
        assert column.index == 0
        assert column.cursor_entry() is None
        assert column.selected_or_current() == []

    def test_selected_or_current(self, tree):
        column = load(tree)
        column.set_index(2)

        assert [e.name for e in column.selected_or_current()] == ["file1.txt"]

        column.entries[0].selected = True
        column.entries[5].selected = True
        assert [e.name for e in column.selected_or_current()] == ["alpha", "notes.md"]

        column.clear_selection()
        assert column.selected_entries() == []

    def test_index_of(self, tree):
        column = load(tree)

        assert column.index_of("beta") == 1
        assert column.index_of("nope") is None


class TestStaleness:
    """Test mtime-based refresh."""

    def test_fresh_column_not_stale(self, tree):
        assert not load(tree).is_stale()

    def test_mtime_change_is_stale(self, tree):
        column = load(tree)

        bump_mtime(tree)

        assert column.is_stale()

    def test_need_update_flag(self, tree):
        column = load(tree)
        column.need_update = True

        assert column.is_stale()

    def test_reload_picks_up_new_file(self, tree):
        column = load(tree)
        (tree / "file3.txt").write_text("three")

        column.reload(SortOption(), show_hidden=False)

        assert "file3.txt" in names(column)
        assert not column.is_stale()

    def test_reload_clamps_cursor_when_directory_empties(self, tree):
        directory = tree / "alpha"
        column = load(directory)
        column.set_index(0)
        (directory / "inner.txt").unlink()

        column.reload(SortOption(), show_hidden=False)

        assert len(column) == 0
        assert column.index == 0
        assert column.cursor_entry() is None

    def test_reload_clamps_cursor_when_directory_shrinks(self, tree):
        column = load(tree)
        column.set_index(5)
        (tree / "notes.md").unlink()

        column.reload(SortOption(), show_hidden=False)

        assert column.index == 4

    def test_reload_failure_keeps_entries(self, tree):
        directory = tree / "alpha"
        column = load(directory)
        (directory / "inner.txt").unlink()
        directory.rmdir()

        assert column.is_stale()
        with pytest.raises(FileSystemError):
            column.reload(SortOption(), show_hidden=False)
        assert names(column) == ["inner.txt"]


class TestScroll:
    """Test viewport adjustment."""

    def test_cursor_below_viewport(self, tree):
        column = load(tree)
        column.set_index(5)

        assert column.adjust_scroll(3) == 3

    def test_cursor_above_viewport(self, tree):
        column = load(tree)
        column.set_index(5)
        column.adjust_scroll(3)
        column.set_index(1)

        assert column.adjust_scroll(3) == 1

    def test_viewport_larger_than_listing(self, tree):
        column = load(tree)
        column.set_index(5)

        assert column.adjust_scroll(50) == 0
