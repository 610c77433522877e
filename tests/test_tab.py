"""
Tests for tab navigation and the column cache.

Created: 2025-11-09
"""

import pytest

from fanger.core.exceptions import FileSystemError
from fanger.core.models import SortOption, SortType
from fanger.core.tab import Tab, normalize_path
from tests.utils import bump_mtime, names


class TestNormalizePath:
    """Test path normalization."""

    def test_relative_to_base(self, tmp_path):
        assert normalize_path("sub", base=tmp_path) == tmp_path / "sub"

    def test_collapses_dotdot(self, tmp_path):
        assert normalize_path(tmp_path / "a" / ".." / "b") == tmp_path / "b"

    def test_expands_user(self, isolated_home):
        assert normalize_path("~/docs") == isolated_home / "docs"


class TestTabCreation:
    """Test opening a tab."""

    def test_opens_directory(self, tree):
        tab = Tab(tree)

        assert tab.curr_path == tree
        assert tree in tab.history

    def test_missing_directory_fails(self, tmp_path):
        with pytest.raises(FileSystemError):
            Tab(tmp_path / "missing")

    def test_file_is_not_a_directory(self, tree):
        with pytest.raises(FileSystemError) as exc_info:
            Tab(tree / "notes.md")

        assert "Not a directory" in str(exc_info.value)


class TestNavigation:
    """Test changing directories."""

    def test_change_dir_relative(self, tree):
        tab = Tab(tree)

        tab.change_dir("alpha")

        assert tab.curr_path == tree / "alpha"
        assert names(tab.curr_list()) == ["inner.txt"]

    def test_change_dir_missing(self, tree):
        tab = Tab(tree)

        with pytest.raises(FileSystemError) as exc_info:
            tab.change_dir("nope")

        assert "No such file or directory" in str(exc_info.value)
        assert tab.curr_path == tree

    def test_change_dir_to_file(self, tree):
        tab = Tab(tree)

        with pytest.raises(FileSystemError) as exc_info:
            tab.change_dir("notes.md")

        assert "Not a directory" in str(exc_info.value)
        assert tab.curr_path == tree

    def test_parent_dir_keeps_cursor_on_child(self, tree):
        tab = Tab(tree / "beta")

        tab.parent_dir()

        assert tab.curr_path == tree
        assert tab.curr_list().cursor_entry().name == "beta"

    def test_parent_dir_at_root(self):
        tab = Tab("/")

        assert tab.parent_dir() == tab.curr_path
        assert tab.parent_list() is None

    def test_parent_list_points_at_current(self, tree):
        tab = Tab(tree / "beta")

        parent = tab.parent_list()

        assert parent.path == tree
        assert parent.cursor_entry().name == "beta"

    def test_child_list_for_directory(self, tree):
        tab = Tab(tree)

        child = tab.child_list()

        assert child.path == tree / "alpha"

    def test_child_list_for_file(self, tree):
        tab = Tab(tree)
        tab.curr_list().set_index(2)

        assert tab.child_list() is None

    def test_columns_are_cached(self, tree):
        tab = Tab(tree)
        column = tab.curr_list()
        column.set_index(3)

        tab.change_dir("alpha")
        tab.parent_dir()

        assert tab.curr_list() is column


class TestRefresh:
    """Test lazy staleness handling."""

    def test_stale_column_relisted_on_access(self, tree):
        tab = Tab(tree)
        (tree / "file3.txt").write_text("three")
        bump_mtime(tree)

        assert "file3.txt" in names(tab.curr_list())

    def test_invalidate_marks_column(self, tree):
        tab = Tab(tree)
        (tree / "file3.txt").write_text("three")
        tab.invalidate([tree])

        assert tab.history[tree].need_update
        assert "file3.txt" in names(tab.curr_list())
        assert not tab.history[tree].need_update

    def test_cursor_clamped_after_shrink(self, tree):
        tab = Tab(tree)
        tab.curr_list().set_index(5)
        for name in ("file1.txt", "file2.txt", "file10.txt", "notes.md"):
            (tree / name).unlink()
        tab.invalidate([tree])

        column = tab.curr_list()

        assert len(column) == 2
        assert column.index == 1

    def test_stale_listing_kept_when_unreadable(self, tree):
        tab = Tab(tree)
        column = tab.get_column(tree / "alpha")
        (tree / "alpha" / "inner.txt").unlink()
        (tree / "alpha").rmdir()

        assert names(tab.get_column(tree / "alpha")) == ["inner.txt"]
        assert column is tab.get_column(tree / "alpha")

    def test_reload_all_drops_vanished_columns(self, tree):
        tab = Tab(tree)
        tab.get_column(tree / "beta")
        (tree / "beta").rmdir()

        tab.reload_all()

        assert tree / "beta" not in tab.history
        assert "beta" not in names(tab.curr_list())

    def test_sort_option_applies_to_all_columns(self, tree):
        tab = Tab(tree)

        tab.set_sort_option(SortOption(sort_method=SortType.SIZE, directories_first=False))

        listed = names(tab.curr_list())
        assert listed.index("file1.txt") < listed.index("file2.txt") < listed.index("file10.txt")

    def test_show_hidden(self, tree):
        tab = Tab(tree)

        tab.set_show_hidden(True)

        assert ".hidden" in names(tab.curr_list())
