"""
Tab state: a cache of directory columns around one navigation cursor.

Modified: 2025-11-08
"""

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from fanger.core.column import DirColumn
from fanger.core.exceptions import FileSystemError
from fanger.core.models import SortOption


logger = logging.getLogger(__name__)


def normalize_path(path: Union[str, Path], base: Optional[Path] = None) -> Path:
    """Make a path absolute (relative to ``base``) and collapse ``..`` parts.

    Symlinks are not resolved so the displayed path is the one the user
    navigated through.
    """
    path = Path(os.path.expanduser(str(path)))
    if not path.is_absolute() and base is not None:
        path = base / path
    return Path(os.path.abspath(path))


class Tab:
    """
    One navigation context.

    Columns are cached by path in ``history`` and re-listed lazily when they
    go stale. Every column in the tab shares the tab's sort option and
    hidden-file setting.
    """

    def __init__(
        self,
        path: Union[str, Path],
        sort_option: Optional[SortOption] = None,
        show_hidden: bool = False,
    ):
        """
        Initialize a tab.

        Args:
            path: Starting directory
            sort_option: Comparator settings (default: natural, dirs first)
            show_hidden: Whether dotfiles are listed

        Raises:
            FileSystemError: If the starting directory cannot be read
        """
        self.sort_option = sort_option or SortOption()
        self.show_hidden = show_hidden
        self.history: Dict[Path, DirColumn] = {}

        start = normalize_path(path)
        if not start.is_dir():
            raise FileSystemError(f"Not a directory: {start}", path=start)
        self.get_column(start)
        self.curr_path = start
        self._sync_parent()

    def __repr__(self) -> str:
        return f"Tab({str(self.curr_path)!r})"

    # Columns

    def get_column(self, path: Path) -> DirColumn:
        """
        Get the column for a directory, listing it on first use.

        A cached column that went stale is re-listed; if that fails the old
        contents are returned as they were.

        Raises:
            FileSystemError: If a directory that was never listed cannot be read
        """
        column = self.history.get(path)
        if column is None:
            column = DirColumn.load(path, self.sort_option, self.show_hidden)
            self.history[path] = column
        elif column.is_stale():
            try:
                column.reload(self.sort_option, self.show_hidden)
            except FileSystemError as e:
                logger.warning(f"Keeping stale listing of {path}: {e}")
        return column

    def curr_list(self) -> DirColumn:
        """Column for the current directory."""
        return self.get_column(self.curr_path)

    def parent_list(self) -> Optional[DirColumn]:
        """Column for the parent directory, or None at the filesystem root."""
        parent = self.curr_path.parent
        if parent == self.curr_path:
            return None
        try:
            return self.get_column(parent)
        except FileSystemError as e:
            logger.debug(f"Cannot list parent {parent}: {e}")
            return None

    def child_list(self) -> Optional[DirColumn]:
        """Preview column for the directory under the cursor, if any."""
        entry = self.curr_list().cursor_entry()
        if entry is None or not entry.is_dir:
            return None
        try:
            return self.get_column(entry.path)
        except FileSystemError as e:
            logger.debug(f"Cannot preview {entry.path}: {e}")
            return None

    def _sync_parent(self) -> None:
        """Point the parent column's cursor at the current directory."""
        parent = self.parent_list()
        if parent is not None:
            index = parent.index_of(self.curr_path.name)
            if index is not None:
                parent.set_index(index)

    # Navigation

    def change_dir(self, path: Union[str, Path]) -> Path:
        """
        Make ``path`` the current directory.

        Relative paths are taken from the current directory.

        Returns:
            The new current path

        Raises:
            FileSystemError: If the path is not a readable directory
        """
        target = normalize_path(path, base=self.curr_path)
        if not target.exists():
            raise FileSystemError(f"No such file or directory: {target}", path=target)
        if not target.is_dir():
            raise FileSystemError(f"Not a directory: {target}", path=target)
        self.get_column(target)
        self.curr_path = target
        self._sync_parent()
        return target

    def parent_dir(self) -> Path:
        """Move to the parent directory, keeping the cursor on where we came from."""
        child = self.curr_path
        if child.parent == child:
            return child
        self.change_dir(child.parent)
        column = self.curr_list()
        index = column.index_of(child.name)
        if index is not None:
            column.set_index(index)
        return self.curr_path

    # Refresh

    def invalidate(self, paths: Iterable[Path]) -> None:
        """Mark the columns for the given directories as needing a re-list."""
        for path in paths:
            column = self.history.get(normalize_path(path))
            if column is not None:
                column.need_update = True

    def invalidate_all(self) -> None:
        for column in self.history.values():
            column.need_update = True

    def reload_all(self) -> None:
        """
        Re-list every cached column now.

        Columns whose directory disappeared are dropped from the cache.

        Raises:
            FileSystemError: If the current directory cannot be re-listed
        """
        current_error = None
        for path, column in list(self.history.items()):
            try:
                column.reload(self.sort_option, self.show_hidden)
            except FileSystemError as e:
                if path == self.curr_path:
                    current_error = e
                else:
                    logger.debug(f"Dropping column for {path}: {e}")
                    del self.history[path]
        if current_error is not None:
            raise current_error

    def set_sort_option(self, sort_option: SortOption) -> None:
        self.sort_option = sort_option
        self.invalidate_all()

    def set_show_hidden(self, show_hidden: bool) -> None:
        self.show_hidden = show_hidden
        self.invalidate_all()
