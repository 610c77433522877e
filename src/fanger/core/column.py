"""
Cached directory listing with cursor and selection state.

A column keeps a sorted, filtered snapshot of one directory and notices
when the directory's modification time moves on.

Modified: 2025-11-08
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from fanger.core.exceptions import FileSystemError
from fanger.core.models import Entry, SortOption


logger = logging.getLogger(__name__)


def read_dir_list(path: Path, show_hidden: bool) -> List[Entry]:
    """
    List a directory's children as entries (unsorted).

    Args:
        path: Directory to list
        show_hidden: Whether to include dotfiles

    Returns:
        List of Entry objects

    Raises:
        FileSystemError: If the directory cannot be read
    """
    entries = []
    try:
        with os.scandir(path) as it:
            for child in it:
                if not show_hidden and child.name.startswith("."):
                    continue
                try:
                    entries.append(Entry.from_path(Path(child.path)))
                except OSError as e:
                    # Child vanished between scandir and lstat
                    logger.debug(f"Skipping {child.path}: {e}")
    except OSError as e:
        raise FileSystemError.from_os_error(e) from e
    return entries


def dir_mtime(path: Path) -> Optional[int]:
    """Return the directory's st_mtime_ns, or None if it cannot be stat-ed."""
    try:
        return os.stat(path).st_mtime_ns
    except OSError:
        return None


class DirColumn:
    """
    Listing of one directory plus cursor, scroll and selection state.

    Invariant: ``index`` is a valid position whenever ``entries`` is
    non-empty, and 0 when it is empty.
    """

    def __init__(self, path: Path, entries: List[Entry], modified: Optional[int]):
        self.path = path
        self.entries = entries
        self.index = 0
        self.start_index = 0
        self.modified = modified
        self.need_update = False

    @classmethod
    def load(cls, path: Path, sort_option: SortOption, show_hidden: bool) -> "DirColumn":
        """
        List and sort a directory.

        Raises:
            FileSystemError: If the directory cannot be read
        """
        modified = dir_mtime(path)
        entries = sort_option.sort_entries(read_dir_list(path, show_hidden))
        return cls(path, entries, modified)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"DirColumn({str(self.path)!r}, {len(self.entries)} entries, index={self.index})"

    # Staleness

    def is_stale(self) -> bool:
        """True when the listing no longer matches the directory on disk."""
        if self.need_update:
            return True
        current = dir_mtime(self.path)
        return current is None or current != self.modified

    def reload(self, sort_option: SortOption, show_hidden: bool) -> None:
        """
        Rebuild the whole listing.

        On failure the previous entries are kept so the pane never goes
        blank because of a transient read error.

        Raises:
            FileSystemError: If the directory cannot be read
        """
        modified = dir_mtime(self.path)
        entries = sort_option.sort_entries(read_dir_list(self.path, show_hidden))
        self.entries = entries
        self.modified = modified
        self.need_update = False
        self._clamp()
        logger.debug(f"Reloaded {self.path} ({len(entries)} entries)")

    # Cursor

    def _clamp(self) -> None:
        if not self.entries:
            self.index = 0
            self.start_index = 0
        elif self.index >= len(self.entries):
            self.index = len(self.entries) - 1
        elif self.index < 0:
            self.index = 0
        if self.start_index > self.index:
            self.start_index = self.index

    def set_index(self, index: int) -> None:
        """Move the cursor, clamping to the valid range."""
        self.index = index
        self._clamp()

    def move_by(self, delta: int) -> None:
        self.set_index(self.index + delta)

    def cursor_entry(self) -> Optional[Entry]:
        """Entry under the cursor, or None for an empty directory."""
        if 0 <= self.index < len(self.entries):
            return self.entries[self.index]
        return None

    def index_of(self, name: str) -> Optional[int]:
        for i, entry in enumerate(self.entries):
            if entry.name == name:
                return i
        return None

    def adjust_scroll(self, height: int) -> int:
        """
        Keep the cursor inside a viewport of ``height`` rows.

        Returns:
            The updated start index
        """
        if height <= 0:
            return self.start_index
        if self.index < self.start_index:
            self.start_index = self.index
        elif self.index >= self.start_index + height:
            self.start_index = self.index - height + 1
        max_start = max(0, len(self.entries) - height)
        self.start_index = max(0, min(self.start_index, max_start))
        return self.start_index

    # Selection

    def selected_entries(self) -> List[Entry]:
        return [entry for entry in self.entries if entry.selected]

    def selected_or_current(self) -> List[Entry]:
        """Selected entries, or the entry under the cursor if none are selected."""
        selected = self.selected_entries()
        if selected:
            return selected
        entry = self.cursor_entry()
        return [entry] if entry else []

    def clear_selection(self) -> None:
        for entry in self.entries:
            entry.selected = False
