"""
Core data models for Fanger.

Directory entries, sort options, the clipboard and background job
descriptions.

Modified: 2025-11-07
"""

import os
import re
import stat
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Optional, Set


class EntryKind(Enum):
    """Filesystem object type of a directory entry."""

    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass
class Entry:
    """
    Snapshot of one directory child.

    Metadata is captured once when the entry is created and is never
    refreshed; a stale listing is rebuilt as a whole instead.
    """

    name: str
    path: Path
    kind: EntryKind = EntryKind.FILE
    size: int = 0
    mode: int = 0
    modified: float = 0.0
    is_dir: bool = False  # True for directories and links to directories

    # UI state
    selected: bool = False

    @classmethod
    def from_path(cls, path: Path) -> "Entry":
        """
        Create an Entry from a filesystem path.

        Args:
            path: Path of the directory child

        Returns:
            Entry instance

        Raises:
            OSError: If the path cannot be stat-ed
        """
        st = os.lstat(path)
        if stat.S_ISLNK(st.st_mode):
            kind = EntryKind.SYMLINK
            is_dir = path.is_dir()  # follows the link; False when dangling
        elif stat.S_ISDIR(st.st_mode):
            kind = EntryKind.DIR
            is_dir = True
        elif stat.S_ISREG(st.st_mode):
            kind = EntryKind.FILE
            is_dir = False
        else:
            kind = EntryKind.OTHER
            is_dir = False

        return cls(
            name=path.name,
            path=path,
            kind=kind,
            size=st.st_size,
            mode=st.st_mode,
            modified=st.st_mtime,
            is_dir=is_dir,
        )

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def extension(self) -> str:
        """Lower-cased extension without the dot ("" for none or dotfiles)."""
        stem, dot, ext = self.name.rpartition(".")
        if not dot or not stem:
            return ""
        return ext.lower()

    def format_size(self) -> str:
        """Format size for display (e.g., 512B, 4.0K, 1.2M)."""
        if self.is_dir:
            return "-"
        size = float(self.size)
        for unit in ("B", "K", "M", "G", "T"):
            if size < 1024 or unit == "T":
                if unit == "B":
                    return f"{int(size)}B"
                return f"{size:.1f}{unit}"
            size /= 1024
        return f"{size:.1f}P"

    def format_mode(self) -> str:
        """Format permission bits for display (e.g., drwxr-xr-x)."""
        return stat.filemode(self.mode)

    def format_modified(self) -> str:
        """Format modification time for display (e.g., 2025-11-07 14:03)."""
        return datetime.fromtimestamp(self.modified).strftime("%Y-%m-%d %H:%M")


class SortType(Enum):
    """Sort key for directory listings."""

    LEXICAL = "lexical"
    NATURAL = "natural"
    SIZE = "size"
    MTIME = "mtime"
    EXT = "ext"

    @classmethod
    def parse(cls, name: str) -> Optional["SortType"]:
        """Look up a sort type by name, returning None if unknown."""
        for member in cls:
            if member.value == name:
                return member
        return None


_DIGITS = re.compile(r"(\d+)")


def natural_key(name: str) -> List[Any]:
    """Split a name into text and number chunks so "file10" sorts after "file9"."""
    chunks = _DIGITS.split(name)
    return [int(chunk) if i % 2 else chunk for i, chunk in enumerate(chunks)]


@dataclass
class SortOption:
    """
    Comparator settings shared by every column of a tab.

    The resulting order is total: entries that tie on the primary key fall
    back to name order, so listings are reproducible.
    """

    sort_method: SortType = SortType.NATURAL
    reverse: bool = False
    directories_first: bool = True
    case_sensitive: bool = False

    def _name_key(self, entry: Entry) -> str:
        return entry.name if self.case_sensitive else entry.name.lower()

    def key_func(self) -> Callable[[Entry], tuple]:
        """Build the sort key for the active sort method."""
        method = self.sort_method

        def key(entry: Entry) -> tuple:
            name_key = self._name_key(entry)
            if method == SortType.NATURAL:
                primary: Any = natural_key(name_key)
            elif method == SortType.SIZE:
                primary = entry.size
            elif method == SortType.MTIME:
                primary = entry.modified
            elif method == SortType.EXT:
                primary = entry.extension
            else:
                primary = name_key
            return (primary, name_key, entry.name)

        return key

    def sort_entries(self, entries: List[Entry]) -> List[Entry]:
        """Return entries sorted by this option."""
        result = sorted(entries, key=self.key_func(), reverse=self.reverse)
        if self.directories_first:
            # sorted() is stable, so the order inside each group is kept
            result.sort(key=lambda e: not e.is_dir)
        return result


@dataclass
class ClipboardItem:
    """Item in the clipboard (for copy/cut/paste operations)."""

    path: Path
    operation: str = "copy"  # "copy" or "cut"


@dataclass
class Clipboard:
    """Holds the paths captured by copy_files/cut_files until pasted."""

    items: List[ClipboardItem] = field(default_factory=list)

    def copy(self, paths: List[Path]) -> None:
        """
        Copy paths to clipboard.

        Args:
            paths: Paths to copy on the next paste
        """
        self.items = [ClipboardItem(path=path, operation="copy") for path in paths]

    def cut(self, paths: List[Path]) -> None:
        """
        Cut paths to clipboard (they are moved on the next paste).

        Args:
            paths: Paths to move on the next paste
        """
        self.items = [ClipboardItem(path=path, operation="cut") for path in paths]

    def paste(self) -> List[ClipboardItem]:
        """
        Get items for pasting.

        Returns:
            List of clipboard items (does NOT clear clipboard)
        """
        return self.items.copy()

    def clear(self) -> None:
        """Clear the clipboard."""
        self.items = []

    def is_empty(self) -> bool:
        """Check if clipboard is empty."""
        return len(self.items) == 0

    def get_operation(self) -> Optional[str]:
        """Get the operation type ('copy' or 'cut'), or None if empty."""
        if self.is_empty():
            return None
        return self.items[0].operation


class JobKind(Enum):
    """Kind of background file operation."""

    COPY = "copy"
    MOVE = "move"
    DELETE = "delete"


class JobState(Enum):
    """Lifecycle of a worker job: queued -> running -> completed | failed."""

    QUEUED = "queued"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class JobOptions:
    """Destination collision policy for copy/move jobs."""

    overwrite: bool = False
    skip_exist: bool = False


@dataclass
class WorkerJob:
    """
    One batch of file operations run on a background thread.

    The worker thread only writes the result fields (state, error and the
    counters); tabs and columns are updated by the interactive thread.
    """

    kind: JobKind
    sources: List[Path]
    destination: Optional[Path] = None
    options: JobOptions = field(default_factory=JobOptions)

    # Result fields
    state: JobState = JobState.QUEUED
    error: Optional[str] = None
    processed: int = 0
    skipped: int = 0

    def touched_paths(self) -> Set[Path]:
        """Directories whose listings this job may change."""
        paths: Set[Path] = set()
        if self.destination is not None:
            paths.add(self.destination)
        if self.kind in (JobKind.MOVE, JobKind.DELETE):
            paths.update(source.parent for source in self.sources)
        return paths

    def describe(self) -> str:
        """Human-readable summary used in status messages."""
        count = len(self.sources)
        noun = "item" if count == 1 else "items"
        if self.kind == JobKind.DELETE:
            return f"delete {count} {noun}"
        return f"{self.kind.value} {count} {noun} to {self.destination}"
