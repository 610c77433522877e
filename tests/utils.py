"""Test utilities and helper functions.

Created: 2025-11-09
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Union

from fanger.commands import parse_command
from fanger.core.column import DirColumn
from fanger.core.models import Entry


TreeSpec = Dict[str, Union[str, Dict[str, Any]]]


def make_tree(root: Path, spec: TreeSpec) -> Path:
    """Create files and directories from a nested dict.

    Strings become file contents, dicts become subdirectories.

    Example:
        make_tree(tmp_path, {"src": {"main.py": "print()"}, "README": "hi"})
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, content in spec.items():
        path = root / name
        if isinstance(content, dict):
            make_tree(path, content)
        else:
            path.write_text(content)
    return root


def create_test_entry(name: str, **overrides) -> Entry:
    """Factory for entries that do not exist on disk.

    Args:
        name: Entry name
        **overrides: Override any default fields

    Example:
        entry = create_test_entry("big.bin", size=4096)
    """
    defaults = {
        "name": name,
        "path": Path("/virtual") / name,
        "size": 0,
        "modified": 1_700_000_000.0,
        "is_dir": False,
    }
    defaults.update(overrides)
    return Entry(**defaults)


def names(column: DirColumn) -> List[str]:
    """Entry names of a column, in display order."""
    return [entry.name for entry in column.entries]


def cursor_name(context) -> str:
    """Name of the entry under the current tab's cursor."""
    entry = context.curr_tab().curr_list().cursor_entry()
    return entry.name if entry else None


def run(context, backend, line: str) -> None:
    """Parse and execute one command line."""
    parse_command(line).execute(context, backend)


def bump_mtime(path: Path, seconds: int = 10) -> None:
    """Move a directory's mtime forward so cached listings see it as changed."""
    st = os.stat(path)
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + seconds * 1_000_000_000))
