"""
Incremental search in the current column.

Modified: 2025-11-09
"""

from typing import Optional

from fanger.commands.base import Command, curr_column, register, require_arg
from fanger.core.column import DirColumn


def search_column(column: DirColumn, pattern: str, start: int, step: int) -> Optional[int]:
    """
    Find the next entry whose name contains ``pattern`` (case-insensitive).

    Scans from ``start`` in direction ``step`` (1 or -1), wrapping around.

    Returns:
        Index of the match, or None
    """
    total = len(column.entries)
    needle = pattern.lower()
    for offset in range(total):
        index = (start + offset * step) % total
        if needle in column.entries[index].name.lower():
            return index
    return None


def _jump(context, start_offset: int, step: int) -> None:
    pattern = context.search_pattern
    if not pattern:
        context.push_message("No search pattern")
        return
    column = curr_column(context)
    if not column.entries:
        return
    index = search_column(column, pattern, column.index + start_offset, step)
    if index is None:
        context.push_message(f"Pattern not found: {pattern}")
    else:
        column.set_index(index)


@register
class Search(Command):
    """Jump to the first entry matching a pattern, starting at the cursor."""

    name = "search"
    description = "Search in current directory"

    def __init__(self, pattern: str):
        self.pattern = pattern

    @classmethod
    def parse(cls, arg: str) -> "Search":
        return cls(require_arg(cls.name, arg))

    def execute(self, context, backend) -> None:
        context.search_pattern = self.pattern
        _jump(context, 0, 1)

    def __str__(self) -> str:
        return f"{self.name} {self.pattern}"


@register
class SearchNext(Command):
    name = "search_next"
    description = "Next search match"

    def execute(self, context, backend) -> None:
        _jump(context, 1, 1)


@register
class SearchPrev(Command):
    name = "search_prev"
    description = "Previous search match"

    def execute(self, context, backend) -> None:
        _jump(context, -1, -1)
