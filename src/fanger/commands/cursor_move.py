"""
Cursor movement commands.

Movement clamps at the ends of the listing; moving past the end is a no-op,
never an error.

Modified: 2025-11-09
"""

from fanger.commands.base import Command, curr_column, register
from fanger.core.exceptions import CommandParseError


def parse_count(command: str, arg: str) -> int:
    """
    Parse a movement count; an empty argument means 1.

    Raises:
        CommandParseError: If the argument is not a non-negative integer
    """
    if not arg:
        return 1
    try:
        count = int(arg)
    except ValueError as e:
        raise CommandParseError(f"{command}: {e}") from e
    if count < 0:
        raise CommandParseError(f"{command}: count must not be negative: {arg}")
    return count


def cursor_move(context, delta: int) -> None:
    """Move the current column's cursor by ``delta`` rows."""
    curr_column(context).move_by(delta)


@register
class CursorMoveUp(Command):
    name = "cursor_move_up"
    description = "Move cursor up"

    def __init__(self, count: int = 1):
        self.count = count

    @classmethod
    def parse(cls, arg: str) -> "CursorMoveUp":
        return cls(parse_count(cls.name, arg))

    def execute(self, context, backend) -> None:
        cursor_move(context, -self.count)

    def __str__(self) -> str:
        return f"{self.name} {self.count}"


@register
class CursorMoveDown(Command):
    name = "cursor_move_down"
    description = "Move cursor down"

    def __init__(self, count: int = 1):
        self.count = count

    @classmethod
    def parse(cls, arg: str) -> "CursorMoveDown":
        return cls(parse_count(cls.name, arg))

    def execute(self, context, backend) -> None:
        cursor_move(context, self.count)

    def __str__(self) -> str:
        return f"{self.name} {self.count}"


@register
class CursorMoveHome(Command):
    name = "cursor_move_home"
    description = "Jump to first entry"

    def execute(self, context, backend) -> None:
        curr_column(context).set_index(0)


@register
class CursorMoveEnd(Command):
    name = "cursor_move_end"
    description = "Jump to last entry"

    def execute(self, context, backend) -> None:
        column = curr_column(context)
        column.set_index(len(column) - 1)


@register
class CursorMovePageUp(Command):
    name = "cursor_move_page_up"
    description = "Move cursor up one page"

    def execute(self, context, backend) -> None:
        cursor_move(context, -backend.page_size())


@register
class CursorMovePageDown(Command):
    name = "cursor_move_page_down"
    description = "Move cursor down one page"

    def execute(self, context, backend) -> None:
        cursor_move(context, backend.page_size())
