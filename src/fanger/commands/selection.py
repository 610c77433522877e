"""
Selection command.

Modified: 2025-11-09
"""

from fanger.commands.base import Command, curr_column, parse_flags, register
from fanger.commands.cursor_move import CursorMoveDown


@register
class SelectFiles(Command):
    """
    Select entries in the current column.

    ``--toggle`` flips the flag instead of setting it; ``--all`` applies to
    every entry instead of the one under the cursor. Without ``--all`` the
    cursor then moves down one row, so repeated presses mark a run of files.
    """

    name = "select_files"
    description = "Select files"

    def __init__(self, toggle: bool = False, all: bool = False):
        self.toggle = toggle
        self.all = all

    @classmethod
    def parse(cls, arg: str) -> "SelectFiles":
        flags = parse_flags(cls.name, arg, ["--toggle", "--all"])
        return cls(toggle="--toggle" in flags, all="--all" in flags)

    def execute(self, context, backend) -> None:
        column = curr_column(context)
        if self.all:
            for entry in column.entries:
                entry.selected = not entry.selected if self.toggle else True
            return

        entry = column.cursor_entry()
        if entry is None:
            return
        entry.selected = not entry.selected if self.toggle else True
        CursorMoveDown(1).execute(context, backend)

    def __str__(self) -> str:
        line = self.name
        if self.toggle:
            line += " --toggle"
        if self.all:
            line += " --all"
        return line
