"""
Open commands.

Modified: 2025-11-09
"""

import shlex

from fanger.commands.base import Command, curr_column, register
from fanger.commands.shell import run_program


@register
class OpenFile(Command):
    """Enter the directory under the cursor, or open files with the configured opener."""

    name = "open_file"
    description = "Open file or enter directory"

    def execute(self, context, backend) -> None:
        entry = curr_column(context).cursor_entry()
        if entry is None:
            return
        if entry.is_dir:
            context.curr_tab().change_dir(entry.path)
            backend.request_redraw()
            return

        paths = [
            str(e.path) for e in curr_column(context).selected_or_current() if not e.is_dir
        ]
        if not paths:
            paths = [str(entry.path)]
        run_program(context, backend, shlex.split(context.settings.behavior.opener) + paths)


@register
class OpenFileWith(Command):
    """Open the selection with a given program; without one, ask for it."""

    name = "open_file_with"
    description = "Open file with a program"

    def __init__(self, program: str = ""):
        self.program = program

    @classmethod
    def parse(cls, arg: str) -> "OpenFileWith":
        return cls(arg)

    def execute(self, context, backend) -> None:
        if not self.program:
            backend.open_console(f"{self.name} ")
            return
        entries = curr_column(context).selected_or_current()
        if not entries:
            return
        paths = [str(entry.path) for entry in entries]
        run_program(context, backend, shlex.split(self.program) + paths)

    def __str__(self) -> str:
        return f"{self.name} {self.program}" if self.program else self.name
