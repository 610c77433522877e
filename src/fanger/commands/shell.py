"""
Commands that hand control to other programs or the command line.

Modified: 2025-11-09
"""

import shlex
from typing import List

from fanger.commands.base import Command, curr_column, register
from fanger.core.exceptions import FileSystemError, InvalidDataError


def run_program(context, backend, argv: List[str]) -> None:
    """
    Run a program through the backend and refresh the current directory.

    Raises:
        FileSystemError: If the program cannot be started
    """
    try:
        status = backend.run_external(argv)
    except OSError as e:
        raise FileSystemError.from_os_error(e) from e
    if status != 0:
        context.push_message(f"{argv[0]}: exited with status {status}")
    tab = context.curr_tab()
    tab.invalidate([tab.curr_path])
    backend.request_redraw()


@register
class ShellCommand(Command):
    """
    Run a shell command line (``shell tar -cf out.tar %s``).

    A ``%s`` word expands to the selected paths. Without a command line the
    user's shell is started.
    """

    name = "shell"
    description = "Run a shell command"

    def __init__(self, command: str = ""):
        self.command = command

    @classmethod
    def parse(cls, arg: str) -> "ShellCommand":
        return cls(arg)

    def execute(self, context, backend) -> None:
        if not self.command:
            argv = shlex.split(context.settings.behavior.shell)
        else:
            try:
                words = shlex.split(self.command)
            except ValueError as e:
                raise InvalidDataError(f"{self.name}: {e}") from e
            paths = [str(entry.path) for entry in curr_column(context).selected_or_current()]
            argv = []
            for word in words:
                if word == "%s":
                    argv.extend(paths)
                else:
                    argv.append(word)
        run_program(context, backend, argv)

    def __str__(self) -> str:
        return f"{self.name} {self.command}" if self.command else self.name


@register
class CommandLine(Command):
    """Open the command line, optionally prefilled (``console rename``)."""

    name = "console"
    description = "Open the command line"

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    @classmethod
    def parse(cls, arg: str) -> "CommandLine":
        return cls(arg)

    def execute(self, context, backend) -> None:
        backend.open_console(self.prefix)

    def __str__(self) -> str:
        return f"{self.name} {self.prefix}" if self.prefix else self.name
