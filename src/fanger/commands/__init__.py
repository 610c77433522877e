"""
Builtin commands for Fanger.

Importing this package registers every builtin with the parser.

Modified: 2025-11-09
"""

from fanger.commands.base import COMMANDS, Command
from fanger.commands import (  # noqa: F401  (registration side effects)
    change_directory,
    cursor_move,
    display,
    file_ops,
    open_file,
    quit,
    rename_file,
    search,
    selection,
    shell,
    tab_operations,
)
from fanger.commands.parser import list_commands, parse_command, split_command

__all__ = ["COMMANDS", "Command", "list_commands", "parse_command", "split_command"]
