"""
Command line parser.

``parse_command("cursor_move_down 3")`` looks up the builtin named by the
first word and lets it parse the rest of the line. Parsing has no side
effects apart from reading the home directory for a bare ``cd``.

Modified: 2025-11-09
"""

from typing import List, Tuple

from fanger.commands.base import COMMANDS, Command
from fanger.core.exceptions import UnknownCommandError


def split_command(line: str) -> Tuple[str, str]:
    """
    Split a command line on the first space.

    Returns:
        (name, argument) where argument is "" when there is none
    """
    line = line.rstrip("\r\n").lstrip()
    name, _, arg = line.partition(" ")
    return name, arg.lstrip()


def parse_command(line: str) -> Command:
    """
    Build a command from a textual command line.

    Args:
        line: Command line, e.g. ``"paste_files --overwrite"``

    Returns:
        The constructed Command

    Raises:
        UnknownCommandError: If the name is not a builtin
        CommandParseError: If a numeric argument is malformed
        InvalidDataError: If an argument is missing or a flag is unknown
        EnvVarNotPresentError: If ``cd`` needs a home directory and there is none
    """
    name, arg = split_command(line)
    command_cls = COMMANDS.get(name)
    if command_cls is None:
        raise UnknownCommandError(f"Unknown command: {name}")
    return command_cls.parse(arg)


def list_commands() -> List[str]:
    """Names of all builtin commands, sorted."""
    return sorted(COMMANDS)
