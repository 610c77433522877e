"""
Command base class and builtin registry.

A command is a named, parseable unit of behavior. ``str(command)`` gives
back the canonical command line, so keymaps can be written out again.

Modified: 2025-11-09
"""

from typing import TYPE_CHECKING, Dict, List, Type

from fanger.core.column import DirColumn
from fanger.core.exceptions import InvalidDataError

if TYPE_CHECKING:
    from fanger.core.context import Context
    from fanger.tui.backend import Backend


# Builtin command classes by canonical name
COMMANDS: Dict[str, Type["Command"]] = {}


def register(cls: Type["Command"]) -> Type["Command"]:
    """Class decorator adding a command to the builtin table."""
    COMMANDS[cls.name] = cls
    return cls


class Command:
    """
    Base class for every builtin command.

    Subclasses set ``name``, override ``parse`` when they take an argument,
    and implement ``execute``. Errors are raised as ``FangerError``
    subclasses.
    """

    name: str = ""
    description: str = ""

    @classmethod
    def parse(cls, arg: str) -> "Command":
        """Build the command from its argument string (ignored by default)."""
        return cls()

    def execute(self, context: "Context", backend: "Backend") -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {str(self)!r}>"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]


def require_arg(command: str, arg: str) -> str:
    """Return ``arg`` or fail with IOInvalidData when it is empty."""
    if not arg:
        raise InvalidDataError(f"{command}: Expected 1, got 0")
    return arg


def parse_flags(command: str, arg: str, allowed: List[str]) -> List[str]:
    """
    Split a flag string, accepting only the given tokens.

    Raises:
        InvalidDataError: Naming the first unknown token
    """
    flags = arg.split()
    for flag in flags:
        if flag not in allowed:
            raise InvalidDataError(f"{command}: unknown option {flag}")
    return flags


def curr_column(context: "Context") -> DirColumn:
    """Column of the current tab's current directory."""
    return context.curr_tab().curr_list()
