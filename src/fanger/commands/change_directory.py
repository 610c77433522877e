"""
Directory navigation commands: cd, cd .., reload_dir_list.

Modified: 2025-11-09
"""

from fanger.commands.base import Command, register
from fanger.config.settings import get_home_dir
from fanger.core.exceptions import EnvVarNotPresentError


@register
class ChangeDirectory(Command):
    """Change the current tab's directory (``cd <path>``)."""

    name = "cd"
    description = "Change directory"

    def __init__(self, path: str):
        self.path = path

    @classmethod
    def parse(cls, arg: str) -> Command:
        if arg == "":
            home = get_home_dir()
            if home is None:
                raise EnvVarNotPresentError(f"{cls.name}: Cannot find home directory")
            return cls(str(home))
        if arg == "..":
            return ParentDirectory()
        return cls(arg)

    def execute(self, context, backend) -> None:
        context.curr_tab().change_dir(self.path)
        backend.request_redraw()

    def __str__(self) -> str:
        return f"{self.name} {self.path}"


class ParentDirectory(Command):
    """Go up one directory (``cd ..``)."""

    name = "cd"
    description = "Go to parent directory"

    def execute(self, context, backend) -> None:
        context.curr_tab().parent_dir()
        backend.request_redraw()

    def __str__(self) -> str:
        return f"{self.name} .."


@register
class ReloadDirList(Command):
    """Re-list every cached directory of the current tab."""

    name = "reload_dir_list"
    description = "Reload directory listings"

    def execute(self, context, backend) -> None:
        context.curr_tab().reload_all()
        backend.request_redraw()
