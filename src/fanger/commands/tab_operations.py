"""
Tab management commands: new_tab, close_tab, tab_switch.

Modified: 2025-11-09
"""

from fanger.commands.base import Command, register
from fanger.commands.quit import Quit
from fanger.core.exceptions import CommandParseError, InvalidDataError


def tab_switch(index: int, context) -> None:
    """Make tab ``index`` current and bring its listings up to date."""
    context.curr_tab_index = index
    tab = context.curr_tab()
    tab.curr_list()
    tab.parent_list()


@register
class NewTab(Command):
    """Open a tab at the start directory (home, or / without one)."""

    name = "new_tab"
    description = "Open a new tab"

    def execute(self, context, backend) -> None:
        tab = context.make_tab(context.new_tab_path())
        context.push_tab(tab)
        tab_switch(context.curr_tab_index, context)
        tab.child_list()
        backend.request_redraw()


@register
class CloseTab(Command):
    """Close the current tab; closing the last one quits."""

    name = "close_tab"
    description = "Close the current tab"

    def execute(self, context, backend) -> None:
        if len(context.tabs) <= 1:
            Quit.quit(context)
            return

        del context.tabs[context.curr_tab_index]
        if context.curr_tab_index > 0:
            context.curr_tab_index -= 1
        tab_switch(context.curr_tab_index, context)
        backend.request_redraw()


@register
class TabSwitch(Command):
    """
    Move to another tab relative to the current one.

    The offset wraps around the ends: ``tab_switch -1`` on the first tab
    selects the last one.
    """

    name = "tab_switch"
    description = "Switch tabs"

    def __init__(self, offset: int):
        self.offset = offset

    @classmethod
    def parse(cls, arg: str) -> "TabSwitch":
        if not arg:
            raise InvalidDataError(f"{cls.name}: No option provided")
        try:
            return cls(int(arg))
        except ValueError as e:
            raise CommandParseError(f"{cls.name}: {e}") from e

    def execute(self, context, backend) -> None:
        index = (context.curr_tab_index + self.offset) % len(context.tabs)
        tab_switch(index, context)
        backend.request_redraw()

    def __str__(self) -> str:
        return f"{self.name} {self.offset}"
