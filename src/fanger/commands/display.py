"""
Display option commands: sort order and hidden files.

Modified: 2025-11-09
"""

from dataclasses import replace

from fanger.commands.base import Command, register
from fanger.core.exceptions import InvalidDataError
from fanger.core.models import SortType


@register
class Sort(Command):
    """Set the current tab's sort method (``sort size``); ``sort reverse`` flips the order."""

    name = "sort"
    description = "Change sort method"

    def __init__(self, sort_type: SortType):
        self.sort_type = sort_type

    @classmethod
    def parse(cls, arg: str) -> Command:
        if arg == "reverse":
            return SortReverse()
        sort_type = SortType.parse(arg)
        if sort_type is None:
            raise InvalidDataError(f"{cls.name}: Unknown option {arg}")
        return cls(sort_type)

    def execute(self, context, backend) -> None:
        tab = context.curr_tab()
        tab.set_sort_option(replace(tab.sort_option, sort_method=self.sort_type))
        backend.request_redraw()

    def __str__(self) -> str:
        return f"{self.name} {self.sort_type.value}"


class SortReverse(Command):
    name = "sort"
    description = "Reverse sort order"

    def execute(self, context, backend) -> None:
        tab = context.curr_tab()
        tab.set_sort_option(replace(tab.sort_option, reverse=not tab.sort_option.reverse))
        backend.request_redraw()

    def __str__(self) -> str:
        return f"{self.name} reverse"


@register
class ToggleHiddenFiles(Command):
    name = "toggle_hidden"
    description = "Show/hide dotfiles"

    def execute(self, context, backend) -> None:
        tab = context.curr_tab()
        tab.set_show_hidden(not tab.show_hidden)
        state = "shown" if tab.show_hidden else "hidden"
        context.push_message(f"Hidden files {state}")
        backend.request_redraw()
