"""Miller column view implementation for Fanger.

Three-column layout inspired by ranger: parent directory, current
directory, and a preview of the entry under the cursor.

Modified: 2025-11-09
Adapted from ganger/tui/ui/miller_view.py
"""

from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from ...core.column import DirColumn
from ...core.models import Entry
from ...core.tab import Tab


def render_entry(entry: Entry, is_cursor: bool, width: int) -> Text:
    """Render one listing row."""
    marker = "*" if entry.selected else " "
    name = entry.name + ("/" if entry.is_dir else "")
    size = entry.format_size()
    room = max(1, width - len(size) - 2)
    if len(name) > room:
        name = name[: max(0, room - 1)] + "~"
    line = f"{marker}{name.ljust(room)} {size}"

    style = ""
    if entry.is_dir:
        style = "bold blue"
    if entry.selected:
        style = "bold yellow"
    if is_cursor:
        style = f"{style} reverse".strip()
    return Text(line, style=style)


def render_column(column: Optional[DirColumn], height: int, width: int, focused: bool) -> Text:
    """
    Render the visible window of a column.

    The cursor row is highlighted when ``focused``; the scroll offset is
    adjusted so the cursor stays on screen.
    """
    if column is None:
        return Text("")
    if not column.entries:
        return Text("(empty)", style="dim")

    start = column.adjust_scroll(height)
    lines: List[Text] = []
    for i, entry in enumerate(column.entries[start:start + height], start=start):
        lines.append(render_entry(entry, focused and i == column.index, width))
    return Text("\n").join(lines)


def render_file_info(entry: Entry) -> Text:
    """Preview text for a non-directory entry."""
    text = Text()
    text.append(f"{entry.name}\n\n", style="bold")
    text.append(f"Type:     {entry.kind.value}\n")
    text.append(f"Size:     {entry.format_size()}\n")
    text.append(f"Mode:     {entry.format_mode()}\n")
    text.append(f"Modified: {entry.format_modified()}\n")
    return text


class ColumnView(Static):
    """One column of the Miller view."""

    DEFAULT_CSS = """
    ColumnView {
        height: 100%;
        border-right: solid $accent;
        padding: 0 1;
        overflow: hidden;
    }

    ColumnView.preview-column {
        border-right: none;
    }
    """

    def show_column(self, column: Optional[DirColumn], focused: bool = True) -> None:
        height = self.content_size.height or 20
        width = self.content_size.width or 30
        self.update(render_column(column, height, width, focused))

    def show_text(self, text: Text) -> None:
        self.update(text)


class MillerView(Horizontal):
    """Three-column view of one tab."""

    DEFAULT_CSS = """
    MillerView {
        width: 100%;
        height: 1fr;
    }
    """

    def __init__(self, column_ratio: Optional[List[int]] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.column_ratio = column_ratio or [1, 3, 4]
        self.parent_column = ColumnView(id="parent-column", classes="parent-column")
        self.current_column = ColumnView(id="current-column", classes="current-column")
        self.preview_column = ColumnView(id="preview-column", classes="preview-column")

    def compose(self) -> ComposeResult:
        yield self.parent_column
        yield self.current_column
        yield self.preview_column

    def on_mount(self) -> None:
        columns = (self.parent_column, self.current_column, self.preview_column)
        for column, ratio in zip(columns, self.column_ratio):
            column.styles.width = f"{ratio}fr"

    @property
    def visible_rows(self) -> int:
        return self.current_column.content_size.height or 10

    def show_tab(self, tab: Tab) -> None:
        """Redraw all three columns from the tab's cached listings."""
        self.parent_column.show_column(tab.parent_list(), focused=True)
        self.current_column.show_column(tab.curr_list(), focused=True)

        entry = tab.curr_list().cursor_entry()
        if entry is None:
            self.preview_column.show_text(Text(""))
        elif entry.is_dir:
            child = tab.child_list()
            if child is None:
                self.preview_column.show_text(Text("(unreadable)", style="dim"))
            else:
                self.preview_column.show_column(child, focused=False)
        else:
            self.preview_column.show_text(render_file_info(entry))
