"""Status bar and tab bar widgets for Fanger.

Shows the current path, selection, worker activity and status messages.

Modified: 2025-11-09
Adapted from ganger/tui/ui/status_bar.py
"""

from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget
from textual.reactive import reactive

from ...core.context import Context
from ...core.tab import Tab


DEFAULT_HINTS = "q:quit ?:help space:mark yy:copy dd:cut pp:paste /:search ::command"


class TabBar(Static):
    """One-line bar with the tab list and the current path."""

    DEFAULT_CSS = """
    TabBar {
        height: 1;
        dock: top;
        background: $panel;
        padding: 0 1;
    }
    """

    def show_tabs(self, tabs: List[Tab], curr_index: int) -> None:
        text = Text()
        if len(tabs) > 1:
            for i, tab in enumerate(tabs):
                label = f" {i + 1}:{tab.curr_path.name or '/'} "
                text.append(label, style="reverse" if i == curr_index else "")
            text.append(" ")
        text.append(str(tabs[curr_index].curr_path), style="bold green")
        self.update(text)


class StatusBar(Widget):
    """Status bar showing context, messages and worker state."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-left {
        width: 1fr;
        padding: 0 1;
    }

    StatusBar .status-center {
        width: 2fr;
        text-align: center;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-right {
        width: 1fr;
        text-align: right;
        padding: 0 1;
    }

    StatusBar .status-error {
        color: $error;
        text-style: bold;
    }

    StatusBar .worker-busy {
        color: $warning;
        text-style: bold;
    }
    """

    # Reactive properties
    context = reactive("")
    status = reactive("")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.left_widget: Optional[Static] = None
        self.center_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None
        self._reset_timer = None

    def compose(self) -> ComposeResult:
        """Create status bar layout."""
        with Horizontal():
            self.left_widget = Static("", classes="status-left")
            self.center_widget = Static("", classes="status-center")
            self.right_widget = Static("", classes="status-right")

            yield self.left_widget
            yield self.center_widget
            yield self.right_widget

    def on_mount(self) -> None:
        """Initialize status bar with default values."""
        self.update_hints()

    def update_context(self, context: Context) -> None:
        """Update the left side (cursor entry, selection) and the right side (workers)."""
        column = context.curr_tab().curr_list()
        entry = column.cursor_entry()

        display_text = ""
        if entry is not None:
            display_text = f"{entry.format_mode()} {entry.format_size()} {entry.format_modified()}"
        selected_count = len(column.selected_entries())
        if selected_count > 0:
            display_text = f"[yellow]Sel[/yellow] {selected_count} | {display_text}"
        self.context = display_text
        if self.left_widget:
            self.left_widget.update(display_text)

        if self.right_widget:
            active = context.worker_queue.active
            if active is not None:
                pending = len(context.worker_queue.pending)
                label = active.describe()
                if pending:
                    label += f" (+{pending} queued)"
                self.right_widget.update(label)
                self.right_widget.add_class("worker-busy")
            else:
                self.right_widget.update(f"{column.index + 1 if column.entries else 0}/{len(column)}")
                self.right_widget.remove_class("worker-busy")

    def update_hints(self, custom_hints: Optional[str] = None) -> None:
        """Update keyboard hints.

        Args:
            custom_hints: Custom hint text to display (e.g., a pending chord)
        """
        hints = custom_hints or DEFAULT_HINTS
        if self.center_widget:
            self.center_widget.remove_class("status-error")
            self.center_widget.update(hints)

    def show_message(self, message: str, duration: int = 3, error: bool = False) -> None:
        """Show a temporary message in the center.

        Args:
            message: Message to display
            duration: Duration in seconds
            error: Highlight as an error
        """
        self.status = message
        if not self.center_widget:
            return

        self.center_widget.set_class(error, "status-error")
        self.center_widget.update(Text(message))

        if self._reset_timer is not None:
            self._reset_timer.stop()
        self._reset_timer = self.set_timer(duration, self.update_hints)
