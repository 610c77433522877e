"""Command line widget for Fanger.

Hidden single-line input docked above the status bar. Commands such as
``console``, ``rename_append`` and ``search`` open it pre-filled.

Modified: 2025-11-09
"""

from textual import events
from textual.widgets import Input

from ..messages import CommandCancelled, CommandSubmitted


class CommandInput(Input):
    """Single-line command input, shown on demand."""

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: 1;
        border: none;
        padding: 0 1;
        display: none;
    }

    CommandInput.visible {
        display: block;
    }
    """

    def show(self, prefix: str = "", suffix: str = "") -> None:
        """Open with ``prefix + suffix`` and the cursor right after the prefix."""
        self.value = prefix + suffix
        self.cursor_position = len(prefix)
        self.add_class("visible")
        self.call_after_refresh(self.focus)

    def hide(self) -> None:
        self.remove_class("visible")
        self.value = ""
        if self.has_focus:
            self.screen.set_focus(None)

    @property
    def is_open(self) -> bool:
        return self.has_class("visible")

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        line = event.value
        self.hide()
        if line.strip():
            self.post_message(CommandSubmitted(line))
        else:
            self.post_message(CommandCancelled())

    async def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            event.stop()
            self.hide()
            self.post_message(CommandCancelled())
