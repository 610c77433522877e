"""Modal screen listing the active key bindings.

Modified: 2025-11-09
Adapted from ganger/tui/ui/modals/folder_creation_modal.py
"""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static


class HelpModal(ModalScreen):
    """Scrollable help text; any key closes it."""

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }

    HelpModal > Container {
        width: 70;
        height: 80%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    HelpModal Static#title {
        text-align: center;
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }
    """

    def __init__(self, help_text: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.help_text = help_text

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        with Container():
            yield Static("Key Bindings", id="title")
            with VerticalScroll():
                yield Static(self.help_text, id="help-text", markup=False)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        scroll = self.query_one(VerticalScroll)
        if event.key in ("j", "down"):
            scroll.scroll_down()
        elif event.key in ("k", "up"):
            scroll.scroll_up()
        elif event.key == "pagedown":
            scroll.scroll_page_down()
        elif event.key == "pageup":
            scroll.scroll_page_up()
        else:
            self.dismiss()
