"""Main Fanger TUI application.

Coordinates key input, command execution, worker polling and drawing.

Modified: 2025-11-09
Adapted from ganger/tui/app.py
"""

import asyncio
import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container

from ..commands import Command, parse_command
from ..config.settings import Settings
from ..core.context import Context
from ..core.exceptions import FangerError
from .backend import Backend
from .keybindings import Keymap, KeyResolver, load_keymap
from .messages import CommandCancelled, CommandSubmitted, ErrorMessage, StatusMessage
from .ui.command_input import CommandInput
from .ui.miller_view import MillerView
from .ui.modals import HelpModal
from .ui.status_bar import StatusBar, TabBar


logger = logging.getLogger(__name__)


def key_name(event: events.Key) -> str:
    """Name used in keymaps: the character for printable keys, else Textual's key name."""
    if event.key == "space":
        return "space"
    if event.is_printable and event.character:
        return event.character
    return event.key


class FangerApp(App, Backend):
    """Main application class for Fanger."""

    TITLE = "Fanger"
    SUB_TITLE = "File Ranger"
    AUTO_FOCUS = None

    DEFAULT_CSS = """
    #main-container {
        height: 1fr;
    }
    """

    def __init__(self, context: Context, keymap: Optional[Keymap] = None):
        """Initialize the application.

        Args:
            context: Application state with at least one tab open
            keymap: Key bindings (default: built-in keymap plus user file)
        """
        super().__init__()
        self.context = context
        self.keymap = keymap or load_keymap()
        self.resolver = KeyResolver(self.keymap)

        self.tab_bar = TabBar(id="tab-bar")
        self.miller_view = MillerView(
            column_ratio=context.settings.display.column_ratio, id="miller-view"
        )
        self.command_input = CommandInput(id="command-input")
        self.status_bar = StatusBar(id="status-bar")

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield self.tab_bar
        with Container(id="main-container"):
            yield self.miller_view
        yield self.command_input
        yield self.status_bar

    def on_mount(self) -> None:
        """Start polling workers once the screen exists."""
        self.set_interval(self.context.settings.worker.poll_interval, self.poll_workers)
        self.call_after_refresh(self.refresh_view)

    # Backend

    def report(self, text: str, error: bool = False) -> None:
        if error:
            self.post_message(ErrorMessage(text))
        else:
            self.post_message(StatusMessage(text))

    def request_redraw(self) -> None:
        self.call_after_refresh(self.refresh_view)

    def page_size(self) -> int:
        return self.miller_view.visible_rows

    def open_console(self, prefix: str, suffix: str = "") -> None:
        self.resolver.reset()
        self.command_input.show(prefix, suffix)

    def run_external(self, argv: List[str]) -> int:
        logger.info(f"Running {argv}")
        with self.suspend():
            return subprocess.call(argv)

    # Drawing

    def refresh_view(self) -> None:
        """Redraw the tab bar, columns and status bar from the context."""
        if not self.context.tabs:
            return
        tab = self.context.curr_tab()
        self.tab_bar.show_tabs(self.context.tabs, self.context.curr_tab_index)
        self.miller_view.show_tab(tab)
        self.status_bar.update_context(self.context)

    def flush_messages(self) -> None:
        for text in self.context.pop_messages():
            self.status_bar.show_message(text)

    # Command execution

    def execute_command(self, command: Command) -> None:
        """Run one command and report any failure on the status bar."""
        logger.debug(f"Executing {command}")
        try:
            command.execute(self.context, self)
        except FangerError as e:
            logger.warning(f"{command}: {e}")
            self.report(str(e), error=True)

        self.flush_messages()
        if self.context.exit:
            self.exit()
            return
        self.refresh_view()

    def execute_line(self, line: str) -> None:
        """Parse and run a command line."""
        try:
            command = parse_command(line)
        except FangerError as e:
            logger.warning(f"{line!r}: {e}")
            self.report(str(e), error=True)
            return
        self.execute_command(command)

    def poll_workers(self) -> None:
        """Process worker progress and completion on the UI thread."""
        changed = self.context.poll_workers()
        self.flush_messages()
        if changed:
            self.refresh_view()

    # Message handlers

    async def on_command_submitted(self, message: CommandSubmitted) -> None:
        self.execute_line(message.line)

    async def on_command_cancelled(self, message: CommandCancelled) -> None:
        self.refresh_view()

    async def on_status_message(self, message: StatusMessage) -> None:
        """Handle status messages."""
        self.status_bar.show_message(message.message, duration=message.duration)

    async def on_error_message(self, message: ErrorMessage) -> None:
        """Handle error messages."""
        self.status_bar.show_message(message.message, duration=5, error=True)

    def on_resize(self, event: events.Resize) -> None:
        self.call_after_refresh(self.refresh_view)

    # Action handlers

    def action_help(self) -> None:
        """Show the key binding help."""
        self.push_screen(HelpModal(self.keymap.format_help_text()))

    def on_key(self, event: events.Key) -> None:
        """Handle keyboard events."""
        if self.command_input.is_open or self.screen is not self.screen_stack[0]:
            return

        event.stop()
        event.prevent_default()
        key = key_name(event)

        if key == "?" and not self.resolver.pending_keys:
            self.action_help()
            return

        command = self.resolver.feed(key)
        pending = self.resolver.pending_keys
        if pending:
            self.status_bar.update_hints(" ".join(pending) + " ...")
            return
        self.status_bar.update_hints()

        if command is not None:
            self.execute_command(command)


async def run_app(
    path: Optional[Path] = None,
    settings: Optional[Settings] = None,
    keymap: Optional[Keymap] = None,
) -> None:
    """Run the Fanger TUI application.

    Args:
        path: Starting directory
        settings: Application settings (default: loaded from config file)
        keymap: Key bindings

    Raises:
        FileSystemError: If the starting directory cannot be opened
    """
    settings = settings or Settings.load()
    context = Context.create(path, settings=settings)
    app = FangerApp(context, keymap=keymap)
    await app.run_async()


if __name__ == "__main__":
    asyncio.run(run_app())
