"""Rendering backend interface used by commands.

Commands talk to the terminal only through these calls. The Textual app
implements them; ``HeadlessBackend`` serves the ``fanger run`` CLI and
tests.

Modified: 2025-11-09
"""

import logging
import subprocess
from typing import Callable, List, Optional, Tuple


logger = logging.getLogger(__name__)


class Backend:
    """Interface between commands and whatever draws the screen."""

    def report(self, text: str, error: bool = False) -> None:
        """Show a one-line status or error message."""
        raise NotImplementedError

    def request_redraw(self) -> None:
        """Ask for a redraw after a state change."""

    def page_size(self) -> int:
        """Number of rows a page-up/page-down moves."""
        return 10

    def open_console(self, prefix: str, suffix: str = "") -> None:
        """Open the command line with ``prefix + suffix``, cursor after prefix."""
        raise NotImplementedError

    def run_external(self, argv: List[str]) -> int:
        """Run a program with the terminal handed over to it.

        Returns:
            The program's exit status

        Raises:
            OSError: If the program cannot be started
        """
        raise NotImplementedError


class HeadlessBackend(Backend):
    """Backend without a screen: records everything it is asked to do."""

    def __init__(
        self,
        runner: Optional[Callable[[List[str]], int]] = None,
        echo: Optional[Callable[[str], None]] = None,
        rows: int = 10,
    ):
        """
        Initialize the backend.

        Args:
            runner: Runs external programs (default: subprocess.call)
            echo: Called with every reported line (e.g., click.echo)
            rows: Page size for page-up/page-down
        """
        self.runner = runner or subprocess.call
        self.echo = echo
        self.rows = rows
        self.reports: List[Tuple[str, bool]] = []
        self.console_requests: List[Tuple[str, str]] = []
        self.external_calls: List[List[str]] = []
        self.redraws = 0

    def report(self, text: str, error: bool = False) -> None:
        self.reports.append((text, error))
        if self.echo:
            self.echo(f"error: {text}" if error else text)

    def request_redraw(self) -> None:
        self.redraws += 1

    def page_size(self) -> int:
        return self.rows

    def open_console(self, prefix: str, suffix: str = "") -> None:
        self.console_requests.append((prefix, suffix))

    def run_external(self, argv: List[str]) -> int:
        self.external_calls.append(list(argv))
        logger.info(f"Running {argv}")
        return self.runner(argv)
