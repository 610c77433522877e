"""Custom Textual messages for Fanger.

Defines custom messages for communication between TUI components.

Modified: 2025-11-09
"""

from textual.message import Message


class CommandSubmitted(Message):
    """Message sent when a line is entered on the command line."""

    def __init__(self, line: str):
        super().__init__()
        self.line = line


class CommandCancelled(Message):
    """Message sent when the command line is closed without running anything."""

    pass


class StatusMessage(Message):
    """Message sent to display status information."""

    def __init__(self, message: str, duration: int = 3):
        """Initialize status message.

        Args:
            message: Status message text
            duration: Display duration in seconds
        """
        super().__init__()
        self.message = message
        self.duration = duration


class ErrorMessage(Message):
    """Message sent when a command fails."""

    def __init__(self, message: str):
        super().__init__()
        self.message = message
