"""
Custom exceptions for Fanger.

Every error carries a ``kind`` tag so the UI can report it uniformly on the
status line.

Modified: 2025-11-07
"""


class FangerError(Exception):
    """Base exception for all Fanger errors."""

    kind = "Error"


class UnknownCommandError(FangerError):
    """Raised when a command line names no builtin command."""

    kind = "UnknownCommand"


class CommandParseError(FangerError):
    """Raised when a numeric command argument is malformed."""

    kind = "ParseError"


class InvalidDataError(FangerError):
    """Raised for a missing argument, an unknown flag or an unknown option."""

    kind = "IOInvalidData"


class EnvVarNotPresentError(FangerError):
    """Raised when the home directory cannot be resolved."""

    kind = "EnvVarNotPresent"


class FileSystemError(FangerError):
    """Raised when a filesystem call fails.

    The message is the operating system's text, unchanged.
    """

    kind = "IO"

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path

    @classmethod
    def from_os_error(cls, error: OSError) -> "FileSystemError":
        """Wrap an OSError, keeping the OS message verbatim."""
        message = error.strerror or str(error)
        if error.filename is not None:
            message = f"{message}: {error.filename}"
        return cls(message, path=error.filename)


class WorkerBusyError(FangerError):
    """Raised when quitting while background file operations are pending."""

    kind = "WorkerBusy"


class ConfigurationError(FangerError):
    """Raised when configuration or keymap files are invalid."""

    kind = "Config"
