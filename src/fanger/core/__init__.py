"""
Core state and logic for Fanger.

Directory columns, tabs, the process-wide context and the background worker
queue. Nothing in here depends on the terminal UI.

Modified: 2025-11-07
"""

from fanger.core.exceptions import (
    FangerError,
    UnknownCommandError,
    CommandParseError,
    InvalidDataError,
    EnvVarNotPresentError,
    FileSystemError,
    WorkerBusyError,
)

__all__ = [
    "FangerError",
    "UnknownCommandError",
    "CommandParseError",
    "InvalidDataError",
    "EnvVarNotPresentError",
    "FileSystemError",
    "WorkerBusyError",
]
