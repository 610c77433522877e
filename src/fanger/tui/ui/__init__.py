"""
UI components for Fanger TUI.

Modified: 2025-11-09
"""

__all__ = [
    "miller_view",
    "status_bar",
    "command_input",
    "modals",
]
