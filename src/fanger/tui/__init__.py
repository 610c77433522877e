"""
TUI (Terminal User Interface) for Fanger.

Textual-based three-column file browser with a command line and a status bar.

Modified: 2025-11-09
"""

__all__ = ["app", "backend", "keybindings", "messages"]
