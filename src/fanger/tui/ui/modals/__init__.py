"""Modal screens for Fanger."""

from .help_modal import HelpModal

__all__ = ["HelpModal"]
