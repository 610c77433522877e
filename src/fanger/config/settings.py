"""
Configuration management for Fanger.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2025-11-07
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional

from fanger.core.exceptions import ConfigurationError
from fanger.core.models import SortOption, SortType


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class DisplaySettings:
    """Listing and layout settings."""

    show_hidden: bool = False
    sort_method: str = "natural"  # lexical, natural, size, mtime, ext
    reverse: bool = False
    directories_first: bool = True
    case_sensitive: bool = False
    column_ratio: List[int] = field(default_factory=lambda: [1, 3, 4])


@dataclass
class BehaviorSettings:
    """Behavior settings."""

    start_dir: Optional[str] = None  # new tabs open here (default: home)
    opener: str = "xdg-open"
    editor: str = "vi"
    shell: str = "/bin/sh"


@dataclass
class WorkerSettings:
    """Background worker settings."""

    poll_interval: float = 0.1  # seconds between UI polls of the worker queue


@dataclass
class Settings:
    """Main settings container."""

    display: DisplaySettings = field(default_factory=DisplaySettings)
    behavior: BehaviorSettings = field(default_factory=BehaviorSettings)
    worker: WorkerSettings = field(default_factory=WorkerSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/fanger/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is not valid YAML or holds bad values
        """
        settings = cls()

        # Load from config file
        if config_path is None:
            config_path = Path.home() / ".config" / "fanger" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"{config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"{config_path}: expected a mapping at top level")

            # Display settings
            if "display" in config_data:
                display = config_data["display"] or {}
                settings.display = DisplaySettings(
                    show_hidden=display.get("show_hidden", False),
                    sort_method=display.get("sort_method", "natural"),
                    reverse=display.get("reverse", False),
                    directories_first=display.get("directories_first", True),
                    case_sensitive=display.get("case_sensitive", False),
                    column_ratio=display.get("column_ratio", [1, 3, 4]),
                )

            # Behavior settings
            if "behavior" in config_data:
                behavior = config_data["behavior"] or {}
                settings.behavior = BehaviorSettings(
                    start_dir=behavior.get("start_dir"),
                    opener=behavior.get("opener", "xdg-open"),
                    editor=behavior.get("editor", "vi"),
                    shell=behavior.get("shell", "/bin/sh"),
                )

            # Worker settings
            if "worker" in config_data:
                worker = config_data["worker"] or {}
                settings.worker = WorkerSettings(
                    poll_interval=float(worker.get("poll_interval", 0.1)),
                )

        # Override with environment variables
        show_hidden_env = os.getenv("FANGER_SHOW_HIDDEN")
        if show_hidden_env:
            settings.display.show_hidden = show_hidden_env.lower() in _TRUE_VALUES

        start_dir_env = os.getenv("FANGER_START_DIR")
        if start_dir_env:
            settings.behavior.start_dir = start_dir_env

        editor_env = os.getenv("EDITOR")
        if editor_env:
            settings.behavior.editor = editor_env

        shell_env = os.getenv("SHELL")
        if shell_env:
            settings.behavior.shell = shell_env

        # Validate
        settings.sort_option()
        if len(settings.display.column_ratio) != 3:
            raise ConfigurationError("display.column_ratio must have three values")

        return settings

    def sort_option(self) -> SortOption:
        """
        Build the sort option for new tabs.

        Raises:
            ConfigurationError: If the configured sort method is unknown
        """
        sort_type = SortType.parse(self.display.sort_method)
        if sort_type is None:
            raise ConfigurationError(f"Unknown sort method: {self.display.sort_method}")
        return SortOption(
            sort_method=sort_type,
            reverse=self.display.reverse,
            directories_first=self.display.directories_first,
            case_sensitive=self.display.case_sensitive,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "display": {
                "show_hidden": self.display.show_hidden,
                "sort_method": self.display.sort_method,
                "reverse": self.display.reverse,
                "directories_first": self.display.directories_first,
                "case_sensitive": self.display.case_sensitive,
                "column_ratio": list(self.display.column_ratio),
            },
            "behavior": {
                "start_dir": self.behavior.start_dir,
                "opener": self.behavior.opener,
                "editor": self.behavior.editor,
                "shell": self.behavior.shell,
            },
            "worker": {
                "poll_interval": self.worker.poll_interval,
            },
        }


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "fanger"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_cache_dir() -> Path:
    """Get cache directory, creating if needed."""
    cache_dir = Path.home() / ".cache" / "fanger"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir


def get_home_dir() -> Optional[Path]:
    """Resolve the user's home directory, or None if it cannot be found."""
    home = os.getenv("HOME")
    if home:
        return Path(home)
    try:
        return Path.home()
    except (KeyError, RuntimeError):
        return None
