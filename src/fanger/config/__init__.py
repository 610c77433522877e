"""
Configuration management for Fanger.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/fanger/config.yaml)
- Environment variables

Modified: 2025-11-07
"""

from fanger.config.settings import (
    Settings,
    DisplaySettings,
    BehaviorSettings,
    WorkerSettings,
    get_config_dir,
    get_cache_dir,
    get_home_dir,
)

__all__ = [
    "Settings",
    "DisplaySettings",
    "BehaviorSettings",
    "WorkerSettings",
    "get_config_dir",
    "get_cache_dir",
    "get_home_dir",
]
