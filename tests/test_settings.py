"""
Tests for configuration settings.

Modified: 2025-11-09
"""

import pytest
import yaml
from pathlib import Path
from fanger.config.settings import (
    Settings,
    DisplaySettings,
    BehaviorSettings,
    WorkerSettings,
    get_config_dir,
    get_cache_dir,
    get_home_dir,
)
from fanger.core.exceptions import ConfigurationError
from fanger.core.models import SortType


def write_config(path: Path, data) -> Path:
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


class TestSettings:
    """Test Settings class."""

    def test_default_settings(self):
        """Test default settings initialization."""
        settings = Settings()

        assert settings.display.show_hidden is False
        assert settings.display.sort_method == "natural"
        assert settings.display.column_ratio == [1, 3, 4]
        assert settings.behavior.opener == "xdg-open"
        assert settings.worker.poll_interval == 0.1

    def test_load_from_file(self, tmp_path):
        """Test loading settings from YAML file."""
        config_file = write_config(tmp_path / "config.yaml", {
            "display": {
                "show_hidden": True,
                "sort_method": "size",
                "column_ratio": [2, 3, 3],
            },
            "behavior": {
                "editor": "nano",
                "start_dir": "/srv",
            },
            "worker": {
                "poll_interval": 0.5,
            },
        })

        settings = Settings.load(config_file)

        assert settings.display.show_hidden is True
        assert settings.display.sort_method == "size"
        assert settings.display.column_ratio == [2, 3, 3]
        assert settings.behavior.editor == "nano"
        assert settings.behavior.start_dir == "/srv"
        assert settings.behavior.opener == "xdg-open"
        assert settings.worker.poll_interval == 0.5

    def test_load_with_missing_file(self):
        """Test loading with non-existent config file."""
        # Should return defaults
        settings = Settings.load(Path("/nonexistent/config.yaml"))

        assert settings.display.sort_method == "natural"
        assert settings.behavior.editor == "vi"

    def test_load_default_path(self, isolated_home):
        """Test that the default file lives under ~/.config/fanger."""
        config_dir = isolated_home / ".config" / "fanger"
        config_dir.mkdir(parents=True)
        write_config(config_dir / "config.yaml", {"display": {"reverse": True}})

        settings = Settings.load()

        assert settings.display.reverse is True

    def test_empty_file(self, tmp_path):
        """Test that an empty file means defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert Settings.load(config_file).display.sort_method == "natural"

    def test_environment_variable_override(self, monkeypatch, tmp_path):
        """Test that environment variables override config file."""
        config_file = write_config(tmp_path / "config.yaml", {
            "display": {"show_hidden": False},
            "behavior": {"editor": "nano"},
        })

        monkeypatch.setenv("FANGER_SHOW_HIDDEN", "yes")
        monkeypatch.setenv("FANGER_START_DIR", "/data")
        monkeypatch.setenv("EDITOR", "emacs -nw")
        monkeypatch.setenv("SHELL", "/bin/zsh")

        settings = Settings.load(config_file)

        # Env var should override file
        assert settings.display.show_hidden is True
        assert settings.behavior.start_dir == "/data"
        assert settings.behavior.editor == "emacs -nw"
        assert settings.behavior.shell == "/bin/zsh"

    def test_invalid_yaml(self, tmp_path):
        """Test that a broken file is reported."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("display: [unclosed\n")

        with pytest.raises(ConfigurationError):
            Settings.load(config_file)

    def test_not_a_mapping(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", ["a", "b"])

        with pytest.raises(ConfigurationError):
            Settings.load(config_file)

    def test_unknown_sort_method(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", {"display": {"sort_method": "color"}})

        with pytest.raises(ConfigurationError) as exc_info:
            Settings.load(config_file)

        assert "color" in str(exc_info.value)

    def test_bad_column_ratio(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", {"display": {"column_ratio": [1, 2]}})

        with pytest.raises(ConfigurationError):
            Settings.load(config_file)

    def test_sort_option(self):
        """Test building the tab sort option."""
        settings = Settings()
        settings.display.sort_method = "mtime"
        settings.display.reverse = True

        option = settings.sort_option()

        assert option.sort_method == SortType.MTIME
        assert option.reverse is True
        assert option.directories_first is True

    def test_to_dict(self):
        """Test converting settings to dictionary."""
        settings = Settings()
        settings_dict = settings.to_dict()

        assert "display" in settings_dict
        assert "behavior" in settings_dict
        assert "worker" in settings_dict

        assert settings_dict["display"]["sort_method"] == "natural"
        assert settings_dict["behavior"]["shell"] == "/bin/sh"

    def test_get_config_dir(self):
        """Test getting config directory."""
        config_dir = get_config_dir()

        assert config_dir.exists()
        assert config_dir.is_dir()
        assert str(config_dir).endswith("fanger")

    def test_get_cache_dir(self):
        """Test getting cache directory."""
        cache_dir = get_cache_dir()

        assert cache_dir.exists()
        assert cache_dir.is_dir()
        assert str(cache_dir).endswith("fanger")

    def test_get_home_dir(self, isolated_home):
        assert get_home_dir() == isolated_home


class TestIndividualSettings:
    """Test individual settings dataclasses."""

    def test_display_settings(self):
        """Test DisplaySettings."""
        settings = DisplaySettings(show_hidden=True, sort_method="ext")

        assert settings.show_hidden is True
        assert settings.sort_method == "ext"
        assert settings.directories_first is True

    def test_behavior_settings(self):
        """Test BehaviorSettings."""
        settings = BehaviorSettings(opener="open", shell="/bin/bash")

        assert settings.opener == "open"
        assert settings.shell == "/bin/bash"
        assert settings.start_dir is None

    def test_worker_settings(self):
        """Test WorkerSettings."""
        assert WorkerSettings(poll_interval=1.0).poll_interval == 1.0
