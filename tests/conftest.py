"""Shared test fixtures for Fanger tests.

Created: 2025-11-09
"""

import pytest
from pathlib import Path

from fanger.config.settings import Settings
from fanger.core.context import Context
from fanger.tui.backend import HeadlessBackend
from tests.utils import make_tree


# Default tree used by most tests. Sorted naturally with directories first
# the visible listing is: alpha, beta, file1.txt, file2.txt, file10.txt, notes.md
DEFAULT_TREE = {
    "alpha": {"inner.txt": "inside alpha"},
    "beta": {},
    "file1.txt": "one",
    "file2.txt": "two two",
    "file10.txt": "ten ten ten",
    "notes.md": "# notes",
    ".hidden": "secret",
}


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at an empty directory and clear Fanger's environment variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("FANGER_SHOW_HIDDEN", "FANGER_START_DIR", "EDITOR", "SHELL"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def tree(tmp_path) -> Path:
    """Standard directory tree to browse."""
    root = tmp_path / "root"
    make_tree(root, DEFAULT_TREE)
    return root


@pytest.fixture
def settings(tree) -> Settings:
    """Default settings with new tabs opening in the test tree."""
    settings = Settings()
    settings.behavior.start_dir = str(tree)
    return settings


@pytest.fixture
def context(tree, settings) -> Context:
    """Context with one tab open on the test tree."""
    return Context.create(tree, settings=settings)


@pytest.fixture
def backend() -> HeadlessBackend:
    """Headless backend whose external programs always succeed."""
    return HeadlessBackend(runner=lambda argv: 0)
