"""Keymap for Fanger.

Maps key sequences to commands. A binding is either a single command or a
nested keymap, so multi-key chords such as ``g g`` work the same way as
single keys.

Modified: 2025-11-09
Adapted from ganger/tui/keybindings.py
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

import yaml

from ..commands import Command, parse_command
from ..core.exceptions import ConfigurationError, FangerError


logger = logging.getLogger(__name__)


# (keys, command line, help category)
DEFAULT_KEYMAP: List[Tuple[str, str, str]] = [
    # Navigation
    ("j", "cursor_move_down", "Navigation"),
    ("down", "cursor_move_down", "Navigation"),
    ("k", "cursor_move_up", "Navigation"),
    ("up", "cursor_move_up", "Navigation"),
    ("g g", "cursor_move_home", "Navigation"),
    ("home", "cursor_move_home", "Navigation"),
    ("G", "cursor_move_end", "Navigation"),
    ("end", "cursor_move_end", "Navigation"),
    ("pageup", "cursor_move_page_up", "Navigation"),
    ("pagedown", "cursor_move_page_down", "Navigation"),
    ("h", "cd ..", "Navigation"),
    ("left", "cd ..", "Navigation"),
    ("l", "open_file", "Navigation"),
    ("right", "open_file", "Navigation"),
    ("enter", "open_file", "Navigation"),
    ("r", "open_file_with", "Navigation"),
    ("g h", "cd ~", "Navigation"),
    ("g r", "cd /", "Navigation"),
    ("ctrl+r", "reload_dir_list", "Navigation"),

    # Selection
    ("space", "select_files --toggle", "Selection"),
    ("v", "select_files --toggle --all", "Selection"),

    # Operations
    ("y y", "copy_files", "Operations"),
    ("d d", "cut_files", "Operations"),
    ("p p", "paste_files", "Operations"),
    ("p o", "paste_files --overwrite", "Operations"),
    ("p s", "paste_files --skip_exist", "Operations"),
    ("D", "delete_files", "Operations"),
    ("delete", "delete_files", "Operations"),
    ("A", "rename_append", "Operations"),
    ("I", "rename_prepend", "Operations"),
    ("c w", "console rename ", "Operations"),
    ("B", "bulk_rename", "Operations"),
    ("m k", "console mkdir ", "Operations"),
    ("!", "console shell ", "Operations"),
    ("S", "shell", "Operations"),

    # Tabs
    ("t t", "new_tab", "Tabs"),
    ("t c", "close_tab", "Tabs"),
    ("tab", "tab_switch 1", "Tabs"),
    ("shift+tab", "tab_switch -1", "Tabs"),

    # Search
    ("/", "console search ", "Search"),
    ("n", "search_next", "Search"),
    ("N", "search_prev", "Search"),

    # Display
    ("z h", "toggle_hidden", "Display"),
    ("o l", "sort lexical", "Display"),
    ("o n", "sort natural", "Display"),
    ("o s", "sort size", "Display"),
    ("o m", "sort mtime", "Display"),
    ("o e", "sort ext", "Display"),
    ("o r", "sort reverse", "Display"),

    # Application
    (":", "console", "Application"),
    ("q", "quit", "Application"),
    ("Q", "force_quit", "Application"),
]


CommandKeybind = Union[Command, "Keymap"]


class Keymap:
    """Nested mapping from key to a command or a sub-keymap."""

    def __init__(self):
        self.bindings: Dict[str, CommandKeybind] = {}
        self.categories: Dict[Tuple[str, ...], str] = {}

    def bind(self, keys: List[str], command: Command, category: str = "General") -> None:
        """
        Bind a key sequence to a command.

        Raises:
            ConfigurationError: If the sequence collides with a shorter or
                longer binding
        """
        if not keys:
            raise ConfigurationError("Empty key sequence")

        node = self
        for key in keys[:-1]:
            child = node.bindings.get(key)
            if child is None:
                child = Keymap()
                node.bindings[key] = child
            elif not isinstance(child, Keymap):
                raise ConfigurationError(
                    f"'{' '.join(keys)}' is shadowed by the binding for '{key}'"
                )
            node = child

        last = keys[-1]
        if isinstance(node.bindings.get(last), Keymap):
            raise ConfigurationError(f"'{' '.join(keys)}' would shadow a longer chord")
        node.bindings[last] = command
        self.categories[tuple(keys)] = category

    def unbind(self, keys: List[str]) -> None:
        node = self
        for key in keys[:-1]:
            child = node.bindings.get(key)
            if not isinstance(child, Keymap):
                return
            node = child
        node.bindings.pop(keys[-1], None)
        self.categories.pop(tuple(keys), None)

    def get(self, key: str) -> Optional[CommandKeybind]:
        return self.bindings.get(key)

    def walk(self, prefix: Tuple[str, ...] = ()) -> Iterator[Tuple[Tuple[str, ...], Command]]:
        """Yield every (key sequence, command) pair."""
        for key, binding in self.bindings.items():
            keys = prefix + (key,)
            if isinstance(binding, Keymap):
                yield from binding.walk(keys)
            else:
                yield keys, binding

    def format_help_text(self) -> str:
        """Format help text for display."""
        lines = []
        lines.append("Fanger - File Ranger\n")
        lines.append("=" * 40 + "\n")

        # Group by category
        by_category: Dict[str, List[Tuple[str, Command]]] = {}
        for keys, command in self.walk():
            category = self.categories.get(keys, "General")
            by_category.setdefault(category, []).append((" ".join(keys), command))

        for category in sorted(by_category):
            lines.append(f"\n{category}:")
            lines.append("-" * len(category) + "-")
            for key_str, command in sorted(by_category[category], key=lambda b: b[0]):
                lines.append(f"  {key_str.ljust(12)} {command}")

        lines.append("\n" + "=" * 40)
        lines.append("Press '?' to toggle this help")

        return "\n".join(lines)


def build_default_keymap() -> Keymap:
    """Build the keymap from DEFAULT_KEYMAP."""
    keymap = Keymap()
    for keys, line, category in DEFAULT_KEYMAP:
        keymap.bind(keys.split(), parse_command(line), category)
    return keymap


def load_keymap(path: Optional[Path] = None) -> Keymap:
    """
    Load the default keymap, extended by a user keymap file.

    The file holds a list of entries such as::

        - keys: [g, d]
          command: cd ~/Downloads

    Entries with ``command: null`` remove a default binding.

    Args:
        path: Keymap file (default: ~/.config/fanger/keymap.yaml)

    Raises:
        ConfigurationError: If the file is malformed or a command fails to parse
    """
    keymap = build_default_keymap()

    if path is None:
        path = Path.home() / ".config" / "fanger" / "keymap.yaml"
    if not path.exists():
        return keymap

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or []
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{path}: {e}") from e

    if not isinstance(data, list):
        raise ConfigurationError(f"{path}: expected a list of bindings")

    for item in data:
        if not isinstance(item, dict) or "keys" not in item:
            raise ConfigurationError(f"{path}: invalid binding {item!r}")
        keys = item["keys"]
        if isinstance(keys, str):
            keys = keys.split()
        keys = [str(key) for key in keys]

        line = item.get("command")
        keymap.unbind(keys)
        if line is None:
            continue
        try:
            command = parse_command(str(line))
        except FangerError as e:
            raise ConfigurationError(f"{path}: {' '.join(keys)}: {e}") from e
        keymap.bind(keys, command, item.get("category", "Custom"))

    logger.info(f"Loaded keymap from {path}")
    return keymap


class KeyResolver:
    """Turns single key presses into commands, tracking pending chords."""

    def __init__(self, keymap: Keymap):
        self.keymap = keymap
        self._pending: Optional[Keymap] = None
        self._pending_keys: List[str] = []

    @property
    def pending_keys(self) -> List[str]:
        return list(self._pending_keys)

    def reset(self) -> None:
        self._pending = None
        self._pending_keys = []

    def feed(self, key: str) -> Optional[Command]:
        """
        Feed one key.

        Returns:
            The bound command once a sequence completes; None while a chord
            is pending or when the key is unbound (which also resets the chord)
        """
        if key == "escape" and self._pending is not None:
            self.reset()
            return None

        node = self._pending or self.keymap
        binding = node.get(key)
        if isinstance(binding, Keymap):
            self._pending = binding
            self._pending_keys.append(key)
            return None

        self.reset()
        return binding
