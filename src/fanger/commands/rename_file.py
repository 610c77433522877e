"""
Rename commands.

Modified: 2025-11-09
"""

import logging
import os
import shlex
import tempfile
from pathlib import Path
from typing import List

from fanger.commands.base import Command, curr_column, register, require_arg
from fanger.core.exceptions import FileSystemError, InvalidDataError


logger = logging.getLogger(__name__)


def rename_path(source: Path, target: Path) -> None:
    """
    Rename without clobbering an existing file.

    Raises:
        FileSystemError: If the target exists or the rename fails
    """
    if target != source and os.path.lexists(target):
        raise FileSystemError(f"File exists: {target}", path=target)
    try:
        os.rename(source, target)
    except OSError as e:
        raise FileSystemError.from_os_error(e) from e


@register
class RenameFile(Command):
    """Rename the entry under the cursor (``rename <new name>``)."""

    name = "rename"
    description = "Rename file"

    def __init__(self, new_name: str):
        self.new_name = new_name

    @classmethod
    def parse(cls, arg: str) -> "RenameFile":
        return cls(require_arg(cls.name, arg))

    def execute(self, context, backend) -> None:
        tab = context.curr_tab()
        column = tab.curr_list()
        entry = column.cursor_entry()
        if entry is None:
            raise InvalidDataError(f"{self.name}: no file under cursor")

        target = entry.path.parent / Path(self.new_name).expanduser()
        rename_path(entry.path, target)
        tab.invalidate([entry.path.parent, target.parent])

        column = tab.curr_list()
        index = column.index_of(target.name)
        if index is not None:
            column.set_index(index)
        backend.request_redraw()

    def __str__(self) -> str:
        return f"{self.name} {self.new_name}"


@register
class RenameFileAppend(Command):
    """Open the command line as ``rename <name>`` with the cursor before the extension."""

    name = "rename_append"
    description = "Rename file (cursor at end of name)"

    def execute(self, context, backend) -> None:
        entry = curr_column(context).cursor_entry()
        if entry is None:
            return
        ext = entry.extension
        if ext and not entry.is_dir:
            stem = entry.name[: -(len(ext) + 1)]
            backend.open_console(f"rename {stem}", entry.name[len(stem):])
        else:
            backend.open_console(f"rename {entry.name}")


@register
class RenameFilePrepend(Command):
    """Open the command line as ``rename <name>`` with the cursor before the name."""

    name = "rename_prepend"
    description = "Rename file (cursor at start of name)"

    def execute(self, context, backend) -> None:
        entry = curr_column(context).cursor_entry()
        if entry is None:
            return
        backend.open_console("rename ", entry.name)


@register
class BulkRename(Command):
    """
    Rename the selection in an editor.

    Names are written one per line to a temporary file; after the editor
    exits, line N is the new name for entry N. Unchanged lines are left
    alone.
    """

    name = "bulk_rename"
    description = "Rename selected files in $EDITOR"

    def execute(self, context, backend) -> None:
        tab = context.curr_tab()
        entries = tab.curr_list().selected_or_current()
        if not entries:
            return

        names = [entry.name for entry in entries]
        new_names = self._edit_names(names, context.settings.behavior.editor, backend)
        if len(new_names) != len(names):
            raise InvalidDataError(
                f"{self.name}: expected {len(names)} names, got {len(new_names)}"
            )

        for name in new_names:
            if not name or "/" in name:
                raise InvalidDataError(f"{self.name}: invalid file name: {name!r}")

        renamed = 0
        for entry, new_name in zip(entries, new_names):
            if new_name == entry.name:
                continue
            rename_path(entry.path, entry.path.parent / new_name)
            renamed += 1

        tab.invalidate([tab.curr_path])
        context.push_message(f"Renamed {renamed} of {len(entries)} files")
        backend.request_redraw()

    @staticmethod
    def _edit_names(names: List[str], editor: str, backend) -> List[str]:
        fd, tmp_name = tempfile.mkstemp(prefix="fanger-", suffix=".txt")
        try:
            with os.fdopen(fd, "w") as f:
                f.write("\n".join(names) + "\n")
            try:
                status = backend.run_external(shlex.split(editor) + [tmp_name])
            except OSError as e:
                raise FileSystemError.from_os_error(e) from e
            if status != 0:
                raise InvalidDataError(f"bulk_rename: editor exited with status {status}")
            with open(tmp_name) as f:
                return [line.rstrip("\n") for line in f if line.strip()]
        finally:
            os.unlink(tmp_name)
