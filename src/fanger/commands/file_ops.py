"""
File operation commands.

Copy, move and delete go through the worker queue; only cheap calls
(mkdir, chmod) run directly on the interactive thread.

Modified: 2025-11-09
"""

import os
from pathlib import Path

from fanger.commands.base import Command, curr_column, parse_flags, register, require_arg
from fanger.core.exceptions import FileSystemError, InvalidDataError
from fanger.core.models import JobKind, JobOptions, WorkerJob


def _plural(count: int) -> str:
    return "item" if count == 1 else "items"


@register
class CopyFiles(Command):
    """Put the selection (or the entry under the cursor) on the clipboard for copying."""

    name = "copy_files"
    description = "Copy selected files"

    def execute(self, context, backend) -> None:
        paths = [entry.path for entry in curr_column(context).selected_or_current()]
        if not paths:
            context.push_message("Nothing to copy")
            return
        context.clipboard.copy(paths)
        context.push_message(f"Copied {len(paths)} {_plural(len(paths))} to clipboard")


@register
class CutFiles(Command):
    """Put the selection (or the entry under the cursor) on the clipboard for moving."""

    name = "cut_files"
    description = "Cut selected files"

    def execute(self, context, backend) -> None:
        paths = [entry.path for entry in curr_column(context).selected_or_current()]
        if not paths:
            context.push_message("Nothing to cut")
            return
        context.clipboard.cut(paths)
        context.push_message(f"Cut {len(paths)} {_plural(len(paths))} to clipboard")


@register
class PasteFiles(Command):
    """
    Queue a copy or move of the clipboard into the current directory.

    ``--overwrite`` replaces existing targets, ``--skip_exist`` leaves them
    alone; with neither the whole job fails on the first existing target.
    """

    name = "paste_files"
    description = "Paste files from clipboard"

    def __init__(self, options: JobOptions = None):
        self.options = options or JobOptions()

    @classmethod
    def parse(cls, arg: str) -> "PasteFiles":
        flags = parse_flags(cls.name, arg, ["--overwrite", "--skip_exist"])
        return cls(
            JobOptions(
                overwrite="--overwrite" in flags,
                skip_exist="--skip_exist" in flags,
            )
        )

    def execute(self, context, backend) -> None:
        clipboard = context.clipboard
        if clipboard.is_empty():
            context.push_message("Clipboard is empty")
            return

        kind = JobKind.MOVE if clipboard.get_operation() == "cut" else JobKind.COPY
        job = WorkerJob(
            kind=kind,
            sources=[item.path for item in clipboard.paste()],
            destination=context.curr_tab().curr_path,
            options=JobOptions(
                overwrite=self.options.overwrite,
                skip_exist=self.options.skip_exist,
            ),
        )
        if kind == JobKind.MOVE:
            # Moved files no longer exist at the clipboard paths
            clipboard.clear()
        context.add_worker(job)

    def __str__(self) -> str:
        line = self.name
        if self.options.overwrite:
            line += " --overwrite"
        if self.options.skip_exist:
            line += " --skip_exist"
        return line


@register
class DeleteFiles(Command):
    """Queue deletion of the selection (or the entry under the cursor)."""

    name = "delete_files"
    description = "Delete selected files"

    def execute(self, context, backend) -> None:
        column = curr_column(context)
        entries = column.selected_or_current()
        if not entries:
            context.push_message("Nothing to delete")
            return
        context.add_worker(
            WorkerJob(kind=JobKind.DELETE, sources=[entry.path for entry in entries])
        )
        column.clear_selection()


@register
class NewDirectory(Command):
    """Create a directory (and missing parents) under the current directory."""

    name = "mkdir"
    description = "Create a directory"

    def __init__(self, path: str):
        self.path = path

    @classmethod
    def parse(cls, arg: str) -> "NewDirectory":
        return cls(require_arg(cls.name, arg))

    def execute(self, context, backend) -> None:
        tab = context.curr_tab()
        target = tab.curr_path / Path(self.path).expanduser()
        try:
            os.makedirs(target)
        except OSError as e:
            raise FileSystemError.from_os_error(e) from e

        tab.invalidate([tab.curr_path])
        column = tab.curr_list()
        try:
            first_part = target.relative_to(tab.curr_path).parts[0]
        except (ValueError, IndexError):
            first_part = None
        if first_part is not None:
            index = column.index_of(first_part)
            if index is not None:
                column.set_index(index)
        backend.request_redraw()

    def __str__(self) -> str:
        return f"{self.name} {self.path}"


@register
class SetMode(Command):
    """
    Change permission bits of the selection (``set_mode 644``).

    The mode is taken on the command line; an empty argument is rejected.
    """

    name = "set_mode"
    description = "Change file permissions"

    def __init__(self, mode: str):
        self.mode = mode

    @classmethod
    def parse(cls, arg: str) -> "SetMode":
        arg = require_arg(cls.name, arg)
        try:
            value = int(arg, 8)
        except ValueError:
            raise InvalidDataError(f"{cls.name}: not an octal mode: {arg}")
        if not 0 <= value <= 0o7777:
            raise InvalidDataError(f"{cls.name}: mode out of range: {arg}")
        return cls(arg)

    def execute(self, context, backend) -> None:
        column = curr_column(context)
        entries = column.selected_or_current()
        value = int(self.mode, 8)
        for entry in entries:
            try:
                os.chmod(entry.path, value)
            except OSError as e:
                raise FileSystemError.from_os_error(e) from e
        column.need_update = True
        context.push_message(f"Changed mode of {len(entries)} {_plural(len(entries))} to {self.mode}")

    def __str__(self) -> str:
        return f"{self.name} {self.mode}"
