"""
Quit commands.

Modified: 2025-11-09
"""

from fanger.commands.base import Command, register
from fanger.core.exceptions import WorkerBusyError


@register
class Quit(Command):
    """Exit, unless background file operations are still pending."""

    name = "quit"
    description = "Quit"

    @staticmethod
    def quit(context) -> None:
        if not context.worker_queue.is_idle():
            raise WorkerBusyError(
                "operations running in background, use force_quit to quit"
            )
        context.exit = True

    def execute(self, context, backend) -> None:
        self.quit(context)


@register
class ForceQuit(Command):
    """Exit even if background jobs are running; their work may be cut short."""

    name = "force_quit"
    description = "Quit without waiting for background jobs"

    def execute(self, context, backend) -> None:
        context.exit = True
