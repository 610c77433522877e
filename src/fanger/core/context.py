"""
Process-wide application state.

The context is owned by the interactive thread. Commands receive it for the
duration of one ``execute`` call and never keep a reference to it.

Modified: 2025-11-09
"""

import logging
import time
from collections import deque
from pathlib import Path
from typing import Deque, Iterable, List, Optional, Union

from fanger.config.settings import Settings, get_home_dir
from fanger.core.models import Clipboard, JobState, WorkerJob
from fanger.core.tab import Tab
from fanger.core.worker import JobFinished, JobProgress, WorkerQueue, summarize


logger = logging.getLogger(__name__)


class Context:
    """
    Root of mutable state: tabs, worker queue and status messages.

    Invariant once started: ``tabs`` is non-empty and
    ``0 <= curr_tab_index < len(tabs)``.
    """

    def __init__(self, settings: Optional[Settings] = None, worker_queue: Optional[WorkerQueue] = None):
        """
        Initialize an empty context.

        Use ``Context.create`` to get one with its first tab open.

        Args:
            settings: Application settings (default: built-in defaults)
            worker_queue: Worker queue (default: a new WorkerQueue)
        """
        self.settings = settings or Settings()
        self.exit = False
        self.tabs: List[Tab] = []
        self.curr_tab_index = 0
        self.worker_queue = worker_queue or WorkerQueue()
        self.message_queue: Deque[str] = deque()
        self.clipboard = Clipboard()
        self.search_pattern: Optional[str] = None

    @classmethod
    def create(
        cls,
        path: Optional[Union[str, Path]] = None,
        settings: Optional[Settings] = None,
        worker_queue: Optional[WorkerQueue] = None,
    ) -> "Context":
        """
        Create a context with one tab open.

        Args:
            path: Starting directory (default: configured start dir or home)
            settings: Application settings
            worker_queue: Worker queue

        Raises:
            FileSystemError: If the starting directory cannot be read
        """
        context = cls(settings=settings, worker_queue=worker_queue)
        context.push_tab(context.make_tab(path or context.new_tab_path()))
        return context

    # Tabs

    def curr_tab(self) -> Tab:
        return self.tabs[self.curr_tab_index]

    def push_tab(self, tab: Tab) -> None:
        """Append a tab and make it current."""
        self.tabs.append(tab)
        self.curr_tab_index = len(self.tabs) - 1

    def make_tab(self, path: Union[str, Path]) -> Tab:
        """Create a tab with the configured display options."""
        return Tab(
            path,
            sort_option=self.settings.sort_option(),
            show_hidden=self.settings.display.show_hidden,
        )

    def new_tab_path(self) -> Path:
        """Directory new tabs start in: configured start dir, home, or root."""
        if self.settings.behavior.start_dir:
            return Path(self.settings.behavior.start_dir).expanduser()
        return get_home_dir() or Path("/")

    def invalidate_paths(self, paths: Iterable[Path]) -> None:
        """Mark columns showing these directories stale in every tab."""
        paths = list(paths)
        for tab in self.tabs:
            tab.invalidate(paths)

    # Messages

    def push_message(self, text: str) -> None:
        self.message_queue.append(text)

    def pop_messages(self) -> List[str]:
        """Remove and return all queued status messages, oldest first."""
        messages = list(self.message_queue)
        self.message_queue.clear()
        return messages

    # Workers

    @property
    def worker_busy(self) -> bool:
        return self.worker_queue.busy

    def add_worker(self, job: WorkerJob) -> None:
        """Queue a job; it starts right away if nothing else is running."""
        self.worker_queue.submit(job)
        self.worker_queue.start_next()

    def poll_workers(self, block: bool = False, timeout: Optional[float] = None) -> bool:
        """
        Process worker events on the interactive thread.

        Progress and completion text goes to the message queue in the order
        it was posted. Finished jobs mark their directories stale, then the
        next queued job starts.

        Args:
            block: Wait for at least one event
            timeout: Maximum wait in seconds when blocking

        Returns:
            True if any event was processed
        """
        events = self.worker_queue.drain(block=block, timeout=timeout)
        for event in events:
            if isinstance(event, JobProgress):
                self.push_message(event.text)
            elif isinstance(event, JobFinished):
                job = event.job
                text = summarize(job)
                if job.state == JobState.FAILED:
                    logger.error(f"Job failed: {text}")
                else:
                    logger.info(text)
                self.push_message(text)
                self.invalidate_paths(job.touched_paths())
        self.worker_queue.start_next()
        return bool(events)

    def wait_for_workers(self, timeout: Optional[float] = None) -> bool:
        """
        Block until every queued job has finished.

        Returns:
            True if the queue drained, False on timeout
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while not self.worker_queue.is_idle():
            remaining = None
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
            self.worker_queue.start_next()
            self.poll_workers(block=True, timeout=remaining)
        return True
