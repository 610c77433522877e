"""
Background worker queue for slow file operations.

Jobs run one at a time on a daemon thread. Worker threads talk to the
interactive thread only through an event channel; they never touch tabs
or columns.

Modified: 2025-11-09
"""

import logging
import os
import shutil
import threading
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue
from typing import Callable, Deque, List, Optional, Tuple, Union

from fanger.core.exceptions import FangerError, FileSystemError, InvalidDataError
from fanger.core.models import JobKind, JobState, WorkerJob


logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


@dataclass(frozen=True)
class JobProgress:
    """Progress text posted by a running job."""

    job: WorkerJob
    text: str


@dataclass(frozen=True)
class JobFinished:
    """Posted once when a job completes or fails, after all its progress events."""

    job: WorkerJob


WorkerEvent = Union[JobProgress, JobFinished]


def _is_real_dir(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink()


def remove_path(path: Path) -> None:
    """Delete a file, symlink or directory tree."""
    if _is_real_dir(path):
        shutil.rmtree(path)
    else:
        os.unlink(path)


def _is_inside(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root)
        return True
    except ValueError:
        return False


def plan_transfer(job: WorkerJob) -> List[Tuple[Path, Path, bool]]:
    """
    Resolve every destination before anything is touched.

    Collision policy, in order: ``overwrite`` replaces the existing target,
    ``skip_exist`` drops that one source, otherwise the whole batch fails on
    the first existing target.

    A target that is the source itself, lies inside the source, or contains
    the source is never replaced; it is skipped under ``skip_exist``.

    Returns:
        List of (source, target, replace_existing) tuples

    Raises:
        FileSystemError: On the first collision when neither flag is set
    """
    if job.destination is None:
        raise InvalidDataError(f"{job.kind.value} job has no destination")
    verb = "copy" if job.kind == JobKind.COPY else "move"
    plan = []
    for source in job.sources:
        target = job.destination / source.name
        if (
            target == source
            or (_is_real_dir(source) and _is_inside(target, source))
            or _is_inside(source, target)
        ):
            if job.options.skip_exist:
                job.skipped += 1
                continue
            raise FileSystemError(f"Cannot {verb} {source} into itself", path=source)
        if os.path.lexists(target):
            if job.options.overwrite:
                plan.append((source, target, True))
            elif job.options.skip_exist:
                job.skipped += 1
            else:
                raise FileSystemError(f"File exists: {target}", path=target)
        else:
            plan.append((source, target, False))
    return plan


def run_job(job: WorkerJob, report: Reporter) -> None:
    """
    Execute a job's file operations.

    Stops at the first error; work already done is left in place.

    Args:
        job: Job to execute
        report: Callback receiving progress text

    Raises:
        FileSystemError: On a destination collision
        OSError: On any filesystem failure
    """
    if job.kind == JobKind.DELETE:
        total = len(job.sources)
        for i, source in enumerate(job.sources, 1):
            report(f"Deleting {source.name} ({i}/{total})")
            remove_path(source)
            job.processed += 1
        return

    plan = plan_transfer(job)
    verb = "Copying" if job.kind == JobKind.COPY else "Moving"
    for i, (source, target, replace) in enumerate(plan, 1):
        report(f"{verb} {source.name} ({i}/{len(plan)})")
        if replace:
            remove_path(target)
        if job.kind == JobKind.COPY:
            if _is_real_dir(source):
                shutil.copytree(source, target, symlinks=True)
            else:
                shutil.copy2(source, target, follow_symlinks=False)
        else:
            shutil.move(str(source), str(target))
        job.processed += 1


def summarize(job: WorkerJob) -> str:
    """Status line for a finished job."""
    if job.state == JobState.FAILED:
        done = f" ({job.processed} of {len(job.sources)} done)" if job.processed else ""
        return f"{job.kind.value} failed: {job.error}{done}"

    noun = "item" if job.processed == 1 else "items"
    if job.kind == JobKind.DELETE:
        text = f"Deleted {job.processed} {noun}"
    elif job.kind == JobKind.COPY:
        text = f"Copied {job.processed} {noun} to {job.destination}"
    else:
        text = f"Moved {job.processed} {noun} to {job.destination}"
    if job.skipped:
        text += f" ({job.skipped} skipped)"
    return text


class WorkerQueue:
    """
    FIFO of background jobs with at most one running.

    ``submit``, ``start_next`` and ``drain`` are called from the interactive
    thread only. The event queue is the one structure shared with worker
    threads.
    """

    def __init__(self, runner: Callable[[WorkerJob, Reporter], None] = run_job):
        """
        Initialize the queue.

        Args:
            runner: Function executing a job (replaceable for tests)
        """
        self._runner = runner
        self._pending: Deque[WorkerJob] = deque()
        self._active: Optional[WorkerJob] = None
        self._events: "Queue[WorkerEvent]" = Queue()

    @property
    def busy(self) -> bool:
        """True while a job is running (until its completion is drained)."""
        return self._active is not None

    @property
    def active(self) -> Optional[WorkerJob]:
        return self._active

    @property
    def pending(self) -> List[WorkerJob]:
        return list(self._pending)

    def is_idle(self) -> bool:
        return self._active is None and not self._pending

    def submit(self, job: WorkerJob) -> None:
        job.state = JobState.QUEUED
        self._pending.append(job)
        logger.info(f"Queued job: {job.describe()}")

    def start_next(self) -> Optional[WorkerJob]:
        """
        Start the oldest queued job if nothing is running.

        Returns:
            The started job, or None
        """
        if self._active is not None or not self._pending:
            return None

        job = self._pending.popleft()
        job.state = JobState.RUNNING
        self._active = job
        thread = threading.Thread(
            target=self._run,
            args=(job,),
            name=f"fanger-worker-{job.kind.value}",
            daemon=True,
        )
        thread.start()
        logger.info(f"Started job: {job.describe()}")
        return job

    def _run(self, job: WorkerJob) -> None:
        """Worker thread body."""

        def report(text: str) -> None:
            self._events.put(JobProgress(job, text))

        try:
            self._runner(job, report)
            job.state = JobState.COMPLETED
        except FangerError as e:
            job.error = str(e)
            job.state = JobState.FAILED
        except OSError as e:
            job.error = str(FileSystemError.from_os_error(e))
            job.state = JobState.FAILED
        except Exception as e:
            logger.error(f"Unexpected worker error: {e}", exc_info=True)
            job.error = str(e)
            job.state = JobState.FAILED

        self._events.put(JobFinished(job))

    def drain(self, block: bool = False, timeout: Optional[float] = None) -> List[WorkerEvent]:
        """
        Collect events posted by worker threads, in the order posted.

        Args:
            block: Wait for the first event
            timeout: Maximum wait in seconds when blocking

        Returns:
            List of events (possibly empty)
        """
        events: List[WorkerEvent] = []
        wait = block
        while True:
            try:
                event = self._events.get(block=wait, timeout=timeout if wait else None)
            except Empty:
                break
            wait = False
            if isinstance(event, JobFinished) and event.job is self._active:
                self._active = None
            events.append(event)
        return events
