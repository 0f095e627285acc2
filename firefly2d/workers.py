"""Thread helpers: a reusable barrier and a pool that splits index ranges."""

from __future__ import annotations

import os
import queue
import threading
from collections.abc import Callable
from typing import Any

__all__ = ["core_count", "Barrier", "WorkerPool"]

Job = Callable[[int, int, Any], None]


def core_count() -> int:
    """Number of processors the machine reports, or 0 if unknown."""
    return os.cpu_count() or 0


class Barrier:
    """Blocks callers of :meth:`wait` until ``threads`` of them have arrived."""

    def __init__(self, threads: int) -> None:
        if threads < 1:
            raise ValueError("a barrier needs at least one thread")
        self._thread_count = threads
        self._counter = 0
        self._waiting = 0
        self._condition = threading.Condition()

    def wait(self) -> None:
        with self._condition:
            self._counter += 1
            self._waiting += 1
            self._condition.wait_for(lambda: self._counter >= self._thread_count)
            self._condition.notify_all()
            self._waiting -= 1
            if self._waiting == 0:
                self._counter = 0


class _Helper:
    """One worker thread that runs the jobs handed to it, in order."""

    def __init__(self, pool: WorkerPool, helper_id: int) -> None:
        self._pool = pool
        self._jobs: queue.SimpleQueue[tuple[int, int, Job, Any] | None] = queue.SimpleQueue()
        self._thread = threading.Thread(
            target=self._run, name=f"firefly2d-helper-{helper_id}", daemon=True
        )
        self._thread.start()

    def submit(self, start: int, end: int, function: Job, args: Any) -> None:
        self._jobs.put((start, end, function, args))

    def stop(self) -> None:
        self._jobs.put(None)
        self._thread.join()

    def _run(self) -> None:
        while (job := self._jobs.get()) is not None:
            start, end, function, args = job
            try:
                function(start, end, args)
            except BaseException as error:  # handed back to whoever waits
                self._pool._task_done(error)
            else:
                self._pool._task_done(None)


class WorkerPool:
    """A fixed set of threads that share out the indices ``0..count``.

    Each thread gets ``count // threads`` indices; the last one also takes
    whatever is left over. The job is called as ``function(start, end, args)``
    with ``end`` excluded.
    """

    def __init__(self, threads: int) -> None:
        if threads < 1:
            raise ValueError("a worker pool needs at least one thread")
        self._condition = threading.Condition()
        self._active = 0
        self._errors: list[BaseException] = []
        self._closed = False
        self._helpers = [_Helper(self, i) for i in range(threads)]

    @property
    def thread_count(self) -> int:
        return len(self._helpers)

    def start_work(self, count: int, function: Job, args: Any = None) -> None:
        """Hand out ``count`` indices to the threads; does not wait."""
        if self._closed:
            raise RuntimeError("the worker pool has been destroyed")
        if count <= 0:
            return
        threads = len(self._helpers)
        per_thread = count // threads
        with self._condition:
            self._active = threads
        for index, helper in enumerate(self._helpers[:-1]):
            start = index * per_thread
            helper.submit(start, start + per_thread, function, args)
        self._helpers[-1].submit((threads - 1) * per_thread, count, function, args)

    def wait(self) -> None:
        """Block until every thread has finished; re-raise a job's error."""
        with self._condition:
            self._condition.wait_for(lambda: self._active == 0)
            errors, self._errors = self._errors, []
        if errors:
            raise errors[0]

    def destroy(self) -> None:
        """Stop every thread once its current job is done."""
        if self._closed:
            return
        self._closed = True
        for helper in self._helpers:
            helper.stop()

    def _task_done(self, error: BaseException | None) -> None:
        with self._condition:
            self._active -= 1
            if error is not None:
                self._errors.append(error)
            self._condition.notify_all()

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()