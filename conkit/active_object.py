"""Active objects: a private worker thread runs submitted calls in turn."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
import threading
import time
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable, TextIO

_Job = tuple[Future, Callable[..., Any], tuple]

_out_lock = threading.Lock()


class _FifoJobs:
    """Jobs taken in submission order."""

    def __init__(self) -> None:
        self._jobs: deque[_Job] = deque()

    def put(self, priority: int, job: _Job) -> None:
        self._jobs.append(job)

    def take(self) -> _Job:
        return self._jobs.popleft()

    def __len__(self) -> int:
        return len(self._jobs)

    def drain(self) -> list[_Job]:
        jobs = list(self._jobs)
        self._jobs.clear()
        return jobs


class _PriorityJobs:
    """Jobs taken highest priority first; ties in submission order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, _Job]] = []
        self._sequence = itertools.count()

    def put(self, priority: int, job: _Job) -> None:
        heapq.heappush(self._heap, (-priority, next(self._sequence), job))

    def take(self) -> _Job:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def drain(self) -> list[_Job]:
        jobs = [job for _, _, job in sorted(self._heap, key=lambda item: item[:2])]
        self._heap.clear()
        return jobs


class _Worker:
    """A thread that runs jobs from a job container one at a time."""

    def __init__(self, jobs: _FifoJobs | _PriorityJobs) -> None:
        self._jobs = jobs
        self._cond = threading.Condition()
        self._stopped = False
        self._thread = threading.Thread(target=self._loop, daemon=True)
        self._thread.start()

    def schedule(self, priority: int, func: Callable[..., Any], args: tuple) -> Future:
        future: Future = Future()
        with self._cond:
            if self._stopped:
                raise RuntimeError("process on stopped active object")
            self._jobs.put(priority, (future, func, args))
            self._cond.notify()
        return future

    def _loop(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stopped or len(self._jobs) > 0)
                if self._stopped:
                    return
                future, func, args = self._jobs.take()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = func(*args)
            except Exception as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def stop(self) -> None:
        with self._cond:
            self._stopped = True
            abandoned = self._jobs.drain()
            self._cond.notify_all()
        for future, _, _ in abandoned:
            future.cancel()
        if threading.current_thread() is not self._thread:
            self._thread.join()


class ActiveObject:
    """Runs submitted calls one at a time, in the order they were submitted."""

    def __init__(self) -> None:
        self._worker = _Worker(_FifoJobs())

    def process(self, func: Callable[..., Any], *args: Any) -> Future:
        """Queue ``func(*args)`` and return a future for its result."""
        return self._worker.schedule(0, func, args)

    def stop(self) -> None:
        """Stop the worker; calls not yet started are cancelled."""
        self._worker.stop()

    def __enter__(self) -> ActiveObject:
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()


class PriorityActiveObject:
    """Runs the waiting call with the highest priority first; ties run FIFO."""

    def __init__(self) -> None:
        self._worker = _Worker(_PriorityJobs())

    def process(self, priority: int, func: Callable[..., Any], *args: Any) -> Future:
        """Queue ``func(*args)`` with ``priority`` and return a future."""
        return self._worker.schedule(priority, func, args)

    def stop(self) -> None:
        """Stop the worker; calls not yet started are cancelled."""
        self._worker.stop()

    def __enter__(self) -> PriorityActiveObject:
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()


def timed_work(label: str, msg: str, seconds: float, out: TextIO | None = None) -> None:
    """Report the start of ``label``, sleep ``seconds``, report its end."""
    stream = sys.stdout if out is None else out
    with _out_lock:
        stream.write(f"{label} start: {msg}\n")
        stream.flush()
    time.sleep(seconds)
    with _out_lock:
        stream.write(f"{label} stop:  {msg}\n")
        stream.flush()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run three jobs on an active object.")
    parser.add_argument(
        "--priority", action="store_true", help="use the priority-ordered variant"
    )
    options = parser.parse_args(argv)

    jobs = [
        (3, "Work1", "first task", 1.0),
        (1, "Work2", "second task", 2.0),
        (2, "Work3", "thrid task", 3.0),
    ]
    if options.priority:
        with PriorityActiveObject() as prio_active:
            for priority, label, msg, seconds in jobs:
                print("Submitted", flush=True)
                prio_active.process(priority, timed_work, label, msg, seconds)
            time.sleep(5.0)
    else:
        with ActiveObject() as active:
            for _, label, msg, seconds in jobs:
                print("Submitted", flush=True)
                active.process(timed_work, label, msg, seconds)
            time.sleep(5.0)
    return 0