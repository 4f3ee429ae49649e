"""Worker pools that run queued callables on a fixed set of threads."""

from __future__ import annotations

import argparse
import logging
import os
import threading
import time
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable

_log = logging.getLogger(__name__)


def _thread_count(requested: int) -> int:
    if requested < 0:
        raise ValueError(f"thread count must not be negative, got {requested}")
    return requested or os.cpu_count() or 2


class ThreadPool:
    """A pool whose ``enqueue`` hands back a future for each task.

    Tasks still queued when the pool is shut down are run before the
    workers exit.
    """

    def __init__(self, threads: int = 0) -> None:
        self._tasks: deque[tuple[Future, Callable[..., Any], tuple, dict]] = deque()
        self._cond = threading.Condition()
        self._stop = False
        self._workers = [
            threading.Thread(target=self._work, daemon=True)
            for _ in range(_thread_count(threads))
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stop or self._tasks)
                if self._stop and not self._tasks:
                    return
                future, func, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def enqueue(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._cond:
            if self._stop:
                raise RuntimeError("enqueue on stopped ThreadPool")
            self._tasks.append((future, func, args, kwargs))
            self._cond.notify()
        return future

    def shutdown(self) -> None:
        """Refuse new work, let the queue drain and join every worker."""
        with self._cond:
            self._stop = True
            self._cond.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()


class SimpleThreadPool:
    """A pool of fire-and-forget jobs taking no arguments."""

    def __init__(self, num_threads: int = 0) -> None:
        self._jobs: deque[Callable[[], Any]] = deque()
        self._cond = threading.Condition()
        self._stop = False
        self._workers = [
            threading.Thread(target=self._work, daemon=True)
            for _ in range(_thread_count(num_threads))
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stop or self._jobs)
                if self._stop and not self._jobs:
                    return
                job = self._jobs.popleft()
            try:
                job()
            except Exception:
                _log.exception("job raised an exception")

    def enqueue(self, func: Callable[[], Any]) -> None:
        """Queue a job; raises RuntimeError once the pool is stopping."""
        with self._cond:
            if self._stop:
                raise RuntimeError("enqueue on stopped ThreadPool")
            self._jobs.append(func)
            self._cond.notify()

    def queue_size(self) -> int:
        with self._cond:
            return len(self._jobs)

    def workers_size(self) -> int:
        with self._cond:
            return len(self._workers)

    def gentle_stop(self) -> None:
        """Stop accepting jobs; workers exit once the queue is empty."""
        with self._cond:
            self._stop = True
            self._cond.notify_all()

    def join(self) -> None:
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> SimpleThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.gentle_stop()
        self.join()


def calculate(a: int) -> int:
    """Sleep for a tenth of a second, then return ``a + 2``."""
    time.sleep(0.1)
    return a + 2


def _foo() -> None:
    print("Start foo...", flush=True)
    time.sleep(0.2)
    print("End foo...", flush=True)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the thread pool demo.")
    parser.add_argument(
        "--simple", action="store_true", help="run the fire-and-forget pool instead"
    )
    options = parser.parse_args(argv)

    if options.simple:
        with SimpleThreadPool(2) as pool:
            for _ in range(10):
                pool.enqueue(_foo)
            time.sleep(0.5)
        return 0

    with ThreadPool(8) as pool:
        results = [pool.enqueue(calculate, i) for i in range(100)]
        print(" ".join(str(future.result()) for future in results))
    return 0