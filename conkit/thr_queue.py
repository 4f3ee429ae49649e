"""A blocking FIFO queue that can be shut down, and a demo around it."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections import deque
from typing import Any, TextIO


class ThrQueue:
    """Thread-safe FIFO whose ``pop`` blocks until data arrives or shutdown."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cond = threading.Condition(self._lock)
        self._items: deque[Any] = deque()
        self._stop = False

    def push(self, data: Any) -> None:
        with self._cond:
            self._items.append(data)
            self._cond.notify()

    def pop(self) -> Any | None:
        """Block for the next item; return None once shut down and empty."""
        with self._cond:
            self._cond.wait_for(lambda: self._items or self._stop)
            if not self._items:
                return None
            return self._items.popleft()

    def imm_pop(self) -> Any | None:
        """Pop without waiting; None if the queue is busy or empty."""
        if not self._lock.acquire(blocking=False):
            return None
        try:
            return self._items.popleft() if self._items else None
        finally:
            self._lock.release()

    def shutdown(self) -> None:
        with self._cond:
            self._stop = True
            self._cond.notify_all()

    def stopped(self) -> bool:
        with self._lock:
            return self._stop


def receive_all(queue: ThrQueue, name: str = "", out: TextIO | None = None) -> list[Any]:
    """Drain ``queue`` until it is shut down, reporting each item to ``out``."""
    stream = sys.stdout if out is None else out
    received = []
    while (data := queue.pop()) is not None:
        received.append(data)
        stream.write(f"{name} rcv: {data}\n")
        stream.flush()
    return received


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run two receivers on one queue.")
    parser.add_argument("--count", type=int, default=20, help="items to send")
    options = parser.parse_args(argv)

    queue = ThrQueue()
    receivers = [
        threading.Thread(target=receive_all, args=(queue, name))
        for name in ("First  ", "Second ")
    ]
    for thread in receivers:
        thread.start()

    for i in range(options.count):
        queue.push(1000 + i)

    time.sleep(1.0)
    print("SHUTDOWN!!!", flush=True)
    queue.shutdown()

    for thread in reversed(receivers):
        thread.join()
    return 0