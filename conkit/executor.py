"""Run callables periodically or after a delay, with a shared stop switch."""

from __future__ import annotations

import argparse
import functools
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from typing import Any, Callable


def _seconds(value: float | timedelta) -> float:
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
    if seconds < 0:
        raise ValueError(f"duration must not be negative, got {seconds}")
    return seconds


class Executor:
    """Schedules calls; ``stop`` ends every running ``periodic`` loop."""

    def __init__(self) -> None:
        self._stopped = threading.Event()

    def periodic(
        self, interval: float | timedelta, func: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> int:
        """Call ``func`` every ``interval`` until stopped; return the call count."""
        period = _seconds(interval)
        calls = 0
        deadline = time.monotonic()
        while not self._stopped.is_set():
            deadline += period
            func(*args, **kwargs)
            calls += 1
            remaining = deadline - time.monotonic()
            if remaining > 0:
                time.sleep(remaining)
        return calls

    def one_shot(
        self, delay: float | timedelta, func: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> Any:
        """Sleep for ``delay``, then call ``func`` and return its result."""
        time.sleep(_seconds(delay))
        return func(*args, **kwargs)

    def stop(self) -> None:
        self._stopped.set()

    def start(self) -> None:
        self._stopped.clear()

    def stopped(self) -> bool:
        return self._stopped.is_set()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ping periodically, then stop.")
    parser.add_argument("--stop-after", type=float, default=5.0, help="seconds")
    options = parser.parse_args(argv)

    ping = functools.partial(print, "Ping!", flush=True)
    executor = Executor()
    with ThreadPoolExecutor(max_workers=2) as pool:
        pinger = pool.submit(executor.periodic, 1.0, ping)
        stopper = pool.submit(executor.one_shot, options.stop_after, executor.stop)

        for _ in range(10):
            print("Work in main()", flush=True)
            time.sleep(0.5)

        pinger.result()
        stopper.result()
    return 0