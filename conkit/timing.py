"""Measure call durations and compare serial with threaded summation."""

from __future__ import annotations

import argparse
import os
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Sequence

_RANDOM_MAX = 2**31 - 1


def check_time(message: str, func: Callable[..., Any], *args: Any) -> int:
    """Print ``message``, run ``func`` and print and return its time in microseconds."""
    print(message, flush=True)
    start = time.perf_counter_ns()
    func(*args)
    elapsed_us = (time.perf_counter_ns() - start) // 1000
    print(f"Exec time: {elapsed_us} us.", flush=True)
    return elapsed_us


def fast_fun() -> int:
    return sum(range(1000))


def slow_fun() -> int:
    return sum(range(100_000_000))


def other_fun(z: int) -> int:
    return sum(range(z))


def random_values(count: int) -> list[int]:
    """Return ``count`` random integers in ``[0, 2**31 - 1]``."""
    return [random.randint(0, _RANDOM_MAX) for _ in range(count)]


def serial_sum(values: Sequence[int]) -> int:
    return sum(values)


def thread_sum(values: Sequence[int], workers: int | None = None) -> int:
    """Sum ``values`` in contiguous chunks, one per worker thread."""
    count = workers if workers is not None else (os.cpu_count() or 1)
    if count < 1:
        raise ValueError(f"worker count must be positive, got {count}")
    step = len(values) // count
    bounds = [(i * step, (i + 1) * step) for i in range(count)]
    bounds[-1] = (bounds[-1][0], len(values))
    with ThreadPoolExecutor(max_workers=count) as pool:
        partials = [pool.submit(lambda b: sum(values[b[0]:b[1]]), b) for b in bounds]
        return sum(future.result() for future in partials)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time a few summations.")
    parser.add_argument(
        "--per-worker", type=int, default=524288, help="elements per CPU core"
    )
    options = parser.parse_args(argv)

    resolution = time.get_clock_info("perf_counter").resolution
    print(f"Clock precision: {resolution} sec.")
    check_time("Function fast_fun()", fast_fun)
    check_time("Function slow_fun()", slow_fun)
    check_time("Function other_fun()", other_fun, 9000)

    values = random_values((os.cpu_count() or 1) * options.per_worker)
    print(f"Result serial_sum: {serial_sum(values)}")
    print(f"Result thread_sum: {thread_sum(values)}")
    check_time("Serial sum: ", serial_sum, values)
    check_time("Thread sum: ", thread_sum, values)
    print(f"Vector size (elements): {len(values)}")
    return 0