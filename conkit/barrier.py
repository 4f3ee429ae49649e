"""A reusable barrier that releases threads in groups of a fixed size."""

from __future__ import annotations

import argparse
import threading


class Barrier:
    """Blocks each caller of ``wait`` until ``count`` callers have arrived."""

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ValueError(f"barrier count must be positive, got {count}")
        self._max = count
        self._remaining = count
        self._generation = 0
        self._cond = threading.Condition()

    def wait(self) -> None:
        with self._cond:
            generation = self._generation
            self._remaining -= 1
            if self._remaining == 0:
                self._generation += 1
                self._remaining = self._max
                self._cond.notify_all()
                return
            self._cond.wait_for(lambda: self._generation != generation)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Release threads through a barrier.")
    parser.add_argument("--count", type=int, default=2, help="threads per release")
    options = parser.parse_args(argv)

    barrier = Barrier(options.count)
    print_lock = threading.Lock()

    def work(name: str) -> None:
        barrier.wait()
        with print_lock:
            print(name, flush=True)

    threads = [threading.Thread(target=work, args=(f"thr{i}",)) for i in (1, 2)]
    for thread in threads:
        thread.start()

    with print_lock:
        print("in main()", flush=True)

    later = [threading.Thread(target=work, args=(f"thr{i}",)) for i in (3, 4)]
    for thread in later:
        thread.start()

    for thread in reversed(threads + later):
        thread.join()
    return 0