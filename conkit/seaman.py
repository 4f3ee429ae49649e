"""A drunken seaman staggers on a road, pushed left and right by two threads."""

from __future__ import annotations

import argparse
import threading
import time


def render_road(position: int, road_width: int) -> str:
    """Draw the road with the seaman at ``position`` (1-based)."""
    if not 1 <= position <= road_width:
        raise ValueError(f"position {position} is off a road of width {road_width}")
    return "|" + "-" * (position - 1) + "*" + "-" * (road_width - position) + "|"


class Seaman:
    """Two threads move the seaman; the right one steps slightly faster."""

    def __init__(self, road_width: int = 10, tick: float = 0.01) -> None:
        if road_width < 1:
            raise ValueError(f"road width must be positive, got {road_width}")
        if tick <= 0:
            raise ValueError(f"tick must be positive, got {tick}")
        self.road_width = road_width
        self.tick = tick
        self._lock = threading.Lock()
        self._position = road_width // 2
        self._stop = False
        self._lines: list[str] = []

    def _walk(self, delta: int) -> None:
        pause = self.tick * (1 - delta / 10)
        while True:
            time.sleep(pause)
            with self._lock:
                self._position += delta
                position = self._position
                if self._stop or position <= 0 or position >= self.road_width + 1:
                    self._stop = True
                    return
                line = render_road(position, self.road_width)
                self._lines.append(line)
                print(line, flush=True)

    def run(self) -> list[str]:
        """Walk until the seaman leaves the road; return every road drawn."""
        with self._lock:
            self._position = self.road_width // 2
            self._stop = False
            self._lines = []
        walkers = [threading.Thread(target=self._walk, args=(d,)) for d in (-1, 1)]
        for walker in walkers:
            walker.start()
        for walker in walkers:
            walker.join()
        return list(self._lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Watch a seaman stagger off the road.")
    parser.add_argument("--width", type=int, default=10, help="road width")
    options = parser.parse_args(argv)
    Seaman(options.width).run()
    return 0