import threading
import time
from datetime import timedelta

import pytest

from conkit.executor import Executor


def test_one_shot_returns_result_after_delay():
    ex = Executor()
    start = time.monotonic()
    result = ex.one_shot(0.05, max, 4, 9)
    assert result == max(4, 9)
    assert time.monotonic() - start >= 0.05


def test_one_shot_accepts_timedelta():
    ex = Executor()
    assert ex.one_shot(timedelta(milliseconds=10), str.upper, "ping") == "PING"


def test_periodic_returns_immediately_when_stopped():
    ex = Executor()
    ex.stop()
    calls = []
    assert ex.periodic(0.01, calls.append, 1) == 0
    assert calls == []


def test_periodic_stopped_by_one_shot():
    ex = Executor()
    calls = []
    stopper = threading.Thread(target=ex.one_shot, args=(0.2, ex.stop))
    stopper.start()
    count = ex.periodic(0.02, calls.append, "tick")
    stopper.join(5)
    assert count == len(calls)
    assert count >= 2
    assert set(calls) == {"tick"}


def test_periodic_keeps_schedule():
    ex = Executor()
    stamps = []
    threading.Thread(target=ex.one_shot, args=(0.25, ex.stop)).start()
    ex.periodic(0.05, lambda: stamps.append(time.monotonic()))
    assert stamps[-1] - stamps[0] >= 0.05 * (len(stamps) - 1) - 0.01


def test_stop_and_start_toggle_state():
    ex = Executor()
    assert ex.stopped() is False
    ex.stop()
    assert ex.stopped() is True
    ex.start()
    assert ex.stopped() is False


def test_negative_interval_rejected():
    ex = Executor()
    with pytest.raises(ValueError):
        ex.periodic(-1, lambda: None)
    with pytest.raises(ValueError):
        ex.one_shot(timedelta(seconds=-1), lambda: None)