import io
import threading

import pytest

from conkit.active_object import ActiveObject, PriorityActiveObject, timed_work


def _blocker(started, release):
    started.set()
    release.wait(5)
    return "blocker"


def test_process_returns_result():
    with ActiveObject() as active:
        future = active.process(lambda a, b: a + b, 2, 3)
        assert future.result(timeout=5) == 5


def test_fifo_order():
    seen = []
    with ActiveObject() as active:
        futures = [active.process(seen.append, i) for i in range(20)]
        for future in futures:
            future.result(timeout=5)
    assert seen == list(range(20))


def test_exception_is_carried_by_future():
    def boom():
        raise KeyError("bad")

    with ActiveObject() as active:
        future = active.process(boom)
        with pytest.raises(KeyError):
            future.result(timeout=5)
        assert active.process(lambda: 7).result(timeout=5) == 7


def test_process_after_stop_raises():
    active = ActiveObject()
    active.stop()
    with pytest.raises(RuntimeError):
        active.process(lambda: None)


def test_stop_cancels_pending_jobs():
    started, release = threading.Event(), threading.Event()
    active = ActiveObject()
    first = active.process(_blocker, started, release)
    assert started.wait(5)
    waiting = active.process(lambda: "never")
    timer = threading.Timer(0.1, release.set)
    timer.start()
    active.stop()
    timer.join()
    assert first.result(timeout=5) == "blocker"
    assert waiting.cancelled()


def test_priority_order():
    started, release = threading.Event(), threading.Event()
    seen = []
    with PriorityActiveObject() as active:
        active.process(0, _blocker, started, release)
        assert started.wait(5)
        futures = [
            active.process(3, seen.append, "first"),
            active.process(1, seen.append, "second"),
            active.process(2, seen.append, "third"),
        ]
        release.set()
        for future in futures:
            future.result(timeout=5)
    assert seen == ["first", "third", "second"]


def test_priority_ties_keep_submission_order():
    started, release = threading.Event(), threading.Event()
    seen = []
    with PriorityActiveObject() as active:
        active.process(0, _blocker, started, release)
        assert started.wait(5)
        futures = [active.process(5, seen.append, i) for i in range(6)]
        release.set()
        for future in futures:
            future.result(timeout=5)
    assert seen == list(range(6))


def test_priority_process_after_stop_raises():
    active = PriorityActiveObject()
    active.stop()
    with pytest.raises(RuntimeError):
        active.process(1, lambda: None)


def test_timed_work_output():
    out = io.StringIO()
    timed_work("Work1", "first task", 0, out)
    assert out.getvalue() == "Work1 start: first task\nWork1 stop:  first task\n"