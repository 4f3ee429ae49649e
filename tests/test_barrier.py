import threading

import pytest

from conkit.barrier import Barrier, main


def _run(barrier, events, lock, tag):
    with lock:
        events.append(("arrive", tag))
    barrier.wait()
    with lock:
        events.append(("leave", tag))


def test_nobody_leaves_before_all_arrive():
    barrier = Barrier(3)
    events = []
    lock = threading.Lock()
    threads = [
        threading.Thread(target=_run, args=(barrier, events, lock, i)) for i in range(3)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(5)
    assert all(not t.is_alive() for t in threads)
    assert [kind for kind, _ in events[:3]] == ["arrive"] * 3
    assert [kind for kind, _ in events[3:]] == ["leave"] * 3


def test_single_waiter_blocks_until_count_reached():
    barrier = Barrier(2)
    t = threading.Thread(target=barrier.wait)
    t.start()
    t.join(0.2)
    assert t.is_alive()
    barrier.wait()
    t.join(5)
    assert not t.is_alive()


def test_barrier_is_reusable():
    barrier = Barrier(2)
    events = []
    lock = threading.Lock()
    threads = [
        threading.Thread(target=_run, args=(barrier, events, lock, i)) for i in range(4)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(5)
    assert all(not t.is_alive() for t in threads)
    assert sorted(tag for kind, tag in events if kind == "leave") == [0, 1, 2, 3]


def test_count_of_one_never_blocks():
    barrier = Barrier(1)
    t = threading.Thread(target=lambda: (barrier.wait(), barrier.wait()))
    t.start()
    t.join(5)
    assert not t.is_alive()


@pytest.mark.parametrize("count", [0, -3])
def test_non_positive_count_rejected(count):
    with pytest.raises(ValueError):
        Barrier(count)


def test_main_prints_every_thread(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == sorted(["in main()", "thr1", "thr2", "thr3", "thr4"])