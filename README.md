# conkit

A small collection of thread-based concurrency building blocks, each kept short
enough to read in one sitting. It depends on nothing outside the standard library.

## What is inside

| Module                  | What it gives you |
|-------------------------|-------------------|
| `conkit.thread_pool`    | `ThreadPool`, whose `enqueue` returns a `concurrent.futures.Future` for each call, and `SimpleThreadPool`, for fire-and-forget jobs with `queue_size`, `workers_size`, `gentle_stop` and `join`; also `calculate` |
| `conkit.thr_queue`      | `ThrQueue`, a blocking FIFO with `push`, `pop`, `imm_pop`, `shutdown` and `stopped`, and `receive_all` to drain one |
| `conkit.barrier`        | `Barrier`, a reusable rendezvous point for a fixed number of threads |
| `conkit.executor`       | `Executor`, with `periodic`, `one_shot`, `stop`, `start` and `stopped` |
| `conkit.active_object`  | `ActiveObject` (calls run in submission order) and `PriorityActiveObject` (highest priority first, ties in submission order), plus `timed_work` |
| `conkit.seaman`         | `Seaman`, two threads pushing a walker left and right along a road, drawn with `render_road` |
| `conkit.timing`         | `check_time` for timing a call in microseconds, `fast_fun`, `slow_fun`, `other_fun`, `random_values`, `serial_sum` and `thread_sum` |

## Behaviour worth knowing

- A thread count of `0` for either pool means "one per CPU core", falling back to 2;
  a negative count raises `ValueError`.
- Both pools run every job still queued when they are stopped, then let their
  workers exit. Enqueueing on a stopped pool raises `RuntimeError`.
- An exception raised by a `ThreadPool` task is set on its future; one raised by a
  `SimpleThreadPool` job is logged and the worker carries on.
- `ThrQueue.pop` blocks until an item arrives or the queue is shut down; it returns
  `None` once the queue is shut down and empty. `imm_pop` never waits: it returns
  `None` if the queue is empty or another thread holds its lock.
- `Barrier(count)` releases threads in groups of `count` and can be reused; a count
  below 1 raises `ValueError`.
- `Executor.periodic` keeps a fixed schedule, returns how many calls it made once
  `stop` is called, and accepts seconds or a `datetime.timedelta`. Negative
  durations raise `ValueError`.
- `ActiveObject.stop` and `PriorityActiveObject.stop` cancel every call that has not
  started and wait for the running one to finish; `process` afterwards raises
  `RuntimeError`.
- `Seaman.run` returns every road it drew; `render_road` raises `ValueError` for a
  position off the road.
- `thread_sum` splits the values into one contiguous chunk per worker, the last
  chunk taking any remainder.

## Installing

```
pip install .
```

Add the `test` extra to get pytest as well:

```
pip install ".[test]"
```

## Using it from Python

A thread pool whose results come back as futures:

```python
from conkit.thread_pool import ThreadPool, calculate

with ThreadPool(4) as pool:
    futures = [pool.enqueue(calculate, i) for i in range(10)]
    print([f.result() for f in futures])
```

A blocking queue that wakes every waiting consumer on shutdown:

```python
from conkit.thr_queue import ThrQueue

queue = ThrQueue()
queue.push(1000)
print(queue.pop())
queue.shutdown()
print(queue.pop())  # None
```

A barrier for three threads:

```python
from conkit.barrier import Barrier

barrier = Barrier(3)
# each of three threads calls barrier.wait(); none continues until all have arrived
```

An active object that runs higher priorities first:

```python
from conkit.active_object import PriorityActiveObject

with PriorityActiveObject() as active:
    future = active.process(5, pow, 2, 10)
    print(future.result())  # 1024
```

## Commands

Each module ships a small demonstration you can run from the shell:

```
conkit-thread-pool [--simple]
conkit-queue [--count N]
conkit-barrier [--count N]
conkit-executor [--stop-after SECONDS]
conkit-timing [--per-worker N]
conkit-active-object [--priority]
conkit-seaman [--width N]
```

## What it does not do

The package has no read/write lock, no run-once helper and no helper for taking
several locks at once without deadlock; use the standard `threading` module for
these. There is no single command that runs every demonstration; each module has
its own, listed above.

## Running the tests

```
pytest
```