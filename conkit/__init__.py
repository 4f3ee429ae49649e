"""Thread-based concurrency building blocks: pools, queues, barriers, active objects, executors and timing helpers."""

__version__ = "0.1.0"