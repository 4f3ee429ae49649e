[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conkit"
version = "0.1.0"
description = "Small, readable concurrency building blocks: thread pools, blocking queues, barriers, active objects and periodic executors"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threading",
    "thread-pool",
    "queue",
    "barrier",
    "active-object",
    "executor",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
conkit-thread-pool = "conkit.thread_pool:main"
conkit-queue = "conkit.thr_queue:main"
conkit-barrier = "conkit.barrier:main"
conkit-executor = "conkit.executor:main"
conkit-timing = "conkit.timing:main"
conkit-active-object = "conkit.active_object:main"
conkit-seaman = "conkit.seaman:main"

[tool.hatch.build.targets.wheel]
packages = ["conkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
