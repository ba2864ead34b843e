[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Operating-systems lab exercises: processes, threads, IPC, CPU scheduling, memory cost and image diffusion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "threads",
    "ipc",
    "scheduling",
    "shared memory",
    "named pipes",
    "pgm",
    "diffusion",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab-fda = "oslab.fda:main"
oslab-schedule = "oslab.schedulers:main"
oslab-memcost = "oslab.memcost:main"
oslab-summation = "oslab.summation:main"
oslab-monitor = "oslab.counters:monitor_main"
oslab-ticker = "oslab.counters:ticker_main"
oslab-partial-sum = "oslab.thread_demos:partial_sum_main"
oslab-pipeline = "oslab.thread_demos:pipeline_main"
oslab-pool = "oslab.pool:main"
oslab-loops = "oslab.parallel_loops:main"
oslab-pipe-server = "oslab.unix_pipe:server_main"
oslab-pipe-client = "oslab.unix_pipe:client_main"
oslab-fifo-writer = "oslab.fifo_chat:writer_first_main"
oslab-fifo-reader = "oslab.fifo_chat:reader_first_main"
oslab-shm-producer = "oslab.shared_memory:producer_main"
oslab-shm-consumer = "oslab.shared_memory:consumer_main"
oslab-processes = "oslab.processes:main"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.hatch.build.targets.sdist]
include = ["oslab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
