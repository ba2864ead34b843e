# oslab

A collection of small, runnable operating-systems exercises: creating
processes, sharing data between threads, passing messages through sockets,
named pipes and shared memory, simulating CPU schedulers, measuring the
cost of memory and smoothing grey-scale images with nonlinear diffusion.

Everything uses only the Python standard library. The socket, FIFO and
process exercises rely on POSIX facilities (Unix domain sockets, FIFOs,
`fork`), so run them on Linux or macOS.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### Images

- `oslab-fda [INPUT] [OUTPUT] [--lam L] [--iterations N]` reads a plain
  (`P2`) PGM image, applies `N` steps of nonlinear diffusion filtering with
  contrast parameter `L` and time step 0.5, and writes a raw (`P5`) PGM.
  Any file name, `--lam` or `--iterations` left out is asked for on the
  terminal.

### Scheduling

- `oslab-schedule TASKS_FILE [-a {rr-p,edf}]` reads a schedule with one task
  per line, `name,priority,burst[,deadline]`, and runs it. `rr-p` (the
  default) runs the highest priority first and shares the CPU between tasks
  of equal priority in quanta of 10 units; `edf` runs the task with the
  earliest deadline first and needs a deadline on every line. Priorities
  must lie between 1 and 10. Each slice is printed as
  `Running task = [name] [priority] [burst] for N units.`

### Memory

- `oslab-memcost [--buffer-mb MB] [--iterations N]` times allocating,
  writing and reading a buffer (32 MB, 100 times by default) and prints the
  results.

### Threads

- `oslab-summation N` sums the integers from 1 to `N` in a separate thread.
- `oslab-monitor [--interval S]` shows a counter that ticks every `S`
  seconds; press Enter, then type a new value for it.
- `oslab-ticker [--period S]` runs two threads that increment and two that
  decrement a shared counter until Enter is pressed.
- `oslab-partial-sum [--size N] [--threads T] [--value V]` splits a vector
  between worker threads and adds the partial sums.
- `oslab-pipeline [--constant C]` reads a number, adds `C` (10 by default)
  and prints the result, each step in its own thread.
- `oslab-pool [--tasks N] [--workers W] [--seed S]` submits random addition
  tasks to a fixed pool of worker threads.
- `oslab-loops [--mode {loop,critical,reduction,region}] [--iterations N]
  [--workers W]` shares the iterations of a loop among threads and reports
  how many each one performed.

### Inter-process communication

- `oslab-pipe-server` / `oslab-pipe-client` (both take `--path`, default
  `/tmp/pipeso`): the client sends a line over a Unix domain socket and the
  server answers once with it in upper case.
- `oslab-fifo-writer` / `oslab-fifo-reader` (both take `--path`, default
  `/tmp/myfifo`): a two-way chat over one named pipe, taking turns to write
  and read.
- `oslab-shm-producer [MESSAGE ...] [--name N] [--size B]` /
  `oslab-shm-consumer [--name N] [--size B] [--keep]`: the producer writes
  a message into a named shared-memory segment; the consumer prints it and
  removes the segment unless `--keep` is given.

### Processes

- `oslab-processes value` shows that a forked child works on its own copy
  of the parent's data.
- `oslab-processes tree [--levels N]` forks `N` times in every process and
  reports how many processes ran.
- `oslab-processes pids` prints what `fork` and `getpid` return on each side
  of a fork.
- `oslab-processes exec [COMMAND ...]` runs a program (`ls` by default) in a
  child process and waits for it.

## Using the library

```python
from oslab.pgm import read_ascii_pgm, write_binary_pgm
from oslab.fda import smooth

image = read_ascii_pgm("input.pgm")
smoothed = smooth(image, lam=4.0, iterations=5, time_step=0.5)
write_binary_pgm(smoothed, "output.pgm")
```

`oslab.pgm` also has `read_binary_pgm` and `write_pixel_list`, and raises
`PgmOpenError`, `PgmFormatError` or `PgmDepthError` (all `PgmError`) on bad
files. `oslab.diffusion` offers `diffuse(grid, time_step, lam)` for a single
step on a list of rows.

```python
from oslab.schedulers import RoundRobinPriorityScheduler

scheduler = RoundRobinPriorityScheduler()
scheduler.add("T1", 4, 20)
scheduler.add("T2", 3, 25)
for task, time_slice in scheduler.schedule():
    print(task.name, time_slice)
```

```python
from oslab.summation import threaded_summation
from oslab.thread_demos import parallel_sum
from oslab.pool import AdditionTask, ThreadPool

print(threaded_summation(10))          # 55
print(parallel_sum(list(range(100)), 4))

with ThreadPool(4) as pool:
    future = pool.submit(AdditionTask(2, 3))
print(future.result())                 # 5
```

```python
from oslab.tasklist import TaskList
from oslab.task import Task, run

tasks = TaskList()
tasks.insert(Task(name="T1", priority=4, burst=20))
for task in tasks:
    run(task, 10)
```

## Limits

- PGM support covers 8-bit greyscale images only; a maximum value above 255
  is rejected.
- The FIFO chat, the Unix socket service and the process examples need a
  POSIX system; there is no Windows named-pipe variant.