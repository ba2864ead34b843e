"""Priority round-robin and earliest-deadline-first CPU schedulers."""

from __future__ import annotations

import argparse
import os
import sys
from collections import deque
from dataclasses import replace
from typing import Union

from oslab.task import QUANTUM, Task, run
from oslab.tasklist import TaskList

MIN_PRIORITY = 1
MAX_PRIORITY = 10

PathLike = Union[str, "os.PathLike[str]"]
RunRecord = tuple[Task, int]


class _Scheduler:
    def __init__(self) -> None:
        self._tasks = TaskList()
        self._next_tid = 1

    def _add(self, task: Task) -> Task:
        if not task.name:
            raise ValueError("task name must not be empty")
        if not MIN_PRIORITY <= task.priority <= MAX_PRIORITY:
            raise ValueError(
                f"priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}, "
                f"got {task.priority}"
            )
        if task.burst < 0:
            raise ValueError(f"burst must not be negative, got {task.burst}")
        task.tid = self._next_tid
        self._next_tid += 1
        self._tasks.insert(task)
        return task

    def _arrivals(self) -> list[Task]:
        """Pending tasks, oldest first."""
        return list(reversed(list(self._tasks)))

    def _run(self, task: Task, remaining: int, time_slice: int) -> RunRecord:
        snapshot = replace(task, burst=remaining)
        run(snapshot, time_slice)
        return snapshot, time_slice


class RoundRobinPriorityScheduler(_Scheduler):
    """Highest priority first; tasks of equal priority share the CPU in quanta."""

    def add(self, name: str, priority: int, burst: int) -> Task:
        """Add a task to the scheduler and return it."""
        return self._add(Task(name, priority, burst))

    def schedule(self) -> list[RunRecord]:
        """Run every pending task to completion and return the slices run."""
        records: list[RunRecord] = []
        arrivals = self._arrivals()
        for priority in sorted({task.priority for task in arrivals}, reverse=True):
            queue = deque((task, task.burst) for task in arrivals if task.priority == priority)
            while queue:
                task, remaining = queue.popleft()
                if remaining > 0:
                    time_slice = min(QUANTUM, remaining)
                    records.append(self._run(task, remaining, time_slice))
                    remaining -= time_slice
                if remaining > 0:
                    queue.append((task, remaining))
                else:
                    self._tasks.delete(task)
        return records


class EdfScheduler(_Scheduler):
    """Earliest deadline first; ties keep the order of arrival."""

    def add(self, name: str, priority: int, burst: int, deadline: int) -> Task:
        """Add a task with a deadline to the scheduler and return it."""
        if deadline is None:
            raise ValueError(f"task {name!r} has no deadline")
        if deadline < 0:
            raise ValueError(f"deadline must not be negative, got {deadline}")
        return self._add(Task(name, priority, burst, deadline))

    def schedule(self) -> list[RunRecord]:
        """Run every pending task to completion and return the slices run."""
        records: list[RunRecord] = []
        ordered = sorted(
            enumerate(self._arrivals()), key=lambda pair: (pair[1].deadline, pair[0])
        )
        for _, task in ordered:
            if task.burst > 0:
                records.append(self._run(task, task.burst, task.burst))
            self._tasks.delete(task)
        return records


def parse_task_line(line: str) -> Task:
    """Parse a line of the form ``name, priority, burst[, deadline]``."""
    fields = [field.strip() for field in line.strip().split(",")]
    if len(fields) not in (3, 4):
        raise ValueError(f"invalid task line: {line.strip()!r}")
    name, *numbers = fields
    if not name:
        raise ValueError(f"task line has no name: {line.strip()!r}")
    try:
        values = [int(field) for field in numbers]
    except ValueError:
        raise ValueError(f"invalid number in task line: {line.strip()!r}") from None
    priority, burst, *rest = values
    return Task(name, priority, burst, rest[0] if rest else None)


def read_schedule(path: PathLike) -> list[Task]:
    """Read the tasks listed in a schedule file, skipping blank lines."""
    with open(path, encoding="utf-8") as source:
        return [parse_task_line(line) for line in source if line.strip()]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-schedule", description="Run a CPU scheduling simulation."
    )
    parser.add_argument("schedule", help="file with lines: name, priority, burst[, deadline]")
    parser.add_argument(
        "-a", "--algorithm", choices=("rr-p", "edf"), default="rr-p",
        help="scheduling algorithm (default: rr-p)",
    )
    args = parser.parse_args(argv)

    try:
        tasks = read_schedule(args.schedule)
        if args.algorithm == "edf":
            edf = EdfScheduler()
            for task in tasks:
                edf.add(task.name, task.priority, task.burst, task.deadline)
            edf.schedule()
        else:
            rr = RoundRobinPriorityScheduler()
            for task in tasks:
                rr.add(task.name, task.priority, task.burst)
            rr.schedule()
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())