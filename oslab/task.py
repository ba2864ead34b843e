"""Tasks and the virtual CPU that runs them."""

from __future__ import annotations

from dataclasses import dataclass

QUANTUM = 10
"""Length of a time quantum, in time units."""


@dataclass
class Task:
    """A task in the system."""

    name: str
    priority: int
    burst: int
    deadline: int | None = None
    tid: int = 0


def run(task: Task, time_slice: int) -> str:
    """Run the task for the given time slice and return the reported line."""
    line = (
        f"Running task = [{task.name}] [{task.priority}] [{task.burst}] "
        f"for {time_slice} units."
    )
    print(line)
    return line