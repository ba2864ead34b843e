"""A list of the tasks in the system, newest first."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from oslab.task import Task


class TaskList:
    """Tasks kept with the most recently inserted one at the head."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._items: deque[Task] = deque()
        for task in tasks:
            self.insert(task)

    def insert(self, task: Task) -> None:
        """Add a task at the head of the list."""
        self._items.appendleft(task)

    def delete(self, task: Task) -> None:
        """Remove the first task, from the head, whose name matches."""
        for index, current in enumerate(self._items):
            if current.name == task.name:
                del self._items[index]
                return
        raise KeyError(f"task {task.name!r} is not in the list")

    def traverse(self) -> None:
        """Print every task, head first."""
        for task in self:
            print(f"[{task.name}] [{task.priority}] [{task.burst}]")

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)