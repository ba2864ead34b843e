"""A fixed-size pool of worker threads fed from a FIFO queue."""

from __future__ import annotations

import argparse
import queue
import random
import sys
import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Tuple

THREAD_NUM = 4


class _Executable(Protocol):
    def execute(self) -> Any: ...


@dataclass(frozen=True)
class AdditionTask:
    """Add two numbers after a short pause."""

    a: int
    b: int
    delay: float = 0.05

    def execute(self) -> int:
        """Compute, print and return the sum."""
        time.sleep(self.delay)
        result = self.a + self.b
        print(f"The sum of {self.a} and {self.b} is {result}", flush=True)
        return result


_Item = Optional[Tuple[_Executable, "Future[Any]"]]


class ThreadPool:
    """Worker threads that run submitted tasks in submission order."""

    def __init__(self, workers: int = THREAD_NUM) -> None:
        if workers < 1:
            raise ValueError("a pool needs at least one worker")
        self._queue: queue.Queue[_Item] = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._threads = [
            threading.Thread(target=self._work, name=f"pool-worker-{number}", daemon=True)
            for number in range(workers)
        ]
        for thread in self._threads:
            thread.start()

    def _work(self) -> None:
        while True:
            item = self._queue.get()
            if item is None:
                return
            task, future = item
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = task.execute()
            except Exception as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def submit(self, task: _Executable) -> Future[Any]:
        """Queue a task and return a future for its result."""
        with self._lock:
            if self._closed:
                raise RuntimeError("cannot submit to a pool that has been shut down")
            future: Future[Any] = Future()
            self._queue.put((task, future))
        return future

    def shutdown(self) -> None:
        """Finish the queued tasks and stop the workers."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for _ in self._threads:
                self._queue.put(None)
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-pool", description="Add random pairs of numbers on a thread pool."
    )
    parser.add_argument("--tasks", type=int, default=100, help="number of tasks")
    parser.add_argument("--workers", type=int, default=THREAD_NUM, help="worker threads")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        with ThreadPool(args.workers) as pool:
            for _ in range(args.tasks):
                pool.submit(AdditionTask(rng.randrange(100), rng.randrange(100)))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())