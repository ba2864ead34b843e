"""Work-sharing loops over threads with per-thread and combined counts."""

from __future__ import annotations

import argparse
import os
import sys
import threading


def partition(iterations: int, workers: int) -> list[range]:
    """Split 0..iterations into contiguous near-equal chunks, larger ones first."""
    if workers < 1:
        raise ValueError("number of workers must be at least 1")
    if iterations < 0:
        raise ValueError("number of iterations must not be negative")
    size, extra = divmod(iterations, workers)
    chunks = []
    start = 0
    for worker in range(workers):
        stop = start + size + (1 if worker < extra else 0)
        chunks.append(range(start, stop))
        start = stop
    return chunks


def count_iterations(
    iterations: int = 1000, workers: int | None = None
) -> list[tuple[int, int]]:
    """Count loop iterations per thread.

    Returns (thread number, iterations performed) pairs in the order the
    threads added them to the shared total.
    """
    if workers is None:
        workers = os.cpu_count() or 1
    chunks = partition(iterations, workers)
    added: list[tuple[int, int]] = []
    lock = threading.Lock()

    def body(thread_id: int, chunk: range) -> None:
        count = 0
        for _ in chunk:
            count += 1
        with lock:
            added.append((thread_id, count))

    threads = [
        threading.Thread(target=body, args=(thread_id, chunk))
        for thread_id, chunk in enumerate(chunks)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return added


def _parallel_region(workers: int) -> None:
    lock = threading.Lock()

    def body(thread_id: int) -> None:
        with lock:
            print(f"I am a parallel region of Thread: {thread_id}")

    threads = [threading.Thread(target=body, args=(number,)) for number in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-loops", description="Share loop iterations between threads."
    )
    parser.add_argument(
        "--mode", choices=("loop", "critical", "reduction", "region"), default="loop",
        help="what to demonstrate (default: loop)",
    )
    parser.add_argument("--iterations", type=int, default=1000, help="loop length")
    parser.add_argument("--workers", type=int, help="number of threads")
    args = parser.parse_args(argv)
    workers = args.workers if args.workers is not None else (os.cpu_count() or 1)

    try:
        if args.mode == "region":
            if workers < 1:
                raise ValueError("number of workers must be at least 1")
            _parallel_region(workers)
            return 0
        added = count_iterations(args.iterations, workers)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    total = 0
    for thread_id, count in added:
        if args.mode == "critical":
            print(
                f"Thread {thread_id} is adding its iterations ({count}) to sum ({total}), "
                f" total nloops is now {total + count}."
            )
        else:
            print(f"Thread {thread_id} performed {count} iterations of the loop.")
        total += count
    if args.mode != "loop":
        print(f"Total # loop iterations is {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())