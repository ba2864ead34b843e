"""Small thread examples: partial sums, shared counters and a staged pipeline."""

from __future__ import annotations

import argparse
import re
import sys
import threading
from typing import Callable, Sequence

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def split_ranges(size: int, parts: int) -> list[range]:
    """Split 0..size into equal ranges; the last one takes the remainder."""
    if parts < 1:
        raise ValueError("number of parts must be at least 1")
    if size < 0:
        raise ValueError("size must not be negative")
    length, remainder = divmod(size, parts)
    return [
        range(index * length, (index + 1) * length + (remainder if index == parts - 1 else 0))
        for index in range(parts)
    ]


def parallel_sum(numbers: Sequence[int], num_threads: int = 2) -> int:
    """Sum the numbers, each thread adding its share to a common total."""
    total = 0
    lock = threading.Lock()

    def worker(span: range) -> None:
        nonlocal total
        local_sum = sum(numbers[span.start : span.stop])
        with lock:
            total += local_sum

    threads = [
        threading.Thread(target=worker, args=(span,))
        for span in split_ranges(len(numbers), num_threads)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return total


def run_shared_counters(thread_count: int = 3) -> list[tuple[int, int, int]]:
    """Let each thread bump two shared counters twice.

    Returns one (thread id, first counter, second counter) record per thread,
    in the order the threads finished.
    """
    if thread_count < 0:
        raise ValueError("thread count must not be negative")
    static_count = 0
    global_count = 0
    records: list[tuple[int, int, int]] = []
    lock = threading.Lock()

    def body() -> None:
        nonlocal static_count, global_count
        thread_id = threading.get_ident()
        with lock:
            static_count += 1
            global_count += 1
            static_count += 1
            global_count += 1
            records.append((thread_id, static_count, global_count))
            print(f"Thread ID: {thread_id}, Static: {static_count}, Global: {global_count}")

    threads = [threading.Thread(target=body) for _ in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return records


def add_constant_pipeline(value: int, constant: int = 10) -> int:
    """Store, add and print in three threads run one after another."""
    state = {"entry": 0}

    def apply(operation: Callable[[int], int]) -> None:
        state["entry"] = operation(state["entry"])

    operations: tuple[Callable[[int], int], ...] = (
        lambda _current: value,
        lambda current: current + constant,
    )
    for operation in operations:
        thread = threading.Thread(target=apply, args=(operation,))
        thread.start()
        thread.join()

    printer = threading.Thread(
        target=print, args=(f"O resultado da operação é: {state['entry']}",)
    )
    printer.start()
    printer.join()
    return state["entry"]


def partial_sum_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-partial-sum", description="Sum a vector split across threads."
    )
    parser.add_argument("--size", type=int, default=5000, help="vector length")
    parser.add_argument("--threads", type=int, default=2, help="number of threads")
    parser.add_argument("--value", type=int, default=0, help="value of every element")
    args = parser.parse_args(argv)
    try:
        if args.size < 0:
            raise ValueError("size must not be negative")
        total = parallel_sum([args.value] * args.size, args.threads)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"A soma dos numeros do vetor eh {total}")
    return 0


def pipeline_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-pipeline", description="Read a number, add a constant, print it."
    )
    parser.add_argument("--constant", type=int, default=10, help="value to add")
    args = parser.parse_args(argv)
    print("Escreva algo: ")
    value = _leading_int(sys.stdin.readline())
    add_constant_pipeline(value, args.constant)
    print("Fim do programa")
    return 0


if __name__ == "__main__":
    sys.exit(pipeline_main())