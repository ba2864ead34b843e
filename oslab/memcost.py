"""Measure the cost of allocating, writing and reading memory."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass

MIB = 1024 * 1024
_INT_SIZE = 4
_FILL_WORD = 0x01010101


class Timer:
    """A monotonic stopwatch started on creation."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since the timer was created."""
        return time.perf_counter() - self._start


def busy_wait(ms: float) -> None:
    """Spin, without sleeping, for the given number of milliseconds."""
    end = time.monotonic() + ms / 1000.0
    while time.monotonic() <= end:
        pass


@dataclass
class Measurement:
    """One timed experiment."""

    action: str
    seconds: float
    buffer_size: int
    iterations: int
    delete_seconds: float | None = None
    checksum: int | None = None

    def __str__(self) -> str:
        text = (
            f"{self.seconds:1.4f} s to {self.action} "
            f"{self.buffer_size // MIB} MB {self.iterations} times"
        )
        if self.delete_seconds is not None:
            text += f" ({self.delete_seconds:1.4f} s to delete)"
        if self.checksum is not None:
            text += f", sum = {self.checksum}"
        return text + "."


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _int_sum(buffer: bytearray, count: int) -> int:
    return sum(memoryview(buffer)[: count * _INT_SIZE].cast("i"))


def fast_measure(buffer_size: int = 32 * MIB, iterations: int = 100) -> list[Measurement]:
    """Run the memory experiments, print each result and return them."""
    if buffer_size < _INT_SIZE:
        raise ValueError(f"buffer size must be at least {_INT_SIZE} bytes")
    if iterations < 0:
        raise ValueError("iteration count must not be negative")
    count = buffer_size // _INT_SIZE
    size = count * _INT_SIZE
    ones = b"\x01" * size
    results: list[Measurement] = []

    def report(measurement: Measurement) -> None:
        print(measurement)
        results.append(measurement)

    print("Busy waiting to raise the CPU frequency...")
    busy_wait(500)

    timer = Timer()
    for _ in range(iterations):
        buffer = bytearray(size)
        del buffer
    report(Measurement("allocate", timer.elapsed(), buffer_size, iterations))

    timer = Timer()
    delete_time = 0.0
    for _ in range(iterations):
        buffer = bytearray(size)
        delete_timer = Timer()
        del buffer
        delete_time += delete_timer.elapsed()
    report(Measurement("allocate", timer.elapsed(), buffer_size, iterations, delete_time))

    buffer = bytearray(size)
    timer = Timer()
    for _ in range(iterations):
        buffer[:] = ones
    report(Measurement("write", timer.elapsed(), buffer_size, iterations))

    timer = Timer()
    total = 0
    for _ in range(iterations):
        total = _wrap32(total + _int_sum(buffer, count))
    report(Measurement("read", timer.elapsed(), buffer_size, iterations, checksum=total))
    del buffer

    timer = Timer()
    delete_time = 0.0
    for _ in range(iterations):
        buffer = bytearray(size)
        buffer[:] = ones
        delete_timer = Timer()
        del buffer
        delete_time += delete_timer.elapsed()
    report(
        Measurement("allocate and write", timer.elapsed(), buffer_size, iterations, delete_time)
    )

    timer = Timer()
    total = 0
    for _ in range(iterations):
        buffer = bytearray(size)
        total = _wrap32(total + _int_sum(buffer, count))
        del buffer
    report(
        Measurement("allocate and read", timer.elapsed(), buffer_size, iterations, checksum=total)
    )
    return results


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-memcost", description="Time memory allocation, writes and reads."
    )
    parser.add_argument("--buffer-mb", type=int, default=32, help="buffer size in MB")
    parser.add_argument("--iterations", type=int, default=100, help="repetitions per test")
    args = parser.parse_args(argv)
    try:
        fast_measure(args.buffer_mb * MIB, args.iterations)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())