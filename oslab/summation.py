"""Sum the integers up to a bound in a separate thread."""

from __future__ import annotations

import argparse
import sys
import threading


def summation(upper: int) -> int:
    """Return the sum of the integers from 1 to upper."""
    if upper < 0:
        raise ValueError(f"Argument {upper} must be non-negative")
    return sum(range(1, upper + 1))


def threaded_summation(upper: int) -> int:
    """Compute the summation in a worker thread and wait for it."""
    if upper < 0:
        raise ValueError(f"Argument {upper} must be non-negative")
    results: list[int] = []
    runner = threading.Thread(
        target=lambda: results.append(summation(upper)), name="runner"
    )
    runner.start()
    runner.join()
    return results[0]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-sum", description="Sum 1..N in a separate thread."
    )
    parser.add_argument("upper", type=int, help="non-negative integer bound")
    args = parser.parse_args(argv)
    try:
        total = threaded_summation(args.upper)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"sum = {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())