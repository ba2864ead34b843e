"""A lock-protected counter shared by several threads."""

from __future__ import annotations

import argparse
import re
import sys
import threading
from typing import Callable

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class SharedCounter:
    """An integer that threads change one at a time."""

    def __init__(
        self, value: int = 0, on_change: Callable[[int, int], None] | None = None
    ) -> None:
        self._value = value
        self._lock = threading.Lock()
        self._on_change = on_change

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def add(self, delta: int) -> int:
        """Add delta and return the new value."""
        with self._lock:
            self._value += delta
            new_value = self._value
            if self._on_change is not None:
                self._on_change(delta, new_value)
        return new_value

    def set(self, value: int) -> None:
        """Replace the value."""
        with self._lock:
            self._value = value


def monitor_main(argv: list[str] | None = None) -> int:
    """Show a ticking counter; <enter> then a number replaces its value."""
    parser = argparse.ArgumentParser(
        prog="oslab-monitor", description="Counter shown by one thread, set by another."
    )
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between ticks")
    args = parser.parse_args(argv)

    counter = SharedCounter()
    screen = threading.Lock()
    stop = threading.Event()

    def show_status() -> None:
        while not stop.wait(args.interval):
            with screen:
                latest = counter.add(1)
                print(f"Ultimo lido foi {latest}, digite <enter> para alterar", flush=True)

    def read_keyboard() -> None:
        while sys.stdin.readline():
            with screen:
                print("Digite novo valor:", flush=True)
                line = sys.stdin.readline()
                if not line:
                    return
                counter.set(_leading_int(line))

    status = threading.Thread(target=show_status, name="status", daemon=True)
    keyboard = threading.Thread(target=read_keyboard, name="keyboard")
    status.start()
    keyboard.start()
    keyboard.join()
    stop.set()
    status.join()
    return 0


def ticker_main(argv: list[str] | None = None) -> int:
    """Two threads increment and two decrement a counter until <enter>."""
    parser = argparse.ArgumentParser(
        prog="oslab-ticker", description="Threads racing on a protected counter."
    )
    parser.add_argument("--period", type=float, default=1.0, help="seconds between increments")
    args = parser.parse_args(argv)

    def report(delta: int, new_value: int) -> None:
        print(f"Somando {delta} ficará {new_value}", flush=True)

    counter = SharedCounter(on_change=report)
    stop = threading.Event()

    def step(delta: int, interval: float) -> None:
        while not stop.wait(interval):
            counter.add(delta)

    plan = [(1, args.period), (1, args.period), (-1, 2 * args.period), (-1, 2 * args.period)]
    workers = [
        threading.Thread(target=step, args=spec, name=f"ticker-{number}", daemon=True)
        for number, spec in enumerate(plan)
    ]
    for worker in workers:
        worker.start()
    print("Digite enter para terminar o programa:", flush=True)
    sys.stdin.readline()
    stop.set()
    for worker in workers:
        worker.join()
    return 0


if __name__ == "__main__":
    sys.exit(monitor_main())