"""Process creation: forking, separate address spaces and running programs."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, Sequence


def _require_fork() -> None:
    if not hasattr(os, "fork"):
        raise OSError("fork is not available on this platform")


def _run_child(body: Callable[[], bytes]) -> tuple[int, bytes]:
    """Fork; the child runs body and sends back its result. Return (pid, result)."""
    _require_fork()
    read_fd, write_fd = os.pipe()
    pid = os.fork()
    if pid == 0:
        status = 1
        try:
            os.close(read_fd)
            payload = body()
            with os.fdopen(write_fd, "wb") as out:
                out.write(payload)
            status = 0
        finally:
            os._exit(status)
    os.close(write_fd)
    with os.fdopen(read_fd, "rb") as source:
        payload = source.read()
    _, status = os.waitpid(pid, 0)
    code = os.waitstatus_to_exitcode(status)
    if code != 0:
        raise ChildProcessError(f"child {pid} exited with status {code}")
    return pid, payload


def child_modifies_copy(initial: int = 5, delta: int = 15) -> tuple[int, int]:
    """Let a child add delta to its copy of a value.

    Returns (value seen by the parent after the child finished, value in the child).
    """
    state = {"value": initial}

    def child() -> bytes:
        state["value"] += delta
        return str(state["value"]).encode()

    _, payload = _run_child(child)
    return state["value"], int(payload)


def fork_tree(levels: int = 3) -> list[int]:
    """Fork `levels` times in every process; return the pids of all processes."""
    if levels < 0:
        raise ValueError("levels must not be negative")
    _require_fork()
    root = os.getpid()
    read_fd, write_fd = os.pipe()
    children: list[int] = []
    failed = True
    try:
        for _ in range(levels):
            pid = os.fork()
            if pid == 0:
                children = []
            else:
                children.append(pid)
        os.write(write_fd, f"{os.getpid()}\n".encode())
        for child in children:
            os.waitpid(child, 0)
        failed = False
    finally:
        if os.getpid() != root:
            os._exit(1 if failed else 0)
    os.close(write_fd)
    with os.fdopen(read_fd, "rb") as source:
        return [int(line) for line in source.read().split()]


@dataclass(frozen=True)
class PidReport:
    """Process ids seen from both sides of a fork."""

    parent_pid: int
    child_pid: int
    child_fork_value: int
    child_own_pid: int


def report_pids() -> PidReport:
    """Fork once and report what fork and getpid return in each process."""

    def child() -> bytes:
        print("child: pid = 0")
        print(f"child: pid1 = {os.getpid()}", flush=True)
        return f"0 {os.getpid()}".encode()

    pid, payload = _run_child(child)
    fork_value, own_pid = (int(field) for field in payload.split())
    print(f"parent: pid = {pid}")
    print(f"parent: pid1 = {os.getpid()}")
    return PidReport(os.getpid(), pid, fork_value, own_pid)


def exec_listing(command: Sequence[str] = ("ls",)) -> int:
    """Run command in a child process, wait for it and return its exit status."""
    if not command:
        raise ValueError("command must not be empty")
    with subprocess.Popen(list(command)) as child:
        print(f"I am the parent {child.pid}", flush=True)
        status = child.wait()
    print("Child Complete")
    return status


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-proc", description="Process creation examples."
    )
    sub = parser.add_subparsers(dest="demo", required=True)
    sub.add_parser("value", help="a child changes its own copy of a variable")
    tree = sub.add_parser("tree", help="fork repeatedly in every process")
    tree.add_argument("--levels", type=int, default=3)
    sub.add_parser("pids", help="show fork and getpid results")
    run = sub.add_parser("exec", help="run a program in a child process")
    run.add_argument("command", nargs="*", default=["ls"])
    args = parser.parse_args(argv)

    try:
        if args.demo == "value":
            parent_value, _ = child_modifies_copy()
            print(f"PARENT: value = {parent_value}")
        elif args.demo == "tree":
            print(f"{len(fork_tree(args.levels))} processes")
        elif args.demo == "pids":
            report_pids()
        else:
            exec_listing(args.command)
    except (OSError, ValueError) as exc:
        print(f"Fork Failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())