"""Two programs taking turns talking through one named pipe."""

from __future__ import annotations

import argparse
import os
import stat
import sys
from typing import Union

FIFO_PATH = "/tmp/myfifo"
MESSAGE_SIZE = 80

PathLike = Union[str, "os.PathLike[str]"]


def ensure_fifo(path: PathLike = FIFO_PATH) -> str:
    """Create the FIFO at path unless one is already there."""
    try:
        os.mkfifo(path, 0o666)
    except FileExistsError:
        if not stat.S_ISFIFO(os.stat(path).st_mode):
            raise FileExistsError(f"{os.fspath(path)} exists and is not a FIFO") from None
    return os.fspath(path)


def send(path: PathLike, text: str) -> int:
    """Write one NUL-terminated message to the FIFO; return the bytes written."""
    payload = text.encode("utf-8")[: MESSAGE_SIZE - 1] + b"\0"
    with open(path, "wb", buffering=0) as fifo:
        return fifo.write(payload)


def receive(path: PathLike, size: int = MESSAGE_SIZE) -> str:
    """Read one message of at most size bytes from the FIFO."""
    if size < 1:
        raise ValueError("size must be at least 1")
    with open(path, "rb", buffering=0) as fifo:
        data = fifo.read(size) or b""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--path", default=FIFO_PATH, help=f"FIFO path (default: {FIFO_PATH})")
    return parser


def writer_first_main(argv: list[str] | None = None) -> int:
    """Send a line from standard input, then print the answer; repeat."""
    args = _parser("oslab-fifo-writer", "Talk through a FIFO, writing first.").parse_args(argv)
    try:
        ensure_fifo(args.path)
        while True:
            line = sys.stdin.readline()
            if not line:
                return 0
            send(args.path, line)
            print(f"User2: {receive(args.path)}", flush=True)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1


def reader_first_main(argv: list[str] | None = None) -> int:
    """Print a received message, then answer with a line from standard input; repeat."""
    args = _parser("oslab-fifo-reader", "Talk through a FIFO, reading first.").parse_args(argv)
    try:
        ensure_fifo(args.path)
        while True:
            print(f"User1: {receive(args.path)}", flush=True)
            line = sys.stdin.readline()
            if not line:
                return 0
            send(args.path, line)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(writer_first_main())