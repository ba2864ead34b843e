"""Pass a message between processes through a named shared-memory segment."""

from __future__ import annotations

import argparse
import os
import sys
from multiprocessing import resource_tracker
from multiprocessing.shared_memory import SharedMemory
from typing import Sequence

SEGMENT_NAME = "OS"
SEGMENT_SIZE = 4096
MESSAGES = ("Studying ", "Operating Systems ", "Is Fun!")

_LEGACY_TRACKING = sys.version_info < (3, 13) and os.name == "posix"


def _attach(name: str, create: bool, size: int = 0) -> SharedMemory:
    if sys.version_info >= (3, 13):
        return SharedMemory(name=name, create=create, size=size, track=False)
    return SharedMemory(name=name, create=create, size=size)


def _release(segment: SharedMemory, unlink: bool) -> None:
    """Close the segment, removing it or leaving it for other processes."""
    try:
        if unlink:
            segment.unlink()
        elif _LEGACY_TRACKING:
            # Keep the segment alive after this process exits.
            resource_tracker.unregister("/" + segment.name, "shared_memory")
    finally:
        segment.close()


def _open_for_writing(name: str, size: int) -> SharedMemory:
    try:
        return _attach(name, create=True, size=size)
    except FileExistsError:
        segment = _attach(name, create=False)
        if segment.size < size:
            _release(segment, unlink=False)
            raise ValueError(
                f"segment {name!r} holds {segment.size} bytes, {size} needed"
            ) from None
        return segment


def _write(segment: SharedMemory, messages: Sequence[str], size: int) -> int:
    data = "".join(messages).encode("utf-8")
    if len(data) + 1 > size:
        raise ValueError(f"messages need {len(data) + 1} bytes, segment has {size}")
    segment.buf[: len(data)] = data
    segment.buf[len(data)] = 0
    return len(data)


def write_messages(
    name: str = SEGMENT_NAME, messages: Sequence[str] = MESSAGES, size: int = SEGMENT_SIZE
) -> int:
    """Write the messages one after another into the segment; return the bytes written.

    The segment is created if needed and left in place for a reader.
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    segment = _open_for_writing(name, size)
    try:
        return _write(segment, messages, size)
    finally:
        _release(segment, unlink=False)


def read_message(name: str = SEGMENT_NAME, size: int = SEGMENT_SIZE, unlink: bool = True) -> str:
    """Read the NUL-terminated text stored in the segment, removing it if asked."""
    segment = _attach(name, create=False)
    try:
        data = bytes(segment.buf[: min(size, segment.size)])
    finally:
        _release(segment, unlink)
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--name", default=SEGMENT_NAME, help="segment name")
    parser.add_argument("--size", type=int, default=SEGMENT_SIZE, help="segment size in bytes")
    return parser


def producer_main(argv: list[str] | None = None) -> int:
    parser = _parser("oslab-shm-producer", "Write a message into shared memory.")
    parser.add_argument("messages", nargs="*", help="message parts to write")
    args = parser.parse_args(argv)
    messages = args.messages or MESSAGES
    try:
        if os.name == "nt":
            # The mapping disappears with its last handle, so hold it until <enter>.
            segment = _open_for_writing(args.name, args.size)
            try:
                _write(segment, messages, args.size)
                input("Press <enter> to release the segment: ")
            finally:
                _release(segment, unlink=False)
        else:
            write_messages(args.name, messages, args.size)
    except (OSError, ValueError) as exc:
        print(f"Map failed: {exc}", file=sys.stderr)
        return 1
    return 0


def consumer_main(argv: list[str] | None = None) -> int:
    parser = _parser("oslab-shm-consumer", "Print the message held in shared memory.")
    parser.add_argument("--keep", action="store_true", help="do not remove the segment")
    args = parser.parse_args(argv)
    try:
        text = read_message(args.name, args.size, unlink=not args.keep)
    except FileNotFoundError:
        print("shared memory failed", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error removing {args.name}: {exc}", file=sys.stderr)
        return 1
    print(text, end="")
    return 0


if __name__ == "__main__":
    sys.exit(producer_main())