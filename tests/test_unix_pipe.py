import shutil
import tempfile
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from oslab.unix_pipe import BUFFER_SIZE, request, serve_once, uppercase


@pytest.fixture
def sock_path():
    directory = tempfile.mkdtemp(prefix="oslab")
    yield Path(directory) / "pipe"
    shutil.rmtree(directory, ignore_errors=True)


def _request_when_ready(path, text, timeout=5.0):
    deadline = time.monotonic() + timeout
    while True:
        try:
            return request(path, text)
        except (FileNotFoundError, ConnectionRefusedError):
            if time.monotonic() > deadline:
                raise
            time.sleep(0.01)


def _exchange(path, text):
    with ThreadPoolExecutor(max_workers=1) as executor:
        served = executor.submit(serve_once, path)
        reply = _request_when_ready(path, text)
        received = served.result(timeout=5)
    return received, reply


def test_uppercase_letters():
    assert uppercase(b"hello\n") == b"HELLO\n"


def test_uppercase_stops_at_nul():
    assert uppercase(b"ab\x00cd") == b"AB"


def test_uppercase_leaves_other_bytes():
    data = b"123 !?\n"
    assert uppercase(data) == data


def test_round_trip(sock_path):
    received, reply = _exchange(sock_path, "hello world\n")
    assert received == "hello world\n"
    assert reply == "HELLO WORLD\n"


def test_reply_is_idempotent_on_uppercase(sock_path):
    received, reply = _exchange(sock_path, "ALREADY UP")
    assert reply == received


def test_long_message_is_truncated(sock_path):
    received, reply = _exchange(sock_path, "a" * (BUFFER_SIZE * 2))
    assert received == "a" * (BUFFER_SIZE - 1)
    assert reply == "A" * (BUFFER_SIZE - 1)


def test_server_replaces_stale_file(sock_path):
    sock_path.write_text("stale")
    _, reply = _exchange(sock_path, "abc")
    assert reply == "ABC"


def test_request_without_server_fails(sock_path):
    with pytest.raises(FileNotFoundError):
        request(sock_path, "hello")