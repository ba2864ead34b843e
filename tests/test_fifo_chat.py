import os
import stat
from concurrent.futures import ThreadPoolExecutor

import pytest

from oslab.fifo_chat import MESSAGE_SIZE, ensure_fifo, receive, send


@pytest.fixture
def fifo(tmp_path):
    path = tmp_path / "fifo"
    ensure_fifo(path)
    return path


def _transfer(path, text, size=MESSAGE_SIZE):
    with ThreadPoolExecutor(max_workers=1) as executor:
        sent = executor.submit(send, path, text)
        received = receive(path, size)
        written = sent.result(timeout=5)
    return written, received


def test_ensure_fifo_creates_fifo(tmp_path):
    path = tmp_path / "chat"
    assert ensure_fifo(path) == os.fspath(path)
    assert stat.S_ISFIFO(os.stat(path).st_mode)


def test_ensure_fifo_is_idempotent(fifo):
    assert ensure_fifo(fifo) == os.fspath(fifo)
    assert stat.S_ISFIFO(os.stat(fifo).st_mode)


def test_ensure_fifo_rejects_regular_file(tmp_path):
    path = tmp_path / "plain"
    path.write_text("data")
    with pytest.raises(FileExistsError):
        ensure_fifo(path)


def test_round_trip(fifo):
    written, received = _transfer(fifo, "hello\n")
    assert received == "hello\n"
    assert written == len("hello\n".encode()) + 1


def test_message_limited_to_buffer(fifo):
    written, received = _transfer(fifo, "x" * 200)
    assert received == "x" * (MESSAGE_SIZE - 1)
    assert written == MESSAGE_SIZE


def test_receive_reads_at_most_size(fifo):
    _, received = _transfer(fifo, "abcdef", size=3)
    assert received == "abc"


def test_receive_rejects_bad_size(fifo):
    with pytest.raises(ValueError):
        receive(fifo, 0)