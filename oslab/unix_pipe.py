"""A one-shot uppercase echo service over a Unix domain socket."""

from __future__ import annotations

import argparse
import contextlib
import os
import socket
import sys
from typing import Union

SOCK_PATH = "/tmp/pipeso"
BUFFER_SIZE = 1024

PathLike = Union[str, "os.PathLike[str]"]


def _text(data: bytes) -> str:
    """Decode the bytes before the first NUL."""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def uppercase(data: bytes) -> bytes:
    """Upper-case the ASCII letters of the bytes before the first NUL."""
    return data.split(b"\0", 1)[0].upper()


def _listen(path: PathLike) -> socket.socket:
    server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(path)
        server.bind(os.fspath(path))
        server.listen(5)
    except OSError:
        server.close()
        raise
    return server


def _serve(path: PathLike, announce: bool) -> str:
    with _listen(path) as server:
        if announce:
            print(f"Servidor Named pipe ouvindo em {os.fspath(path)}...", flush=True)
        connection, _ = server.accept()
        with connection:
            if announce:
                print("Cliente conectado!", flush=True)
            received = connection.recv(BUFFER_SIZE)
            text = _text(received)
            if announce:
                print(f"Dado recebido: {text}", flush=True)
            connection.sendall(uppercase(received) + b"\0")
            if announce:
                print("Dado enviado de volta para o cliente.", flush=True)
    return text


def serve_once(path: PathLike = SOCK_PATH) -> str:
    """Accept one client, answer with its message upper-cased, return the message."""
    return _serve(path, announce=False)


def _connect(path: PathLike) -> socket.socket:
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.connect(os.fspath(path))
    except OSError:
        sock.close()
        raise
    return sock


def _send(sock: socket.socket, text: str) -> None:
    sock.sendall(text.encode("utf-8")[: BUFFER_SIZE - 1] + b"\0")


def _receive(sock: socket.socket) -> str:
    return _text(sock.recv(BUFFER_SIZE))


def request(path: PathLike, text: str) -> str:
    """Send text to the server at path and return its reply."""
    with _connect(path) as sock:
        _send(sock, text)
        return _receive(sock)


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--path", default=SOCK_PATH, help=f"socket path (default: {SOCK_PATH})")
    return parser


def server_main(argv: list[str] | None = None) -> int:
    args = _parser("oslab-pipe-server", "Upper-case one message from a client.").parse_args(argv)
    try:
        _serve(args.path, announce=True)
    except OSError as exc:
        print(f"Falha no servidor: {exc}", file=sys.stderr)
        return 1
    return 0


def client_main(argv: list[str] | None = None) -> int:
    args = _parser("oslab-pipe-client", "Send one message to the server.").parse_args(argv)
    try:
        sock = _connect(args.path)
    except OSError as exc:
        print(f"Falha em conectar no servidor: {exc}", file=sys.stderr)
        return 1
    with sock:
        print("Conectado ao servidor!")
        print("Entre com o dado a ser enviado: ", end="", flush=True)
        line = sys.stdin.readline()
        try:
            _send(sock, line)
            print("Dado enviado ao servidor.")
            reply = _receive(sock)
        except OSError as exc:
            print(f"Falha na comunicacao com o servidor: {exc}", file=sys.stderr)
            return 1
    print(f"Dado recebido: {reply}")
    return 0


if __name__ == "__main__":
    sys.exit(server_main())