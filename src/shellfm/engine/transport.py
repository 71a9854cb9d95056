"""Blocking socket transport to the Shell.FM daemon: one connection per command."""

from __future__ import annotations

import socket
from collections.abc import Iterator
from contextlib import contextmanager

from shellfm.models.endpoint import Endpoint, TcpEndpoint, UnixEndpoint, Unresolved


class TransportError(Exception):
    """Raised when the daemon can't be reached, written to, or read from."""


def _connect(endpoint: Endpoint) -> socket.socket:
    if isinstance(endpoint, UnixEndpoint):
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.connect(endpoint.path)
        except OSError:
            sock.close()
            raise
        return sock
    if isinstance(endpoint, TcpEndpoint):
        return socket.create_connection((endpoint.host, endpoint.port))
    raise TypeError(f"Not a connectable endpoint: {endpoint!r}")


@contextmanager
def open_connection(endpoint: Endpoint) -> Iterator[socket.socket]:
    """Connect to ``endpoint`` and close the socket on the way out, whatever happens."""
    if isinstance(endpoint, Unresolved):
        raise TransportError(f"No endpoint to connect to ({endpoint.reason.value})")

    try:
        sock = _connect(endpoint)
    except OSError as e:
        raise TransportError(f"Cannot connect to shell-fm at {endpoint}: {e}") from e

    try:
        yield sock
    finally:
        sock.close()


def send_line(sock: socket.socket, data: bytes) -> None:
    try:
        sock.sendall(data)
    except OSError as e:
        raise TransportError(f"Write failed: {e}") from e


def read_line(sock: socket.socket) -> bytes:
    """Block until one line (or EOF) arrives. Returns b"" when the peer sent nothing."""
    try:
        with sock.makefile("rb") as reader:
            return reader.readline()
    except OSError as e:
        raise TransportError(f"Read failed: {e}") from e
