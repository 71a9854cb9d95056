import queue
import shutil
import socketserver
import tempfile
import threading
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog


class _CommandHandler(socketserver.StreamRequestHandler):
    """Reads one command line and answers queries the way shell-fm does."""

    def handle(self) -> None:
        self.server.connections += 1
        line = self.rfile.readline()
        self.server.received.put(line)
        verb = line.decode().split(" ", 1)[0].strip()
        reply = self.server.replies.get(verb)
        if reply is not None:
            self.wfile.write(reply.encode() + b"\n")


class _UnixServer(socketserver.ThreadingMixIn, socketserver.UnixStreamServer):
    daemon_threads = True


class _TcpServer(socketserver.ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True


class FakeDaemon:
    """In-process stand-in for a listening shell-fm."""

    def __init__(self, server: socketserver.BaseServer) -> None:
        self.server = server
        server.received = queue.Queue()
        server.replies = {}
        server.connections = 0
        self._thread = threading.Thread(target=server.serve_forever, daemon=True)

    @property
    def replies(self) -> dict[str, str]:
        return self.server.replies

    @property
    def connections(self) -> int:
        return self.server.connections

    def next_line(self, timeout: float = 5.0) -> bytes:
        return self.server.received.get(timeout=timeout)

    def nothing_received(self, timeout: float = 0.2) -> bool:
        try:
            self.server.received.get(timeout=timeout)
        except queue.Empty:
            return True
        return False

    def start(self) -> "FakeDaemon":
        self._thread.start()
        return self

    def close(self) -> None:
        self.server.shutdown()
        self.server.server_close()
        self._thread.join(timeout=5)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def short_tmp() -> Iterator[Path]:
    """A short temp dir, since UNIX socket paths are limited to ~100 bytes."""
    path = Path(tempfile.mkdtemp(prefix="sfm-"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def unix_daemon(short_tmp: Path) -> Iterator[FakeDaemon]:
    server = _UnixServer(str(short_tmp / "shell-fm.sock"), _CommandHandler)
    daemon = FakeDaemon(server).start()
    yield daemon
    daemon.close()


@pytest.fixture
def tcp_daemon() -> Iterator[FakeDaemon]:
    server = _TcpServer(("127.0.0.1", 0), _CommandHandler)
    daemon = FakeDaemon(server).start()
    yield daemon
    daemon.close()


@pytest.fixture
def unix_path(unix_daemon: FakeDaemon) -> str:
    return unix_daemon.server.server_address


@pytest.fixture
def tcp_address(tcp_daemon: FakeDaemon) -> tuple[str, int]:
    host, port = tcp_daemon.server.server_address[:2]
    return host, port


@pytest.fixture
def dead_socket(short_tmp: Path) -> str:
    """Path where nothing is listening."""
    return str(short_tmp / "nobody-home.sock")
