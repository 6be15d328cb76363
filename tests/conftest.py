import io
import socket

import pytest
from rich.console import Console

from gethttp.console import StepReporter


class FakeSocket:
    """Stand-in for a connected TCP socket that replays scripted chunks."""

    def __init__(self, chunks=(), recv_error=None, connect_error=None, accept=None, send_error=None):
        self.chunks = list(chunks)
        self.recv_error = recv_error
        self.connect_error = connect_error
        self.send_error = send_error
        self.accept = accept
        self.connected_to = None
        self.sent = b""
        self.recv_sizes = []
        self.closed = False

    def fileno(self):
        return -1 if self.closed else 7

    def connect(self, address):
        if self.connect_error is not None:
            raise self.connect_error
        self.connected_to = address

    def send(self, data):
        if self.send_error is not None:
            raise self.send_error
        count = len(data) if self.accept is None else self.accept
        self.sent += data[:count]
        return count

    def recv(self, size):
        self.recv_sizes.append(size)
        if self.chunks:
            return self.chunks.pop(0)
        if self.recv_error is not None:
            raise self.recv_error
        return b""

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class FakeNetwork:
    """Socket factory and resolver pair that records what the connector asked for."""

    def __init__(self, sock=None, addresses=None, socket_error=None):
        self.sock = sock if sock is not None else FakeSocket()
        self.addresses = addresses or {}
        self.socket_error = socket_error
        self.sockets_created = 0
        self.lookups = []

    def socket_factory(self):
        if self.socket_error is not None:
            raise self.socket_error
        self.sockets_created += 1
        return self.sock

    def resolver(self, host):
        self.lookups.append(host)
        if host not in self.addresses:
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        return self.addresses[host]


class CapturingReporter(StepReporter):
    def __init__(self):
        super().__init__(
            console=Console(file=io.StringIO(), markup=False, highlight=False, soft_wrap=True, width=200),
            raw_out=io.BytesIO(),
        )

    @property
    def text(self) -> str:
        return self.console.file.getvalue()

    @property
    def response(self) -> bytes:
        return self.raw_out.getvalue()


@pytest.fixture
def reporter():
    return CapturingReporter()


@pytest.fixture
def fake_socket_cls():
    return FakeSocket


@pytest.fixture
def network_cls():
    return FakeNetwork
