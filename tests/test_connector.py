import socket

import pytest

from gethttp.model.Connector import Connector
from gethttp.model.errors import ConnectError, ResolutionError, SocketError
from gethttp.model.header import ConnectionTarget


def make_connector(reporter, network):
    return Connector(reporter, socket_factory=network.socket_factory, resolver=network.resolver)


def test_literal_ipv4_skips_dns(reporter, network_cls):
    network = network_cls()
    sock = make_connector(reporter, network).connect(ConnectionTarget("127.0.0.1", 80))
    assert network.lookups == []
    assert sock.connected_to == ("127.0.0.1", 80)
    assert "inet_addr failed" not in reporter.text


def test_hostname_goes_through_resolver(reporter, network_cls):
    network = network_cls(addresses={"example.com": "93.184.216.34"})
    sock = make_connector(reporter, network).connect(ConnectionTarget("example.com", 80))
    assert network.lookups == ["example.com"]
    assert sock.connected_to == ("93.184.216.34", 80)
    assert "Resolved 'example.com' → 93.184.216.34:80" in reporter.text
    assert "Socket created (fd=7)" in reporter.text
    assert "Connected to example.com:80" in reporter.text


def test_steps_are_printed_in_order(reporter, network_cls):
    network = network_cls()
    make_connector(reporter, network).connect(ConnectionTarget("10.0.0.1", 3128))
    text = reporter.text
    assert text.index("[Step 5]") < text.index("[Step 6]") < text.index("[Step 7]")


def test_lookup_failure_is_resolution_error(reporter, network_cls):
    network = network_cls()
    with pytest.raises(ResolutionError) as info:
        make_connector(reporter, network).connect(ConnectionTarget("nowhere.invalid", 80))
    assert info.value.code == socket.EAI_NONAME
    assert info.value.exit_status == 1
    assert network.sockets_created == 0


def test_empty_host_is_resolution_error(reporter, network_cls):
    network = network_cls()
    with pytest.raises(ResolutionError):
        make_connector(reporter, network).connect(ConnectionTarget("", 80))
    assert network.lookups == []


def test_socket_creation_failure_is_socket_error(reporter, network_cls):
    network = network_cls(socket_error=OSError(24, "Too many open files"))
    with pytest.raises(SocketError) as info:
        make_connector(reporter, network).connect(ConnectionTarget("127.0.0.1", 80))
    assert info.value.code == 24
    assert info.value.exit_status == 24


def test_connect_failure_closes_socket(reporter, network_cls, fake_socket_cls):
    sock = fake_socket_cls(connect_error=ConnectionRefusedError(111, "Connection refused"))
    network = network_cls(sock=sock)
    with pytest.raises(ConnectError) as info:
        make_connector(reporter, network).connect(ConnectionTarget("127.0.0.1", 8080))
    assert info.value.code == 111
    assert sock.closed
    assert "Connected to" not in reporter.text
