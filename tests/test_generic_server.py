import socket

import pytest

from level2.generic_server import GenericServer
from level2.networklistener import ListenerProcessingMode


class FakeFifo:
    def __init__(self):
        self.items = []

    def enqueue(self, item):
        self.items.append(item)

    def dequeue(self):
        return self.items.pop(0) if self.items else None


class EchoServer(GenericServer):
    def __init__(self, config=None):
        super().__init__(config)
        self.hosts = []

    def handle_client_connection(self, client_socket, client_host):
        self.hosts.append(client_host)
        client_socket.settimeout(5)
        data = client_socket.recv(1024)
        client_socket.sendall(b"echo:" + data)


class FailingServer(GenericServer):
    def handle_client_connection(self, client_socket, client_host):
        raise RuntimeError("handler failed")


def test_generic_server_is_abstract():
    with pytest.raises(TypeError):
        GenericServer()


def test_defaults_without_config():
    server = EchoServer()
    GenericServer.init_fifo(server, FakeFifo())
    assert server.port == 8888
    assert server.max_clients == 10
    assert server.init_complete is True


def test_defaults_with_empty_config():
    server = EchoServer({})
    GenericServer.init_fifo(server, FakeFifo())
    assert server.port == -1
    assert server.max_clients == 10
    assert server.init_complete is True


def test_values_from_config():
    server = EchoServer({"port": 9100, "maxClients": 3, "name": "echo"})
    GenericServer.init_processor(server, object())
    assert server.port == 9100
    assert server.max_clients == 3
    assert server.name == "echo"
    assert server.processing_mode is ListenerProcessingMode.SYNCHRONOUS


def test_init_fifo_completes_init():
    server = EchoServer({"port": 0})
    GenericServer.init_fifo(server, FakeFifo())
    assert server.init_complete is True
    assert server.processing_mode is ListenerProcessingMode.ASYNCHRONOUS


def test_init_processor_completes_init():
    server = EchoServer({"port": 0})
    GenericServer.init_processor(server, object())
    assert server.init_complete is True
    assert server.processing_mode is ListenerProcessingMode.SYNCHRONOUS


def test_serves_a_connection():
    server = EchoServer({"port": 0, "maxClients": 5})
    GenericServer.init_fifo(server, FakeFifo())
    with server:
        GenericServer.start_listening(server)
        assert server.is_listening is True
        _, port = server.server_address
        with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
            client.sendall(b"hello")
            reply = client.recv(1024)
    assert reply == b"echo:hello"
    assert server.hosts == ["127.0.0.1"]
    assert server.is_listening is False
    assert server.server_address is None


def test_serves_several_connections():
    server = EchoServer({"port": 0})
    GenericServer.init_fifo(server, FakeFifo())
    replies = []
    with server:
        GenericServer.start_listening(server)
        _, port = server.server_address
        for text in (b"one", b"two"):
            with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
                client.sendall(text)
                replies.append(client.recv(1024))
    assert replies == [b"echo:one", b"echo:two"]
    assert len(server.hosts) == 2


def test_failing_handler_closes_connection_and_server_keeps_running():
    server = FailingServer({"port": 0})
    GenericServer.init_fifo(server, FakeFifo())
    with server:
        GenericServer.start_listening(server)
        _, port = server.server_address
        with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
            assert client.recv(1024) == b""
        assert server.is_listening is True


def test_not_listening_without_init():
    server = EchoServer({"port": 0})
    with server:
        GenericServer.start_listening(server)
        assert server.is_listening is False
        assert server.server_address is None


def test_invalid_port_fails_to_listen():
    server = EchoServer({})
    GenericServer.init_fifo(server, FakeFifo())
    with server:
        GenericServer.start_listening(server)
        assert server.is_listening is False
        assert server.init_complete is False


def test_port_in_use_fails_to_listen():
    first = EchoServer({"port": 0})
    GenericServer.init_fifo(first, FakeFifo())
    with first:
        GenericServer.start_listening(first)
        _, port = first.server_address
        second = EchoServer({"port": port})
        GenericServer.init_fifo(second, FakeFifo())
        with second:
            GenericServer.start_listening(second)
            assert second.is_listening is False
            assert second.init_complete is False
        assert first.is_listening is True