"""A threaded TCP server that hands each connection to a subclass."""

from __future__ import annotations

import selectors
import socket
import threading
from abc import abstractmethod
from collections.abc import Mapping
from typing import Any

from level2.logger import get_logger
from level2.networklistener import NetworkListener, config_value

DEFAULT_PORT = 8888
DEFAULT_MAX_CLIENTS = 10
POLL_TIMEOUT = 1.0
CLEAN_INTERVAL = 2.0


class GenericServer(NetworkListener):
    """Listens on a TCP port and serves every connection in its own thread.

    Configuration fields: ``port`` (default -1 when a configuration is given,
    8888 otherwise) and ``maxClients`` (the listen backlog, default 10).
    Subclasses implement ``handle_client_connection``; the client socket is
    non-blocking and is closed once the handler returns.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        super().__init__(config)
        if config is None:
            self.port = DEFAULT_PORT
            self.max_clients = DEFAULT_MAX_CLIENTS
        else:
            self.port = config_value(config, "port", -1)
            self.max_clients = config_value(config, "maxClients", DEFAULT_MAX_CLIENTS)
        self._server_socket: socket.socket | None = None
        self._stop = threading.Event()
        self._listening_thread: threading.Thread | None = None
        self._cleaner_thread: threading.Thread | None = None
        self._workers: list[threading.Thread] = []
        self._workers_lock = threading.Lock()

    def __enter__(self) -> GenericServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_listening()

    @property
    def server_address(self) -> tuple[str, int] | None:
        """The address the server socket is bound to, or None if there is none."""
        sock = self._server_socket
        if sock is None:
            return None
        try:
            return sock.getsockname()
        except OSError:
            return None

    def init_fifo(self, fifo: Any) -> None:
        super().init_fifo(fifo)
        self.init_complete = True

    def init_processor(self, processor: Any) -> None:
        super().init_processor(processor)
        self.init_complete = True

    def start_listening(self) -> None:
        """Open the server socket and start the accepting and cleaning threads."""
        self._stop.clear()
        if self.init_complete:
            self._open_server_socket()
        self._listening_thread = threading.Thread(
            target=self._accept_loop, name=f"listener-{self.port}", daemon=True
        )
        self._listening_thread.start()
        self._set_listening(self._server_socket is not None)
        get_logger().info(
            "starting listening thread " + ("succeeded" if self.is_listening else "failed")
        )
        self._cleaner_thread = threading.Thread(
            target=self._clean_workers_loop, name=f"cleaner-{self.port}", daemon=True
        )
        self._cleaner_thread.start()

    def stop_listening(self) -> None:
        """Stop accepting connections and wait for running connections to end."""
        logger = get_logger()
        logger.info(f"stopping to listen for incoming HTTP calls on port: {self.port}")
        self._stop.set()
        if self._listening_thread is not None:
            self._listening_thread.join()
            self._listening_thread = None
            logger.info(f"stopped to listen for incoming HTTP calls on port: {self.port}")
        if self._cleaner_thread is not None:
            self._cleaner_thread.join()
            self._cleaner_thread = None
            logger.info("all working threads have been ended")
        self._set_listening(False)

    @abstractmethod
    def handle_client_connection(self, client_socket: socket.socket, client_host: str) -> None:
        """Serve one accepted connection."""

    def _handle_listening_error(self, message: str) -> None:
        get_logger().error(message)
        self.init_complete = False
        self._set_listening(False)

    def _open_server_socket(self) -> None:
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            self._handle_listening_error(f"failed creating listening socket: {exc}")
            return
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.setblocking(False)
        except OSError as exc:
            sock.close()
            self._handle_listening_error(f"failed setting socket options: {exc}")
            return
        try:
            sock.bind(("", self.port))
        except (OSError, OverflowError, TypeError) as exc:
            sock.close()
            self._handle_listening_error(
                f"failed to bind listening socket to port {self.port}. Error: {exc}"
            )
            return
        try:
            sock.listen(self.max_clients)
        except OSError as exc:
            sock.close()
            self._handle_listening_error(
                f"failed listening on server socket on port {self.port}. Error: {exc}"
            )
            return
        self._server_socket = sock
        get_logger().info(f"server is listening on port {self.port}")

    def _accept_loop(self) -> None:
        sock = self._server_socket
        if sock is None:
            return
        logger = get_logger()
        try:
            with selectors.DefaultSelector() as selector:
                selector.register(sock, selectors.EVENT_READ)
                while not self._stop.is_set():
                    try:
                        events = selector.select(timeout=POLL_TIMEOUT)
                    except OSError as exc:
                        logger.error(
                            "error encountered during waiting for an event to occurre "
                            f"on the server socket: {exc}"
                        )
                        self._stop.wait(POLL_TIMEOUT)
                        continue
                    if events:
                        self._accept_connection(sock)
        finally:
            self._server_socket = None
            sock.close()

    def _accept_connection(self, sock: socket.socket) -> None:
        logger = get_logger()
        try:
            client, (host, port) = sock.accept()
        except BlockingIOError:
            return
        except OSError as exc:
            logger.error(f"failed accepting incoming connection: {exc}")
            return
        logger.info(f"New connection from {host}:{port}")
        worker = threading.Thread(
            target=self._serve_client, args=(client, host), daemon=True
        )
        with self._workers_lock:
            self._workers.append(worker)
        worker.start()

    def _serve_client(self, client: socket.socket, host: str) -> None:
        logger = get_logger()
        logger.trace("start processing incoming connection")
        with client:
            try:
                client.setblocking(False)
                self.handle_client_connection(client, host)
            except Exception as exc:
                logger.error(f"processing of incoming connection failed: {exc}")
        logger.trace("finished processing incoming connection")

    def _erase_finished_workers(self) -> None:
        with self._workers_lock:
            finished = [worker for worker in self._workers if not worker.is_alive()]
            self._workers = [worker for worker in self._workers if worker.is_alive()]
        for _ in finished:
            get_logger().info("removing finished working thread")

    def _clean_workers_loop(self) -> None:
        get_logger().info("starting working thread monitoring")
        while not self._stop.wait(CLEAN_INTERVAL):
            self._erase_finished_workers()
        if self._listening_thread is not None:
            self._listening_thread.join()
        while True:
            with self._workers_lock:
                remaining = list(self._workers)
            if not remaining:
                break
            for worker in remaining:
                worker.join()
            self._erase_finished_workers()