"""Reading HTTP/1.1 requests from and writing responses to a client socket."""

from __future__ import annotations

import select
import socket

from level2.httpdefs import (
    HEADER_FIELD_SEPARATOR,
    HEADER_TERMINATOR,
    HTTP_STATUS_CODE_400,
    HTTP_STATUS_CODE_408,
    HTTP_STATUS_CODE_411,
    HTTP_STATUS_CODE_431,
    HTTP_STATUS_CODE_500,
    LINE_TERMINATOR,
    MAX_READ,
    METHOD_PATH_SEPARATOR,
    ONE_SECOND_MS,
    PATH_PROTOCOL_SEPARATOR,
    TIMEOUT_IN_SECONDS,
)
from level2.httpexception import HttpException
from level2.httprequest import HttpRequest
from level2.httpresponse import HttpResponse
from level2.logger import get_logger


class Http11:
    """One request/response exchange on a non-blocking client socket.

    Failures while reading are logged and kept; ``last_error`` returns the
    most recent one.
    """

    def __init__(self, client_socket: socket.socket | None) -> None:
        self._socket = client_socket
        self._raw = bytearray()
        self.bytes_read = 0
        self._content_offset = 0
        self._reading_finished = False
        self._errors: list[HttpException] = []

    def read_request(self, client_host: str) -> HttpRequest | None:
        """Read and parse one request, or return None if that failed."""
        logger = get_logger()
        try:
            self._read_first_chunk()
            request = self._parse_header()
            self._read_remaining_data(request)
        except HttpException as exc:
            logger.error(f"Failed reading incoming request: {exc}")
            logger.trace(
                "Exception is of class HttpException. "
                f"Http statuscode: '{exc.http_return_code}'"
            )
            self._errors.append(exc)
            return None
        except OSError as exc:
            logger.error(f"Failed reading incoming request: {exc}")
            return None
        return request

    def send_response(self, response: HttpResponse) -> None:
        self._socket.sendall(response.message())

    def has_errors(self) -> bool:
        return bool(self._errors)

    def last_error(self) -> HttpException | None:
        return self._errors[-1] if self._errors else None

    def _append(self, chunk: bytes) -> None:
        self._raw += chunk
        self.bytes_read += len(chunk)

    def _read_first_chunk(self) -> None:
        if self._socket is None or self._socket.fileno() < 0:
            raise HttpException(
                "reading the request was started with an invalid socket",
                HTTP_STATUS_CODE_500,
            )
        self._raw.clear()
        self.bytes_read = 0
        chunk: bytes | None = None
        while self.bytes_read < MAX_READ:
            try:
                chunk = self._socket.recv(MAX_READ)
            except OSError:
                chunk = None
            if not chunk:
                break
            self._append(chunk)
        self._reading_finished = chunk == b""

    def _parse_header(self) -> HttpRequest:
        raw = bytes(self._raw)
        header_end = raw.find(HEADER_TERMINATOR.encode())
        if header_end == -1:
            raise HttpException(
                f"first {self.bytes_read} bytes of message do not contain a valid header!",
                HTTP_STATUS_CODE_431,
            )
        self._content_offset = header_end + len(HEADER_TERMINATOR)
        request = HttpRequest()
        header_text = raw[:header_end].decode("latin-1")
        if header_text:
            first_line, *field_lines = header_text.split(LINE_TERMINATOR)
            self._parse_first_line(request, first_line)
            for line in field_lines:
                self._parse_header_field_line(request, line)
        return request

    @staticmethod
    def _parse_first_line(request: HttpRequest, line: str) -> None:
        method_end = line.find(METHOD_PATH_SEPARATOR)
        if method_end == -1:
            raise HttpException("no http method found in header!", HTTP_STATUS_CODE_400)
        request.method = line[:method_end]
        path_start = method_end + 1
        if path_start < len(line):
            path_end = line.find(PATH_PROTOCOL_SEPARATOR)
            if path_end == -1:
                raise HttpException("no path found in http header!", HTTP_STATUS_CODE_400)
            request.path = line[path_start:path_end]

    @staticmethod
    def _parse_header_field_line(request: HttpRequest, line: str) -> None:
        name_end = line.find(HEADER_FIELD_SEPARATOR)
        if name_end == -1:
            raise HttpException(
                f"no http header field found in '{line}'", HTTP_STATUS_CODE_400
            )
        request.add_header_field(
            line[:name_end], line[name_end + len(HEADER_FIELD_SEPARATOR):]
        )

    def _read_remaining_data(self, request: HttpRequest) -> None:
        if self._reading_finished:
            return
        length = request.content_length()
        if length is None:
            raise HttpException("Content-Length required", HTTP_STATUS_CODE_411)
        expected = length + self._content_offset
        logger = get_logger()
        logger.trace(
            f"continuing to read from socket - {self.bytes_read} of {expected} "
            "byted have been read. Trying to fetch the rest ..."
        )
        chunk: bytes | None = None
        while self.bytes_read < expected:
            try:
                chunk = self._socket.recv(MAX_READ)
            except BlockingIOError:
                self._wait_for_data()
                continue
            except OSError as exc:
                raise HttpException(
                    f"error during reading from socket: '{exc}'", HTTP_STATUS_CODE_400
                ) from exc
            if not chunk:
                break
            self._append(chunk)
        self._reading_finished = chunk == b""
        request.content = bytes(self._raw[self._content_offset:])
        logger.trace(
            f"finished reading from socket - {self.bytes_read} of {expected} "
            "byted have been read."
        )

    def _wait_for_data(self) -> None:
        for _ in range(TIMEOUT_IN_SECONDS):
            ready, _, _ = select.select([self._socket], [], [], ONE_SECOND_MS / 1000)
            if ready:
                return
        raise HttpException(
            "connection to client timed out while waiting for more data to arrive",
            HTTP_STATUS_CODE_408,
        )