"""An outgoing HTTP response."""

from __future__ import annotations

import re

from level2.headerfields import HeaderFieldOwner
from level2.httpdefs import (
    HEADER_FIELD_SEPARATOR,
    HEADER_TERMINATOR,
    HTTP_FIELD_NAME_CONNECTION,
    HTTP_FIELD_NAME_CONTENT_LENGTH,
    HTTP_FIELD_NAME_CONTENT_TYPE,
    HTTP_FIELD_NAME_SERVER,
    HTTP_FIELD_VALUE_CLOSE,
    HTTP_FIELD_VALUE_SERVER,
    HTTP_PROTOCOL_VERSION,
    HTTP_STATUS_CODE_200,
    LINE_TERMINATOR,
    MIMETYPE_TEXT_PLAIN_UTF8,
)
from level2.logger import get_logger

_UNSIGNED_PREFIX = re.compile(r"\s*\+?(\d+)")


class HttpResponse(HeaderFieldOwner):
    """Status, header fields and payload of a response.

    A new response is ``200 OK`` with the status line as payload. Setting a
    status that is not a 2xx one replaces the payload by the status line.
    """

    def __init__(self) -> None:
        super().__init__()
        self.payload: bytes | None = None
        self.status_code = ""
        self.protocol = HTTP_PROTOCOL_VERSION
        self.set_status_code(HTTP_STATUS_CODE_200)
        self.add_header_field(HTTP_FIELD_NAME_CONNECTION, HTTP_FIELD_VALUE_CLOSE)
        self.add_header_field(HTTP_FIELD_NAME_CONTENT_TYPE, MIMETYPE_TEXT_PLAIN_UTF8)
        self.add_header_field(HTTP_FIELD_NAME_SERVER, HTTP_FIELD_VALUE_SERVER)

    def set_status_code(self, status: str) -> None:
        self.status_code = status
        if self.payload is None or not status.startswith("2"):
            self.set_payload(status)

    def header(self) -> str:
        """Return the status line and header fields, ending with a blank line."""
        lines = [f"{HTTP_PROTOCOL_VERSION} {self.status_code}{LINE_TERMINATOR}"]
        lines.extend(
            f"{name}{HEADER_FIELD_SEPARATOR}{value}{LINE_TERMINATOR}"
            for name, value in self.all_header_fields().items()
        )
        lines.append(HEADER_TERMINATOR)
        return "".join(lines)

    def set_payload(self, payload: str | bytes) -> None:
        """Set the body and its Content-Length; text ends at its first NUL."""
        if isinstance(payload, str):
            payload = payload.encode("utf-8").split(b"\0", 1)[0]
        self.payload = bytes(payload)
        self.add_header_field(HTTP_FIELD_NAME_CONTENT_LENGTH, str(len(self.payload)))

    def content_length(self) -> int:
        """Return the Content-Length field as a number, 0 if missing or invalid."""
        text = self.get_header_field(HTTP_FIELD_NAME_CONTENT_LENGTH)
        if text is None:
            text = "0"
        match = _UNSIGNED_PREFIX.match(text)
        if match is None:
            get_logger().error(
                f"failed converting Content-Length value '{text}' to numeric. "
                "Assuming Conent-Length is 0"
            )
            return 0
        return int(match.group(1))

    def message(self) -> bytes:
        """Return the complete response as sent on the wire."""
        length = self.content_length()
        body = self.payload[:length] if length > 0 and self.payload is not None else b""
        return self.header().encode("utf-8") + body