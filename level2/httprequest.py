"""An incoming HTTP request."""

from __future__ import annotations

import re

from level2.headerfields import HeaderFieldOwner
from level2.httpdefs import (
    HTTP_FIELD_NAME_CONTENT_LENGTH,
    KEY_VALUE_SEPARATOR,
    PATH_QUERY_SEPARATOR,
    QUERY_PARAM_SEPARATOR,
)
from level2.logger import get_logger

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class HttpRequest(HeaderFieldOwner):
    """Method, path, query parameters, header fields and body of a request.

    Setting ``path`` to a value with a query string splits the query off and
    records its ``key=value`` pairs as URL parameters.
    """

    def __init__(self, method: str = "", path: str = "") -> None:
        super().__init__()
        self.method = method
        self._path = ""
        self._url_params: list[tuple[str, str]] = []
        self.content: bytes | None = None
        if path:
            self.path = path

    @property
    def path(self) -> str:
        return self._path

    @path.setter
    def path(self, value: str) -> None:
        path, separator, query = value.partition(PATH_QUERY_SEPARATOR)
        self._path = path
        if separator:
            for param in query.split(QUERY_PARAM_SEPARATOR):
                key, found, param_value = param.partition(KEY_VALUE_SEPARATOR)
                if found:
                    self._url_params.append((key, param_value))

    def content_length(self) -> int | None:
        """Return the Content-Length field as a number, or None if missing or invalid."""
        text = self.get_header_field(HTTP_FIELD_NAME_CONTENT_LENGTH)
        if text is None:
            return None
        match = _INT_PREFIX.match(text)
        if match is None or not _INT32_MIN <= int(match.group(1)) <= _INT32_MAX:
            get_logger().error(
                f"failed to read Content-Length. Value '{text}' is invalid. "
                "Assuming no Content-Length has been sent by the client."
            )
            return None
        return int(match.group(1))

    def url_param_count(self) -> int:
        return len(self._url_params)

    def url_params(self, key: str) -> list[str]:
        """Return every value given for ``key``, in the order they appeared."""
        return [value for name, value in self._url_params if name == key]

    def all_url_params(self) -> list[tuple[str, str]]:
        """Return all parameters ordered by key, repeated keys in arrival order."""
        return sorted(self._url_params, key=lambda item: item[0])

    def has_payload(self) -> bool:
        return self.content is not None