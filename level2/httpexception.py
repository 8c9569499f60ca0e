"""Error raised while handling an HTTP exchange."""

from __future__ import annotations


class HttpException(Exception):
    """An HTTP failure carrying the status line the server should answer with."""

    def __init__(self, message: str, http_return_code: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.http_return_code = http_return_code

    def has_http_return_code(self) -> bool:
        """Return True if a status code was suggested."""
        return bool(self.http_return_code)