"""Storage for HTTP header fields."""

from __future__ import annotations

from level2.logger import get_logger


class HeaderFieldOwner:
    """Holds header fields by name; adding a name again replaces its value."""

    def __init__(self) -> None:
        self._header_fields: dict[str, str] = {}

    def get_header_field(self, name: str) -> str | None:
        """Return the value of field ``name``, or None if it is absent."""
        return self._header_fields.get(name)

    def add_header_field(self, name: str, value: str) -> None:
        """Set field ``name`` to ``value``."""
        get_logger().trace(f"HeaderFieldOwner - adding header field: {name}: {value}")
        self._header_fields[name] = value

    def all_header_fields(self) -> dict[str, str]:
        """Return a copy of all fields, ordered by name."""
        return dict(sorted(self._header_fields.items()))