"""Sources of timestamps for log lines."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class TimeProvider(ABC):
    """Supplies the timestamp written with each log message."""

    @abstractmethod
    def timestamp_now(self) -> str:
        """Return the current time as text."""


class DefaultTimeProvider(TimeProvider):
    """Local time formatted as ``YYYY-MM-DD HH:MM:SS``."""

    def timestamp_now(self) -> str:
        return time.strftime(TIMESTAMP_FORMAT, time.localtime())