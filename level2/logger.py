"""Process-wide, thread-safe logger with pluggable destinations."""

from __future__ import annotations

import os
import sys
import threading

from level2.destinations import LoggingDestination, StdOutDestination
from level2.loglevels import MAX_LOG_LEVEL_ENV_VAR, LogLevel, parse_log_level
from level2.timeproviders import DefaultTimeProvider, TimeProvider


class Logger:
    """Sends messages at or below the maximum level to every destination.

    Use ``Logger.get_instance()`` or ``get_logger()`` for the shared instance.
    It starts at ``LogLevel.TRACE`` with one destination writing to stdout.
    The environment variable ``LEVEL2_MAX_LOG_LEVEL`` overrides the maximum
    level whenever a message is logged.
    """

    _instance: Logger | None = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._max_level = LogLevel.TRACE
        self._destinations: list[LoggingDestination] = [StdOutDestination()]
        self.time_provider: TimeProvider = DefaultTimeProvider()

    @classmethod
    def get_instance(cls) -> Logger:
        """Return the one shared logger."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def trace(self, message: str) -> None:
        self._log(LogLevel.TRACE, message)

    def debug(self, message: str) -> None:
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self._log(LogLevel.WARN, message)

    def error(self, message: str) -> None:
        self._log(LogLevel.ERROR, message)

    def fatal(self, message: str) -> None:
        self._log(LogLevel.FATAL, message)

    def remove_all_destinations(self) -> None:
        with self._lock:
            self._destinations.clear()

    @property
    def destination_count(self) -> int:
        with self._lock:
            return len(self._destinations)

    def add_destination(self, destination: LoggingDestination | None) -> None:
        """Add a destination; None is ignored."""
        if destination is None:
            return
        with self._lock:
            self._destinations.append(destination)

    def set_destination(self, destination: LoggingDestination) -> None:
        """Replace all destinations by ``destination``."""
        with self._lock:
            self._destinations = [destination]

    def set_max_log_level(self, level: LogLevel | str) -> None:
        """Set the most verbose level reported; unknown names are ignored."""
        if isinstance(level, str):
            parsed = parse_log_level(level)
            if parsed is None:
                return
            level = parsed
        with self._lock:
            self._max_level = LogLevel(level)

    @property
    def max_log_level(self) -> LogLevel:
        return self._max_level

    def _apply_environment_level(self) -> None:
        from_env = os.environ.get(MAX_LOG_LEVEL_ENV_VAR)
        if from_env is None:
            return
        level = parse_log_level(from_env)
        if level is None:
            print(
                "Warning: Unknown log level string found in environment: "
                f"{MAX_LOG_LEVEL_ENV_VAR} = {from_env}",
                file=sys.stderr,
            )
        else:
            self._max_level = level

    def _log(self, level: LogLevel, message: str) -> None:
        with self._lock:
            self._apply_environment_level()
            if level > self._max_level:
                return
            timestamp = self.time_provider.timestamp_now()
            for destination in self._destinations:
                destination.log(level, message, timestamp)


def get_logger() -> Logger:
    """Return the shared logger."""
    return Logger.get_instance()