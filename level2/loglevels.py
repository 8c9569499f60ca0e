"""Log levels and their textual names."""

from __future__ import annotations

from enum import IntEnum

MAX_LOG_LEVEL_ENV_VAR = "LEVEL2_MAX_LOG_LEVEL"


class LogLevel(IntEnum):
    """Severity of a log message; a lower value is more severe."""

    NO_LOGGING = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


_LEVEL_NAMES = {
    LogLevel.NO_LOGGING: "NO_LOGGING",
    LogLevel.FATAL: "FATAL",
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARN",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.TRACE: "TRACE",
}

_LEVELS_BY_NAME = {name: level for level, name in _LEVEL_NAMES.items()}


def parse_log_level(text: str) -> LogLevel | None:
    """Return the level whose name is exactly ``text``, or None."""
    return _LEVELS_BY_NAME.get(text)


def log_level_name(level: int) -> str | None:
    """Return the name of ``level``, or None if it is not a known level."""
    try:
        return _LEVEL_NAMES[LogLevel(level)]
    except ValueError:
        return None