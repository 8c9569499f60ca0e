"""Places log messages can be written to."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Mapping

try:
    import syslog
except ImportError:  # not available on every platform
    syslog = None

from level2.loglevels import LogLevel, log_level_name

DESTINATION_TYPE_STDOUT = "stdout"
DESTINATION_TYPE_STDERR = "stderr"
DESTINATION_TYPE_FILE = "file"
DESTINATION_TYPE_SYSLOG = "syslog"


class LoggingDestination(ABC):
    """Receives every message the logger lets through."""

    @abstractmethod
    def log(self, level: LogLevel, message: str, timestamp: str) -> None:
        """Write one message."""


class StdOutDestination(LoggingDestination):
    """Writes formatted messages to standard output."""

    def format_message(self, level: LogLevel, message: str, timestamp: str) -> str:
        name = log_level_name(level) or ""
        return f"[{name}] [{timestamp}] {message}"

    def log(self, level: LogLevel, message: str, timestamp: str) -> None:
        print(self.format_message(level, message, timestamp), file=sys.stdout, flush=True)


class StdErrDestination(StdOutDestination):
    """Writes formatted messages to standard error."""

    def log(self, level: LogLevel, message: str, timestamp: str) -> None:
        print(self.format_message(level, message, timestamp), file=sys.stderr, flush=True)


class FileDestination(StdOutDestination):
    """Appends formatted messages to a file, opening it for each message."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name

    def log(self, level: LogLevel, message: str, timestamp: str) -> None:
        try:
            with open(self.file_name, "a", encoding="utf-8") as logfile:
                logfile.write(self.format_message(level, message, timestamp) + "\n")
        except OSError:
            print(f"Failed to open logfile at: {self.file_name}", file=sys.stderr)


class SyslogDestination(LoggingDestination):
    """Sends messages to the system log under an application name."""

    def __init__(self, application_name: str) -> None:
        if syslog is None:
            raise OSError("syslog is not available on this platform")
        self.ident = application_name
        syslog.openlog(application_name, syslog.LOG_PID | syslog.LOG_CONS, syslog.LOG_USER)

    def log(self, level: LogLevel, message: str, timestamp: str) -> None:
        priorities = {
            LogLevel.DEBUG: syslog.LOG_DEBUG,
            LogLevel.ERROR: syslog.LOG_ERR,
            LogLevel.FATAL: syslog.LOG_CRIT,
            LogLevel.INFO: syslog.LOG_INFO,
            LogLevel.TRACE: syslog.LOG_DEBUG,
            LogLevel.WARN: syslog.LOG_WARNING,
        }
        priority = priorities.get(level)
        if priority is not None:
            syslog.syslog(priority, message)

    def close(self) -> None:
        syslog.closelog()


def create_destination(params: Mapping[str, str]) -> LoggingDestination | None:
    """Build a destination from a parameter map, or None if it is incomplete."""
    kind = params.get("type")
    if kind == DESTINATION_TYPE_STDOUT:
        return StdOutDestination()
    if kind == DESTINATION_TYPE_STDERR:
        return StdErrDestination()
    if kind == DESTINATION_TYPE_FILE and "fileName" in params:
        return FileDestination(params["fileName"])
    if kind == DESTINATION_TYPE_SYSLOG and "applicationName" in params:
        return SyslogDestination(params["applicationName"])
    return None