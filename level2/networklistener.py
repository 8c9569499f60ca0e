"""Common base of all listeners that feed received data into pipelines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import Any

from level2.logger import get_logger


class ListenerProcessingMode(Enum):
    """How a listener hands received data on."""

    NOT_SET = "not_set"
    SYNCHRONOUS = "synchronous"
    ASYNCHRONOUS = "asynchronous"


def _convert(value: Any, default: Any) -> Any:
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise TypeError(f"type must be boolean, but is {type(value).__name__}")
        return value
    if isinstance(default, (int, float)):
        if not isinstance(value, (int, float)):
            raise TypeError(f"type must be number, but is {type(value).__name__}")
        return type(default)(value)
    if isinstance(default, str):
        if not isinstance(value, str):
            raise TypeError(f"type must be string, but is {type(value).__name__}")
        return value
    return value


def config_value(config: Mapping[str, Any] | None, field: str, default: Any) -> Any:
    """Return ``config[field]`` converted to the type of ``default``.

    A missing field, a missing configuration or a value of the wrong type is
    logged as an error and ``default`` is returned instead.
    """
    try:
        if config is None:
            raise KeyError(field)
        return _convert(config[field], default)
    except (KeyError, TypeError, ValueError) as exc:
        get_logger().error(
            f"Construction of NetworkListener failed {exc} "
            f"Make sure field '{field}' is contained in the json structure! "
            f"Using default value: '{default}'"
        )
        return default


class NetworkListener(ABC):
    """A source of incoming data.

    A listener is wired either to a FIFO (asynchronous processing, data is
    enqueued) or to a processor (synchronous processing, data is executed
    right away). The FIFO needs ``enqueue`` and ``dequeue``; the processor
    needs ``execute``.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self.processing_mode = ListenerProcessingMode.NOT_SET
        self.pipeline_fifo: Any = None
        self.pipeline_processor: Any = None
        self.init_complete = False
        self._listening = False
        self.name: str = config_value(config, "name", "") if config is not None else ""

    @property
    def is_listening(self) -> bool:
        return self._listening

    def _set_listening(self, value: bool) -> None:
        self._listening = value

    def init_fifo(self, fifo: Any) -> None:
        """Hand received data to ``fifo`` for later processing."""
        self.pipeline_fifo = fifo
        self.processing_mode = ListenerProcessingMode.ASYNCHRONOUS

    def init_processor(self, processor: Any) -> None:
        """Hand received data straight to ``processor``."""
        self.pipeline_processor = processor
        self.processing_mode = ListenerProcessingMode.SYNCHRONOUS

    @abstractmethod
    def start_listening(self) -> None:
        """Begin accepting incoming data."""

    def last_message(self) -> Any:
        """Take the oldest queued item from the FIFO, or None when not queueing."""
        if (
            self.pipeline_fifo is not None
            and self.processing_mode is ListenerProcessingMode.ASYNCHRONOUS
        ):
            return self.pipeline_fifo.dequeue()
        return None