from collections import deque

import pytest

from level2.destinations import StdOutDestination
from level2.logger import get_logger
from level2.loglevels import LogLevel
from level2.networklistener import ListenerProcessingMode, NetworkListener, config_value


class DummyListener(NetworkListener):
    def start_listening(self):
        self._set_listening(True)


class FakeFifo:
    def __init__(self, items=()):
        self._items = deque(items)

    def enqueue(self, item):
        self._items.append(item)

    def dequeue(self):
        return self._items.popleft() if self._items else None


class FakeProcessor:
    def __init__(self):
        self.executed = []

    def execute(self, data):
        self.executed.append(data)


def test_config_value_returns_present_value():
    assert config_value({"port": 8080}, "port", -1) == 8080
    assert config_value({"name": "web"}, "name", "") == "web"


def test_config_value_missing_field_gives_default():
    assert config_value({}, "maxClients", 10) == 10


def test_config_value_without_config_gives_default():
    assert config_value(None, "port", -1) == -1


def test_config_value_wrong_type_gives_default():
    assert config_value({"port": "eighty"}, "port", -1) == -1
    assert config_value({"name": 5}, "name", "") == ""
    assert config_value({"port": None}, "port", -1) == -1


def test_config_value_converts_number_to_default_type():
    result = config_value({"port": 81.0}, "port", -1)
    assert result == 81
    assert isinstance(result, int)


def test_config_value_logs_missing_field(capsys):
    logger = get_logger()
    logger.set_destination(StdOutDestination())
    logger.set_max_log_level(LogLevel.TRACE)
    config_value({}, "port", -1)
    out = capsys.readouterr().out
    assert "Make sure field 'port' is contained in the json structure!" in out
    assert "Using default value: '-1'" in out


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        NetworkListener()


def test_name_is_read_from_config():
    config = {"name": "listener01"}
    assert DummyListener(config).name == "listener01"
    assert config_value(config, "name", "") == "listener01"
    assert DummyListener({}).name == ""
    assert DummyListener().name == ""


def test_new_listener_is_idle():
    listener = DummyListener()
    assert listener.processing_mode is ListenerProcessingMode.NOT_SET
    assert listener.is_listening is False
    assert listener.init_complete is False
    assert NetworkListener.last_message(listener) is None


def test_start_listening_sets_flag():
    listener = DummyListener()
    NetworkListener.init_fifo(listener, FakeFifo())
    listener.start_listening()
    assert listener.is_listening is True
    assert listener.processing_mode is ListenerProcessingMode.ASYNCHRONOUS


def test_init_fifo_switches_to_asynchronous():
    fifo = FakeFifo()
    listener = DummyListener()
    NetworkListener.init_fifo(listener, fifo)
    assert listener.processing_mode is ListenerProcessingMode.ASYNCHRONOUS
    assert listener.pipeline_fifo is fifo


def test_last_message_dequeues_from_fifo_in_order():
    listener = DummyListener()
    NetworkListener.init_fifo(listener, FakeFifo(["first", "second"]))
    assert NetworkListener.last_message(listener) == "first"
    assert NetworkListener.last_message(listener) == "second"
    assert NetworkListener.last_message(listener) is None


def test_last_message_without_fifo_is_none():
    listener = DummyListener()
    NetworkListener.init_fifo(listener, None)
    assert listener.processing_mode is ListenerProcessingMode.ASYNCHRONOUS
    assert NetworkListener.last_message(listener) is None


def test_init_processor_switches_to_synchronous():
    processor = FakeProcessor()
    listener = DummyListener()
    NetworkListener.init_processor(listener, processor)
    assert listener.processing_mode is ListenerProcessingMode.SYNCHRONOUS
    assert listener.pipeline_processor is processor


def test_synchronous_mode_does_not_read_fifo():
    listener = DummyListener()
    fifo = FakeFifo(["queued"])
    NetworkListener.init_fifo(listener, fifo)
    NetworkListener.init_processor(listener, FakeProcessor())
    assert NetworkListener.last_message(listener) is None
    assert fifo.dequeue() == "queued"