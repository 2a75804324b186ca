import pytest

from bunyan_log import BufferSink, Level, Logger
from bunyan_log.process import default_level, process_facts

@pytest.fixture()
def sink():
    return BufferSink()

@pytest.fixture()
def make_logger(sink):
    def _make(name="test", min_level=Level.DEBUG):
        return Logger(name, min_level=min_level, sink=sink)
    return _make

@pytest.fixture()
def fresh_process_cache():
    default_level.cache_clear()
    process_facts.cache_clear()
    yield
    default_level.cache_clear()
    process_facts.cache_clear()
