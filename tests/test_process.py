import os
import socket

import pytest

from bunyan_log import Level
from bunyan_log.process import LOG_LEVEL_ENV, ProcessFacts, default_level, process_facts

class TestProcessFacts:
    def test_values(self, fresh_process_cache):
        facts = process_facts()
        assert facts == ProcessFacts(hostname=socket.gethostname(), pid=os.getpid())

    def test_computed_once(self, fresh_process_cache):
        assert process_facts() is process_facts()

    def test_immutable(self):
        with pytest.raises(AttributeError):
            process_facts().pid = 1

class TestDefaultLevel:
    @pytest.mark.parametrize("value,expected", [("debug", Level.DEBUG), ("FATAL", Level.FATAL), ("nope", Level.INFO)])
    def test_from_env(self, fresh_process_cache, monkeypatch, value, expected):
        monkeypatch.setenv(LOG_LEVEL_ENV, value)
        assert default_level() is expected

    def test_absent_is_info(self, fresh_process_cache, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert default_level() is Level.INFO

    def test_read_once(self, fresh_process_cache, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "warn")
        assert default_level() is Level.WARN
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert default_level() is Level.WARN
