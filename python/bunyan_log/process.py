# Process-wide facts shared by every logger: hostname, pid and the default level.

from __future__ import annotations
import os, socket
from dataclasses import dataclass
from functools import lru_cache

from .levels import Level, parse_level

LOG_LEVEL_ENV = "LOG_LEVEL"

@dataclass(frozen=True)
class ProcessFacts:
    hostname: str
    pid: int

@lru_cache(maxsize=None)
def process_facts() -> ProcessFacts:
    """Computed once per process and read-only afterwards."""
    return ProcessFacts(hostname=socket.gethostname(), pid=os.getpid())

@lru_cache(maxsize=None)
def default_level() -> Level:
    """Threshold for loggers built without an explicit one, from $LOG_LEVEL (default info)."""
    return parse_level(os.environ.get(LOG_LEVEL_ENV))

# a forked child is a new process with its own pid
if hasattr(os, "register_at_fork"):
    os.register_at_fork(after_in_child=process_facts.cache_clear)
