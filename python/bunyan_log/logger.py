# JSON-structured logging facade: one bunyan record per call, or nothing at all.

from __future__ import annotations
from typing import Any, Optional, Protocol

from .extras import to_extras
from .levels import Level, LevelLike, enabled
from .process import default_level, process_facts
from .record import assemble, serialize
from .sinks import Sink, StdoutSink

class LoggerLike(Protocol):
    def debug(self, extras: Any, event: str) -> None: ...
    def info(self, extras: Any, event: str) -> None: ...
    def warn(self, extras: Any, event: str) -> None: ...
    def error(self, extras: Any, event: str) -> None: ...
    def fatal(self, extras: Any, event: str) -> None: ...

class Logger:
    """A named logger writing bunyan records to its own sink.

    `event` is a static name for what happened, not a message template.
    Context goes in `extras` (a dict, Mapping, Pairs, None/() or any single value)::

        log = Logger("billing-client")
        log.info({"invoice": 42}, "invoice.sent")

    Construction is cheap but still better done once per module than per call.
    The level methods never raise; serialization and I/O failures drop the record.
    """

    def __init__(self, name: str, min_level: Optional[LevelLike] = None, sink: Optional[Sink] = None):
        if sink is not None and not isinstance(sink, Sink):
            raise TypeError(f"sink must be a Sink, got {type(sink).__name__}")
        if min_level is not None and (isinstance(min_level, bool) or not isinstance(min_level, int)):
            raise TypeError(f"min_level must be a Level or int, got {type(min_level).__name__}")
        self._name = str(name)
        self._min_level = default_level() if min_level is None else min_level
        self._sink = StdoutSink() if sink is None else sink

    @property
    def name(self) -> str:
        return self._name

    @property
    def min_level(self) -> LevelLike:
        return self._min_level

    @property
    def sink(self) -> Sink:
        return self._sink

    def is_enabled(self, level: LevelLike) -> bool:
        return enabled(level, self._min_level)

    def debug(self, extras: Any, event: str) -> None:
        if self._min_level > Level.DEBUG: return
        self._emit(Level.DEBUG, extras, event)

    def info(self, extras: Any, event: str) -> None:
        if self._min_level > Level.INFO: return
        self._emit(Level.INFO, extras, event)

    def warn(self, extras: Any, event: str) -> None:
        if self._min_level > Level.WARN: return
        self._emit(Level.WARN, extras, event)

    def error(self, extras: Any, event: str) -> None:
        if self._min_level > Level.ERROR: return
        self._emit(Level.ERROR, extras, event)

    def fatal(self, extras: Any, event: str) -> None:
        if self._min_level > Level.FATAL: return
        self._emit(Level.FATAL, extras, event)

    def log(self, level: LevelLike, extras: Any, event: str) -> None:
        """Emit at an arbitrary numeric level, gated like the named methods."""
        if not enabled(level, self._min_level):
            return
        self._emit(level, extras, event)

    def _emit(self, level: LevelLike, extras: Any, event: str) -> None:
        try:
            rec = assemble(level, event, self._name, to_extras(extras), process_facts())
            line = serialize(rec)
        except (TypeError, ValueError, RecursionError):
            return
        try:
            self._sink.write(line)
        except (OSError, ValueError):
            return

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, min_level={self._min_level!r})"

def create(name: str) -> Logger:
    """Logger at the process default level ($LOG_LEVEL), writing to stdout."""
    return Logger(name)
