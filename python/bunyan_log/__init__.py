__all__ = [
    "Level", "enabled", "parse_level",
    "Extras", "Pairs", "to_extras", "size_hint", "chain", "fields", "repr_fields",
    "Sink", "StdoutSink", "StreamSink", "BufferSink",
    "ProcessFacts", "process_facts", "default_level",
    "Logger", "LoggerLike", "create",
]
__version__ = "0.1.0"

from .levels import Level, enabled, parse_level
from .extras import Extras, Pairs, to_extras, size_hint, chain, fields, repr_fields
from .sinks import Sink, StdoutSink, StreamSink, BufferSink
from .process import ProcessFacts, process_facts, default_level
from .logger import Logger, LoggerLike, create
