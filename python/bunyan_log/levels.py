# Severity model: bunyan level weights and the gating rule.

from __future__ import annotations
from enum import IntEnum
from typing import Optional, Union

class Level(IntEnum):
    DEBUG = 20
    INFO = 30
    WARN = 40
    ERROR = 50
    FATAL = 60

LevelLike = Union[Level, int]

_TOKENS = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "error": Level.ERROR,
    "fatal": Level.FATAL,
}

def enabled(level: LevelLike, threshold: LevelLike) -> bool:
    """True when a record at `level` passes a logger configured at `threshold`."""
    return int(level) >= int(threshold)

def parse_level(value: Optional[str]) -> Level:
    """Map a config token to a Level. Unknown or missing tokens give INFO."""
    if value is None:
        return Level.INFO
    return _TOKENS.get(value.strip().lower(), Level.INFO)
