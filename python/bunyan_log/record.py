# Record assembly: the bunyan core fields merged with caller extras, one JSON line out.
# https://github.com/trentm/node-bunyan#core-fields

from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any, Dict, Iterable

from .extras import Pair
from .levels import LevelLike
from .process import ProcessFacts

SCHEMA_VERSION = 0
RESERVED_FIELDS = ("time", "level", "msg", "name", "hostname", "pid", "v")

def now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")

def assemble(level: LevelLike, event: str, name: str, pairs: Iterable[Pair], facts: ProcessFacts) -> Dict[str, Any]:
    """Build the record for one call.

    Merge order decides which value survives a key collision (last write wins):

      1. time, level, msg, name
      2. the extras pairs, in order; these may replace level, msg and name
      3. time (same instant as step 1), hostname, pid, v; never replaced by extras

    `event` goes into `msg` untouched; it is never treated as a format string.
    Extras keys must be str; anything else raises TypeError.
    """
    now = now_rfc3339()
    rec: Dict[str, Any] = {"time": now, "level": int(level), "msg": event, "name": name}
    for key, value in pairs:
        # json.dumps would turn 1 and "1" into two members with the same name
        if not isinstance(key, str):
            raise TypeError(f"extras keys must be str, got {type(key).__name__}")
        rec[key] = value
    rec["time"] = now
    rec["hostname"] = facts.hostname
    rec["pid"] = facts.pid
    rec["v"] = SCHEMA_VERSION
    return rec

def serialize(rec: Dict[str, Any]) -> bytes:
    """One compact JSON object plus a newline. Raises TypeError/ValueError for non-JSON values."""
    return (json.dumps(rec, separators=(",", ":"), ensure_ascii=False, allow_nan=False) + "\n").encode("utf-8")
