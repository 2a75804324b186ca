# Extras: normalize caller context into an ordered list of (field, value) pairs.
#
# Supported shapes:
#   dict              -> its items, insertion order
#   other Mapping     -> its items, order not guaranteed
#   Pairs             -> used verbatim, duplicates included
#   None / ()         -> nothing
#   Extras protocol   -> whatever its to_extras() returns
#   anything else     -> a single ("_", value) pair
#
# New shapes are added with `to_extras.register(SomeType)`.

from __future__ import annotations
import dataclasses
from collections.abc import Mapping
from functools import singledispatch
from typing import Any, Iterable, List, Optional, Protocol, Tuple, runtime_checkable

Pair = Tuple[str, Any]

WRAPPED_KEY = "_"

@runtime_checkable
class Extras(Protocol):
    def to_extras(self) -> List[Pair]: ...

class Pairs(list):
    """An explicit, ordered list of (key, value) pairs. Later duplicates win at merge time."""

    def __init__(self, items: Iterable[Pair] = ()):
        super().__init__(items)

    def to_extras(self) -> List[Pair]:
        return [(k, v) for k, v in self]

    def size_hint(self) -> int:
        return len(self)

    def __repr__(self) -> str:
        return f"Pairs({list.__repr__(self)})"

@singledispatch
def to_extras(source: Any) -> List[Pair]:
    if isinstance(source, Extras):
        return source.to_extras()
    return [(WRAPPED_KEY, source)]

@to_extras.register(type(None))
def _(source: None) -> List[Pair]:
    return []

@to_extras.register(tuple)
def _(source: tuple) -> List[Pair]:
    # () is the unit value; any other tuple is a JSON array
    if not source:
        return []
    return [(WRAPPED_KEY, source)]

@to_extras.register(Mapping)
def _(source: Mapping) -> List[Pair]:
    return list(source.items())

@to_extras.register(dict)
def _(source: dict) -> List[Pair]:
    return list(source.items())

@singledispatch
def size_hint(source: Any) -> Optional[int]:
    """Advisory pair count for `source`; None when it is not cheap to know."""
    hint = getattr(source, "size_hint", None)
    if callable(hint):
        return hint()
    if isinstance(source, Extras):
        return None
    return 1

@size_hint.register(type(None))
def _(source: None) -> Optional[int]:
    return 0

@size_hint.register(tuple)
def _(source: tuple) -> Optional[int]:
    return 0 if not source else 1

@size_hint.register(Mapping)
def _(source: Mapping) -> Optional[int]:
    return len(source)

def chain(*sources: Any) -> Pairs:
    """Concatenate several extras sources; pairs from later sources override earlier ones."""
    return Pairs(pair for source in sources for pair in to_extras(source))

def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value

def fields(**values: Any) -> dict:
    """Snapshot named values into a JSON-object extras value.

    Dataclass instances are expanded to plain dicts so they serialize::

        log.info(fields(order_id=order_id, cfg=cfg), "order.accepted")
    """
    return {k: _plain(v) for k, v in values.items()}

def repr_fields(**values: Any) -> dict:
    """Like fields(), but every value is replaced by its repr()."""
    return {k: repr(v) for k, v in values.items()}
