"""Translation between host Python objects and WireValue trees.

to_wire() is the only place host objects are inspected by type; the encoder
works on its output. from_wire() turns decoded trees back into plain Python
objects.
"""

from __future__ import annotations

import collections.abc
import math
from typing import Any, Callable, Dict, List, Set

from pydantic import BaseModel

from .codec.tags import INT32_MAX, INT32_MIN
from .codec.values import (
    FALSE,
    NULL,
    TRUE,
    Bool,
    ByteString,
    Float64,
    Int32,
    Mapping,
    Null,
    Sequence,
    UnicodeString,
    Unsupported,
    WireValue,
)
from .exceptions import CyclicValueError, EncodeError, UnhashableKeyError


class UnsupportedType:
    """Type of UNSUPPORTED, the host-side stand-in for unimplemented wire tags."""

    _instance: UnsupportedType | None = None

    def __new__(cls) -> UnsupportedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSUPPORTED"

    def __reduce__(self) -> str:
        return "UNSUPPORTED"


UNSUPPORTED = UnsupportedType()


def _number(value: int | float) -> WireValue:
    """Int32 for exact 32-bit integers, Float64 for everything else."""
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return Int32(value)
        try:
            return Float64(float(value))
        except OverflowError:
            return Float64(math.inf if value > 0 else -math.inf)
    if math.isfinite(value) and value == int(value) and INT32_MIN <= value <= INT32_MAX:
        return Int32(int(value))
    return Float64(value)


class _WireBuilder:
    def __init__(self, max_depth: int) -> None:
        self._max_depth = max_depth
        self._active: Set[int] = set()

    def build(self, obj: Any, depth: int = 0) -> WireValue:
        if obj is None:
            return NULL
        if isinstance(obj, bool):
            return TRUE if obj else FALSE
        if isinstance(obj, (int, float)):
            return _number(obj)
        if isinstance(obj, str):
            return UnicodeString(obj)
        if isinstance(obj, (bytes, bytearray, memoryview)):
            return ByteString(bytes(obj))
        if isinstance(obj, BaseModel):
            return self._container(obj, depth, lambda: self._mapping(obj.model_dump(), depth))
        if isinstance(obj, collections.abc.Mapping):
            return self._container(obj, depth, lambda: self._mapping(obj, depth))
        if isinstance(obj, (list, tuple)):
            return self._container(
                obj, depth, lambda: Sequence(tuple(self.build(item, depth + 1) for item in obj))
            )
        return NULL

    def _mapping(self, obj: collections.abc.Mapping, depth: int) -> Mapping:
        return Mapping(
            tuple((self.build(key, depth + 1), self.build(value, depth + 1)) for key, value in obj.items())
        )

    def _container(self, obj: Any, depth: int, build: Callable[[], WireValue]) -> WireValue:
        if depth >= self._max_depth:
            raise EncodeError(f"Nesting exceeds max_depth={self._max_depth}")
        marker = id(obj)
        if marker in self._active:
            raise CyclicValueError(f"Cyclic reference to {type(obj).__name__} at depth {depth}")
        self._active.add(marker)
        try:
            return build()
        finally:
            self._active.discard(marker)


def to_wire(obj: Any, max_depth: int = 100) -> WireValue:
    """Convert a host object to a WireValue tree.

    Args:
        obj: None, bool, int, float, str, bytes-like, list, tuple, mapping,
            or a Pydantic model; anything else becomes Null
        max_depth: Maximum container nesting

    Raises:
        CyclicValueError: If a container contains itself
        EncodeError: If nesting exceeds max_depth
    """
    return _WireBuilder(max_depth).build(obj)


def _hashable(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    if isinstance(value, dict):
        raise UnhashableKeyError("Mapping key decoded to a dict")
    return value


def from_wire(value: WireValue) -> Any:
    """Convert a decoded WireValue tree to plain Python objects.

    Sequences become lists, mappings become dicts (a repeated key keeps its
    last value; list keys become tuples), Unsupported becomes UNSUPPORTED.

    Raises:
        UnhashableKeyError: If a mapping key is itself a mapping
    """
    if isinstance(value, Null):
        return None
    if isinstance(value, (Bool, Int32, Float64, ByteString, UnicodeString)):
        return value.value
    if isinstance(value, Sequence):
        items: List[Any] = [from_wire(item) for item in value.items]
        return items
    if isinstance(value, Mapping):
        result: Dict[Any, Any] = {}
        for key, item in value.pairs:
            result[_hashable(from_wire(key))] = from_wire(item)
        return result
    if isinstance(value, Unsupported):
        return UNSUPPORTED
    return None
