"""Host-independent values handled by the encoder and decoder.

WireValue is a closed union: the boundary adapter builds these once from
host objects, and the codec only ever dispatches on these classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Null:
    """Absent value (wire NONE/NULL)."""


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Int32:
    """Signed integer that fits in 32 bits."""

    value: int


@dataclass(frozen=True)
class Float64:
    value: float


@dataclass(frozen=True)
class ByteString:
    value: bytes


@dataclass(frozen=True)
class UnicodeString:
    value: str


@dataclass(frozen=True)
class Sequence:
    """Ordered items; LIST and TUPLE both decode to this."""

    items: Tuple["WireValue", ...] = ()


@dataclass(frozen=True)
class Mapping:
    """Key/value pairs in the order they were produced or read."""

    pairs: Tuple[Tuple["WireValue", "WireValue"], ...] = ()


@dataclass(frozen=True)
class Unsupported:
    """Placeholder for a well-formed tag the codec does not implement.

    Attributes:
        tag: Raw tag byte that produced the placeholder (0 when built by hand)
    """

    tag: int = 0


WireValue = Union[
    Null, Bool, Int32, Float64, ByteString, UnicodeString, Sequence, Mapping, Unsupported
]

NULL = Null()
TRUE = Bool(True)
FALSE = Bool(False)
