"""One-byte type tags of the marshal wire format.

Every value on the wire starts with one of these bytes. Fixed-width payloads
are little-endian; strings and containers carry a 4-byte signed length.
"""

from __future__ import annotations

import enum


class Tag(enum.IntEnum):
    """Type tag byte values."""

    NULL = ord("0")  # also terminates a dict
    NONE = ord("N")
    FALSE = ord("F")
    TRUE = ord("T")
    STOPITER = ord("S")
    ELLIPSIS = ord(".")
    INT = ord("i")
    INT64 = ord("I")
    FLOAT = ord("f")  # legacy ASCII float
    BINARY_FLOAT = ord("g")
    COMPLEX = ord("x")
    LONG = ord("l")
    STRING = ord("s")
    INTERNED = ord("t")
    STRINGREF = ord("R")
    TUPLE = ord("(")
    LIST = ord("[")
    DICT = ord("{")
    CODE = ord("c")
    UNICODE = ord("u")
    UNKNOWN = ord("?")
    SET = ord("<")
    FROZENSET = ord(">")

    @property
    def byte(self) -> bytes:
        """The tag as a single byte."""
        return bytes((self.value,))


# Defined by the format but decoded to the unsupported placeholder.
UNSUPPORTED_TAGS = frozenset(
    {
        Tag.FLOAT,
        Tag.STOPITER,
        Tag.ELLIPSIS,
        Tag.COMPLEX,
        Tag.LONG,
        Tag.CODE,
        Tag.UNKNOWN,
        Tag.SET,
        Tag.FROZENSET,
    }
)

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def describe_tag(code: int) -> str:
    """Return a readable name for a raw tag byte, e.g. ``"SET ('<')"``."""
    try:
        name = Tag(code).name
    except ValueError:
        name = "UNRECOGNIZED"
    return f"{name} ({chr(code)!r})" if 0x20 <= code < 0x7F else f"{name} (0x{code:02x})"
