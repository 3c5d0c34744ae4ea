"""marshalwire: Marshal wire-format codec

A Python library that reads and writes the compact, self-describing binary
format produced by Python's marshal module (the subset covering None,
booleans, 32-bit integers, doubles, byte and text strings, lists, tuples and
dicts). Streams from other producers are accepted too, including interned
strings and string back-references, which this encoder never emits.

Key Features:
- Deterministic output: mapping keys are written in sorted byte order
- Explicit little-endian wire layout, independent of the host
- Unimplemented wire types decode to a placeholder instead of failing
- Hard errors for truncated data and bad back-references

Quick Start:
    >>> from marshalwire import decode, encode
    >>> data = encode({"depth": 1500, "name": "auv-1", "tags": [b"x", 2.5]})
    >>> decode(data)
    {'depth': 1500, 'name': 'auv-1', 'tags': [b'x', 2.5]}
"""

from __future__ import annotations

from .adapter import UNSUPPORTED, UnsupportedType, from_wire, to_wire
from .api import Codec, decode, encode, iter_decode
from .codec import EndianCodec, Marshaller, Tag, Unmarshaller, decode_wire, encode_wire
from .config import CodecConfig
from .exceptions import (
    CyclicValueError,
    DecodeError,
    EncodeError,
    InvalidStringReferenceError,
    InvalidUnicodeError,
    LimitExceededError,
    MarshalWireError,
    TruncatedError,
    UnhashableKeyError,
    UnsupportedInt64RangeError,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "iter_decode",
    "Codec",
    "CodecConfig",
    "UNSUPPORTED",
    "UnsupportedType",
    # Wire-level API
    "encode_wire",
    "decode_wire",
    "to_wire",
    "from_wire",
    "Marshaller",
    "Unmarshaller",
    "EndianCodec",
    "Tag",
    # Exceptions
    "MarshalWireError",
    "EncodeError",
    "CyclicValueError",
    "DecodeError",
    "TruncatedError",
    "InvalidStringReferenceError",
    "UnsupportedInt64RangeError",
    "InvalidUnicodeError",
    "LimitExceededError",
    "UnhashableKeyError",
    # Version
    "__version__",
]
