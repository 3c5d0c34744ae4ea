"""Marshal wire-format codec core.

This package holds the tag vocabulary, the endian converter, the WireValue
union, and the encoder/decoder that work on it. It knows nothing about host
objects; see marshalwire.adapter for that translation.
"""

from __future__ import annotations

from .decoder import Unmarshaller, decode_wire
from .encoder import Marshaller, canonical_key, encode_wire
from .endian import EndianCodec
from .tags import UNSUPPORTED_TAGS, Tag

__all__ = [
    "encode_wire",
    "decode_wire",
    "Marshaller",
    "Unmarshaller",
    "EndianCodec",
    "Tag",
    "UNSUPPORTED_TAGS",
    "canonical_key",
]
