"""Marshal encoder.

This module provides the Marshaller, a growable output buffer with one write
method per wire construct, and encode(), which walks a WireValue tree and
writes it through a Marshaller.

The encoder never interns strings and never emits INTERNED or STRINGREF
tags: every string is written in full.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple, Type

from .endian import NATIVE, EndianCodec
from .tags import INT32_MAX, INT32_MIN, Tag
from .values import (
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


class Marshaller:
    """Appends wire-format values to an in-memory buffer.

    Containers are written as a header followed by their members:

    - list/tuple: ``write_list_header(n)`` then n values
    - dict: ``write_dict_begin()``, alternating keys and values, ``write_dict_end()``

    Example:
        >>> m = Marshaller()
        >>> m.write_list_header(2)
        >>> m.write_int(1)
        >>> m.write_unicode("a")
        >>> m.getvalue()
        b'[\\x02\\x00\\x00\\x00i\\x01\\x00\\x00\\x00u\\x01\\x00\\x00\\x00a'
    """

    def __init__(self, endian: EndianCodec = NATIVE) -> None:
        self._buffer = bytearray()
        self._endian = endian

    def _write_tag(self, tag: Tag) -> None:
        self._buffer.append(tag)

    def _write_int32(self, value: int) -> None:
        self._buffer += self._endian.pack_int32(value)

    def _write_sized(self, tag: Tag, data: bytes) -> None:
        self._write_tag(tag)
        self._write_int32(len(data))
        self._buffer += data

    def write_none(self) -> None:
        self._write_tag(Tag.NONE)

    def write_bool(self, value: bool) -> None:
        self._write_tag(Tag.TRUE if value else Tag.FALSE)

    def write_int(self, value: int) -> None:
        """Write a 32-bit signed integer.

        Raises:
            ValueError: If value is outside the int32 range
        """
        if value < INT32_MIN or value > INT32_MAX:
            raise ValueError(f"write_int requires a 32-bit value, got {value}")
        self._write_tag(Tag.INT)
        self._write_int32(value)

    def write_double(self, value: float) -> None:
        self._write_tag(Tag.BINARY_FLOAT)
        self._buffer += self._endian.pack_float64(value)

    def write_bytes(self, data: bytes) -> None:
        """Write a byte string (STRING tag)."""
        self._write_sized(Tag.STRING, bytes(data))

    def write_unicode(self, text: str) -> None:
        """Write text as UTF-8 (UNICODE tag)."""
        self._write_sized(Tag.UNICODE, text.encode("utf-8", "surrogatepass"))

    def write_list_header(self, size: int) -> None:
        self._write_tag(Tag.LIST)
        self._write_int32(size)

    def write_tuple_header(self, size: int) -> None:
        self._write_tag(Tag.TUPLE)
        self._write_int32(size)

    def write_dict_begin(self) -> None:
        self._write_tag(Tag.DICT)

    def write_dict_end(self) -> None:
        self._write_tag(Tag.NULL)

    def append(self, other: Marshaller) -> None:
        """Append everything another Marshaller has written."""
        self._buffer += other._buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buffer)


def canonical_key(key: WireValue) -> bytes:
    """Byte form of a mapping key used to order keys on encode.

    Text keys compare by their UTF-8 bytes, byte keys by themselves, and any
    other key by the UTF-8 bytes of its textual rendering.
    """
    if isinstance(key, UnicodeString):
        return key.value.encode("utf-8", "surrogatepass")
    if isinstance(key, ByteString):
        return key.value
    if isinstance(key, Null):
        return b"None"
    if isinstance(key, (Bool, Int32, Float64)):
        return str(key.value).encode("utf-8")
    if isinstance(key, Sequence):
        return b"[" + b",".join(canonical_key(item) for item in key.items) + b"]"
    return b""


def sorted_pairs(pairs: Tuple[Tuple[WireValue, WireValue], ...]) -> List[Tuple[WireValue, WireValue]]:
    """Order mapping pairs by canonical key, computing each key's form once."""
    decorated = [(canonical_key(key), index, key, value) for index, (key, value) in enumerate(pairs)]
    decorated.sort(key=lambda entry: (entry[0], entry[1]))
    return [(key, value) for _, _, key, value in decorated]


class _TreeWriter:
    """Writes a WireValue tree through a Marshaller."""

    def __init__(self, marshaller: Marshaller, sort_keys: bool) -> None:
        self._out = marshaller
        self._sort_keys = sort_keys
        self._dispatch: Dict[Type[object], Callable[[WireValue], None]] = {
            Null: self._null,
            Unsupported: self._null,
            Bool: self._bool,
            Int32: self._int,
            Float64: self._float,
            ByteString: self._bytes,
            UnicodeString: self._unicode,
            Sequence: self._sequence,
            Mapping: self._mapping,
        }

    def write(self, value: WireValue) -> None:
        handler = self._dispatch.get(type(value), self._null)
        handler(value)

    def _null(self, value: WireValue) -> None:
        self._out.write_none()

    def _bool(self, value: Bool) -> None:
        self._out.write_bool(value.value)

    def _int(self, value: Int32) -> None:
        self._out.write_int(value.value)

    def _float(self, value: Float64) -> None:
        self._out.write_double(value.value)

    def _bytes(self, value: ByteString) -> None:
        self._out.write_bytes(value.value)

    def _unicode(self, value: UnicodeString) -> None:
        self._out.write_unicode(value.value)

    def _sequence(self, value: Sequence) -> None:
        self._out.write_list_header(len(value.items))
        for item in value.items:
            self.write(item)

    def _mapping(self, value: Mapping) -> None:
        pairs = sorted_pairs(value.pairs) if self._sort_keys else value.pairs
        self._out.write_dict_begin()
        for key, item in pairs:
            self.write(key)
            self.write(item)
        self._out.write_dict_end()


def encode_wire(value: WireValue, endian: EndianCodec = NATIVE, sort_keys: bool = True) -> bytes:
    """Encode a WireValue tree to marshal bytes.

    Every WireValue has an encoding, so this never fails; unknown values and
    Unsupported placeholders are written as NONE.

    Args:
        value: Tree to encode
        endian: Byte-order converter (see EndianCodec)
        sort_keys: Write mapping keys in ascending canonical byte order

    Returns:
        Encoded bytes

    Example:
        >>> encode_wire(Mapping(((UnicodeString("b"), Int32(1)), (UnicodeString("a"), Int32(2)))))[:7]
        b'{u\\x01\\x00\\x00\\x00a'
    """
    marshaller = Marshaller(endian)
    _TreeWriter(marshaller, sort_keys).write(value)
    return marshaller.getvalue()
