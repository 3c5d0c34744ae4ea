"""Marshal decoder.

This module provides the Unmarshaller, a recursive-descent parser over a
ByteCursor, and decode_wire(), which parses one value from a buffer.

Tags the format defines but this codec does not implement (sets, code
objects, complex numbers, arbitrary-precision integers, ...) decode to an
Unsupported placeholder instead of failing, so one such value does not abort
its siblings. Malformed lengths, bad string references and out-of-range
64-bit integers are hard errors that abort the whole decode.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Dict, List, Optional, Tuple

from ..exceptions import (
    InvalidStringReferenceError,
    InvalidUnicodeError,
    LimitExceededError,
    TruncatedError,
    UnsupportedInt64RangeError,
)
from .cursor import ByteCursor
from .endian import NATIVE, EndianCodec
from .tags import UNSUPPORTED_TAGS, Tag, describe_tag
from .values import (
    FALSE,
    NULL,
    TRUE,
    ByteString,
    Float64,
    Int32,
    Mapping,
    Sequence,
    UnicodeString,
    Unsupported,
    WireValue,
)

logger = logging.getLogger("marshalwire.codec.decoder")


class Unmarshaller:
    """Parses wire values from a byte buffer.

    One Unmarshaller owns one cursor and one interning table. The table is
    append-only and indices are assigned in encounter order from 0; call
    reset_strings() between independent top-level values.

    Attributes:
        unsupported: Count of placeholder substitutions per raw tag byte
    """

    def __init__(
        self,
        data: bytes,
        endian: EndianCodec = NATIVE,
        max_depth: int = 100,
        max_length: Optional[int] = None,
    ) -> None:
        self._cursor = ByteCursor(data, endian)
        self._strings: List[bytes] = []
        self._max_depth = max_depth
        self._max_length = max_length
        self._depth = 0
        self.unsupported: Counter[int] = Counter()
        self._dispatch: Dict[int, Callable[[], WireValue]] = {
            Tag.NULL: lambda: NULL,
            Tag.NONE: lambda: NULL,
            Tag.FALSE: lambda: FALSE,
            Tag.TRUE: lambda: TRUE,
            Tag.INT: self._parse_int32,
            Tag.INT64: self._parse_int64,
            Tag.BINARY_FLOAT: self._parse_binary_float,
            Tag.STRING: self._parse_byte_string,
            Tag.UNICODE: self._parse_unicode,
            Tag.INTERNED: self._parse_interned,
            Tag.STRINGREF: self._parse_string_ref,
            Tag.TUPLE: self._parse_list,
            Tag.LIST: self._parse_list,
            Tag.DICT: self._parse_dict,
        }

    @property
    def offset(self) -> int:
        """Bytes consumed so far."""
        return self._cursor.position()

    def at_end(self) -> bool:
        return self._cursor.remaining() == 0

    @property
    def strings(self) -> Tuple[bytes, ...]:
        """Snapshot of the interning table."""
        return tuple(self._strings)

    def reset_strings(self) -> None:
        self._strings = []

    def parse(self) -> WireValue:
        """Parse one value at the cursor.

        Raises:
            TruncatedError: If the buffer ends before the value does
            InvalidStringReferenceError: On an out-of-range string reference
            UnsupportedInt64RangeError: On a 64-bit integer wider than 32 bits
            InvalidUnicodeError: On a unicode payload that is not UTF-8
            LimitExceededError: If configured ceilings are exceeded
        """
        return self._parse_tagged(self._read_tag())

    def _read_tag(self) -> int:
        if self._cursor.remaining() == 0:
            raise TruncatedError("Truncated data: expected a type tag")
        return self._cursor.read_uint8()

    def _parse_tagged(self, code: int) -> WireValue:
        handler = self._dispatch.get(code)
        if handler is None:
            return self._unsupported(code)
        return handler()

    def _unsupported(self, code: int) -> Unsupported:
        self.unsupported[code] += 1
        kind = "Unimplemented" if code in UNSUPPORTED_TAGS else "Unrecognized"
        logger.debug("%s tag %s at offset %d", kind, describe_tag(code), self.offset - 1)
        return Unsupported(code)

    def _read_length(self, what: str) -> int:
        length = self._cursor.read_int32()
        if length < 0:
            raise TruncatedError(f"Negative {what} {length}")
        if self._max_length is not None and length > self._max_length:
            raise LimitExceededError(
                f"{what.capitalize()} {length} exceeds max_length={self._max_length}"
            )
        return length

    def _read_payload(self) -> bytes:
        return self._cursor.consume(self._read_length("length"))

    def _parse_int32(self) -> Int32:
        return Int32(self._cursor.read_int32())

    def _parse_int64(self) -> Int32:
        low = self._cursor.read_int32()
        high = self._cursor.read_int32()
        if (high == 0 and low >= 0) or (high == -1 and low < 0):
            return Int32(low)
        raise UnsupportedInt64RangeError(
            f"int64 only supports 32-bit values (low={low}, high={high})"
        )

    def _parse_binary_float(self) -> Float64:
        return Float64(self._cursor.read_float64())

    def _parse_byte_string(self) -> ByteString:
        return ByteString(self._read_payload())

    def _parse_unicode(self) -> UnicodeString:
        raw = self._read_payload()
        try:
            return UnicodeString(raw.decode("utf-8", "surrogatepass"))
        except UnicodeDecodeError as e:
            raise InvalidUnicodeError(f"Invalid UTF-8 in unicode string: {e}") from e

    def _parse_interned(self) -> ByteString:
        raw = self._read_payload()
        self._strings.append(raw)
        return ByteString(raw)

    def _parse_string_ref(self) -> ByteString:
        index = self._cursor.read_int32()
        if 0 <= index < len(self._strings):
            return ByteString(self._strings[index])
        raise InvalidStringReferenceError(
            f"Invalid interned string reference {index} (table has {len(self._strings)})"
        )

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            raise LimitExceededError(f"Nesting exceeds max_depth={self._max_depth}")

    def _parse_list(self) -> Sequence:
        count = self._read_length("count")
        # Every element takes at least one byte.
        if count > self._cursor.remaining():
            raise TruncatedError(
                f"Truncated data: {count} elements declared, {self._cursor.remaining()} bytes left"
            )
        self._enter()
        items = [self.parse() for _ in range(count)]
        self._depth -= 1
        return Sequence(tuple(items))

    def _parse_dict(self) -> Mapping:
        self._enter()
        pairs: List[Tuple[WireValue, WireValue]] = []
        while True:
            code = self._read_tag()
            if code == Tag.NULL:
                break
            key = self._parse_tagged(code)
            pairs.append((key, self.parse()))
        self._depth -= 1
        return Mapping(tuple(pairs))


def decode_wire(
    data: bytes,
    endian: EndianCodec = NATIVE,
    max_depth: int = 100,
    max_length: Optional[int] = None,
) -> WireValue:
    """Decode the first marshal value in data.

    Trailing bytes after the first value are ignored.

    Args:
        data: Marshalled bytes
        endian: Byte-order converter (see EndianCodec)
        max_depth: Maximum container nesting
        max_length: Optional ceiling on declared lengths and counts

    Returns:
        Decoded WireValue tree

    Raises:
        DecodeError: Any subclass; the decode is abandoned on the first error
    """
    return Unmarshaller(data, endian, max_depth, max_length).parse()
