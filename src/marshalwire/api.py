"""Public encode/decode entry points.

A Codec binds one CodecConfig; the module-level functions use a shared
default Codec. Codec instances hold no mutable state, so one instance can
serve concurrent callers on different threads.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from .adapter import from_wire, to_wire
from .codec.decoder import Unmarshaller
from .codec.encoder import encode_wire
from .codec.endian import EndianCodec
from .codec.tags import describe_tag
from .config import DEFAULT_CONFIG, CodecConfig


class Codec:
    """Encodes Python values to marshal bytes and decodes them back.

    Example:
        >>> codec = Codec()
        >>> codec.decode(codec.encode({"b": 1, "a": [True, None, 1.5]}))
        {'a': [True, None, 1.5], 'b': 1}

    Args:
        config: Codec settings; defaults to CodecConfig()
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._endian = EndianCodec(opposite_host=self.config.opposite_endianness)
        self._logger = logging.getLogger("marshalwire.codec")

    def encode(self, value: Any) -> bytes:
        """Encode a Python value.

        Raises:
            CyclicValueError: If value contains itself
            EncodeError: If value nests deeper than config.max_depth
        """
        wire = to_wire(value, self.config.max_depth)
        return encode_wire(wire, self._endian, sort_keys=self.config.sort_keys)

    def _unmarshaller(self, data: bytes) -> Unmarshaller:
        return Unmarshaller(
            data,
            self._endian,
            max_depth=self.config.max_depth,
            max_length=self.config.max_length,
        )

    def _report(self, unmarshaller: Unmarshaller) -> None:
        if unmarshaller.unsupported:
            summary = ", ".join(
                f"{describe_tag(code)} x{count}" for code, count in sorted(unmarshaller.unsupported.items())
            )
            self._logger.warning("Decoded unsupported values as placeholders: %s", summary)

    def decode(self, data: bytes) -> Any:
        """Decode the first value in data; trailing bytes are ignored.

        Raises:
            DecodeError: On truncated or malformed input (see the subclasses)
        """
        unmarshaller = self._unmarshaller(data)
        value = from_wire(unmarshaller.parse())
        self._report(unmarshaller)
        return value

    def iter_decode(self, data: bytes) -> Iterator[Any]:
        """Yield each value of a stream of concatenated marshal values.

        Each value gets its own interning table.

        Raises:
            DecodeError: On the first malformed value; earlier values have
                already been yielded
        """
        unmarshaller = self._unmarshaller(data)
        while not unmarshaller.at_end():
            unmarshaller.reset_strings()
            yield from_wire(unmarshaller.parse())
        self._report(unmarshaller)


_default_codec = Codec()


def encode(value: Any, config: Optional[CodecConfig] = None) -> bytes:
    """Encode a Python value to marshal bytes.

    Args:
        value: Value to encode (see marshalwire.adapter.to_wire for the mapping)
        config: Optional settings; defaults to CodecConfig()

    Returns:
        Marshalled bytes

    Example:
        >>> encode([1, "a"])
        b'[\\x02\\x00\\x00\\x00i\\x01\\x00\\x00\\x00u\\x01\\x00\\x00\\x00a'
    """
    codec = _default_codec if config is None else Codec(config)
    return codec.encode(value)


def decode(data: bytes, config: Optional[CodecConfig] = None) -> Any:
    """Decode marshal bytes to a Python value.

    Args:
        data: Marshalled bytes
        config: Optional settings; defaults to CodecConfig()

    Returns:
        Decoded value; unimplemented wire types appear as UNSUPPORTED

    Raises:
        DecodeError: On truncated or malformed input
    """
    codec = _default_codec if config is None else Codec(config)
    return codec.decode(data)


def iter_decode(data: bytes, config: Optional[CodecConfig] = None) -> Iterator[Any]:
    """Yield each value of a stream of concatenated marshal values."""
    codec = _default_codec if config is None else Codec(config)
    return codec.iter_decode(data)
