"""Forward-only byte cursor used by the decoder.

Every read checks the remaining length first, so a short or lying input can
only ever produce TruncatedError, never an out-of-bounds read.
"""

from __future__ import annotations

from ..exceptions import TruncatedError
from .endian import FLOAT64_SIZE, INT32_SIZE, NATIVE, EndianCodec


class ByteCursor:
    """Reads fixed-width fields and length-prefixed payloads from a buffer.

    Example:
        >>> cursor = ByteCursor(b"i\\x05\\x00\\x00\\x00")
        >>> cursor.read_uint8()
        105
        >>> cursor.read_int32()
        5
        >>> cursor.remaining()
        0
    """

    def __init__(self, data: bytes, endian: EndianCodec = NATIVE) -> None:
        self._data = data if isinstance(data, bytes) else bytes(data)
        self._position = 0
        self._endian = endian

    def consume(self, num_bytes: int) -> bytes:
        """Return the next num_bytes bytes and advance past them.

        Raises:
            TruncatedError: If num_bytes is negative or exceeds what remains
        """
        if num_bytes < 0:
            raise TruncatedError(f"Negative length {num_bytes}")
        end = self._position + num_bytes
        if end > len(self._data):
            raise TruncatedError(
                f"Truncated data: need {num_bytes} bytes at offset {self._position}, "
                f"have {len(self._data) - self._position}"
            )
        chunk = self._data[self._position : end]
        self._position = end
        return chunk

    def read_uint8(self) -> int:
        return self.consume(1)[0]

    def read_int32(self) -> int:
        return self._endian.unpack_int32(self.consume(INT32_SIZE))

    def read_float64(self) -> float:
        return self._endian.unpack_float64(self.consume(FLOAT64_SIZE))

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position
