"""Fixed-width integer and float conversion to and from wire byte order.

Values are first packed in host byte order and then reversed when the host
order differs from the wire order (little-endian). The host order can be
flipped per instance so both paths are testable on a single machine.
"""

from __future__ import annotations

import struct
import sys

HOST_IS_LITTLE_ENDIAN = sys.byteorder == "little"

_INT32 = struct.Struct("=i")
_FLOAT64 = struct.Struct("=d")


class EndianCodec:
    """Converts fixed-width values between host order and wire order.

    Example:
        >>> EndianCodec().pack_int32(0x01020304)
        b'\\x04\\x03\\x02\\x01'
        >>> EndianCodec(opposite_host=True).pack_int32(0x01020304)
        b'\\x01\\x02\\x03\\x04'

    Args:
        opposite_host: If True, behave as if the host byte order were the
            opposite of the real one. For tests only; output is wrong on the wire.
    """

    __slots__ = ("_host_little",)

    def __init__(self, opposite_host: bool = False) -> None:
        self._host_little = HOST_IS_LITTLE_ENDIAN != opposite_host

    @property
    def host_is_little_endian(self) -> bool:
        """Byte order this codec assumes for the host."""
        return self._host_little

    def write_fixed(self, fmt: struct.Struct, value: int | float, want_little: bool = True) -> bytes:
        """Pack value with a native-order struct and emit it in the requested order."""
        raw = fmt.pack(value)
        if want_little == self._host_little:
            return raw
        return raw[::-1]

    def read_fixed(self, fmt: struct.Struct, data: bytes, want_little: bool = True) -> int | float:
        """Inverse of write_fixed; data must hold exactly fmt.size bytes."""
        if want_little != self._host_little:
            data = data[::-1]
        return fmt.unpack(data)[0]

    def pack_int32(self, value: int) -> bytes:
        return self.write_fixed(_INT32, value)

    def unpack_int32(self, data: bytes) -> int:
        return int(self.read_fixed(_INT32, data))

    def pack_float64(self, value: float) -> bytes:
        return self.write_fixed(_FLOAT64, value)

    def unpack_float64(self, data: bytes) -> float:
        return float(self.read_fixed(_FLOAT64, data))


INT32_SIZE = _INT32.size
FLOAT64_SIZE = _FLOAT64.size

NATIVE = EndianCodec()
