"""Unit tests for the endian converter."""

from __future__ import annotations

import math
import struct

import pytest

from marshalwire.codec.endian import HOST_IS_LITTLE_ENDIAN, EndianCodec


class TestEndianCodec:
    """Test fixed-width conversion in both host modes."""

    def test_int32_is_little_endian_on_wire(self) -> None:
        """Test int32 output is little-endian regardless of host."""
        assert EndianCodec().pack_int32(0x01020304) == b"\x04\x03\x02\x01"

    def test_float64_is_little_endian_on_wire(self) -> None:
        """Test float64 output matches struct's explicit little-endian packing."""
        assert EndianCodec().pack_float64(1.23) == struct.pack("<d", 1.23)

    def test_opposite_host_reverses_bytes(self) -> None:
        """Test the opposite-host mode emits reversed fixed-width fields."""
        codec = EndianCodec(opposite_host=True)
        assert codec.pack_int32(0x01020304) == b"\x01\x02\x03\x04"
        assert codec.pack_float64(1.23) == b"\x3f\xf3\xae\x14\x7a\xe1\x47\xae"

    def test_host_flag(self) -> None:
        """Test the assumed host order flips with opposite_host."""
        assert EndianCodec().host_is_little_endian is HOST_IS_LITTLE_ENDIAN
        assert EndianCodec(opposite_host=True).host_is_little_endian is not HOST_IS_LITTLE_ENDIAN

    @pytest.mark.parametrize("opposite", [False, True])
    @pytest.mark.parametrize("value", [0, 1, -1, 0x7FFFFFFF, -0x80000000, 123456789])
    def test_int32_inverse(self, opposite: bool, value: int) -> None:
        """Test unpack_int32 inverts pack_int32 in either mode."""
        codec = EndianCodec(opposite_host=opposite)
        assert codec.unpack_int32(codec.pack_int32(value)) == value

    @pytest.mark.parametrize("opposite", [False, True])
    def test_float64_inverse(self, opposite: bool) -> None:
        """Test unpack_float64 inverts pack_float64 in either mode."""
        codec = EndianCodec(opposite_host=opposite)
        for value in (0.0, -0.0625, 1e300, -math.inf):
            assert codec.unpack_float64(codec.pack_float64(value)) == value

    def test_big_endian_request(self) -> None:
        """Test write_fixed can also produce big-endian output."""
        codec = EndianCodec()
        fmt = struct.Struct("=i")
        assert codec.write_fixed(fmt, 1, want_little=False) == b"\x00\x00\x00\x01"
        assert codec.read_fixed(fmt, b"\x00\x00\x00\x01", want_little=False) == 1

    def test_instances_are_independent(self) -> None:
        """Test one codec's mode does not leak into another."""
        flipped = EndianCodec(opposite_host=True)
        normal = EndianCodec()
        assert flipped.pack_int32(1) != normal.pack_int32(1)
        assert normal.pack_int32(1) == b"\x01\x00\x00\x00"
