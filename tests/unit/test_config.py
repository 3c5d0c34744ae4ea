"""Unit tests for CodecConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from marshalwire import Codec, CodecConfig


class TestCodecConfig:
    """Test configuration validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = CodecConfig()
        assert config.max_depth == 100
        assert config.max_length is None
        assert config.opposite_endianness is False
        assert config.sort_keys is True

    def test_invalid_depth(self) -> None:
        """Test max_depth must be positive."""
        with pytest.raises(ValidationError):
            CodecConfig(max_depth=0)

    def test_invalid_length(self) -> None:
        """Test max_length must be non-negative."""
        with pytest.raises(ValidationError):
            CodecConfig(max_length=-1)

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown settings are rejected."""
        with pytest.raises(ValidationError):
            CodecConfig(compress=True)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Test configs cannot be changed after creation."""
        config = CodecConfig()
        with pytest.raises(ValidationError):
            config.max_depth = 5  # type: ignore[misc]

    def test_codec_uses_config(self) -> None:
        """Test a Codec applies its config to encoding."""
        codec = Codec(CodecConfig(sort_keys=False))
        data = codec.encode({"b": 1, "a": 2})
        assert data.index(b"b") < data.index(b"a")
        assert Codec().config == CodecConfig()
