"""Codec configuration.

CodecConfig is an immutable Pydantic model; a Codec binds one instance for
its whole lifetime so concurrent codecs never share mutable settings.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CodecConfig(BaseModel):
    """Settings shared by the encoder, the decoder and the boundary adapter.

    Example:
        >>> config = CodecConfig(max_depth=32, max_length=1 << 20)
        >>> config.opposite_endianness
        False

    Attributes:
        max_depth: Maximum nesting of sequences/mappings on encode and decode
        max_length: Optional ceiling on declared string lengths and container counts
        opposite_endianness: Test hook; behave as if the host had the opposite byte order
        sort_keys: Write mapping keys in canonical byte order (wire-compatible default)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    max_depth: int = Field(default=100, ge=1)
    max_length: Optional[int] = Field(default=None, ge=0)
    opposite_endianness: bool = False
    sort_keys: bool = True


DEFAULT_CONFIG = CodecConfig()
