"""Exception hierarchy for marshalwire.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from MarshalWireError for easy catching of any
marshalwire-specific error.
"""

from __future__ import annotations

DEFAULT_DECODE_MESSAGE = "invalid or truncated marshalled data"


class MarshalWireError(Exception):
    """Base exception for all marshalwire errors."""

    pass


class EncodeError(MarshalWireError):
    """Raised when a host value is refused before encoding.

    The encoder itself cannot fail; these errors come from the boundary
    adapter that translates host objects into wire values.

    Examples:
        - Nesting deeper than the configured max_depth
        - Cyclic object graph (see CyclicValueError)
    """

    pass


class CyclicValueError(EncodeError):
    """Raised when a container is reached again while it is still being encoded."""

    pass


class DecodeError(MarshalWireError):
    """Raised when decoding marshalled data fails.

    Any decode error aborts the whole decode; no partial value is returned.

    Examples:
        - Truncated data (insufficient bytes)
        - Out-of-range string reference
        - 64-bit integer outside the 32-bit range
        - Invalid UTF-8 in a unicode payload
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or DEFAULT_DECODE_MESSAGE)


class TruncatedError(DecodeError):
    """Raised when fewer bytes remain than a fixed field or declared length requires.

    Negative declared lengths are reported the same way.
    """

    pass


class InvalidStringReferenceError(DecodeError):
    """Raised when a string reference points outside the interning table."""

    pass


class UnsupportedInt64RangeError(DecodeError):
    """Raised when a 64-bit integer does not fit in 32 bits."""

    pass


class InvalidUnicodeError(DecodeError):
    """Raised when a unicode payload is not valid UTF-8."""

    pass


class LimitExceededError(DecodeError):
    """Raised when input exceeds a configured nesting or length ceiling."""

    pass


class UnhashableKeyError(DecodeError):
    """Raised when a decoded mapping key cannot be used as a dict key."""

    pass
