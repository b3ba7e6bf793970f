"""Exception hierarchy for msb128.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Msb128Error for easy catching of any codec error.
Errors raised by the underlying byte streams are never wrapped.
"""

from __future__ import annotations


class Msb128Error(Exception):
    """Base exception for all msb128 errors."""

    pass


class EncodeError(Msb128Error):
    """Raised when a value cannot be encoded.

    Examples:
        - Value is not an integer
        - Value is negative
        - Value exceeds the maximum of the target integer type
    """

    pass


class NegativeValueError(EncodeError):
    """Raised when encoding a negative integer.

    Only non-negative values are supported, for both signed and unsigned
    target types.
    """

    pass


class ValueRangeError(EncodeError):
    """Raised when a value does not fit the target integer type."""

    pass


class DecodeError(Msb128Error):
    """Raised when decoding binary data fails.

    Examples:
        - Encoded value overflows the target integer type
        - Input ends before the terminating byte
        - Trailing bytes after a single encoded value
    """

    pass


class DecodeOverflowError(DecodeError):
    """Raised when the encoded value would overflow the target integer type.

    The bytes consumed so far are not returned. Callers may retry with a wider
    type from a rewound source.
    """

    pass


class TruncatedInputError(DecodeError, EOFError):
    """Raised when the input ends before a byte with the continuation flag clear.

    Distinct from DecodeOverflowError so streaming callers can tell
    "not enough data yet" apart from a malformed value.
    """

    pass
