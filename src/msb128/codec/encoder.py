"""MSB128 encoder.

This module writes non-negative integers as MSB128 byte sequences, either
to a byte sink or to a bytes object.
"""

from __future__ import annotations

from collections.abc import Iterable
from io import BytesIO
from typing import BinaryIO

from ..exceptions import EncodeError, NegativeValueError, ValueRangeError
from ..models.inttypes import U64, IntType
from . import groups


def write_positive(sink: BinaryIO, value: int, int_type: IntType = U64) -> int:
    """Write ``value`` to ``sink`` as an MSB128-encoded integer.

    The encoding is offered to the sink in one ``write()`` call and the
    remainder is re-offered until a raw sink has accepted all of it.
    Errors raised by the sink propagate unchanged; whatever it accepted
    before failing stays written.

    Args:
        sink: Writable binary stream
        value: Non-negative integer to encode
        int_type: Target integer type bounding the value (default: u64)

    Returns:
        Number of bytes written

    Raises:
        NegativeValueError: If value is negative
        ValueRangeError: If value exceeds int_type.max_value
        EncodeError: If value is not an integer

    Example:
        >>> stream = BytesIO()
        >>> write_positive(stream, 127, U8)
        1
        >>> write_positive(stream, 256)
        2
        >>> stream.getvalue()
        b'\\x7f\\x81\\x00'
    """
    _check_value(value, int_type)

    # Groups are collected least significant first
    out = bytearray()
    out.append(groups.payload(value))
    while value > groups.PAYLOAD_MASK:
        value = groups.lower(value >> groups.GROUP_BITS)
        out.append(groups.payload(value) | groups.CONTINUATION)
    out.reverse()

    # Raw sinks may accept only part of the data per call
    view = memoryview(bytes(out))
    while view:
        written = sink.write(view)
        if written is None:
            continue
        view = view[written:]
    return len(out)


def encode(value: int, int_type: IntType = U64) -> bytes:
    """Encode a non-negative integer to MSB128 bytes.

    Args:
        value: Non-negative integer to encode
        int_type: Target integer type bounding the value (default: u64)

    Returns:
        Encoded bytes (1 to int_type.max_groups bytes)

    Raises:
        NegativeValueError: If value is negative
        ValueRangeError: If value exceeds int_type.max_value
        EncodeError: If value is not an integer

    Examples:
        ```python
        from msb128 import encode, U8

        encode(0)          # b'\\x00'
        encode(128)        # b'\\x80\\x00'
        encode(65535)      # b'\\x82\\xfe\\x7f'
        encode(255, U8)    # b'\\x80\\x7f'
        ```
    """
    stream = BytesIO()
    write_positive(stream, value, int_type)
    return stream.getvalue()


def encode_many(values: Iterable[int], int_type: IntType = U64) -> bytes:
    """Encode a sequence of integers back to back.

    Args:
        values: Non-negative integers to encode
        int_type: Target integer type bounding every value

    Returns:
        Concatenated encodings

    Raises:
        EncodeError: If any value cannot be encoded (nothing is returned)
    """
    stream = BytesIO()
    for value in values:
        write_positive(stream, value, int_type)
    return stream.getvalue()


def check_non_negative(value: int) -> None:
    """Validate that a value is a non-negative int.

    Raises:
        EncodeError: If value is not an int (bool is rejected too)
        NegativeValueError: If value is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"Expected int, got {type(value).__name__}")

    if value < 0:
        raise NegativeValueError(f"Cannot encode negative integer {value}")


def _check_value(value: int, int_type: IntType) -> None:
    """Validate that a value can be encoded for the given type.

    Raises:
        EncodeError: If value is not an int
        NegativeValueError: If value is negative
        ValueRangeError: If value does not fit int_type
    """
    check_non_negative(value)

    if value > int_type.max_value:
        raise ValueRangeError(
            f"Value {value} does not fit {int_type.name} (max: {int_type.max_value})"
        )
