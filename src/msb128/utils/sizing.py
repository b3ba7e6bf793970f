"""Encoded size calculation utilities.

This module provides functions to calculate the size of MSB128 encodings
without actually encoding anything.
"""

from __future__ import annotations

from ..codec import groups
from ..codec.encoder import check_non_negative
from ..models.inttypes import U64, IntType


def encoded_size(value: int) -> int:
    """Calculate the encoded size of a value in bytes.

    Follows the encoder's shift-and-lower steps without building any bytes.

    Args:
        value: Non-negative integer

    Returns:
        Number of bytes encode(value) produces

    Raises:
        NegativeValueError: If value is negative
        EncodeError: If value is not an integer

    Example:
        >>> encoded_size(127)
        1
        >>> encoded_size(128)
        2
        >>> encoded_size(16511)
        2
        >>> encoded_size(16512)
        3
    """
    check_non_negative(value)

    size = 1
    while value > groups.PAYLOAD_MASK:
        value = groups.lower(value >> groups.GROUP_BITS)
        size += 1
    return size


def max_encoded_size(int_type: IntType = U64) -> int:
    """Return the longest encoding any value of ``int_type`` can have.

    Args:
        int_type: Target integer type (default: u64)

    Returns:
        Size in bytes, ceil(value_bits / 7)

    Example:
        >>> max_encoded_size(U8)
        2
        >>> max_encoded_size(U128)
        19
    """
    return int_type.max_groups
