"""Byte layout of MSB128 groups.

Each encoded byte is ``[continuation:1][payload:7]``. Groups are stored most
significant first, and every group except the last stores its value minus
one. That offset is what makes each integer's encoding unique, so it lives
here as a separate step shared by the encoder and the decoder.
"""

from __future__ import annotations

CONTINUATION = 0x80
PAYLOAD_MASK = 0x7F
GROUP_BITS = 7


def lower(remaining: int) -> int:
    """Apply the encoder offset to the value left after emitting a group.

    Args:
        remaining: Value still to encode, already shifted right by 7 bits
            (must be >= 1)

    Returns:
        The value minus one
    """
    return remaining - 1


def raise_(number: int) -> int:
    """Undo the encoder offset after folding in a non-final group.

    Args:
        number: Accumulated value including the group just read

    Returns:
        The value plus one
    """
    return number + 1


def has_continuation(byte: int) -> bool:
    """Return True if more bytes follow this one."""
    return bool(byte & CONTINUATION)


def payload(byte: int) -> int:
    """Return the 7-bit payload of an encoded byte."""
    return byte & PAYLOAD_MASK
