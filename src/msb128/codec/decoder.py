"""MSB128 decoder.

This module reads MSB128-encoded integers from byte streams and bytes
objects. Every read is bounded by the target integer type: a value that
cannot fit is rejected before any byte beyond the longest legal encoding
is consumed.
"""

from __future__ import annotations

import errno
from collections.abc import Iterator
from io import BytesIO
from typing import BinaryIO

from ..exceptions import DecodeError, DecodeOverflowError, TruncatedInputError
from ..models.inttypes import U64, IntType
from . import groups


def read_positive(source: BinaryIO, int_type: IntType = U64) -> int:
    """Read one MSB128-encoded integer from ``source``.

    Bytes are pulled one at a time, so exactly the bytes of one encoded
    value are consumed on success. Successive calls on the same stream
    return successive values.

    Args:
        source: Readable binary stream (``read(1)`` returns ``b""`` at EOF)
        int_type: Integer type the value must fit (default: u64)

    Returns:
        Decoded non-negative integer

    Raises:
        DecodeOverflowError: If the value would exceed int_type.max_value
        TruncatedInputError: If the stream ends before the final byte
        BlockingIOError: If a non-blocking source has no data available yet

    Example:
        >>> stream = BytesIO(b"\\x0d\\x7f\\x81\\x00")
        >>> read_positive(stream, U8)
        13
        >>> read_positive(stream, U8)
        127
        >>> read_positive(stream, U16)
        256
    """
    first = _next_byte(source)
    if first is None:
        raise TruncatedInputError("Input ended before any byte was read")
    return _read_value(first, source, int_type)


def decode(data: bytes, int_type: IntType = U64) -> int:
    """Decode a bytes object holding exactly one MSB128-encoded integer.

    Args:
        data: Encoded bytes
        int_type: Integer type the value must fit (default: u64)

    Returns:
        Decoded non-negative integer

    Raises:
        DecodeOverflowError: If the value would exceed int_type.max_value
        TruncatedInputError: If data ends before the final byte
        DecodeError: If bytes remain after the encoded value

    Examples:
        ```python
        from msb128 import decode, U8

        decode(b"\\x00")              # 0
        decode(b"\\x80\\x00")          # 128
        decode(b"\\x80\\x7f", U8)      # 255
        decode(b"\\x81\\x00", U8)      # raises DecodeOverflowError
        ```
    """
    value, end = decode_prefix(data, int_type)
    if end != len(data):
        extra = len(data) - end
        raise DecodeError(f"Trailing data: {extra} byte{'s' if extra != 1 else ''} after value")
    return value


def decode_prefix(data: bytes, int_type: IntType = U64, offset: int = 0) -> tuple[int, int]:
    """Decode one integer starting at ``offset`` in a larger buffer.

    Args:
        data: Buffer containing the encoded value
        int_type: Integer type the value must fit (default: u64)
        offset: Position of the first encoded byte

    Returns:
        Tuple of (decoded_value, offset just past the encoded value)

    Raises:
        DecodeOverflowError: If the value would exceed int_type.max_value
        TruncatedInputError: If data ends before the final byte
        ValueError: If offset is outside the buffer
    """
    if not 0 <= offset <= len(data):
        raise ValueError(f"Offset {offset} out of range for {len(data)} bytes")

    stream = BytesIO(data)
    stream.seek(offset)
    value = read_positive(stream, int_type)
    return value, stream.tell()


def iter_positive(source: BinaryIO, int_type: IntType = U64) -> Iterator[int]:
    """Yield consecutive MSB128-encoded integers until the stream ends.

    End of stream is only accepted between values; ending inside a value
    raises TruncatedInputError.

    Args:
        source: Readable binary stream
        int_type: Integer type every value must fit

    Yields:
        Decoded integers in stream order

    Raises:
        DecodeOverflowError: If a value would exceed int_type.max_value
        TruncatedInputError: If the stream ends inside a value
        BlockingIOError: If a non-blocking source has no data available yet
    """
    while True:
        first = _next_byte(source)
        if first is None:
            return
        yield _read_value(first, source, int_type)


def decode_many(data: bytes, int_type: IntType = U64) -> list[int]:
    """Decode a bytes object holding back-to-back encoded integers.

    Args:
        data: Concatenated encodings
        int_type: Integer type every value must fit

    Returns:
        Decoded integers in order (empty for empty data)

    Raises:
        DecodeOverflowError: If a value would exceed int_type.max_value
        TruncatedInputError: If data ends inside a value
    """
    return list(iter_positive(BytesIO(data), int_type))


def _read_value(byte: int, source: BinaryIO, int_type: IntType) -> int:
    """Fold the first byte of a value and keep reading until the final byte.

    Args:
        byte: First byte of the encoded value, already read
        source: Stream holding the remaining bytes
        int_type: Integer type the value must fit

    Returns:
        Decoded integer
    """
    # A non-final group is always followed by one more 7-bit shift, so any
    # accumulator above this bound cannot fit the type.
    fold_limit = int_type.max_value >> groups.GROUP_BITS
    number = 0
    count = 1

    while True:
        number = (number << groups.GROUP_BITS) | groups.payload(byte)
        if not groups.has_continuation(byte):
            return number

        number = groups.raise_(number)
        if number > fold_limit:
            raise DecodeOverflowError(
                f"Encoded integer overflows {int_type.name} after {count} "
                f"byte{'s' if count != 1 else ''} (max: {int_type.max_value})"
            )

        next_byte = _next_byte(source)
        if next_byte is None:
            raise TruncatedInputError(
                f"Input ended after {count} byte{'s' if count != 1 else ''} "
                f"with the continuation flag still set"
            )
        byte = next_byte
        count += 1


def _next_byte(source: BinaryIO) -> int | None:
    """Read a single byte, returning None at end of stream.

    Raises:
        BlockingIOError: If a non-blocking source has no data available yet
    """
    chunk = source.read(1)
    if chunk is None:
        raise BlockingIOError(errno.EAGAIN, "Source has no data available yet")
    if not chunk:
        return None
    return chunk[0]
