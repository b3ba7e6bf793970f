"""msb128: Most Significant Base 128 integer codec

A Python library for reading and writing non-negative integers in the MSB128
variable-length encoding, also known as VLQ. It is the big-endian sibling of
LEB128: 7 bits per byte, most significant group first, with the high bit of
each byte flagging that more bytes follow. Every group except the last is
stored minus one, which gives each integer exactly one encoding.

Key Features:
- Stream API over any binary file-like object
- Fixed-width target types (u8..u128, i8..i128) with overflow detection
- Distinct errors for overflow and truncated input
- Pydantic-based integer type models

Quick Start:
    >>> from io import BytesIO
    >>> from msb128 import U16, decode, encode, read_positive, write_positive
    >>>
    >>> encode(300)
    b'\\x81,'
    >>> decode(b"\\x82\\xfe\\x7f", U16)
    65535
    >>>
    >>> stream = BytesIO()
    >>> write_positive(stream, 16383)
    2
    >>> stream.seek(0)
    0
    >>> read_positive(stream)
    16383
"""

from __future__ import annotations

from .codec import (
    decode,
    decode_many,
    decode_prefix,
    encode,
    encode_many,
    iter_positive,
    read_positive,
    write_positive,
)
from .exceptions import (
    DecodeError,
    DecodeOverflowError,
    EncodeError,
    Msb128Error,
    NegativeValueError,
    TruncatedInputError,
    ValueRangeError,
)
from .models import I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, IntType, VarInt
from .utils import encoded_size, max_encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "write_positive",
    "read_positive",
    # Streams and buffers
    "encode_many",
    "decode_many",
    "decode_prefix",
    "iter_positive",
    # Integer types
    "IntType",
    "VarInt",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    # Exceptions
    "Msb128Error",
    "EncodeError",
    "NegativeValueError",
    "ValueRangeError",
    "DecodeError",
    "DecodeOverflowError",
    "TruncatedInputError",
    # Sizing
    "encoded_size",
    "max_encoded_size",
    # Version
    "__version__",
]
