"""MSB128 codec.

This module provides encoding and decoding of non-negative integers in the
Most Significant Base 128 variable-length format.
"""

from __future__ import annotations

from .decoder import decode, decode_many, decode_prefix, iter_positive, read_positive
from .encoder import encode, encode_many, write_positive

__all__ = [
    "encode",
    "encode_many",
    "write_positive",
    "decode",
    "decode_many",
    "decode_prefix",
    "iter_positive",
    "read_positive",
]
