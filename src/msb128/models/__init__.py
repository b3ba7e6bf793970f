"""Integer type models and Pydantic field helpers."""

from __future__ import annotations

from .fields import VarInt
from .inttypes import I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, IntType

__all__ = [
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
]
