"""Target integer types.

An IntType describes the fixed-width integer a value is decoded into. The
width bounds both the largest encodable value and the number of bytes a
decoder may consume, so the same algorithm serves every width.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict, Field

_NAME_PATTERN = re.compile(r"^([ui])(\d+)$")


class IntType(BaseModel):
    """A fixed-width integer type.

    Signed types are supported for their non-negative range only, so an
    ``i8`` holds 0..127 while a ``u8`` holds 0..255.

    Attributes:
        bits: Width of the type in bits (at least 8)
        signed: Whether one bit is reserved for the sign

    Example:
        >>> IntType(bits=16).max_value
        65535
        >>> IntType.parse("i32").max_groups
        5
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bits: int = Field(ge=8)
    signed: bool = False

    @classmethod
    def parse(cls, name: str) -> IntType:
        """Build an IntType from a name such as ``"u64"`` or ``"i16"``.

        Args:
            name: Type name, case-insensitive

        Returns:
            Matching IntType

        Raises:
            ValueError: If the name is malformed or the width is below 8 bits
        """
        match = _NAME_PATTERN.match(name.strip().lower())
        if match is None:
            raise ValueError(f"Invalid integer type name: {name!r} (expected e.g. 'u64', 'i32')")

        bits = int(match.group(2))
        if bits < 8:
            raise ValueError(f"Integer type {name!r} is narrower than 8 bits")

        return cls(bits=bits, signed=match.group(1) == "i")

    @property
    def name(self) -> str:
        """Short type name, e.g. ``u64``."""
        return f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    def value_bits(self) -> int:
        """Number of bits available for non-negative values."""
        return self.bits - 1 if self.signed else self.bits

    @property
    def max_value(self) -> int:
        """Largest value representable by this type."""
        return (1 << self.value_bits) - 1

    @property
    def max_groups(self) -> int:
        """Longest valid encoding for this type, in bytes."""
        return math.ceil(self.value_bits / 7)

    def __str__(self) -> str:
        return self.name


U8 = IntType(bits=8)
U16 = IntType(bits=16)
U32 = IntType(bits=32)
U64 = IntType(bits=64)
U128 = IntType(bits=128)

I8 = IntType(bits=8, signed=True)
I16 = IntType(bits=16, signed=True)
I32 = IntType(bits=32, signed=True)
I64 = IntType(bits=64, signed=True)
I128 = IntType(bits=128, signed=True)
