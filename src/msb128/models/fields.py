"""Field helpers for Pydantic models holding MSB128 values."""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from .inttypes import U64, IntType


def VarInt(int_type: IntType = U64, **kwargs: Any) -> FieldInfo:
    """Create an integer field restricted to the encodable range of a type.

    This is a convenience wrapper around Pydantic's Field() that sets
    ge=0 and le=int_type.max_value, so a validated model never holds a value
    the encoder would reject.

    Args:
        int_type: Target integer type (default: u64)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Header(BaseModel):
        ...     length: int = VarInt(U32)
        ...     sequence: int = VarInt(U16, default=0)
    """
    return cast(FieldInfo, Field(ge=0, le=int_type.max_value, **kwargs))
