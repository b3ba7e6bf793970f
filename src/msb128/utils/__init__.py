"""Utility functions for msb128."""

from __future__ import annotations

from .sizing import encoded_size, max_encoded_size

__all__ = [
    "encoded_size",
    "max_encoded_size",
]
