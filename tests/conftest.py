"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from io import BytesIO

import pytest


@pytest.fixture
def sample_values() -> list[int]:
    """Values around every 7-bit boundary, up to 128 bits."""
    values = []
    for i in range(2, 128):
        values.extend([(1 << i) - 1, 1 << i, (1 << i) + 1])
    return values


@pytest.fixture
def stream() -> BytesIO:
    """Empty in-memory byte stream."""
    return BytesIO()
