"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bitpack import BitBuffer


@pytest.fixture
def sample_bytes() -> bytes:
    """Sample binary payload for testing."""
    return bytes([0xAB, 0xCD, 0xEF, 0x12])


@pytest.fixture
def header_buffer() -> BitBuffer:
    """48-bit buffer holding 0xff/8, 5/3, 21/5 and 0xffffffff/32 fields."""
    buf = BitBuffer(4)
    buf.append_bits(0xFF, 8)
    buf.append_bits(5, 3)
    buf.append_bits(21, 5)
    buf.append_bits(0xFFFFFFFF, 32)
    return buf
