"""Bit buffer engine for bitpack.

This module provides the growable bit-addressable buffer and the byte storage
it is built on.
"""

from __future__ import annotations

from .bitbuffer import BitBuffer
from .storage import ByteStorage

__all__ = [
    "BitBuffer",
    "ByteStorage",
]
