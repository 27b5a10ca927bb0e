"""Utility functions for bitpack.

This module provides bit/byte size arithmetic shared across the package.
"""

from __future__ import annotations

from .sizing import MAX_FIELD_BITS, bits_required, byte_length, max_value_for

__all__ = [
    "MAX_FIELD_BITS",
    "bits_required",
    "byte_length",
    "max_value_for",
]
