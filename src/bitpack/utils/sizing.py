"""Bit and byte size calculation utilities.

This module provides the integer arithmetic shared by the storage manager and
the field codec. Everything here is pure integer math; no floating point is
involved, so results are exact across the full 64-bit field range.
"""

from __future__ import annotations

MAX_FIELD_BITS = 64
"""Widest unsigned field that can be packed or unpacked, in bits.

This is a fixed constant and does not depend on the host architecture.
"""


def byte_length(num_bits: int) -> int:
    """Return the number of whole bytes needed to hold num_bits bits.

    Args:
        num_bits: Bit count (must be >= 0)

    Returns:
        ceil(num_bits / 8)

    Example:
        >>> byte_length(0)
        0
        >>> byte_length(9)
        2
        >>> byte_length(48)
        6
    """
    if num_bits < 0:
        raise ValueError(f"num_bits must be >= 0, got {num_bits}")
    return (num_bits + 7) // 8


def max_value_for(num_bits: int) -> int:
    """Return the largest unsigned value representable in num_bits bits.

    Args:
        num_bits: Field width in bits (>= 0)

    Returns:
        2**num_bits - 1 (0 for a zero-width field)
    """
    if num_bits < 0:
        raise ValueError(f"num_bits must be >= 0, got {num_bits}")
    return (1 << num_bits) - 1


def bits_required(value: int) -> int:
    """Return the minimum field width that can hold an unsigned value.

    Zero still needs one bit to be written as a field.

    Args:
        value: Unsigned integer value

    Returns:
        Number of bits (at least 1)

    Raises:
        ValueError: If value is negative

    Example:
        >>> bits_required(0)
        1
        >>> bits_required(5)
        3
        >>> bits_required(0xFFFFFFFF)
        32
    """
    if value < 0:
        raise ValueError(f"bits_required requires non-negative value, got {value}")
    return max(1, value.bit_length())
