"""Exception hierarchy for bitpack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BitPackError for easy catching of any bitpack-specific error.

Each exception also derives from the builtin exception a caller would naturally
expect (IndexError for out-of-range access, ValueError for a bad value,
MemoryError for allocation failure), so generic handlers keep working.
"""

from __future__ import annotations

import enum


class ErrorKind(enum.IntEnum):
    """Kinds of failure a buffer operation can report.

    The numeric values are stable and match the historical error codes.
    """

    CLEAR = 0
    MALLOC_FAILED = 1
    INVALID_INDEX = 2
    VALUE_TOO_BIG = 3
    RANGE_TOO_BIG = 4
    READ_PAST_END = 5
    EMPTY = 6


class BitPackError(Exception):
    """Base exception for all bitpack errors.

    Attributes:
        kind: The ErrorKind describing this failure
    """

    kind: ErrorKind = ErrorKind.CLEAR

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        return str(self)


class MallocFailedError(BitPackError, MemoryError):
    """Raised when backing storage cannot be allocated."""

    kind = ErrorKind.MALLOC_FAILED

    def __init__(self, message: str = "memory allocation failed") -> None:
        super().__init__(message)


class InvalidIndexError(BitPackError, IndexError):
    """Raised when a read references a bit index at or beyond the current size.

    Examples:
        - get_bit(10) on a 10-bit buffer
        - get_bits(3, 48) on a 48-bit buffer
    """

    kind = ErrorKind.INVALID_INDEX


class ValueTooBigError(BitPackError, ValueError):
    """Raised when a value does not fit in the requested bit width."""

    kind = ErrorKind.VALUE_TOO_BIG


class RangeTooBigError(BitPackError, IndexError):
    """Raised when a field width exceeds MAX_FIELD_BITS."""

    kind = ErrorKind.RANGE_TOO_BIG


class ReadPastEndError(BitPackError, IndexError):
    """Raised when a multi-bit or byte read would extend past the end of the buffer.

    The read cursor is never advanced when this is raised.
    """

    kind = ErrorKind.READ_PAST_END


class EmptyError(BitPackError, IndexError):
    """Raised when a single-bit read is attempted on a zero-length buffer."""

    kind = ErrorKind.EMPTY

    def __init__(self, message: str = "bitpack is empty") -> None:
        super().__init__(message)
