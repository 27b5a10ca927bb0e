"""bitpack: Growable Bit Buffer

A Python library for packing and unpacking fields of arbitrary bit width into
a growable, bit-addressable buffer. Designed for building compact binary wire
formats (protocol headers, flag sets, variable-width integer fields) without
manual byte shuffling.

Key Features:
- Single bits, unsigned fields up to 64 bits, and byte strings at any bit offset
- MSB-first bit order within each byte
- Exact, byte-granular storage growth
- Sequential read cursor for parsing
- One exception class per error kind

Quick Start:
    >>> from bitpack import BitBuffer
    >>>
    >>> buf = BitBuffer()
    >>> buf.append_bits(3, 5)        # version
    >>> buf.append_bits(1, 3)        # flags
    >>> buf.append_bytes(b"\\x12\\x34")
    >>> data = buf.to_bytes()
    >>>
    >>> parsed = BitBuffer.from_bytes(data)
    >>> parsed.read_bits(5), parsed.read_bits(3), parsed.read_bytes(2)
    (3, 1, b'\\x124')
"""

from __future__ import annotations

from .codec import BitBuffer, ByteStorage
from .config import DEFAULT_CAPACITY_BYTES, BitPackConfig
from .exceptions import (
    BitPackError,
    EmptyError,
    ErrorKind,
    InvalidIndexError,
    MallocFailedError,
    RangeTooBigError,
    ReadPastEndError,
    ValueTooBigError,
)
from .utils import MAX_FIELD_BITS, bits_required, byte_length, max_value_for

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BitBuffer",
    "ByteStorage",
    # Configuration
    "BitPackConfig",
    "DEFAULT_CAPACITY_BYTES",
    # Exceptions
    "BitPackError",
    "ErrorKind",
    "MallocFailedError",
    "InvalidIndexError",
    "ValueTooBigError",
    "RangeTooBigError",
    "ReadPastEndError",
    "EmptyError",
    # Sizing
    "MAX_FIELD_BITS",
    "bits_required",
    "byte_length",
    "max_value_for",
    # Version
    "__version__",
]
