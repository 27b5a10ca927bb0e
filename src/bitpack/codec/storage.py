"""Backing byte storage for bit buffers.

This module owns the growth policy: storage only ever grows, it grows to
exactly cover the highest bit written (rounded up to a whole byte), and every
newly exposed byte is zero.
"""

from __future__ import annotations

import logging

from ..exceptions import MallocFailedError
from ..utils.sizing import byte_length

logger = logging.getLogger(__name__)


class ByteStorage:
    """Growable byte storage tracking a logical size in bits.

    Attributes:
        data: Backing bytearray; len(data) is the capacity in bytes
        size_bits: Logical length in bits (<= len(data) * 8)

    Example:
        >>> storage = ByteStorage(4)
        >>> storage.ensure_capacity(48)
        >>> storage.capacity_bytes
        6
        >>> storage.size_bits
        48
    """

    def __init__(self, capacity_bytes: int) -> None:
        """Allocate zero-filled storage.

        Args:
            capacity_bytes: Number of bytes to preallocate (must be >= 0)

        Raises:
            ValueError: If capacity_bytes is negative
            MallocFailedError: If the storage cannot be allocated
        """
        if capacity_bytes < 0:
            raise ValueError(f"capacity_bytes must be >= 0, got {capacity_bytes}")

        try:
            self.data = bytearray(capacity_bytes)
        except MemoryError as err:
            raise MallocFailedError() from err
        self.size_bits = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> ByteStorage:
        """Create storage holding a copy of data, sized to len(data) * 8 bits."""
        storage = cls.__new__(cls)
        try:
            storage.data = bytearray(data)
        except MemoryError as err:
            raise MallocFailedError() from err
        storage.size_bits = len(storage.data) * 8
        return storage

    @property
    def capacity_bytes(self) -> int:
        """Number of bytes currently allocated."""
        return len(self.data)

    def ensure_capacity(self, new_size_bits: int) -> None:
        """Grow the logical buffer to new_size_bits, allocating if needed.

        Does nothing when new_size_bits does not exceed the current size;
        the logical size is never reduced.

        Capacity grows to exactly byte_length(new_size_bits) when that exceeds
        the current allocation, and is never reduced. On success the logical
        size is new_size_bits, even when no allocation was needed.

        Args:
            new_size_bits: New logical size in bits

        Raises:
            MallocFailedError: If growing the allocation fails; the storage is
                left unchanged
        """
        if new_size_bits <= self.size_bits:
            return

        new_capacity = byte_length(new_size_bits)
        old_capacity = len(self.data)

        if new_capacity > old_capacity:
            try:
                self.data.extend(bytes(new_capacity - old_capacity))
            except MemoryError as err:
                raise MallocFailedError() from err
            logger.debug(
                "grew storage from %d to %d bytes (size %d -> %d bits)",
                old_capacity,
                new_capacity,
                self.size_bits,
                new_size_bits,
            )

        self.size_bits = new_size_bits
