"""Growable bit-addressable buffer.

This module provides BitBuffer, which packs and unpacks single bits, unsigned
integer fields of arbitrary width (up to MAX_FIELD_BITS) and byte strings at
any bit offset, plus a sequential read cursor.

Bit numbering is MSB-first within each byte: bit index i lives in byte i // 8
under the mask 0x80 >> (i % 8). Fields are written with their most
significant bit at the lowest bit index.
"""

from __future__ import annotations

from typing import Iterator

from ..config import BitPackConfig
from ..exceptions import (
    EmptyError,
    InvalidIndexError,
    RangeTooBigError,
    ReadPastEndError,
    ValueTooBigError,
)
from ..utils.sizing import MAX_FIELD_BITS, byte_length, max_value_for
from .storage import ByteStorage


class BitBuffer:
    """Growable buffer addressed by bit index.

    Writes grow the buffer on demand so that it covers the highest bit index
    written; reads never grow it. Every failed operation leaves content, size
    and read cursor unchanged.

    Example:
        >>> buf = BitBuffer(4)
        >>> buf.append_bits(0xFF, 8)
        >>> buf.append_bits(5, 3)
        >>> buf.append_bits(21, 5)
        >>> buf.to_binary_string()
        '1111111110110101'
        >>> buf.read_bits(8), buf.read_bits(3), buf.read_bits(5)
        (255, 5, 21)
    """

    def __init__(
        self, capacity_bytes: int | None = None, config: BitPackConfig | None = None
    ) -> None:
        """Create an empty buffer.

        Args:
            capacity_bytes: Bytes to preallocate. Defaults to
                config.default_capacity_bytes.
            config: Buffer configuration (defaults to BitPackConfig())

        Raises:
            ValueError: If capacity_bytes is negative
            MallocFailedError: If the storage cannot be allocated
        """
        if config is None:
            config = BitPackConfig()
        if capacity_bytes is None:
            capacity_bytes = config.default_capacity_bytes

        self._storage = ByteStorage(capacity_bytes)
        self._read_cursor = 0

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> BitBuffer:
        """Create a buffer holding a copy of data.

        The new buffer is len(data) * 8 bits long and has a capacity of
        exactly len(data) bytes.

        Example:
            >>> BitBuffer.from_bytes(b"\\xab\\xcd").to_binary_string()
            '1010101111001101'
        """
        buf = cls.__new__(cls)
        buf._storage = ByteStorage.from_bytes(_as_bytes(data))
        buf._read_cursor = 0
        return buf

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def size_bits(self) -> int:
        """Current logical length in bits."""
        return self._storage.size_bits

    @property
    def capacity_bytes(self) -> int:
        """Number of bytes currently allocated for storage."""
        return self._storage.capacity_bytes

    @property
    def read_cursor(self) -> int:
        """Bit offset of the next read_bits()/read_bytes() call."""
        return self._read_cursor

    # ------------------------------------------------------------------
    # Single bits
    # ------------------------------------------------------------------

    def set_bit(self, index: int) -> None:
        """Set the bit at index to 1, growing the buffer to cover index if needed.

        Args:
            index: Bit index (>= 0)

        Raises:
            TypeError: If index is not an int
            InvalidIndexError: If index is negative
            MallocFailedError: If growing the buffer fails
        """
        self._check_write_index(index)
        self._storage.ensure_capacity(index + 1)
        self._put_bit(index, 1)

    def clear_bit(self, index: int) -> None:
        """Set the bit at index to 0, growing the buffer to cover index if needed.

        Args:
            index: Bit index (>= 0)

        Raises:
            TypeError: If index is not an int
            InvalidIndexError: If index is negative
            MallocFailedError: If growing the buffer fails
        """
        self._check_write_index(index)
        self._storage.ensure_capacity(index + 1)
        self._put_bit(index, 0)

    def get_bit(self, index: int) -> int:
        """Return the bit at index (0 or 1).

        Args:
            index: Bit index

        Returns:
            Bit value

        Raises:
            EmptyError: If the buffer is empty
            InvalidIndexError: If index is outside the buffer
        """
        if self.size_bits == 0:
            raise EmptyError()
        _require_int("index", index)
        if index < 0 or index >= self.size_bits:
            raise InvalidIndexError(self._invalid_index_message(index))
        return self._peek_bit(index)

    # ------------------------------------------------------------------
    # Unsigned integer fields
    # ------------------------------------------------------------------

    def set_bits(self, value: int, num_bits: int, index: int) -> None:
        """Pack an unsigned integer into num_bits bits starting at index.

        The most significant bit of the field lands at index. The width and
        value are fully validated before the buffer is touched.

        Args:
            value: Unsigned integer value (0 <= value < 2**num_bits)
            num_bits: Field width in bits (0-64)
            index: Bit index of the first (most significant) bit

        Raises:
            TypeError: If value, num_bits or index is not an int
            ValueError: If value or num_bits is negative
            InvalidIndexError: If index is negative
            RangeTooBigError: If num_bits exceeds MAX_FIELD_BITS
            ValueTooBigError: If value does not fit in num_bits bits
            MallocFailedError: If growing the buffer fails
        """
        _require_int("value", value)
        if value < 0:
            raise ValueError(f"set_bits requires non-negative value, got {value}")
        self._check_num_bits(num_bits)
        self._check_write_index(index)

        if num_bits > MAX_FIELD_BITS:
            raise RangeTooBigError(_range_too_big_message(num_bits))
        if value > max_value_for(num_bits):
            raise ValueTooBigError(f"value {value} does not fit in {num_bits} bits")

        self._storage.ensure_capacity(index + num_bits)

        # Most significant bit first
        for i in range(num_bits - 1, -1, -1):
            self._put_bit(index, (value >> i) & 1)
            index += 1

    def get_bits(self, num_bits: int, index: int) -> int:
        """Unpack an unsigned integer from num_bits bits starting at index.

        Args:
            num_bits: Field width in bits (0-64)
            index: Bit index of the first (most significant) bit

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bits is negative
            InvalidIndexError: If index is outside the buffer
            ReadPastEndError: If the field extends past the end of the buffer
            RangeTooBigError: If num_bits exceeds MAX_FIELD_BITS
        """
        self._check_num_bits(num_bits)
        self._check_read_span(index, num_bits)
        if num_bits > MAX_FIELD_BITS:
            raise RangeTooBigError(_range_too_big_message(num_bits))

        value = 0
        for i in range(index, index + num_bits):
            value = (value << 1) | self._peek_bit(i)
        return value

    def append_bits(self, value: int, num_bits: int) -> None:
        """Pack an unsigned integer at the current end of the buffer.

        Equivalent to set_bits(value, num_bits, size_bits).
        """
        self.set_bits(value, num_bits, self.size_bits)

    # ------------------------------------------------------------------
    # Byte strings
    # ------------------------------------------------------------------

    def set_bytes(self, data: bytes | bytearray | memoryview, index: int) -> None:
        """Pack a byte string starting at bit index.

        A byte-aligned index is copied in bulk; any other index is packed one
        byte at a time.

        Args:
            data: Bytes to write
            index: Bit index of the first bit of data[0]

        Raises:
            TypeError: If data is not bytes-like or index is not an int
            InvalidIndexError: If index is negative
            MallocFailedError: If growing the buffer fails
        """
        data = _as_bytes(data)
        self._check_write_index(index)

        self._storage.ensure_capacity(index + len(data) * 8)

        if index % 8 == 0:
            start = index // 8
            self._storage.data[start : start + len(data)] = data
        else:
            for i, byte in enumerate(data):
                self.set_bits(byte, 8, index + i * 8)

    def get_bytes(self, num_bytes: int, index: int) -> bytes:
        """Unpack num_bytes bytes starting at bit index.

        Args:
            num_bytes: Number of bytes to read
            index: Bit index of the first bit to read

        Returns:
            A new bytes object

        Raises:
            ValueError: If num_bytes is negative
            InvalidIndexError: If index is outside the buffer
            ReadPastEndError: If the range extends past the end of the buffer
        """
        _require_int("num_bytes", num_bytes)
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        self._check_read_span(index, num_bytes * 8)

        if index % 8 == 0:
            start = index // 8
            return bytes(self._storage.data[start : start + num_bytes])

        return bytes(self.get_bits(8, index + i * 8) for i in range(num_bytes))

    def append_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Pack a byte string at the current end of the buffer.

        Equivalent to set_bytes(data, size_bits).
        """
        self.set_bytes(data, self.size_bits)

    # ------------------------------------------------------------------
    # Sequential reads
    # ------------------------------------------------------------------

    def read_bits(self, num_bits: int) -> int:
        """Read an unsigned integer at the read cursor and advance past it.

        Args:
            num_bits: Field width in bits (0-64)

        Returns:
            Unsigned integer value

        Raises:
            ReadPastEndError: If fewer than num_bits bits remain; the cursor
                is not moved
        """
        self._check_num_bits(num_bits)
        if self._read_cursor + num_bits > self.size_bits:
            raise ReadPastEndError(self._read_past_end_message())

        value = self.get_bits(num_bits, self._read_cursor)
        self._read_cursor += num_bits
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read num_bytes bytes at the read cursor and advance past them.

        Raises:
            ReadPastEndError: If fewer than num_bytes * 8 bits remain; the
                cursor is not moved
        """
        _require_int("num_bytes", num_bytes)
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        if self._read_cursor + num_bytes * 8 > self.size_bits:
            raise ReadPastEndError(self._read_past_end_message())

        data = self.get_bytes(num_bytes, self._read_cursor)
        self._read_cursor += num_bytes * 8
        return data

    def reset_read_cursor(self) -> None:
        """Move the read cursor back to the start of the buffer."""
        self._read_cursor = 0

    def bits_remaining(self) -> int:
        """Return the number of bits between the read cursor and the end."""
        return self.size_bits - self._read_cursor

    # ------------------------------------------------------------------
    # Serialization views
    # ------------------------------------------------------------------

    def to_binary_string(self) -> str:
        """Return the buffer as a string of '0' and '1', bit 0 first."""
        used = self._storage.data[: byte_length(self.size_bits)]
        return "".join(f"{byte:08b}" for byte in used)[: self.size_bits]

    def to_byte_slice(self) -> tuple[bytes, int]:
        """Return a copy of the used bytes and their count.

        Unused trailing bits of a partial last byte are zero.

        Returns:
            (data, len(data)) where len(data) == ceil(size_bits / 8)
        """
        num_bytes = byte_length(self.size_bits)
        return bytes(self._storage.data[:num_bytes]), num_bytes

    def to_bytes(self) -> bytes:
        """Return a copy of the used bytes, zero-padded to a byte boundary."""
        data, _ = self.to_byte_slice()
        return data

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.size_bits

    def __iter__(self) -> Iterator[int]:
        for i in range(self.size_bits):
            yield self._peek_bit(i)

    def __getitem__(self, key: int | slice) -> int:
        """Return one bit (buf[i]) or an unsigned field (buf[start:stop])."""
        if isinstance(key, slice):
            start, stop = _slice_bounds(key)
            return self.get_bits(stop - start, start)
        return self.get_bit(key)

    def __setitem__(self, key: int | slice, value: int) -> None:
        """Assign one bit (buf[i] = 0/1) or an unsigned field (buf[start:stop] = v).

        Example:
            >>> buf = BitBuffer()
            >>> buf[0:8] = 0xAB
            >>> buf[8] = 1
            >>> str(buf)
            '101010111'
        """
        if isinstance(key, slice):
            start, stop = _slice_bounds(key)
            self.set_bits(value, stop - start, start)
        else:
            self.set_bits(value, 1, key)

    def __str__(self) -> str:
        return self.to_binary_string()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitBuffer):
            return NotImplemented
        return self.size_bits == other.size_bits and self.to_bytes() == other.to_bytes()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"BitBuffer(size_bits={self.size_bits}, "
            f"capacity_bytes={self.capacity_bytes}, read_cursor={self._read_cursor})"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _put_bit(self, index: int, bit: int) -> None:
        mask = 0x80 >> (index % 8)
        if bit:
            self._storage.data[index // 8] |= mask
        else:
            self._storage.data[index // 8] &= ~mask & 0xFF

    def _peek_bit(self, index: int) -> int:
        return 1 if self._storage.data[index // 8] & (0x80 >> (index % 8)) else 0

    def _check_write_index(self, index: int) -> None:
        _require_int("index", index)
        if index < 0:
            raise InvalidIndexError(f"invalid index ({index}), index must be >= 0")

    @staticmethod
    def _check_num_bits(num_bits: int) -> None:
        _require_int("num_bits", num_bits)
        if num_bits < 0:
            raise ValueError(f"num_bits must be >= 0, got {num_bits}")

    def _check_read_span(self, index: int, num_bits: int) -> None:
        _require_int("index", index)
        if index < 0 or index >= self.size_bits:
            raise InvalidIndexError(self._invalid_index_message(index))
        if index + num_bits > self.size_bits:
            raise ReadPastEndError(self._read_past_end_message())

    def _invalid_index_message(self, index: int) -> str:
        if self.size_bits == 0:
            return f"invalid index ({index}), bitpack is empty"
        return f"invalid index ({index}), max index is {self.size_bits - 1}"

    def _read_past_end_message(self) -> str:
        if self.size_bits == 0:
            return "attempted to read past end of bitpack (bitpack is empty)"
        return f"attempted to read past end of bitpack (last index is {self.size_bits - 1})"


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, (str, int)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return bytes(memoryview(data))


def _require_int(name: str, value: object) -> None:
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _range_too_big_message(num_bits: int) -> str:
    return (
        f"range size {num_bits} bits is too large "
        f"(maximum size is {MAX_FIELD_BITS} bits)"
    )


def _slice_bounds(key: slice) -> tuple[int, int]:
    """Translate a bit slice into (start, stop), rejecting steps and open/negative ends."""
    if key.step is not None:
        raise ValueError("bit slices do not support a step")
    if key.stop is None:
        raise ValueError("bit slices require an explicit stop index")
    start = 0 if key.start is None else key.start
    stop = key.stop
    if start < 0 or stop < 0:
        raise ValueError(f"bit slice bounds must be >= 0, got {start}:{stop}")
    if stop < start:
        raise ValueError(f"bit slice stop ({stop}) is before start ({start})")
    return start, stop
