#!/usr/bin/env python3
"""Basic usage example for bitpack.

This example demonstrates:
1. Packing fields of arbitrary bit width
2. Packing bytes at an unaligned offset
3. Serializing to bytes
4. Parsing the bytes back with the read cursor
5. Handling errors
"""

from __future__ import annotations

from bitpack import BitBuffer, BitPackError, ValueTooBigError


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bitpack Basic Usage Example")
    print("=" * 60)
    print()

    # Pack some fields
    print("1. Packing fields...")
    buf = BitBuffer(4)
    buf.append_bits(3, 5)  # 5-bit field
    buf.append_bits(3, 3)  # 3-bit field
    buf.append_bits(0x12345678, 29)  # 29-bit field
    buf.append_bits(0, 3)  # padding to a byte boundary
    print(f"   Bits:     {buf}")
    print(f"   Size:     {buf.size_bits} bits")
    print(f"   Capacity: {buf.capacity_bytes} bytes")
    print()

    # Unaligned bytes
    print("2. Appending bytes at an unaligned offset...")
    buf.append_bits(1, 1)
    buf.append_bytes(b"\xde\xad")
    print(f"   Size:     {buf.size_bits} bits")
    print(f"   Capacity: {buf.capacity_bytes} bytes")
    print()

    # Serialize
    print("3. Serializing...")
    data = buf.to_bytes()
    print(f"   Bytes: {data.hex()} ({len(data)} bytes)")
    print()

    # Parse
    print("4. Parsing with the read cursor...")
    parsed = BitBuffer.from_bytes(data)
    print(f"   5-bit field:  {parsed.read_bits(5)}")
    print(f"   3-bit field:  {parsed.read_bits(3)}")
    print(f"   29-bit field: {parsed.read_bits(29):#x}")
    print(f"   padding:      {parsed.read_bits(3)}")
    print(f"   flag:         {parsed.read_bits(1)}")
    print(f"   bytes:        {parsed.read_bytes(2).hex()}")
    print(f"   Cursor at {parsed.read_cursor}, {parsed.bits_remaining()} bits unread")
    print()

    # Errors
    print("5. Handling errors...")
    try:
        buf.set_bits(8, 3, 0)
    except ValueTooBigError as e:
        print(f"   {type(e).__name__} ({e.kind.name}): {e}")

    try:
        parsed.read_bits(8)
    except BitPackError as e:
        print(f"   {type(e).__name__} ({e.kind.name}): {e}")
    print(f"   Cursor still at {parsed.read_cursor}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
