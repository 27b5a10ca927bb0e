#!/usr/bin/env python3
"""Protocol header example for bitpack.

This example packs a compact telemetry header, back-patches its length field
once the payload is known, and parses it on the receiving side.

Layout (MSB first):
    version      3 bits
    msg_type     5 bits
    ack          1 bit
    priority     2 bits
    length      13 bits   payload length in bytes
    payload      length bytes
"""

from __future__ import annotations

from bitpack import BitBuffer


def build_packet(msg_type: int, payload: bytes, ack: bool = False, priority: int = 0) -> bytes:
    """Pack a header and payload into bytes."""
    buf = BitBuffer()
    buf.append_bits(1, 3)
    buf.append_bits(msg_type, 5)
    buf.append_bits(int(ack), 1)
    buf.append_bits(priority, 2)
    length_index = buf.size_bits
    buf.append_bits(0, 13)
    buf.append_bytes(payload)

    # Back-patch the length now that the payload is written
    buf.set_bits(len(payload), 13, length_index)
    return buf.to_bytes()


def parse_packet(data: bytes) -> dict[str, object]:
    """Parse bytes produced by build_packet()."""
    buf = BitBuffer.from_bytes(data)
    header: dict[str, object] = {
        "version": buf.read_bits(3),
        "msg_type": buf.read_bits(5),
        "ack": bool(buf.read_bits(1)),
        "priority": buf.read_bits(2),
    }
    length = buf.read_bits(13)
    header["payload"] = buf.read_bytes(length)
    return header


def main() -> None:
    """Run the protocol header example."""
    print("=" * 60)
    print("bitpack Protocol Header Example")
    print("=" * 60)
    print()

    packet = build_packet(msg_type=17, payload=b"depth=42.5", ack=True, priority=2)
    print(f"Packet: {packet.hex()} ({len(packet)} bytes)")
    print(f"Header bits: {str(BitBuffer.from_bytes(packet[:3]))}")
    print()

    for key, value in parse_packet(packet).items():
        print(f"   {key}: {value!r}")
    print()


if __name__ == "__main__":
    main()
