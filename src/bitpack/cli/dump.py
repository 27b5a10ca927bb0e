"""Field dump CLI command."""

from __future__ import annotations

import binascii

from ..codec.bitbuffer import BitBuffer


def load_hex(text: str) -> BitBuffer:
    """Build a buffer from a hex string.

    Whitespace and an optional 0x prefix are ignored.

    Args:
        text: Hex-encoded bytes, e.g. "abcd ef12" or "0xabcdef12"

    Returns:
        BitBuffer holding the decoded bytes

    Raises:
        ValueError: If text is not valid hex
    """
    cleaned = "".join(text.split())
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    try:
        data = binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as err:
        raise ValueError(f"invalid hex data: {text!r}") from err
    return BitBuffer.from_bytes(data)


def parse_widths(spec: str) -> list[tuple[int, bool]]:
    """Parse a comma-separated width list.

    A plain number is a field width in bits; a number with a "b" suffix is a
    byte count.

    Args:
        spec: e.g. "5,3,29,8b"

    Returns:
        List of (count, is_bytes) pairs

    Example:
        >>> parse_widths("5,3,2b")
        [(5, False), (3, False), (2, True)]
    """
    widths: list[tuple[int, bool]] = []
    for part in spec.split(","):
        part = part.strip().lower()
        if not part:
            continue
        is_bytes = part.endswith("b")
        number = part[:-1] if is_bytes else part
        if not number.isdigit():
            raise ValueError(f"invalid field width: {part!r}")
        widths.append((int(number), is_bytes))

    if not widths:
        raise ValueError("no field widths given")
    return widths


def dump_fields(buf: BitBuffer, widths: list[tuple[int, bool]]) -> list[str]:
    """Read consecutive fields from the buffer's read cursor.

    Args:
        buf: Buffer to read
        widths: Field widths from parse_widths()

    Returns:
        One "offset: value" line per field; byte reads are shown as hex

    Raises:
        BitPackError: If a field runs past the end of the buffer
    """
    lines = []
    for count, is_bytes in widths:
        offset = buf.read_cursor
        if is_bytes:
            value = buf.read_bytes(count).hex()
            lines.append(f"{offset}: {value} ({count} bytes)")
        else:
            lines.append(f"{offset}: {buf.read_bits(count)} ({count} bits)")

    if buf.bits_remaining():
        lines.append(f"{buf.read_cursor}: {buf.bits_remaining()} bits unread")
    return lines
