"""Main CLI entry point for bitpack."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..exceptions import BitPackError
from .dump import dump_fields, load_hex, parse_widths


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bitpack CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="bitpack",
        description="bitpack: Growable Bit Buffer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bitpack abcdef12                  Show the bits of 4 bytes
  bitpack abcdef12 --fields 5,3,2b  Read a 5-bit, a 3-bit and a 2-byte field
  bitpack --version                 Show version
        """,
    )

    parser.add_argument(
        "data",
        nargs="?",
        metavar="HEX",
        help="Hex-encoded bytes to inspect",
    )

    parser.add_argument(
        "--fields",
        metavar="WIDTHS",
        type=str,
        help="Comma-separated field widths in bits (suffix 'b' for bytes)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"bitpack {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # If no data given, show help
    if args.data is None:
        parser.print_help()
        return 0

    try:
        buf = load_hex(args.data)
        if args.fields:
            for line in dump_fields(buf, parse_widths(args.fields)):
                print(line)
        else:
            print(buf.to_binary_string())
        return 0
    except (BitPackError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
