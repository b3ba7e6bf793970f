"""Main CLI entry point for msb128."""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..codec import decode_many, encode_many
from ..exceptions import Msb128Error
from ..models.inttypes import IntType


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the msb128 CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="msb128",
        description="msb128: Most Significant Base 128 integer codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  msb128 encode 300                  Print the encoding of 300 as hex
  msb128 encode 1 128 --type u16     Encode several values back to back
  msb128 decode "82 fe 7f"           Decode hex bytes into integers
  msb128 --version                   Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"msb128 {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode integers to hex bytes")
    encode_parser.add_argument("values", metavar="VALUE", nargs="+", help="Non-negative integer")
    _add_type_option(encode_parser)

    decode_parser = subparsers.add_parser("decode", help="Decode hex bytes to integers")
    decode_parser.add_argument("hex", metavar="HEX", nargs="+", help="Hex-encoded bytes")
    _add_type_option(decode_parser)

    args = parser.parse_args(argv)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        int_type = IntType.parse(args.type)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "encode":
        return _run_encode(args.values, int_type)
    return _run_decode(args.hex, int_type)


def _add_type_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--type",
        metavar="TYPE",
        default="u64",
        help="Target integer type, e.g. u8, u32, i64 (default: u64)",
    )


def _run_encode(raw_values: list[str], int_type: IntType) -> int:
    try:
        values = [_parse_int(raw) for raw in raw_values]
    except ValueError as e:
        print(f"Error: invalid integer: {e}", file=sys.stderr)
        return 1

    try:
        data = encode_many(values, int_type)
    except Msb128Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(data.hex(" "))
    return 0


def _parse_int(raw: str) -> int:
    """Parse an integer literal, accepting 0x/0o/0b prefixes and zero-padded decimals."""
    try:
        return int(raw, 0)
    except ValueError:
        return int(raw)


def _run_decode(raw_hex: list[str], int_type: IntType) -> int:
    try:
        data = bytes.fromhex(" ".join(raw_hex))
    except ValueError as e:
        print(f"Error: invalid hex input: {e}", file=sys.stderr)
        return 1

    try:
        values = decode_many(data, int_type)
    except Msb128Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for value in values:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
