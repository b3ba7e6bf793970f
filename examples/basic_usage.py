#!/usr/bin/env python3
"""Basic usage example for msb128.

This example demonstrates:
1. Encoding integers to MSB128 bytes
2. Writing and reading values on a stream
3. Bounding decodes with a target integer type
4. Validating values with a Pydantic model
"""

from __future__ import annotations

from io import BytesIO

from pydantic import BaseModel

from msb128 import (
    U8,
    U16,
    U32,
    DecodeOverflowError,
    TruncatedInputError,
    VarInt,
    decode,
    encode,
    encoded_size,
    iter_positive,
    read_positive,
    write_positive,
)


class RecordHeader(BaseModel):
    """Header of a length-prefixed record."""

    record_type: int = VarInt(U8, description="Record type (0-255)")
    length: int = VarInt(U32, description="Payload length in bytes")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("msb128 Basic Usage Example")
    print("=" * 60)
    print()

    # Encode some values
    print("1. Encoding values...")
    for value in [0, 127, 128, 256, 16383, 65535, 1 << 32]:
        data = encode(value)
        print(f"   {value:>12}: {data.hex(' '):<16} ({encoded_size(value)} bytes)")
    print()

    # Stream round-trip
    print("2. Writing a header to a stream...")
    header = RecordHeader(record_type=7, length=70000)
    stream = BytesIO()
    written = write_positive(stream, header.record_type, U8)
    written += write_positive(stream, header.length, U32)
    print(f"   Wrote {written} bytes: {stream.getvalue().hex(' ')}")

    stream.seek(0)
    decoded = RecordHeader(
        record_type=read_positive(stream, U8),
        length=read_positive(stream, U32),
    )
    print(f"   Read back: {decoded}")
    print(f"   Match: {decoded == header}")
    print()

    # Iterate over a stream of values
    print("3. Iterating over back-to-back values...")
    values = list(iter_positive(BytesIO(b"\x0d\x7f\x81\x00\xfe\x7f")))
    print(f"   Values: {values}")
    print()

    # Errors
    print("4. Handling errors...")
    data = b"\x82\xfe\x7f"
    try:
        decode(data, U8)
    except DecodeOverflowError as e:
        print(f"   Overflow: {e}")
        print(f"   As u16 instead: {decode(data, U16)}")

    try:
        decode(b"\x82\xfe")
    except TruncatedInputError as e:
        print(f"   Truncated: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
