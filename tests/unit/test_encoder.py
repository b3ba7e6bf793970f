"""Unit tests for the encoder."""

from __future__ import annotations

from io import BytesIO, RawIOBase

import pytest

from msb128 import (
    I8,
    U8,
    U16,
    U128,
    EncodeError,
    NegativeValueError,
    ValueRangeError,
    encode,
    encode_many,
    write_positive,
)

# Reference encodings (value, bytes)
VECTORS = [
    (0, b"\x00"),
    (1, b"\x01"),
    (127, b"\x7f"),
    (128, b"\x80\x00"),
    (255, b"\x80\x7f"),
    (256, b"\x81\x00"),
    (16383, b"\xfe\x7f"),
    (16384, b"\xff\x00"),
    (16511, b"\xff\x7f"),
    (65535, b"\x82\xfe\x7f"),
    (1 << 32, b"\x8e\xfe\xfe\xff\x00"),
]


class TestEncode:
    """Test encode() against known vectors."""

    @pytest.mark.parametrize("value,expected", VECTORS)
    def test_known_vectors(self, value: int, expected: bytes) -> None:
        """Test encodings match the reference vectors."""
        assert encode(value) == expected

    def test_zero_is_single_byte(self) -> None:
        """Test zero encodes to one clear byte."""
        assert encode(0) == b"\x00"

    def test_continuation_flags(self) -> None:
        """Test only the last byte has the continuation flag clear."""
        data = encode(1 << 40)
        assert all(b & 0x80 for b in data[:-1])
        assert not data[-1] & 0x80

    def test_type_maximums(self) -> None:
        """Test the largest value of each type is encodable."""
        assert encode(255, U8) == b"\x80\x7f"
        assert encode(127, I8) == b"\x7f"
        assert encode(65535, U16) == b"\x82\xfe\x7f"
        assert len(encode(U128.max_value, U128)) <= U128.max_groups

    def test_encode_many(self) -> None:
        """Test encodings are concatenated in order."""
        assert encode_many([13, 127, 256, 16383]) == b"\x0d\x7f\x81\x00\xfe\x7f"
        assert encode_many([]) == b""


class TestEncodeErrors:
    """Test encoder error handling."""

    def test_negative(self) -> None:
        """Test negative values are rejected."""
        with pytest.raises(NegativeValueError, match="negative"):
            encode(-2)

    def test_negative_is_encode_error(self) -> None:
        """Test NegativeValueError can be caught as EncodeError."""
        with pytest.raises(EncodeError):
            encode(-1)

    def test_too_large_for_type(self) -> None:
        """Test values above the type maximum are rejected."""
        with pytest.raises(ValueRangeError, match="does not fit u8"):
            encode(256, U8)

        with pytest.raises(ValueRangeError, match="does not fit i8"):
            encode(128, I8)

    def test_too_large_for_default(self) -> None:
        """Test the default type is u64."""
        with pytest.raises(ValueRangeError):
            encode(1 << 64)

    @pytest.mark.parametrize("value", [1.0, "1", None, True])
    def test_not_an_int(self, value: object) -> None:
        """Test non-integers (including bool) are rejected."""
        with pytest.raises(EncodeError, match="Expected int"):
            encode(value)  # type: ignore[arg-type]

    def test_encode_many_stops_on_bad_value(self) -> None:
        """Test encode_many raises on the first bad value."""
        with pytest.raises(NegativeValueError):
            encode_many([1, 2, -3])


class TestWritePositive:
    """Test writing to streams."""

    def test_returns_bytes_written(self, stream: BytesIO) -> None:
        """Test the written length is returned."""
        assert write_positive(stream, 127, U8) == 1
        assert write_positive(stream, 256) == 2
        assert stream.getvalue() == b"\x7f\x81\x00"

    def test_single_write_call(self) -> None:
        """Test the encoding is handed to the sink in one write."""
        writes: list[bytes] = []

        class RecordingSink:
            def write(self, data: bytes) -> int:
                writes.append(bytes(data))
                return len(data)

        write_positive(RecordingSink(), 1 << 32)  # type: ignore[arg-type]
        assert writes == [b"\x8e\xfe\xfe\xff\x00"]

    def test_partial_writes_are_completed(self) -> None:
        """Test a raw sink accepting one byte per call receives the whole encoding."""

        class OneByteRawSink(RawIOBase):
            def __init__(self) -> None:
                self.data = bytearray()
                self.calls = 0

            def writable(self) -> bool:
                return True

            def write(self, b) -> int:  # type: ignore[override]
                self.calls += 1
                self.data += bytes(b[:1])
                return 1

        sink = OneByteRawSink()
        assert write_positive(sink, 1 << 32) == 5
        assert bytes(sink.data) == b"\x8e\xfe\xfe\xff\x00"
        assert sink.calls == 5

    def test_would_block_write_is_retried(self) -> None:
        """Test a write returning None is offered the same bytes again."""
        offered: list[bytes] = []

        class StallingSink:
            def write(self, data: bytes) -> int | None:
                offered.append(bytes(data))
                return None if len(offered) == 1 else len(data)

        assert write_positive(StallingSink(), 300) == 2  # type: ignore[arg-type]
        assert offered == [b"\x81\x2c", b"\x81\x2c"]

    def test_nothing_written_on_invalid_value(self, stream: BytesIO) -> None:
        """Test validation happens before writing."""
        with pytest.raises(ValueRangeError):
            write_positive(stream, 1000, U8)
        assert stream.getvalue() == b""

    def test_sink_error_propagates(self) -> None:
        """Test I/O errors from the sink are not wrapped."""

        class BrokenSink:
            def write(self, data: bytes) -> int:
                raise OSError("disk full")

        with pytest.raises(OSError, match="disk full"):
            write_positive(BrokenSink(), 300)  # type: ignore[arg-type]
