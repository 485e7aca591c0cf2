# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for varint sequence lengths."""

import pytest

from bigint_serde.serde import FormatError
from bigint_serde.varint import encode_varint, decode_varint


class TestEncodeVarint:
    """Tests for encode_varint function."""

    @pytest.mark.parametrize("value,expected", [
        (0, b"\x00"),
        (1, b"\x01"),
        (127, b"\x7F"),
        (128, b"\x80\x01"),
        (129, b"\x81\x01"),
        (16383, b"\xFF\x7F"),
        (16384, b"\x80\x80\x01"),
    ])
    def test_known_encodings(self, value, expected):
        """Digit counts at the 7-bit group boundaries."""
        assert encode_varint(value) == expected

    def test_max_u64(self):
        """The largest sequence length takes ten bytes."""
        assert encode_varint(2**64 - 1) == b"\xFF" * 9 + b"\x01"

    def test_negative_raises(self):
        """Negative values raise ValueError."""
        with pytest.raises(ValueError, match="Cannot encode negative"):
            encode_varint(-1)


class TestDecodeVarint:
    """Tests for decode_varint function."""

    def test_zero(self):
        """A single zero byte is count 0."""
        assert decode_varint(b"\x00") == (0, 1)

    def test_multi_byte(self):
        """Low group comes first."""
        assert decode_varint(b"\x81\x01") == (129, 2)
        assert decode_varint(b"\x80\x80\x01") == (16384, 3)

    def test_with_offset_and_trailing_data(self):
        """Decoding starts at offset and stops after the varint."""
        assert decode_varint(b"\xAA\x80\x01\xCC", offset=1) == (128, 3)

    def test_memoryview(self):
        """Any buffer type is accepted."""
        assert decode_varint(memoryview(b"\x7F")) == (127, 1)

    def test_max_u64(self):
        """2**64 - 1 is the widest accepted count."""
        assert decode_varint(b"\xFF" * 9 + b"\x01") == (2**64 - 1, 10)

    @pytest.mark.parametrize("data", [b"", b"\x80", b"\xFF\xFF"])
    def test_truncated_raises(self, data):
        """Missing bytes raise FormatError."""
        with pytest.raises(FormatError, match="unexpected end of data"):
            decode_varint(data)

    def test_offset_past_end_raises(self):
        """Offset past end of data raises FormatError."""
        with pytest.raises(FormatError, match="unexpected end of data"):
            decode_varint(b"\x01", offset=5)

    def test_above_u64_raises(self):
        """A tenth byte that overflows 64 bits is rejected."""
        with pytest.raises(FormatError, match="value too large"):
            decode_varint(b"\xFF" * 9 + b"\x02")

    def test_too_many_bytes_raises(self):
        """More than ten continuation bytes are rejected."""
        with pytest.raises(FormatError, match="value too large"):
            decode_varint(b"\x80" * 10 + b"\x01")

    def test_custom_width(self):
        """max_bits narrows the accepted range."""
        assert decode_varint(b"\xFF\x01", max_bits=8) == (255, 2)
        with pytest.raises(FormatError, match="value too large"):
            decode_varint(b"\x80\x02", max_bits=8)

    @pytest.mark.parametrize("value", [0, 127, 128, 300, 2**32, 2**63 + 5])
    def test_roundtrip(self, value):
        """Encode then decode returns the original length."""
        encoded = encode_varint(value)
        assert decode_varint(encoded) == (value, len(encoded))
