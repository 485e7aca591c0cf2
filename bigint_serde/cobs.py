# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
COBS (Consistent Overhead Byte Stuffing) framing for integer streams.

A postcard-encoded integer is full of 0x00 digits; COBS rewrites it
without zeros so a single 0x00 can end each frame on the wire.
"""

from .serde import FormatError

FRAME_DELIMITER = b"\x00"

# Longest run of non-zero bytes one code byte can describe
_MAX_RUN = 254


def cobs_encode(data: bytes) -> bytes:
    """
    Encode data using COBS.

    Args:
        data: Raw bytes to encode

    Returns:
        COBS-encoded bytes (without delimiter)
    """
    output = bytearray()
    for segment in bytes(data).split(b"\x00"):
        # A full run needs no implied zero, so it gets its own 0xFF block
        while len(segment) >= _MAX_RUN:
            output.append(0xFF)
            output += segment[:_MAX_RUN]
            segment = segment[_MAX_RUN:]
        output.append(len(segment) + 1)
        output += segment
    return bytes(output)


def cobs_decode(data: bytes) -> bytes:
    """
    Decode COBS-encoded data.

    Args:
        data: COBS-encoded bytes, decoding stops at the first 0x00

    Returns:
        Decoded raw bytes

    Raises:
        FormatError: If a block runs past the end of the frame
    """
    data = bytes(data)
    end = data.find(FRAME_DELIMITER)
    if end != -1:
        data = data[:end]

    output = bytearray()
    i = 0
    while i < len(data):
        code = data[i]
        block = data[i + 1:i + code]
        if len(block) != code - 1:
            raise FormatError("COBS decode: unexpected end of data")
        output += block
        i += code
        if code != 0xFF and i < len(data):
            output.append(0)
    return bytes(output)


def frame(payload: bytes) -> bytes:
    """COBS-encode a payload and append the delimiter."""
    return cobs_encode(payload) + FRAME_DELIMITER


def unframe(data: bytes) -> bytes:
    """Decode one delimited frame."""
    return cobs_decode(data)
