# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 varints for postcard sequence lengths.

Seven bits per byte, low group first, high bit set on every byte but
the last. Sequence lengths are u64, so decoding stops at 64 bits.
"""

from typing import Tuple, Union

from .serde import FormatError

Buffer = Union[bytes, bytearray, memoryview]

MAX_BITS = 64


def encode_varint(value: int) -> bytes:
    """
    Encode a sequence length as a varint.

    Args:
        value: Non-negative integer to encode

    Returns:
        Varint-encoded bytes
    """
    if value < 0:
        raise ValueError("Cannot encode negative value as varint")

    out = bytearray()
    while True:
        group = value & 0x7F
        value >>= 7
        if not value:
            out.append(group)
            return bytes(out)
        out.append(group | 0x80)


def decode_varint(data: Buffer, offset: int = 0, max_bits: int = MAX_BITS) -> Tuple[int, int]:
    """
    Decode a varint from a buffer.

    Args:
        data: Buffer containing the varint
        offset: Starting offset in data
        max_bits: Widest value accepted

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        FormatError: If varint is truncated or wider than max_bits
    """
    value = 0
    for shift in range(0, max_bits + 6, 7):
        if offset >= len(data):
            raise FormatError("Varint decode: unexpected end of data")
        byte = data[offset]
        offset += 1
        value |= (byte & 0x7F) << shift
        if byte < 0x80:
            if value >> max_bits:
                raise FormatError("Varint decode: value too large")
            return value, offset

    raise FormatError("Varint decode: value too large")
