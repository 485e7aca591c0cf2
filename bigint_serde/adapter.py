# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Encoding of arbitrary-precision integers as a sequence of u8 digits.

    encode_integer(serializer, value)
    decode_integer(deserializer) -> Integer

The digits are written least-significant first with the count announced
up front. On decode the reader's size hint only sizes the initial buffer;
the sequence ends when the reader says it is exhausted.
"""

from .digits import IntegerLike, export_digits, import_digits
from .integer import Integer
from .serde import Deserializer, Serializer

# Initial buffer when the format gives no size hint
DEFAULT_CAPACITY = 64

# Upper bound on pre-allocation from an untrusted hint
MAX_PREALLOC = 1 << 20


def encode_integer(serializer: Serializer, value: IntegerLike) -> None:
    """
    Encode a non-negative integer as a digit sequence.

    Args:
        serializer: Target format
        value: Integer or raw value to encode

    Raises:
        ValueError: If value is negative
    """
    if isinstance(value, Integer):
        value = value.value

    digits = export_digits(value)
    seq = serializer.serialize_seq(len(digits))
    for digit in digits:
        seq.serialize_element(digit)
    seq.end()


def decode_integer(deserializer: Deserializer) -> Integer:
    """
    Decode a digit sequence into an Integer.

    Args:
        deserializer: Source format

    Returns:
        Decoded Integer

    Raises:
        FormatError: If the sequence or one of its elements is invalid
    """
    seq = deserializer.deserialize_seq()

    hint = seq.size_hint()
    if hint is None:
        hint = DEFAULT_CAPACITY
    buf = bytearray(max(0, min(hint, MAX_PREALLOC)))

    count = 0
    while True:
        digit = seq.next_element()
        if digit is None:
            break
        if count < len(buf):
            buf[count] = digit
        else:
            buf.append(digit)
        count += 1

    del buf[count:]
    return Integer(import_digits(buf))
