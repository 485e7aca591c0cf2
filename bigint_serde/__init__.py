# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
bigint-serde - format-agnostic serialization of arbitrary-precision integers.

An integer is written as the sequence of its base-256 digits, least
significant first, through any format implementing the Serializer and
Deserializer contracts.

Example usage:
    from gmpy2 import mpz
    from bigint_serde import Integer
    from bigint_serde.formats import json, postcard

    number = Integer(mpz(2) ** 130 - 1)

    data = postcard.dumps(number)
    assert postcard.loads(data) == number

    text = json.dumps(number)
    assert json.loads(text) == number
"""

from .adapter import decode_integer, encode_integer
from .cobs import cobs_encode, cobs_decode
from .digits import digit_count, export_digits, import_digits
from .integer import Integer
from .serde import (
    Deserializer,
    FormatError,
    SequenceReader,
    SequenceWriter,
    SerdeError,
    Serializer,
)
from .stream import IntegerStream, StreamError, StreamTimeoutError
from .varint import encode_varint, decode_varint

__version__ = "0.1.0"

__all__ = [
    # Wrapper
    "Integer",
    # Digits
    "digit_count",
    "export_digits",
    "import_digits",
    # Sequence adapter
    "encode_integer",
    "decode_integer",
    # Contracts
    "Serializer",
    "Deserializer",
    "SequenceWriter",
    "SequenceReader",
    "SerdeError",
    "FormatError",
    # Stream
    "IntegerStream",
    "StreamError",
    "StreamTimeoutError",
    # COBS
    "cobs_encode",
    "cobs_decode",
    # Varint
    "encode_varint",
    "decode_varint",
]
