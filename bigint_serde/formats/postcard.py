# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Compact binary format, postcard compatible.

A sequence is its element count as a varint followed by the elements.
A u8 element is a single raw byte, so an integer with digits
[0x39, 0x30] (12345) is encoded as 02 39 30.
"""

from typing import Optional, Type

from ..integer import Integer
from ..serde import (
    Deserializer,
    FormatError,
    SequenceReader,
    SequenceWriter,
    SerdeError,
    Serializer,
    check_u8,
)
from ..varint import Buffer, decode_varint, encode_varint


class _SeqWriter(SequenceWriter):

    def __init__(self, output: bytearray, length: Optional[int]):
        self._output = output
        self._length = length
        self._count = 0
        self._pending = bytearray()
        if length is not None:
            output += encode_varint(length)

    def serialize_element(self, value: int) -> None:
        value = check_u8(value)
        if self._length is None:
            self._pending.append(value)
        else:
            self._output.append(value)
        self._count += 1

    def end(self) -> None:
        if self._length is None:
            self._output += encode_varint(self._count)
            self._output += self._pending
        elif self._count != self._length:
            raise SerdeError(
                f"Sequence length mismatch: announced {self._length}, wrote {self._count}"
            )


class PostcardSerializer(Serializer):
    """Serializer writing into an in-memory buffer."""

    def __init__(self):
        self._output = bytearray()

    def serialize_seq(self, length: Optional[int]) -> SequenceWriter:
        return _SeqWriter(self._output, length)

    def finalize(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._output)


class _SeqReader(SequenceReader):

    def __init__(self, de: "PostcardDeserializer", count: int):
        self._de = de
        self._count = count
        self._remaining = count

    def size_hint(self) -> Optional[int]:
        return self._count

    def next_element(self) -> Optional[int]:
        if self._remaining == 0:
            return None
        self._remaining -= 1
        return self._de._read_byte()


class PostcardDeserializer(Deserializer):
    """Deserializer reading from a bytes buffer."""

    def __init__(self, data: Buffer):
        self._data = data
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed."""
        return self._offset

    def _read_byte(self) -> int:
        if self._offset >= len(self._data):
            raise FormatError("Postcard decode: unexpected end of data")
        byte = self._data[self._offset]
        self._offset += 1
        return byte

    def deserialize_seq(self) -> SequenceReader:
        count, self._offset = decode_varint(self._data, self._offset)
        return _SeqReader(self, count)

    def end(self) -> None:
        """
        Check that the whole buffer was consumed.

        Raises:
            FormatError: If bytes remain after the value
        """
        if self._offset != len(self._data):
            raise FormatError(
                f"Postcard decode: {len(self._data) - self._offset} trailing bytes"
            )


def dumps(obj) -> bytes:
    """Serialize obj (anything with a serialize() method) to postcard bytes."""
    se = PostcardSerializer()
    obj.serialize(se)
    return se.finalize()


def loads(data: Buffer, cls: Type = Integer):
    """
    Deserialize one value of type cls from postcard bytes.

    Raises:
        FormatError: If data is malformed or has trailing bytes
    """
    de = PostcardDeserializer(data)
    value = cls.deserialize(de)
    de.end()
    return value
