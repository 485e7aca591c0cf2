# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Self-describing binary format on top of MessagePack.

A sequence is a MessagePack array. Digits below 0x80 pack as a single
positive fixint byte, larger ones as uint8 (cc xx).
"""

from typing import Optional, Type

import msgpack
from msgpack.exceptions import UnpackException

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
from ..varint import Buffer


class _SeqWriter(SequenceWriter):

    def __init__(self, se: "MsgpackSerializer", length: Optional[int]):
        self._se = se
        self._length = length
        self._count = 0
        self._pending = []
        if length is not None:
            se._output += se._packer.pack_array_header(length)

    def serialize_element(self, value: int) -> None:
        value = check_u8(value)
        if self._length is None:
            self._pending.append(value)
        else:
            self._se._output += self._se._packer.pack(value)
        self._count += 1

    def end(self) -> None:
        if self._length is None:
            self._se._output += self._se._packer.pack(self._pending)
        elif self._count != self._length:
            raise SerdeError(
                f"Sequence length mismatch: announced {self._length}, wrote {self._count}"
            )


class MsgpackSerializer(Serializer):
    """Serializer writing MessagePack into an in-memory buffer."""

    def __init__(self):
        self._packer = msgpack.Packer()
        self._output = bytearray()

    def serialize_seq(self, length: Optional[int]) -> SequenceWriter:
        return _SeqWriter(self, length)

    def finalize(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._output)


class _SeqReader(SequenceReader):

    def __init__(self, unpacker: msgpack.Unpacker, count: int):
        self._unpacker = unpacker
        self._count = count
        self._index = 0

    def size_hint(self) -> Optional[int]:
        return self._count

    def next_element(self) -> Optional[int]:
        if self._index >= self._count:
            return None
        try:
            item = self._unpacker.unpack()
        except (UnpackException, ValueError) as e:
            raise FormatError(f"Msgpack decode: {str(e) or type(e).__name__}") from e
        if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 0xFF:
            raise FormatError(
                f"Invalid element at index {self._index}: expected u8, got {item!r}"
            )
        self._index += 1
        return item


class MsgpackDeserializer(Deserializer):
    """Deserializer reading MessagePack from a bytes buffer."""

    def __init__(self, data: Buffer):
        self._size = len(data)
        self._unpacker = msgpack.Unpacker(raw=False)
        self._unpacker.feed(data)

    def deserialize_seq(self) -> SequenceReader:
        try:
            count = self._unpacker.read_array_header()
        except (UnpackException, ValueError) as e:
            raise FormatError(
                f"Expected a sequence of bytes in little-endian format: {str(e) or type(e).__name__}"
            ) from e
        return _SeqReader(self._unpacker, count)

    def end(self) -> None:
        """
        Check that the whole buffer was consumed.

        Raises:
            FormatError: If bytes remain after the value
        """
        remaining = self._size - self._unpacker.tell()
        if remaining:
            raise FormatError(f"Msgpack decode: {remaining} trailing bytes")


def dumps(obj) -> bytes:
    """Serialize obj (anything with a serialize() method) to MessagePack."""
    se = MsgpackSerializer()
    obj.serialize(se)
    return se.finalize()


def loads(data: Buffer, cls: Type = Integer):
    """
    Deserialize one value of type cls from MessagePack bytes.

    Raises:
        FormatError: If data is malformed or has trailing bytes
    """
    de = MsgpackDeserializer(data)
    value = cls.deserialize(de)
    de.end()
    return value
