# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Human-readable format: a sequence is a JSON array.

12345 has digits [0x39, 0x30] and is encoded as "[57,48]".
"""

import json
from typing import Any, List, Optional, Type, Union

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


class _SeqWriter(SequenceWriter):

    def __init__(self, se: "JsonSerializer"):
        self._se = se
        self._items: List[int] = []

    def serialize_element(self, value: int) -> None:
        self._items.append(check_u8(value))

    def end(self) -> None:
        self._se._value = self._items


class JsonSerializer(Serializer):
    """Serializer building a JSON document."""

    def __init__(self):
        self._value: Any = None

    def serialize_seq(self, length: Optional[int]) -> SequenceWriter:
        return _SeqWriter(self)

    def finalize(self) -> str:
        """Return the JSON text of the written value."""
        if self._value is None:
            raise SerdeError("Nothing was serialized")
        return json.dumps(self._value, separators=(",", ":"))


class _SeqReader(SequenceReader):

    def __init__(self, items: list):
        self._items = items
        self._index = 0

    def size_hint(self) -> Optional[int]:
        return len(self._items)

    def next_element(self) -> Optional[int]:
        if self._index >= len(self._items):
            return None
        item = self._items[self._index]
        if isinstance(item, bool) or not isinstance(item, int):
            raise FormatError(
                f"Invalid element at index {self._index}: expected u8, got {item!r}"
            )
        if not 0 <= item <= 0xFF:
            raise FormatError(
                f"Invalid element at index {self._index}: {item} out of u8 range"
            )
        self._index += 1
        return item


class JsonDeserializer(Deserializer):
    """Deserializer over JSON text."""

    def __init__(self, text: Union[str, bytes]):
        try:
            self._value = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise FormatError(f"Invalid JSON: {e}") from e

    def deserialize_seq(self) -> SequenceReader:
        if not isinstance(self._value, list):
            raise FormatError(
                "Expected a sequence of bytes in little-endian format, "
                f"got {type(self._value).__name__}"
            )
        return _SeqReader(self._value)


def dumps(obj) -> str:
    """Serialize obj (anything with a serialize() method) to JSON text."""
    se = JsonSerializer()
    obj.serialize(se)
    return se.finalize()


def loads(text: Union[str, bytes], cls: Type = Integer):
    """
    Deserialize one value of type cls from JSON text.

    Raises:
        FormatError: If text is not valid JSON or not a digit array
    """
    return cls.deserialize(JsonDeserializer(text))
