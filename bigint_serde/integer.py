# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serializable wrapper for gmpy2 integers.

mpz is a foreign type, so the encode/decode behaviour lives on a thin
wrapper. Equality and conversions go straight to the wrapped value.
"""

from gmpy2 import mpz

from .serde import Deserializer, Serializer


class Integer:
    """Arbitrary-precision integer that can be serialized."""

    __slots__ = ("_value",)

    def __init__(self, value=0):
        self.value = value

    @property
    def value(self) -> mpz:
        return self._value

    @value.setter
    def value(self, value) -> None:
        if isinstance(value, Integer):
            value = value.value
        elif not isinstance(value, (int, mpz)):
            raise TypeError(f"Cannot wrap {type(value).__name__} as Integer")
        self._value = mpz(value)

    def into(self) -> mpz:
        """Unwrap into the raw mpz value."""
        return self._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self._value == other._value

    __hash__ = None

    def __int__(self) -> int:
        return int(self._value)

    def __index__(self) -> int:
        return int(self._value)

    def __repr__(self) -> str:
        return f"Integer({self._value})"

    def serialize(self, serializer: Serializer) -> None:
        """Write this value as a digit sequence."""
        from .adapter import encode_integer
        encode_integer(serializer, self._value)

    @classmethod
    def deserialize(cls, deserializer: Deserializer) -> "Integer":
        """Read a value written by serialize()."""
        from .adapter import decode_integer
        return cls(decode_integer(deserializer))
