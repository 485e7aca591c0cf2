# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serialization framework contracts.

A format provides a Serializer that can open a sequence and a
Deserializer that can hand out a sequence reader. Values written
through these contracts do not depend on the concrete format.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SerdeError(Exception):
    """Base exception for serialization errors."""
    pass


class FormatError(SerdeError):
    """Input is structurally invalid for the format."""
    pass


def check_u8(value: int) -> int:
    """
    Check that a sequence element fits in a u8.

    Raises:
        ValueError: If value is not an int in 0..255
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"Element out of u8 range: {value!r}")
    return value


class SequenceWriter(ABC):
    """Sink for the elements of one sequence."""

    @abstractmethod
    def serialize_element(self, value: int) -> None:
        """Write the next element."""

    @abstractmethod
    def end(self) -> None:
        """Close the sequence."""


class Serializer(ABC):
    """Format-side writer."""

    @abstractmethod
    def serialize_seq(self, length: Optional[int]) -> SequenceWriter:
        """
        Begin a sequence.

        Args:
            length: Element count if known up front, else None

        Returns:
            Writer for the sequence elements
        """


class SequenceReader(ABC):
    """Source for the elements of one sequence."""

    def size_hint(self) -> Optional[int]:
        """Advisory element count, or None if the format has none."""
        return None

    @abstractmethod
    def next_element(self) -> Optional[int]:
        """
        Read the next element.

        Returns:
            The element, or None once the sequence is exhausted

        Raises:
            FormatError: If the element is malformed
        """


class Deserializer(ABC):
    """Format-side reader."""

    @abstractmethod
    def deserialize_seq(self) -> SequenceReader:
        """
        Start reading a sequence.

        Raises:
            FormatError: If the input does not hold a sequence
        """
