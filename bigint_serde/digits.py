# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Base-256 digit conversion for arbitrary-precision integers.

Digits are stored least-significant first. Zero has no digits, so it
exports to the empty sequence.
"""

from typing import Iterable, Union

from gmpy2 import mpz

IntegerLike = Union[int, mpz]


def digit_count(value: IntegerLike) -> int:
    """
    Number of base-256 digits needed for the magnitude of a value.

    Args:
        value: Integer to measure

    Returns:
        Digit count (0 for zero)
    """
    return (mpz(value).bit_length() + 7) // 8


def export_digits(value: IntegerLike) -> bytes:
    """
    Export a non-negative integer as base-256 digits.

    Args:
        value: Non-negative integer to export

    Returns:
        Digits, least significant first, without high-order zeros

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError("Cannot export negative value as digits")

    return int(value).to_bytes(digit_count(value), "little")


def import_digits(digits: Union[bytes, bytearray, memoryview, Iterable[int]]) -> mpz:
    """
    Rebuild an integer from base-256 digits.

    Args:
        digits: Digits, least significant first (may be empty)

    Returns:
        The integer value as mpz

    Raises:
        ValueError: If an element is outside 0..255
    """
    if not isinstance(digits, (bytes, bytearray, memoryview)):
        digits = bytes(digits)

    return mpz(int.from_bytes(digits, "little"))
