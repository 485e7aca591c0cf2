# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the Integer wrapper."""

import operator

import pytest
from gmpy2 import mpz

from bigint_serde.integer import Integer


class TestIntegerConstruction:
    """Tests for wrapping and unwrapping."""

    def test_from_mpz(self):
        """Wrapping an mpz keeps its value."""
        value = mpz(2) ** 200
        assert Integer(value).value == value

    def test_from_int(self):
        """Plain ints are converted to mpz."""
        number = Integer(12345)
        assert number.value == 12345
        assert isinstance(number.value, type(mpz(0)))

    def test_default_is_zero(self):
        """No argument wraps zero."""
        assert Integer().value == 0

    def test_from_integer(self):
        """Wrapping an Integer copies its value."""
        assert Integer(Integer(7)).value == 7

    def test_into(self):
        """into() returns the raw mpz."""
        value = mpz(99)
        assert Integer(value).into() == value

    def test_int_conversion(self):
        """int() and index() forward to the value."""
        number = Integer(2**80 + 1)
        assert int(number) == 2**80 + 1
        assert operator.index(number) == 2**80 + 1
        assert hex(Integer(255)) == "0xff"

    def test_value_is_mutable(self):
        """value can be replaced in place."""
        number = Integer(1)
        number.value = mpz(2) ** 64
        assert number == Integer(2**64)

    def test_repr(self):
        """repr shows the wrapped value."""
        assert repr(Integer(42)) == "Integer(42)"

    @pytest.mark.parametrize("value", [1.9, "12", b"\x01", None])
    def test_rejects_non_integers(self, value):
        """Only Integer, int and mpz values can be wrapped."""
        with pytest.raises(TypeError, match="Cannot wrap"):
            Integer(value)

    def test_setter_rejects_non_integers(self):
        """Assigning a float leaves the value unchanged."""
        number = Integer(3)
        with pytest.raises(TypeError):
            number.value = 2.5
        assert number == Integer(3)


class TestIntegerEquality:
    """Tests for equality."""

    def test_equal_values(self):
        """Wrappers of equal values are equal."""
        assert Integer(mpz(5)) == Integer(5)
        assert Integer(2**100) == Integer(mpz(2) ** 100)

    def test_different_values(self):
        """Wrappers of different values differ."""
        assert Integer(5) != Integer(6)

    def test_not_equal_to_raw(self):
        """A wrapper does not compare equal to a raw value."""
        assert Integer(5) != 5
        assert Integer(5) != "5"

    def test_unhashable(self):
        """The wrapper is mutable and not hashable."""
        with pytest.raises(TypeError):
            hash(Integer(1))
