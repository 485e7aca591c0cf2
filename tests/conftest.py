# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import gmpy2
import pytest

from bigint_serde.formats import json, msgpack, postcard

FORMAT_MODULES = [postcard, json, msgpack]


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--scale-bits",
        action="store",
        type=int,
        default=1_000_000,
        help="Bit width of the random values used by the scale tests",
    )
    parser.addoption(
        "--seed",
        action="store",
        type=int,
        default=20260118,
        help="Seed for the random value generator",
    )


@pytest.fixture(scope="session")
def scale_bits(request):
    """Bit width for the scale tests."""
    return request.config.getoption("--scale-bits")


@pytest.fixture
def rand(request):
    """Seeded gmpy2 random state."""
    return gmpy2.random_state(request.config.getoption("--seed"))


@pytest.fixture
def random_below(rand):
    """
    Factory for random values below 2**bits.

    Usage:
        value = random_below(64)
    """
    def make(bits: int) -> gmpy2.mpz:
        return gmpy2.mpz_urandomb(rand, bits)
    return make


@pytest.fixture(params=FORMAT_MODULES, ids=lambda m: m.__name__.rsplit(".", 1)[-1])
def fmt(request):
    """Each concrete format module in turn."""
    return request.param
