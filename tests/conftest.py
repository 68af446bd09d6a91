"""Shared fixtures for the gf2k test suite."""

import random

import pytest

import gf2k
from gf2k import (
    DEFAULT_FIELD,
    POLY_210_G2,
    POLY_310_G2,
    POLY_410_G2,
    POLY_520_G2,
    POLY_610_G2,
    POLY_710_G2,
    POLY_84310_G3,
    POLY_84320_G2,
    FieldRegistry,
)


PRESETS = [
    POLY_210_G2,
    POLY_310_G2,
    POLY_410_G2,
    POLY_520_G2,
    POLY_610_G2,
    POLY_710_G2,
    POLY_84310_G3,
    POLY_84320_G2,
]

SMALL_PRESETS = [f for f in PRESETS if f.size <= 64]


@pytest.fixture
def gf256():
    """The default field, GF(256) with p=0x11d and g=2."""
    return DEFAULT_FIELD


@pytest.fixture
def aes():
    """GF(256) with the AES polynomial 0x11b and g=3."""
    return POLY_84310_G3


@pytest.fixture
def gf8():
    return gf2k.new_field(8, 11, 2)


@pytest.fixture
def registry():
    """A private registry, isolated from the process-wide one."""
    return FieldRegistry()


@pytest.fixture
def rng():
    return random.Random(0x11d)


@pytest.fixture
def namespace():
    """Names available when evaluating reconstruction strings."""
    return vars(gf2k)


def random_coefficients(field, rng, max_len=6):
    """Random little-endian coefficient list, possibly with trailing zeros."""
    return [rng.randrange(field.size) for _ in range(rng.randrange(max_len + 1))]
