"""Tests for GaloisField construction and element arithmetic."""

import random

import numpy as np
import pytest

import gf2k
from gf2k import (
    DEFAULT_FIELD,
    POLY_310_G2,
    POLY_84310_G3,
    POLY_84320_G2,
    new_field,
)
from gf2k.errors import (
    DivisionByZero,
    ElementOutOfRange,
    IncompatibleFields,
    InvalidFieldSize,
    LogarithmOfZero,
    NotGenerator,
    PolynomialOutOfRange,
    ReduciblePolynomial,
)
from gf2k.params import mul_mod

from conftest import PRESETS, SMALL_PRESETS


# Exp/log tables for the AES field from "The Laws of Cryptography: The Finite
# Field GF(2^8)", Neal R. Wagner. First rows only.
AES_EXP_PREFIX = [
    0x01, 0x03, 0x05, 0x0f, 0x11, 0x33, 0x55, 0xff, 0x1a, 0x2e, 0x72, 0x96, 0xa1, 0xf8, 0x13, 0x35,
    0x5f, 0xe1, 0x38, 0x48, 0xd8, 0x73, 0x95, 0xa4, 0xf7, 0x02, 0x06, 0x0a, 0x1e, 0x22, 0x66, 0xaa,
]
AES_LOG_PREFIX = [
    None, 0x00, 0x19, 0x01, 0x32, 0x02, 0x1a, 0xc6, 0x4b, 0xc7, 0x1b, 0x68, 0x33, 0xee, 0xdf, 0x03,
    0x64, 0x04, 0xe0, 0x0e, 0x34, 0x8d, 0x81, 0xef, 0x4c, 0x71, 0x08, 0xc8, 0xf8, 0x69, 0x1c, 0xc1,
]

GF8_MUL = [
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 2, 3, 4, 5, 6, 7],
    [0, 2, 4, 6, 3, 1, 7, 5],
    [0, 3, 6, 5, 7, 4, 1, 2],
    [0, 4, 3, 7, 6, 2, 5, 1],
    [0, 5, 1, 4, 2, 7, 3, 6],
    [0, 6, 7, 1, 5, 3, 2, 4],
    [0, 7, 5, 2, 1, 6, 4, 3],
]


# =============================================================================
# Construction
# =============================================================================

class TestNewField:

    def test_bad_field_size(self):
        with pytest.raises(InvalidFieldSize):
            new_field(17, 0, 0)

    @pytest.mark.parametrize("polynomial", [15, 32])
    def test_polynomial_out_of_range(self, polynomial):
        with pytest.raises(PolynomialOutOfRange):
            new_field(16, polynomial, 2)

    @pytest.mark.parametrize("generator", [0x1, 0x3])
    def test_not_generator(self, generator):
        with pytest.raises(NotGenerator):
            new_field(64, 0x43, generator)

    def test_not_generator_reports_period(self):
        # 3 == x + 1 only generates a proper subgroup of GF(64)*
        with pytest.raises(NotGenerator) as excinfo:
            new_field(64, 0x43, 0x3)
        assert 0 < excinfo.value.period < 63
        assert 63 % excinfo.value.period == 0

    def test_reducible(self):
        with pytest.raises(ReduciblePolynomial):
            new_field(64, 0x42, 0x2)

    def test_identical_arguments_share_instance(self):
        a = new_field(64, 0x43, 0x7)
        b = new_field(64, 0x43, 0x7)
        assert a is b
        assert a == b
        assert {a: "x"}[b] == "x"

    def test_default_field(self):
        assert DEFAULT_FIELD is POLY_84320_G2
        assert new_field(256, 0x11d, 0x2) is DEFAULT_FIELD

    def test_accessors(self):
        gf = new_field(64, 0x43, 0x7)
        assert gf.size == 64
        assert gf.polynomial == 0x43
        assert gf.generator == 0x7
        assert gf.order == 63
        assert len(gf.exp_table) == 2 * 64 - 2
        assert len(gf.log_table) == 64

    def test_tables_are_read_only(self, gf256):
        with pytest.raises(ValueError):
            gf256.exp_table[0] = 7
        with pytest.raises(ValueError):
            gf256.log_table[1] = 7


# =============================================================================
# Tables
# =============================================================================

@pytest.mark.parametrize("gf", PRESETS, ids=repr)
def test_tables_are_mutual_inverses(gf):
    m = gf.order
    for i in range(m):
        assert gf.log_table[gf.exp_table[i]] == i
        assert gf.log_table[gf.exp_table[i + m]] == i
    for x in range(1, gf.size):
        assert gf.exp_table[gf.log_table[x]] == x


@pytest.mark.parametrize("gf", PRESETS, ids=repr)
def test_exp_log_roundtrip(gf):
    for x in range(1, gf.size):
        assert gf.exp(gf.log(x)) == x
    for e in range(gf.order):
        assert gf.log(gf.exp(e)) == e
    # exponents wrap modulo the group order
    assert gf.exp(gf.order) == 1
    assert gf.exp(-1) == gf.inv(gf.generator)


def test_aes_tables(aes):
    for i, expect in enumerate(AES_EXP_PREFIX):
        assert aes.exp(i) == expect
    for i, expect in enumerate(AES_LOG_PREFIX):
        if expect is not None:
            assert aes.log(i) == expect


# =============================================================================
# Element arithmetic
# =============================================================================

class TestArithmetic:

    @pytest.mark.parametrize("value", [0, 1, 5, 19])
    def test_add(self, gf256, value):
        assert gf256.add(value, value) == 0
        assert gf256.add(value, 0) == value
        assert gf256.add(0, value) == value
        assert gf256.sub(value, value) == 0
        assert gf256.neg(value) == value

    def test_mul(self, gf256):
        # (x^4 + 1)(x^4 + x^2) = x^8 + x^6 + x^4 + x^2, reduced by 0x11d
        a, b, axb = 0x11, 0x14, 0x49
        assert gf256.mul(a, 0) == 0
        assert gf256.mul(0, b) == 0
        assert gf256.mul(a, 1) == a
        assert gf256.mul(1, b) == b
        assert gf256.mul(a, b) == axb

    def test_div(self, gf256):
        a, b, axb = 0x11, 0x14, 0x49
        assert gf256.div(axb, b) == a
        assert gf256.div(axb, a) == b
        assert gf256.div(axb, 1) == axb
        assert gf256.div(0, b) == 0
        assert gf256.div(1, b) == 0xe0
        assert gf256.inv(b) == 0xe0
        assert gf256.mul(b, 0xe0) == 1

    def test_div_by_zero(self, gf256):
        with pytest.raises(DivisionByZero):
            gf256.div(1, 0)
        with pytest.raises(DivisionByZero):
            gf256.div(0, 0)
        with pytest.raises(DivisionByZero):
            gf256.inv(0)
        with pytest.raises(ZeroDivisionError):
            gf256.inv(0)

    def test_log_zero(self, gf256):
        with pytest.raises(LogarithmOfZero):
            gf256.log(0)

    def test_exp(self, gf256):
        assert gf256.exp(3) == 8
        assert gf256.log(8) == 3

    def test_aes_product(self, aes):
        # FIPS-197 section 4.2
        assert aes.mul(0x57, 0x83) == 0xc1

    def test_gf8_tables(self, gf8):
        for i in range(8):
            for j in range(8):
                assert gf8.add(i, j) == i ^ j
                assert gf8.mul(i, j) == GF8_MUL[i][j]

    def test_pow(self, gf256):
        assert gf256.pow(0, 0) == 1
        assert gf256.pow(0, 5) == 0
        assert gf256.pow(7, 0) == 1
        assert gf256.pow(2, 3) == 8
        assert gf256.pow(0x14, -1) == 0xe0
        assert gf256.pow(0x14, 255) == 1
        with pytest.raises(DivisionByZero):
            gf256.pow(0, -1)


@pytest.mark.parametrize("gf", PRESETS, ids=repr)
def test_identities(gf):
    for x in range(gf.size):
        assert gf.mul(x, 1) == x
        assert gf.mul(x, 0) == 0
        assert gf.add(x, x) == 0


@pytest.mark.parametrize("gf", PRESETS, ids=repr)
def test_field_laws(gf, rng):
    for _ in range(500):
        x = gf.random_element(rng=rng)
        y = gf.random_element(exclude_zero=True, rng=rng)
        z = gf.random_element(rng=rng)
        assert gf.div(gf.mul(x, y), y) == x
        assert gf.mul(x, y) == gf.mul(y, x)
        assert gf.mul(x, gf.add(y, z)) == gf.add(gf.mul(x, y), gf.mul(x, z))
        assert gf.mul(gf.mul(x, y), z) == gf.mul(x, gf.mul(y, z))
        assert gf.mul(y, gf.inv(y)) == 1
        assert gf.pow(y, 2) == gf.mul(y, y)


@pytest.mark.parametrize("gf", SMALL_PRESETS, ids=repr)
def test_mul_matches_carryless_reference(gf):
    for x in range(gf.size):
        for y in range(gf.size):
            assert gf.mul(x, y) == mul_mod(x, y, gf.polynomial, gf.size)


# =============================================================================
# Bulk arithmetic
# =============================================================================

class TestArrays:

    def test_mul_arrays_matches_scalar(self, gf256):
        xs, ys = np.meshgrid(np.arange(256), np.arange(256))
        products = gf256.mul_arrays(xs, ys)
        assert products.dtype == np.uint8
        assert products.shape == (256, 256)
        for x, y in [(0, 0), (0x11, 0x14), (0x14, 0x11), (255, 255), (1, 200), (0, 9)]:
            assert products[y, x] == gf256.mul(x, y)

    def test_mul_arrays_broadcasts_scalar(self, gf8):
        row = gf8.mul_arrays(3, np.arange(8))
        assert row.tolist() == GF8_MUL[3]

    def test_add_arrays(self, gf8):
        sums = gf8.add_arrays([1, 2, 3], [3, 2, 1])
        assert sums.tolist() == [2, 0, 2]


# =============================================================================
# Field elements
# =============================================================================

class TestFieldElement:

    def test_operators(self):
        a = POLY_310_G2.element(3)
        b = POLY_310_G2.element(6)
        assert a + b == 5
        assert a - b == 5
        assert a * b == 1
        assert a / b == 5
        assert a ** 2 == 5
        assert -a is a
        assert a.inverse() == b
        assert 1 / a == b
        assert 2 * a == POLY_310_G2.mul(2, 3)

    def test_identities(self, gf256):
        assert gf256.zero().is_zero()
        assert gf256.one().is_one()
        assert gf256.element(5).log() == gf256.log(5)

    def test_out_of_range(self):
        with pytest.raises(ElementOutOfRange):
            POLY_310_G2.element(8)
        with pytest.raises(ElementOutOfRange):
            POLY_310_G2.element(3) + 8
        with pytest.raises(ElementOutOfRange):
            POLY_310_G2.element(3) * -1

    def test_non_integer_values_are_rejected(self):
        with pytest.raises(TypeError):
            POLY_310_G2.element(1.5)
        with pytest.raises(TypeError):
            POLY_310_G2.element(3) * 2.0

    def test_check_element(self, gf8):
        assert gf8.check_element(7) == 7
        assert type(gf8.check_element(np.uint8(5))) is int
        for bad in (-1, 8, 256):
            with pytest.raises(ElementOutOfRange):
                gf8.check_element(bad)

    def test_incompatible(self, gf256, aes):
        with pytest.raises(IncompatibleFields):
            gf256.element(3) * aes.element(3)

    def test_inverse_of_zero(self, gf256):
        with pytest.raises(DivisionByZero):
            gf256.zero().inverse()

    def test_reconstruction(self, namespace):
        for a in [POLY_310_G2.element(3), new_field(64, 0x43, 0x7).element(40)]:
            assert eval(repr(a), namespace) == a
        assert repr(POLY_310_G2.element(3)) == "POLY_310_G2.element(3)"

    def test_hashable(self, gf256):
        assert len({gf256.element(3), gf256.element(3)}) == 1


def test_random_element(gf8):
    rng = random.Random(7)
    values = {gf8.random_element(rng=rng) for _ in range(200)}
    assert values == set(range(8))
    nonzero = {gf8.random_element(exclude_zero=True, rng=rng) for _ in range(200)}
    assert 0 not in nonzero


# =============================================================================
# Identity, ordering and text forms
# =============================================================================

@pytest.mark.parametrize("field, reconstruction, display", [
    (POLY_84310_G3, "POLY_84310_G3", "GF(256;p=0x11b;g=0x3)"),
    (POLY_84320_G2, "POLY_84320_G2", "GF(256;p=0x11d;g=0x2)"),
    (DEFAULT_FIELD, "POLY_84320_G2", "GF(256;p=0x11d;g=0x2)"),
    (new_field(64, 0x43, 0x7), "new_field(64, 0x43, 0x7)", "GF(64;p=0x43;g=0x7)"),
])
def test_text_forms(field, reconstruction, display, namespace):
    assert repr(field) == reconstruction
    assert str(field) == display
    assert eval(repr(field), namespace) is field


@pytest.mark.parametrize("left, right, lt, eq, gt", [
    (DEFAULT_FIELD, DEFAULT_FIELD, False, True, False),
    (DEFAULT_FIELD, POLY_84320_G2, False, True, False),
    (POLY_84310_G3, POLY_84320_G2, True, False, False),
    (POLY_84310_G3, new_field(64, 0x43, 0x7), False, False, True),
    (POLY_84320_G2, new_field(256, 0x11d, 0x4), True, False, False),
])
def test_ordering(left, right, lt, eq, gt):
    assert (left < right) == lt
    assert (left == right) == eq
    assert (right == left) == eq
    assert (left > right) == gt
    assert left.compare(right) == (-1 if lt else 1 if gt else 0)


def test_sorted_presets():
    assert sorted(reversed(PRESETS)) == PRESETS
    assert gf2k.POLY_210_G2 < gf2k.POLY_710_G2
