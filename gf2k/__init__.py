"""
gf2k
====

Arithmetic over the binary finite fields GF(2^k), k in [2..8], and
polynomial algebra with coefficients drawn from them. This is the algebraic
core of Reed-Solomon codes and threshold secret sharing schemes.

Modules:
    - field: GaloisField (O(1) table-driven arithmetic), the field
      registry, and preset fields
    - params: FieldParams validation and GF(2) polynomial helpers
    - algebra: Monomial and Polynomial
    - errors: Exception hierarchy

Quick Start:
    >>> from gf2k import DEFAULT_FIELD, Polynomial
    >>> p = Polynomial(DEFAULT_FIELD, [3, 1, 4])
    >>> str(p)
    '4x^2 + x + 3'
    >>> p.evaluate(2)
    17
"""

import logging

__version__ = "0.1.0"

from .errors import (
    DivisionByZero,
    ElementOutOfRange,
    GaloisFieldError,
    IncompatibleFields,
    InvalidFieldSize,
    LogarithmOfZero,
    NotGenerator,
    PolynomialOutOfRange,
    ReduciblePolynomial,
)
from .params import FieldParams, VALID_SIZES
from .field import (
    DEFAULT_FIELD,
    POLY_210_G2,
    POLY_310_G2,
    POLY_410_G2,
    POLY_520_G2,
    POLY_610_G2,
    POLY_710_G2,
    POLY_84310_G3,
    POLY_84320_G2,
    FieldElement,
    FieldRegistry,
    GaloisField,
    default_registry,
    new_field,
)
from .algebra import Monomial, Polynomial, add, multiply

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_FIELD",
    "POLY_210_G2",
    "POLY_310_G2",
    "POLY_410_G2",
    "POLY_520_G2",
    "POLY_610_G2",
    "POLY_710_G2",
    "POLY_84310_G3",
    "POLY_84320_G2",
    "FieldElement",
    "FieldParams",
    "FieldRegistry",
    "GaloisField",
    "Monomial",
    "Polynomial",
    "VALID_SIZES",
    "add",
    "default_registry",
    "multiply",
    "new_field",
    "DivisionByZero",
    "ElementOutOfRange",
    "GaloisFieldError",
    "IncompatibleFields",
    "InvalidFieldSize",
    "LogarithmOfZero",
    "NotGenerator",
    "PolynomialOutOfRange",
    "ReduciblePolynomial",
]
