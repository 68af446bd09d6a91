"""
Polynomials with coefficients drawn from GF(2^k).

Coefficients are stored little-endian: index i holds the coefficient of x^i,
so [3, 1, 4] is 4x^2 + x + 3. Trailing zeros are always stripped, which
makes the representation canonical; the zero polynomial is the empty
sequence.

Key Concepts:
    - Addition is coefficient-wise XOR, so p + p == 0 and subtraction is
      the same operation as addition
    - Multiplication is convolution: the coefficient of x^(i+j) in p*q
      accumulates p[i]*q[j] for every pair (i, j)
    - The degree of the zero polynomial is reported as 0, the same as a
      nonzero constant; use is_zero to tell them apart

Example:
    >>> p = Polynomial(None, [1, 0, 0, 1])     # x^3 + 1
    >>> q = Polynomial(None, [0, 0, 1, 1])     # x^3 + x^2
    >>> str(p + q)
    'x^2 + 1'
    >>> (p + q).degree
    2
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from ..field import GaloisField, check_compatible, resolve_field
from .monomial import Monomial


PolynomialLike = Union["Polynomial", Monomial]


def _as_polynomial(value: PolynomialLike) -> Polynomial:
    if isinstance(value, Monomial):
        return value.to_polynomial()
    return value


@total_ordering
@dataclass(frozen=True, eq=False, repr=False, init=False)
class Polynomial:
    """
    A polynomial over a GaloisField, stored as little-endian coefficients.

    Attributes:
        field: The field the coefficients are drawn from
        coefficients: Tuple of field elements with no trailing zeros

    Polynomials are ordered by field, then number of stored coefficients,
    then coefficient values from the highest degree down.

    Example:
        >>> p = Polynomial(POLY_84320_G2, [3, 1, 4])
        >>> str(p)
        '4x^2 + x + 3'
        >>> p
        Polynomial(POLY_84320_G2, [3, 1, 4])
    """
    field: GaloisField
    coefficients: Tuple[int, ...]

    def __init__(self, field: Optional[GaloisField], coefficients: Iterable[int] = ()):
        """
        Build a polynomial from little-endian coefficients.

        Args:
            field: The coefficient field; None selects DEFAULT_FIELD
            coefficients: Constant term first; the input is copied

        Raises:
            ElementOutOfRange: A coefficient is not an element of the field
            TypeError: A coefficient is not an integer
        """
        field = resolve_field(field)
        coeffs = [field.check_element(k) for k in coefficients]
        while coeffs and coeffs[-1] == 0:
            coeffs.pop()
        object.__setattr__(self, "field", field)
        object.__setattr__(self, "coefficients", tuple(coeffs))

    @property
    def is_zero(self) -> bool:
        """True iff this polynomial has no terms."""
        return not self.coefficients

    @property
    def degree(self) -> int:
        """Degree, with the convention that the zero polynomial has degree 0."""
        if self.is_zero:
            return 0
        return len(self.coefficients) - 1

    def coefficient(self, i: int) -> int:
        """Coefficient of x^i; 0 for any index outside the stored terms."""
        if 0 <= i < len(self.coefficients):
            return self.coefficients[i]
        return 0

    def term(self, i: int) -> Monomial:
        """
        The i'th term as a monomial.

        Raises:
            ValueError: i is negative; coefficient(i) still reads 0 there
        """
        return Monomial(self.field, self.coefficient(i), i)

    def scale(self, s: int) -> Polynomial:
        """Multiply every coefficient by the scalar s."""
        s = self.field.check_element(s)
        if s == 0:
            return Polynomial(self.field)
        if s == 1:
            return self
        return Polynomial(self.field, [self.field.mul(k, s) for k in self.coefficients])

    def add(self, *others: PolynomialLike) -> Polynomial:
        """
        Sum of this polynomial and any number of others.

        Raises:
            IncompatibleFields: If any operand is over a different field
        """
        field = self.field
        total = list(self.coefficients)
        for other in others:
            other = _as_polynomial(other)
            check_compatible(field, other.field)
            if len(other.coefficients) > len(total):
                total.extend([0] * (len(other.coefficients) - len(total)))
            for i, k in enumerate(other.coefficients):
                total[i] = field.add(total[i], k)
        return Polynomial(field, total)

    def multiply(self, *others: PolynomialLike) -> Polynomial:
        """
        Product of this polynomial and any number of others.

        Raises:
            IncompatibleFields: If any operand is over a different field
        """
        field = self.field
        product = self.coefficients
        for other in others:
            other = _as_polynomial(other)
            check_compatible(field, other.field)
            if not product or other.is_zero:
                product = ()
                continue
            result = [0] * (len(product) + len(other.coefficients) - 1)
            for i, a in enumerate(product):
                if a == 0:
                    continue
                for j, b in enumerate(other.coefficients):
                    result[i + j] = field.add(result[i + j], field.mul(a, b))
            product = Polynomial(field, result).coefficients
        return Polynomial(field, product)

    def evaluate(self, x: int) -> int:
        """Substitute x and return the resulting field element."""
        field = self.field
        x = field.check_element(x)
        total, power = 0, 1
        for k in self.coefficients:
            total = field.add(total, field.mul(k, power))
            power = field.mul(power, x)
        return total

    def evaluate_many(self, xs) -> np.ndarray:
        """
        Evaluate at every point of xs at once.

        Args:
            xs: Array-like of field elements

        Returns:
            numpy.uint8 array of the same shape as xs
        """
        field = self.field
        xs = np.asarray(xs, dtype=np.uint8)
        total = np.zeros_like(xs)
        power = np.ones_like(xs)
        for k in self.coefficients:
            total = field.add_arrays(total, field.mul_arrays(k, power))
            power = field.mul_arrays(power, xs)
        return total

    # Operators

    def __add__(self, other: PolynomialLike):
        if isinstance(other, (Polynomial, Monomial)):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __neg__(self) -> Polynomial:
        return self

    def __mul__(self, other: Union[PolynomialLike, int]):
        if isinstance(other, (Polynomial, Monomial)):
            return self.multiply(other)
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __call__(self, x: int) -> int:
        return self.evaluate(x)

    # Ordering

    def compare(self, other: Polynomial) -> int:
        """Return -1, 0 or +1 as self is less than, equal to or greater than other."""
        cmp = self.field.compare(other.field)
        if cmp != 0:
            return cmp
        a, b = self.coefficients, other.coefficients
        if len(a) != len(b):
            return -1 if len(a) < len(b) else 1
        a, b = a[::-1], b[::-1]
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: Polynomial) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.field, self.coefficients))

    # Text forms

    def __str__(self) -> str:
        if self.is_zero:
            return "0"
        terms = [
            str(self.term(d))
            for d in range(len(self.coefficients) - 1, -1, -1)
            if self.coefficients[d] != 0
        ]
        return " + ".join(terms)

    def __repr__(self) -> str:
        return f"Polynomial({self.field!r}, {list(self.coefficients)})"


def add(first: PolynomialLike, *rest: PolynomialLike) -> Polynomial:
    """Sum of one or more polynomials (or monomials) over one field."""
    return _as_polynomial(first).add(*rest)


def multiply(first: PolynomialLike, *rest: PolynomialLike) -> Polynomial:
    """Product of one or more polynomials (or monomials) over one field."""
    return _as_polynomial(first).multiply(*rest)
