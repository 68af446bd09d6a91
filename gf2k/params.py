"""
Field Parameters and GF(2) Polynomial Helpers.

A binary field GF(2^k) is fully described by three small integers:

    - size n = 2^k: the number of elements (4, 8, ..., 256)
    - polynomial p: an irreducible degree-k polynomial over GF(2), packed
      into an integer with bit i holding the coefficient of x^i
    - generator g: an element whose powers g^0, g^1, ..., g^(n-2) visit
      every nonzero element exactly once

FieldParams validates everything that can be checked without walking the
generator's powers (the walk happens once, while building the tables in
GaloisField). It is also the key of the field registry and defines the
total order over fields: by size, then polynomial, then generator.

Example:
    >>> params = FieldParams(256, 0x11d, 0x02)
    >>> str(params)
    'GF(256;p=0x11d;g=0x2)'
    >>> FieldParams(64, 0x42, 0x02)
    Traceback (most recent call last):
        ...
    gf2k.errors.ReduciblePolynomial: polynomial 0x42 is reducible (divisible by 0x2)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .errors import (
    DivisionByZero,
    InvalidFieldSize,
    NotGenerator,
    PolynomialOutOfRange,
    ReduciblePolynomial,
)


VALID_SIZES = (4, 8, 16, 32, 64, 128, 256)


# =============================================================================
# GF(2) polynomial helpers (polynomials packed into ints)
# =============================================================================

def poly_degree(p: int) -> int:
    """Degree of a packed GF(2) polynomial; -1 for the zero polynomial."""
    return p.bit_length() - 1


def poly_mod(dividend: int, divisor: int) -> int:
    """
    Remainder of GF(2) polynomial long division.

    Subtraction over GF(2) is XOR, so each step cancels the leading term
    of the dividend with a shifted copy of the divisor.
    """
    if divisor == 0:
        raise DivisionByZero("division by zero polynomial")
    width = divisor.bit_length()
    while dividend.bit_length() >= width:
        dividend ^= divisor << (dividend.bit_length() - width)
    return dividend


def smallest_divisor(p: int) -> Optional[int]:
    """
    Find the smallest nontrivial divisor of p over GF(2).

    Only divisors of degree 1..floor(deg(p)/2) need checking: any
    factorization has a factor no larger than that.

    Returns:
        The divisor as a packed polynomial, or None if p is irreducible.
    """
    limit = 1 << (poly_degree(p) // 2 + 1)
    for divisor in range(2, limit):
        if poly_mod(p, divisor) == 0:
            return divisor
    return None


def is_irreducible(p: int) -> bool:
    """Check whether p has no nontrivial factors over GF(2)."""
    return poly_degree(p) >= 1 and smallest_divisor(p) is None


def mul_mod(x: int, y: int, polynomial: int, size: int) -> int:
    """
    Carry-less multiply x*y reduced modulo the field polynomial.

    This is the slow shift-and-add multiply used only while building the
    log/exp tables. Whenever the shifted operand reaches bit log2(size),
    the polynomial is XORed in to reduce it.
    """
    result = 0
    while x > 0:
        if x & 1:
            result ^= y
        x >>= 1
        y <<= 1
        if y & size:
            y ^= polynomial
    return result


# =============================================================================
# Field parameters
# =============================================================================

@dataclass(frozen=True, order=True)
class FieldParams:
    """
    Validated (size, polynomial, generator) triple for GF(2^k).

    Attributes:
        size: Number of field elements, a power of two in [4, 256]
        polynomial: Modulus polynomial, size <= polynomial < 2*size
        generator: Candidate generator, 2 <= generator < size

    Raises:
        InvalidFieldSize: size is not one of VALID_SIZES
        PolynomialOutOfRange: polynomial does not have degree log2(size)
        NotGenerator: generator is 0, 1 or not a field element
        ReduciblePolynomial: polynomial factors over GF(2)
    """
    size: int
    polynomial: int
    generator: int

    def __post_init__(self):
        """Validate the parameters."""
        if self.size not in VALID_SIZES:
            raise InvalidFieldSize(self.size)
        if not self.size <= self.polynomial < 2 * self.size:
            raise PolynomialOutOfRange(self.size, self.polynomial)
        if not 2 <= self.generator < self.size:
            raise NotGenerator(self.generator)
        divisor = smallest_divisor(self.polynomial)
        if divisor is not None:
            raise ReduciblePolynomial(self.polynomial, divisor)

    @property
    def order(self) -> int:
        """Order of the multiplicative group (size - 1)."""
        return self.size - 1

    @property
    def bits(self) -> int:
        """k such that size == 2^k."""
        return self.size.bit_length() - 1

    def __str__(self) -> str:
        return f"GF({self.size};p={self.polynomial:#x};g={self.generator:#x})"
