"""
Monomials with coefficients drawn from GF(2^k).

A monomial is a single term c*x^d. The zero monomial has exactly one
representation: whatever degree was requested, a zero coefficient forces
degree 0, so "0*x^5" and "0" are the same value.

Example:
    >>> m = Monomial(None, 5, 1)      # 5x over the default field
    >>> str(m.multiply(Monomial(None, 3, 1)))
    '15x^2'
    >>> str(m.multiply(Monomial(None, 0, 5)))
    '0'
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
import operator
from typing import Optional, TYPE_CHECKING, Union

from ..field import GaloisField, check_compatible, resolve_field

if TYPE_CHECKING:
    from .polynomial import Polynomial


@total_ordering
@dataclass(frozen=True, eq=False, repr=False, init=False)
class Monomial:
    """
    A single term coefficient * x^degree over a GaloisField.

    Attributes:
        field: The field the coefficient is drawn from
        coefficient: Element of the field in [0, size)
        degree: Non-negative exponent; always 0 when the coefficient is 0

    Monomials are ordered by field, then degree, then coefficient. Two
    monomials over different fields are never equal, and compare by field
    rather than raising.
    """
    field: GaloisField
    coefficient: int
    degree: int

    def __init__(self, field: Optional[GaloisField], coefficient: int, degree: int = 0):
        """
        Build coefficient * x^degree.

        Args:
            field: The coefficient field; None selects DEFAULT_FIELD
            coefficient: Element of the field
            degree: Non-negative exponent

        Raises:
            ElementOutOfRange: coefficient is not an element of the field
            TypeError: coefficient or degree is not an integer
            ValueError: degree is negative
        """
        field = resolve_field(field)
        coefficient = field.check_element(coefficient)
        degree = operator.index(degree)
        if degree < 0:
            raise ValueError(f"degree must be non-negative (got {degree})")
        if coefficient == 0:
            degree = 0
        object.__setattr__(self, "field", field)
        object.__setattr__(self, "coefficient", coefficient)
        object.__setattr__(self, "degree", degree)

    @property
    def is_zero(self) -> bool:
        return self.coefficient == 0

    def scale(self, s: int) -> Monomial:
        """Multiply by a scalar field element."""
        s = self.field.check_element(s)
        return Monomial(self.field, self.field.mul(self.coefficient, s), self.degree)

    def multiply(self, other: Monomial) -> Monomial:
        """
        Multiply by another monomial over the same field.

        Degrees add and coefficients multiply; a zero product collapses to
        the zero monomial regardless of the summed degree.

        Raises:
            IncompatibleFields: If the monomials are over different fields
        """
        check_compatible(self.field, other.field)
        return Monomial(
            self.field,
            self.field.mul(self.coefficient, other.coefficient),
            self.degree + other.degree,
        )

    def evaluate(self, x: int) -> int:
        """Substitute x and return coefficient * x^degree."""
        x = self.field.check_element(x)
        value = self.coefficient
        for _ in range(self.degree):
            value = self.field.mul(value, x)
        return value

    def to_polynomial(self) -> Polynomial:
        """The polynomial whose sole term is this monomial."""
        from .polynomial import Polynomial
        coefficients = [0] * (self.degree + 1)
        coefficients[self.degree] = self.coefficient
        return Polynomial(self.field, coefficients)

    # Operators

    def __mul__(self, other: Union[Monomial, int]):
        if isinstance(other, Monomial):
            return self.multiply(other)
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: int):
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    def __add__(self, other):
        if isinstance(other, Monomial):
            return self.to_polynomial().add(other)
        return NotImplemented

    def __call__(self, x: int) -> int:
        return self.evaluate(x)

    # Ordering

    def compare(self, other: Monomial) -> int:
        """Return -1, 0 or +1 as self is less than, equal to or greater than other."""
        cmp = self.field.compare(other.field)
        if cmp != 0:
            return cmp
        mine = (self.degree, self.coefficient)
        theirs = (other.degree, other.coefficient)
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Monomial):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: Monomial) -> bool:
        if not isinstance(other, Monomial):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.field, self.degree, self.coefficient))

    # Text forms

    def __str__(self) -> str:
        c, d = self.coefficient, self.degree
        if c == 0:
            return "0"
        if d == 0:
            return str(c)
        if d == 1:
            return "x" if c == 1 else f"{c}x"
        if c == 1:
            return f"x^{d}"
        return f"{c}x^{d}"

    def __repr__(self) -> str:
        return f"Monomial({self.field!r}, {self.coefficient}, {self.degree})"
