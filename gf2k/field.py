"""
Finite Field Arithmetic over GF(2^k).

This module implements arithmetic in binary extension fields GF(2^k) for
k in [2..8], the fields underneath Reed-Solomon codes and threshold secret
sharing. Every element is a small unsigned integer in [0, 2^k).

Key Concepts:
    - Addition and subtraction are both XOR (the field has characteristic 2),
      so every element is its own negative
    - Multiplication is polynomial multiplication modulo an irreducible
      polynomial p, which is slow to do bit by bit
    - Instead we walk the powers of a generator g once and record them:
          exp[i] = g^i        log[g^i] = i
      after which x*y = exp[log x + log y] and x/y = exp[log x - log y]
    - The exp table is stored twice over (length 2n-2), so the sum of two
      logs never needs a modulo reduction

Example:
    >>> gf = new_field(256, 0x11d, 0x02)
    >>> gf.mul(0x11, 0x14)
    73
    >>> gf.div(73, 0x14) == 0x11
    True
    >>> a = gf.element(0x11)
    >>> a * 0x14
    POLY_84320_G2.element(73)

Field instances are interned: new_field() with equal parameters always
returns the identical object, so fields can be compared by identity and
used as dictionary keys.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Dict, List, Optional, Tuple, Union
import logging
import operator
import random
import threading

import numpy as np

from .errors import (
    DivisionByZero,
    ElementOutOfRange,
    IncompatibleFields,
    LogarithmOfZero,
    NotGenerator,
)
from .params import FieldParams, mul_mod


logger = logging.getLogger(__name__)

# Filled in at the bottom of the module once the presets exist.
_PRESETS: Dict[str, "GaloisField"] = {}


@dataclass(frozen=True)
class FieldElement:
    """
    An element of GF(2^k) with Python operators attached.

    Plain ints are the working currency of GaloisField; FieldElement is a
    convenience wrapper for code that reads better with operators.

    Attributes:
        value: The integer value (always in range [0, size))
        field: Reference to the parent GaloisField

    Example:
        >>> gf = POLY_310_G2
        >>> a = gf.element(3)
        >>> b = gf.element(6)
        >>> int(a + b), int(a * b), int(a / b)
        (5, 1, 5)
    """
    value: int
    field: "GaloisField"

    def __post_init__(self):
        """Ensure the value is an element of the field."""
        object.__setattr__(self, "value", self.field.check_element(self.value))

    def __repr__(self) -> str:
        return f"{self.field!r}.element({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.value == other.value and self.field == other.field
        if isinstance(other, int):
            return self.value == other
        return False

    def __hash__(self) -> int:
        return hash((self.value, self.field.params))

    def _coerce(self, other: Union[FieldElement, int]) -> int:
        if isinstance(other, FieldElement):
            check_compatible(self.field, other.field)
            return other.value
        return self.field.check_element(other)

    # Arithmetic Operations

    def __add__(self, other: Union[FieldElement, int]) -> FieldElement:
        """Addition in the field: a XOR b"""
        return FieldElement(self.field.add(self.value, self._coerce(other)), self.field)

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __neg__(self) -> FieldElement:
        return self

    def __mul__(self, other: Union[FieldElement, int]) -> FieldElement:
        return FieldElement(self.field.mul(self.value, self._coerce(other)), self.field)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[FieldElement, int]) -> FieldElement:
        return FieldElement(self.field.div(self.value, self._coerce(other)), self.field)

    def __rtruediv__(self, other: int) -> FieldElement:
        return FieldElement(self.field.div(self._coerce(other), self.value), self.field)

    def __pow__(self, exponent: int) -> FieldElement:
        return FieldElement(self.field.pow(self.value, exponent), self.field)

    def inverse(self) -> FieldElement:
        """
        Multiplicative inverse.

        Raises:
            DivisionByZero: If self is zero
        """
        return FieldElement(self.field.inv(self.value), self.field)

    def log(self) -> int:
        """Discrete logarithm to the base of the field's generator."""
        return self.field.log(self.value)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1


def _build_tables(params: FieldParams) -> Tuple[np.ndarray, np.ndarray]:
    """
    Walk the powers of the generator once, filling the exp and log tables.

    The same walk proves the generator: if g^i == 1 for some 0 < i < n-1,
    then g only generates a proper subgroup.

    Raises:
        NotGenerator: If the powers of g return to 1 early
    """
    n, m = params.size, params.order
    exp = np.zeros(2 * n - 2, dtype=np.uint8)
    log = np.zeros(n, dtype=np.uint8)

    x = 1
    for i in range(m):
        if x == 1 and i != 0:
            raise NotGenerator(params.generator, period=i)
        exp[i] = x
        exp[i + m] = x
        log[x] = i
        x = mul_mod(x, params.generator, params.polynomial, n)

    exp.setflags(write=False)
    log.setflags(write=False)
    return exp, log


@total_ordering
class GaloisField:
    """
    The finite field GF(n) for n = 2^k, with precomputed log/exp tables.

    Construct fields with new_field() rather than calling this class
    directly; new_field() goes through the registry, so that equal
    parameters share one instance.

    Attributes:
        params: The validated (size, polynomial, generator) triple

    Element operations take and return ints in [0, size). The "polynomial"
    and "generator" parameters have no effect on add(); the generator has
    no effect on the results of mul/div/inv either, but it does determine
    exp() and log().

    Example:
        >>> gf = POLY_84320_G2
        >>> gf.exp(3)
        8
        >>> gf.log(8)
        3
        >>> gf.inv(0x14)
        224
    """

    def __init__(self, params: FieldParams):
        """
        Build the field tables.

        Args:
            params: Validated field parameters

        Raises:
            NotGenerator: If params.generator does not generate the field
        """
        self._params = params
        self._exp, self._log = _build_tables(params)
        logger.debug("built tables for %s", params)

    # Parameters

    @property
    def params(self) -> FieldParams:
        return self._params

    @property
    def size(self) -> int:
        """Number of elements in the field."""
        return self._params.size

    @property
    def polynomial(self) -> int:
        return self._params.polynomial

    @property
    def generator(self) -> int:
        return self._params.generator

    @property
    def order(self) -> int:
        """Order of the multiplicative group (size - 1)."""
        return self._params.order

    @property
    def exp_table(self) -> np.ndarray:
        """Read-only antilog table, length 2*size - 2."""
        return self._exp

    @property
    def log_table(self) -> np.ndarray:
        """Read-only log table, length size; entry 0 is unused."""
        return self._log

    # Element factories

    def check_element(self, value) -> int:
        """
        Return value as a plain int after checking it is in [0, size).

        The int-level arithmetic below does not call this; it is for the
        wrappers (FieldElement, Monomial, Polynomial) that accept user input.

        Raises:
            TypeError: value is not an integer
            ElementOutOfRange: value is not an element of this field
        """
        value = operator.index(value)
        if not 0 <= value < self.size:
            raise ElementOutOfRange(value, self.size)
        return value

    def element(self, value: int) -> FieldElement:
        """Create a field element from an integer."""
        return FieldElement(value, self)

    def zero(self) -> FieldElement:
        """Return the additive identity (0)."""
        return FieldElement(0, self)

    def one(self) -> FieldElement:
        """Return the multiplicative identity (1)."""
        return FieldElement(1, self)

    def random_element(self, exclude_zero: bool = False,
                       rng: Optional[random.Random] = None) -> int:
        """
        Pick a uniformly random element.

        Args:
            exclude_zero: If True, never returns zero (useful for testing inverses)
            rng: Random source; defaults to the global random module
        """
        rng = rng or random
        return rng.randint(1 if exclude_zero else 0, self.size - 1)

    # Element arithmetic

    def add(self, x: int, y: int) -> int:
        """Return x+y == x-y == x^y."""
        return x ^ y

    def sub(self, x: int, y: int) -> int:
        """Return x-y == x+y == x^y."""
        return x ^ y

    def neg(self, x: int) -> int:
        """Return -x == x."""
        return x

    def mul(self, x: int, y: int) -> int:
        """Return x*y."""
        if x == 0 or y == 0:
            return 0
        return int(self._exp[int(self._log[x]) + int(self._log[y])])

    def div(self, x: int, y: int) -> int:
        """
        Return x/y.

        Raises:
            DivisionByZero: If y is zero
        """
        if y == 0:
            raise DivisionByZero()
        if x == 0:
            return 0
        return int(self._exp[self.order + int(self._log[x]) - int(self._log[y])])

    def inv(self, x: int) -> int:
        """
        Return 1/x.

        Raises:
            DivisionByZero: If x is zero
        """
        if x == 0:
            raise DivisionByZero("zero has no inverse")
        return int(self._exp[self.order - int(self._log[x])])

    def exp(self, e: int) -> int:
        """Return g**e, for any integer e (negative exponents wrap)."""
        return int(self._exp[e % self.order])

    def log(self, x: int) -> int:
        """
        Return log_g(x) in [0, size-1).

        Raises:
            LogarithmOfZero: If x is zero
        """
        if x == 0:
            raise LogarithmOfZero()
        return int(self._log[x])

    def pow(self, x: int, k: int) -> int:
        """
        Return x**k.

        Uses the log table, so any exponent (including negative ones) costs
        one lookup: x^k = g^(k * log x).

        Raises:
            DivisionByZero: If x is zero and k is negative
        """
        if x == 0:
            if k < 0:
                raise DivisionByZero("zero raised to a negative power")
            return 1 if k == 0 else 0
        return int(self._exp[(int(self._log[x]) * k) % self.order])

    # Bulk arithmetic
    # Vectorized over numpy arrays; scalars broadcast.

    def add_arrays(self, xs, ys) -> np.ndarray:
        """Elementwise x+y over arrays of field elements."""
        return np.bitwise_xor(np.asarray(xs, dtype=np.uint8),
                              np.asarray(ys, dtype=np.uint8))

    def mul_arrays(self, xs, ys) -> np.ndarray:
        """Elementwise x*y over arrays of field elements."""
        xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=np.uint8),
                                     np.asarray(ys, dtype=np.uint8))
        logs = self._log[xs].astype(np.intp) + self._log[ys]
        products = self._exp[logs]
        return np.where((xs == 0) | (ys == 0), 0, products).astype(np.uint8)

    # Identity and ordering

    def compare(self, other: GaloisField) -> int:
        """Total order over fields: -1, 0 or +1, by size, polynomial, generator."""
        if self is other:
            return 0
        a, b = self._params, other._params
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, GaloisField):
            return self._params == other._params
        return NotImplemented

    def __lt__(self, other: GaloisField) -> bool:
        if not isinstance(other, GaloisField):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self._params)

    def __str__(self) -> str:
        return str(self._params)

    def __repr__(self) -> str:
        for name, preset in _PRESETS.items():
            if preset == self:
                return name
        return f"new_field({self.size}, {self.polynomial:#x}, {self.generator:#x})"


def check_compatible(left: GaloisField, right: GaloisField) -> None:
    """
    Ensure two values are drawn from the same field.

    Interned fields compare by identity; the params comparison only matters
    for fields built in different registries.

    Raises:
        IncompatibleFields: If the fields differ
    """
    if left is not right and left.params != right.params:
        raise IncompatibleFields(left, right)


# =============================================================================
# Field Registry
# =============================================================================

class FieldRegistry:
    """
    Interning cache from FieldParams to the unique GaloisField built for it.

    Lookups and inserts are serialized by a lock, but table construction
    happens outside it: on a miss the caller builds the tables, then
    re-checks under the lock and inserts. If another thread inserted the
    same key in the meantime, the fresh build is thrown away and the
    existing instance returned, so callers never observe two instances for
    one key.

    Example:
        >>> registry = FieldRegistry()
        >>> a = new_field(16, 0x13, 2, registry=registry)
        >>> b = new_field(16, 0x13, 2, registry=registry)
        >>> a is b, len(registry)
        (True, 1)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._fields: Dict[FieldParams, GaloisField] = {}

    def lookup(self, params: FieldParams) -> Optional[GaloisField]:
        """Return the registered field for params, or None."""
        with self._lock:
            return self._fields.get(params)

    def get(self, params: FieldParams) -> GaloisField:
        """
        Return the unique field for params, building it on first use.

        Raises:
            NotGenerator: If params.generator does not generate the field
        """
        found = self.lookup(params)
        if found is not None:
            return found

        built = GaloisField(params)
        with self._lock:
            winner = self._fields.setdefault(params, built)
        if winner is built:
            logger.debug("registered %s", params)
        else:
            logger.debug("discarded concurrent build of %s", params)
        return winner

    def fields(self) -> List[GaloisField]:
        """Snapshot of the registered fields, in field order."""
        with self._lock:
            return sorted(self._fields.values())

    def clear(self) -> None:
        with self._lock:
            self._fields.clear()

    def __contains__(self, params: FieldParams) -> bool:
        with self._lock:
            return params in self._fields

    def __len__(self) -> int:
        with self._lock:
            return len(self._fields)


_default_registry = FieldRegistry()


def default_registry() -> FieldRegistry:
    """The process-wide registry used when none is passed explicitly."""
    return _default_registry


def new_field(size: int, polynomial: int, generator: int,
              registry: Optional[FieldRegistry] = None) -> GaloisField:
    """
    Construct (or fetch) GF(size) defined by polynomial and generator.

    Args:
        size: Number of elements, one of 4, 8, 16, 32, 64, 128, 256
        polynomial: Irreducible modulus with size <= polynomial < 2*size;
            bit i is the coefficient of x^i
        generator: Element whose powers enumerate the nonzero elements
        registry: Registry to intern into (defaults to the process-wide one)

    Returns:
        The unique GaloisField for these parameters within the registry

    Raises:
        InvalidFieldSize: size is not supported
        PolynomialOutOfRange: polynomial has the wrong degree
        ReduciblePolynomial: polynomial is reducible
        NotGenerator: generator does not generate the field
    """
    params = FieldParams(size, polynomial, generator)
    if registry is None:
        registry = _default_registry
    return registry.get(params)


def resolve_field(field: Optional[GaloisField]) -> GaloisField:
    """Substitute DEFAULT_FIELD for a missing field."""
    return DEFAULT_FIELD if field is None else field


# =============================================================================
# PRESET FIELDS
# =============================================================================
# Names spell out the polynomial's exponents and the generator, e.g.
# POLY_84320_G2 is x^8 + x^4 + x^3 + x^2 + 1 with generator 2.

POLY_210_G2 = new_field(4, 0x7, 0x2)
POLY_310_G2 = new_field(8, 0xb, 0x2)
POLY_410_G2 = new_field(16, 0x13, 0x2)
POLY_520_G2 = new_field(32, 0x25, 0x2)
POLY_610_G2 = new_field(64, 0x43, 0x2)
POLY_710_G2 = new_field(128, 0x83, 0x2)
POLY_84310_G3 = new_field(256, 0x11b, 0x3)   # the AES field
POLY_84320_G2 = new_field(256, 0x11d, 0x2)   # QR codes, RAID-6

DEFAULT_FIELD = POLY_84320_G2

_PRESETS.update(
    POLY_210_G2=POLY_210_G2,
    POLY_310_G2=POLY_310_G2,
    POLY_410_G2=POLY_410_G2,
    POLY_520_G2=POLY_520_G2,
    POLY_610_G2=POLY_610_G2,
    POLY_710_G2=POLY_710_G2,
    POLY_84310_G3=POLY_84310_G3,
    POLY_84320_G2=POLY_84320_G2,
)
