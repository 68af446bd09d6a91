"""
Exceptions raised by field construction and field/polynomial arithmetic.

Every error is a precondition violation: the call is aborted with no partial
result. Each class also derives from the matching builtin, so existing code
that catches ``ValueError`` or ``ZeroDivisionError`` keeps working.
"""


class GaloisFieldError(Exception):
    """Base class for all gf2k errors."""


class InvalidFieldSize(GaloisFieldError, ValueError):
    def __init__(self, size: int):
        super().__init__(
            f"only field sizes 4, 8, 16, 32, 64, 128, and 256 are permitted (got {size})"
        )
        self.size = size


class PolynomialOutOfRange(GaloisFieldError, ValueError):
    def __init__(self, size: int, polynomial: int):
        super().__init__(
            f"polynomial {polynomial:#x} is out of range for GF({size}); "
            f"expected {size:#x} <= p < {2 * size:#x}"
        )
        self.size = size
        self.polynomial = polynomial


class ReduciblePolynomial(GaloisFieldError, ValueError):
    def __init__(self, polynomial: int, divisor: int):
        super().__init__(
            f"polynomial {polynomial:#x} is reducible (divisible by {divisor:#x})"
        )
        self.polynomial = polynomial
        self.divisor = divisor


class NotGenerator(GaloisFieldError, ValueError):
    def __init__(self, generator: int, period: int = 0):
        msg = f"value {generator:#x} is not a generator"
        if period:
            msg += f" (its powers repeat after {period} steps)"
        super().__init__(msg)
        self.generator = generator
        self.period = period


class DivisionByZero(GaloisFieldError, ZeroDivisionError):
    def __init__(self, msg: str = "division by zero"):
        super().__init__(msg)


class LogarithmOfZero(GaloisFieldError, ValueError):
    def __init__(self):
        super().__init__("logarithm of zero")


class IncompatibleFields(GaloisFieldError, ValueError):
    def __init__(self, left=None, right=None):
        msg = "cannot combine values from different finite fields"
        if left is not None and right is not None:
            msg += f": {left} and {right}"
        super().__init__(msg)


class ElementOutOfRange(GaloisFieldError, ValueError):
    def __init__(self, value: int, size: int):
        super().__init__(f"value {value} is not an element of GF({size})")
        self.value = value
        self.size = size
