"""
Algebra over GF(2^k) coefficients.

This module provides:
    - Monomial: a single term c*x^d
    - Polynomial: little-endian coefficient sequences with canonical form
    - add / multiply: n-ary sums and products of polynomials
"""

from .monomial import Monomial
from .polynomial import Polynomial, add, multiply

__all__ = [
    "Monomial",
    "Polynomial",
    "add",
    "multiply",
]
