"""
Exact rational numbers with fixed canonical form.
"""

from .fraction import Fraction, ZERO, ONE, MAX_VALUE, MIN_VALUE, PI
from .utils import DivisionByZeroError, INT_MAX, INT_MIN, gcd, lcm

__all__ = [
    'Fraction', 'DivisionByZeroError',
    'ZERO', 'ONE', 'MAX_VALUE', 'MIN_VALUE', 'PI',
    'INT_MAX', 'INT_MIN', 'gcd', 'lcm',
]
