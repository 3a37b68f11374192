"""
Reduction and float decomposition primitives.
"""

import logging
import math


logger = logging.getLogger(__name__)


# bounds of the integer type fractions were designed for; not enforced
INT_BITS = 32
INT_MAX = 2**(INT_BITS - 1) - 1
INT_MIN = -2**(INT_BITS - 1)


class DivisionByZeroError(ZeroDivisionError):
    """Zero divisor or zero denominator."""

    def __init__(self, msg: str = "Division by zero!") -> None:
        super().__init__(msg)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b| by the Euclidean algorithm; gcd(0, b) = |b|."""
    a, b = abs(a), abs(b)
    while a:
        a, b = b % a, a
    return b


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero if any argument is zero."""
    g = gcd(a, b)
    return a // g * b if g else 0


def reduce_pair(n: int, d: int) -> tuple[int, int]:
    """Lowest terms with positive denominator; zero becomes 0/1."""
    if d == 0:
        raise DivisionByZeroError()
    g = gcd(n, d)
    n //= g
    d //= g
    if d < 0:
        n = -n
        d = -d
    return n, d


def mantissa_to_integer(mantissa: float) -> tuple[int, int]:
    """
    Shift decimal point of the mantissa until it is integer.

    Returns:
        pair (mt, m) such that mantissa = mt / 10**m
    """
    m = 0
    # terminates: every float above 2**53 in magnitude is integer
    while mantissa != int(mantissa):
        mantissa *= 10
        m += 1
    return int(mantissa), m


def ratio_from_float(x: float) -> tuple[int, int]:
    """
    Reduced pair (n, d) with n/d equal to the float x.

    We write x = mt * 2^e / 10^m, where mantissa = mt/10^m and e is the binary exponent.
    Before exponentiation the factor 2^e / 10^m is simplified with h = min(e, m):
        2^e / 10^m = 2^(e-h) / (5^h * 10^(m-h))
    For negative h the denominator equals 5^m * 2^(m-h), so all powers stay integer.
    """
    if not math.isfinite(x):
        raise ValueError("Can't convert non-finite float!")

    mantissa, e = math.frexp(x)
    mt, m = mantissa_to_integer(mantissa)
    h = min(e, m)
    logger.debug('float %r: mantissa %r = %d/10^%d, exponent %d, h=%d', x, mantissa, mt, m, e, h)

    n = mt * 2**(e - h)
    if h >= 0:
        d = 5**h * 10**(m - h)
    else:
        d = 5**m * 2**(m - h)
    return reduce_pair(n, d)
