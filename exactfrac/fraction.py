import operator

import numpy as np
from quicktions import Fraction as _QFraction  # type: ignore

from .utils import INT_MAX, INT_MIN, DivisionByZeroError, lcm, ratio_from_float, reduce_pair


class Fraction:
    """
    Rational number numerator/denominator, always kept in lowest terms with positive denominator.

    Operands of arithmetic and comparisons may be fractions or ints (n is treated as n/1).
    In-place operators (+=, -=, *=, /=) mutate the receiver, so fractions are not hashable.
    Integers are Python ints: there is no overflow check against INT_MIN..INT_MAX.
    """

    ZERO: 'Fraction'
    ONE: 'Fraction'
    MAX_VALUE: 'Fraction'
    MIN_VALUE: 'Fraction'
    PI: 'Fraction'

    _frozen = False

    def __init__(self, numerator=0, denominator=1):
        if isinstance(numerator, float):
            if denominator != 1:
                raise TypeError("Float fraction takes no denominator!")
            self.numerator, self.denominator = ratio_from_float(numerator)
            return
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError("Numerator and denominator must be int!")
        self.numerator, self.denominator = reduce_pair(numerator, denominator)

    @classmethod
    def from_float(cls, number: float) -> 'Fraction':
        return cls(float(number))

    @classmethod
    def convert(cls, x) -> 'Fraction':
        if isinstance(x, cls):
            return x
        elif isinstance(x, int):
            return cls(x)
        elif isinstance(x, float):
            return cls.from_float(x)
        elif isinstance(getattr(x, 'numerator', None), int) and isinstance(getattr(x, 'denominator', None), int):
            # quicktions.Fraction, fractions.Fraction and alike
            return cls(x.numerator, x.denominator)
        else:
            raise TypeError("Can't convert {!r} to Fraction!".format(x))

    @staticmethod
    def _pair(other):
        # (numerator, denominator) of an operand, None if not supported
        if isinstance(other, Fraction):
            return other.numerator, other.denominator
        if isinstance(other, int):
            return other, 1
        return None

    # pure algorithms on pairs, one per operator

    @staticmethod
    def _add_sub(a, b, op):
        lcm_ab = lcm(a[1], b[1])
        return reduce_pair(op(a[0] * (lcm_ab // a[1]), b[0] * (lcm_ab // b[1])), lcm_ab)

    @staticmethod
    def _mul(a, b):
        return reduce_pair(a[0] * b[0], a[1] * b[1])

    @staticmethod
    def _div(a, b):
        if b[0] == 0:
            raise DivisionByZeroError()
        return reduce_pair(a[0] * b[1], a[1] * b[0])

    @staticmethod
    def _mod(a, b):
        # truncating remainder: -7 % 2 == -1
        n, d = Fraction._div(a, b)
        int_part = abs(n) // d
        if n < 0:
            int_part = -int_part
        return n - d * int_part

    @classmethod
    def _from_pair(cls, pair):
        obj = cls.__new__(cls)
        obj.numerator, obj.denominator = pair
        return obj

    def _binary(self, other, func, *args, reflected=False):
        other_pair = self._pair(other)
        if other_pair is None:
            return NotImplemented
        self_pair = (self.numerator, self.denominator)
        if reflected:
            self_pair, other_pair = other_pair, self_pair
        return func(self_pair, other_pair, *args)

    def _inplace(self, other, func, *args):
        result = self._binary(other, func, *args)
        if result is NotImplemented:
            return result
        if self._frozen:
            return Fraction._from_pair(result)
        self.numerator, self.denominator = result
        return self

    def _new(self, pair):
        if pair is NotImplemented:
            return pair
        return Fraction._from_pair(pair)

    def __neg__(self):
        return Fraction._from_pair((-self.numerator, self.denominator))

    def __add__(self, other):
        return self._new(self._binary(other, self._add_sub, operator.add))

    def __radd__(self, other):
        return self._new(self._binary(other, self._add_sub, operator.add, reflected=True))

    def __iadd__(self, other):
        return self._inplace(other, self._add_sub, operator.add)

    def __sub__(self, other):
        return self._new(self._binary(other, self._add_sub, operator.sub))

    def __rsub__(self, other):
        return self._new(self._binary(other, self._add_sub, operator.sub, reflected=True))

    def __isub__(self, other):
        return self._inplace(other, self._add_sub, operator.sub)

    def __mul__(self, other):
        return self._new(self._binary(other, self._mul))

    def __rmul__(self, other):
        return self._new(self._binary(other, self._mul, reflected=True))

    def __imul__(self, other):
        return self._inplace(other, self._mul)

    def __truediv__(self, other):
        return self._new(self._binary(other, self._div))

    def __rtruediv__(self, other):
        return self._new(self._binary(other, self._div, reflected=True))

    def __itruediv__(self, other):
        return self._inplace(other, self._div)

    def __mod__(self, other):
        return self._binary(other, self._mod)

    def __rmod__(self, other):
        return self._binary(other, self._mod, reflected=True)

    def _compare(self, other, op):
        other_pair = self._pair(other)
        if other_pair is None:
            return NotImplemented
        n, d = other_pair
        if self.denominator == d:
            return op(self.numerator, n)
        lcm_d = lcm(self.denominator, d)
        return op(self.numerator * (lcm_d // self.denominator), n * (lcm_d // d))

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __ne__(self, other):
        return self._compare(other, operator.ne)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __le__(self, other):
        return self._compare(other, operator.le)

    __hash__ = None

    def get_double_value(self) -> float:
        return self.numerator / self.denominator

    def get_float_value(self) -> np.float32:
        """Quotient computed in single precision."""
        return np.float32(self.numerator) / np.float32(self.denominator)

    def to_fraction(self) -> _QFraction:
        return _QFraction(self.numerator, self.denominator)

    def __float__(self):
        return self.get_double_value()

    # truncates towards zero, as int(float) does
    def __int__(self):
        int_part = abs(self.numerator) // self.denominator
        return -int_part if self.numerator < 0 else int_part

    def __bool__(self):
        return self.numerator != 0

    def __str__(self):
        return '{}/{}'.format(self.numerator, self.denominator)

    def __repr__(self):
        return 'Fraction({}, {})'.format(self.numerator, self.denominator)


class _ConstFraction(Fraction):
    # shared constant: in-place operators return a new Fraction
    _frozen = True

    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise AttributeError("Fraction constant is read-only!")
        super().__setattr__(name, value)


ZERO = Fraction.ZERO = _ConstFraction(0)
ONE = Fraction.ONE = _ConstFraction(1)
MAX_VALUE = Fraction.MAX_VALUE = _ConstFraction(INT_MAX)
MIN_VALUE = Fraction.MIN_VALUE = _ConstFraction(INT_MIN)
PI = Fraction.PI = _ConstFraction(3126535, 995207)
