"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Exact rational numbers.

A Rational is stored as a sign and two unsigned magnitudes, the numerator and
the denominator. Every value is kept in lowest terms, the denominator is never
zero, and zero itself has the single representation (POS, 0, 1), so there is
no negative zero and equality is a plain comparison of the three fields.
"""

import re

from elliptic import DivideByZero
from elliptic.util.intmath import gcd


POS = 1
NEG = -1

RATIONAL_RE = re.compile(r"^([+-]?\d+)(?:/(\d+))?$", re.ASCII)


def _combine(s1, m1, s2, m2):
    """
    Signed sum of two magnitudes. When the signs differ, the smaller magnitude
    is taken from the larger and the result carries the sign of the larger.
    """
    if s1 == s2:
        return s1, m1 + m2
    if m1 >= m2:
        return s1, m1 - m2
    return s2, m2 - m1


class Rational:
    """
    Rational is an immutable fraction with arbitrary precision. Arithmetic
    operators accept a Rational or an int on either side.
    """

    def __init__(self, numerator=0, denominator=1):
        """
        Args:
            numerator (int): The signed numerator.
            denominator (int): The signed, non-zero denominator.
        """
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError(
                f"numerator and denominator must be int, not "
                f"{type(numerator).__name__} and {type(denominator).__name__}"
            )
        if denominator == 0:
            raise DivideByZero("zero denominator")
        sign = POS if (numerator < 0) == (denominator < 0) else NEG
        self._set(sign, abs(numerator), abs(denominator))

    def _set(self, sign, numerator, denominator):
        if numerator == 0:
            sign, denominator = POS, 1
        else:
            g = gcd(numerator, denominator)
            numerator //= g
            denominator //= g
        self._sign = sign
        self._numerator = numerator
        self._denominator = denominator

    @classmethod
    def _raw(cls, sign, numerator, denominator):
        """
        Build a Rational from parts that are already reduced and canonical.
        """
        r = cls.__new__(cls)
        r._sign = sign
        r._numerator = numerator
        r._denominator = denominator
        return r

    @classmethod
    def new(cls, sign, numerator, denominator):
        """
        The canonical constructor. Reduces numerator/denominator to lowest
        terms and collapses a zero numerator to the canonical zero.

        Args:
            sign (int): POS or NEG.
            numerator (int): The unsigned numerator.
            denominator (int): The unsigned, non-zero denominator.

        Returns:
            Rational: The reduced value.
        """
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError("magnitudes must be int")
        if sign not in (POS, NEG):
            raise ValueError(f"invalid sign {sign}")
        if numerator < 0 or denominator < 0:
            raise ValueError("magnitudes must be non-negative")
        if denominator == 0:
            raise DivideByZero("zero denominator")
        r = cls.__new__(cls)
        r._set(sign, numerator, denominator)
        return r

    @classmethod
    def zero(cls):
        return cls._raw(POS, 0, 1)

    @classmethod
    def fromInt(cls, n):
        """
        Promote an int to a Rational.
        """
        if not isinstance(n, int):
            raise TypeError(f"cannot promote {type(n).__name__} to a Rational")
        return cls._raw(NEG if n < 0 else POS, abs(n), 1)

    @classmethod
    def parse(cls, text):
        """
        Parse the "p" or "p/q" rendering produced by __str__. Only the numerator
        may carry a sign.

        Args:
            text (str): The text to parse.

        Returns:
            Rational: The parsed value.
        """
        m = RATIONAL_RE.match(text.strip())
        if not m:
            raise ValueError(f"cannot parse rational from {text!r}")
        p, q = m.groups()
        return cls(int(p), int(q) if q is not None else 1)

    @property
    def sign(self):
        return self._sign

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    def isZero(self):
        return self._numerator == 0

    def isInteger(self):
        return self._denominator == 1

    def add(self, other):
        """
        add returns self + other.
        """
        other = _promote(other)
        p1 = self._numerator * other._denominator
        p2 = other._numerator * self._denominator
        sign, p = _combine(self._sign, p1, other._sign, p2)
        return Rational.new(sign, p, self._denominator * other._denominator)

    def sub(self, other):
        """
        sub returns self - other.
        """
        other = _promote(other)
        p1 = self._numerator * other._denominator
        p2 = other._numerator * self._denominator
        sign, p = _combine(self._sign, p1, -other._sign, p2)
        return Rational.new(sign, p, self._denominator * other._denominator)

    def neg(self):
        if self.isZero():
            return self
        return Rational._raw(-self._sign, self._numerator, self._denominator)

    def mul(self, other):
        """
        mul returns self * other.
        """
        other = _promote(other)
        # Short circuit so the reduction never sees a zero numerator.
        if self.isZero() or other.isZero():
            return Rational.zero()
        sign = POS if self._sign == other._sign else NEG
        return Rational.new(
            sign,
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def reciprocal(self):
        """
        reciprocal returns 1 / self. The sign is kept and the magnitudes are
        swapped, which leaves the fraction reduced.
        """
        if self.isZero():
            raise DivideByZero("Divide by zero.")
        return Rational._raw(self._sign, self._denominator, self._numerator)

    def div(self, other):
        """
        div returns self / other, raising DivideByZero if other is zero.
        """
        other = _promote(other)
        if other.isZero():
            raise DivideByZero("Divide by zero.")
        return self.mul(other.reciprocal())

    def comp(self, other):
        """
        Compare with another Rational or int.

        Returns:
            int: -1 if self < other, 0 if equal, 1 if self > other.
        """
        other = _promote(other)
        diff = self.sub(other)
        if diff.isZero():
            return 0
        return diff.sign

    def __add__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return _promote(other).sub(self)

    def __mul__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return _promote(other).div(self)

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational._raw(POS, self._numerator, self._denominator)

    def __pow__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        base = self
        if n < 0:
            base = self.reciprocal()
            n = -n
        # Powers of coprime magnitudes stay coprime.
        sign = base._sign if n % 2 == 1 else POS
        return Rational.new(sign, base._numerator ** n, base._denominator ** n)

    def __bool__(self):
        return not self.isZero()

    def __eq__(self, other):
        if not _isOperand(other):
            return NotImplemented
        other = _promote(other)
        return (
            self._sign == other._sign
            and self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __lt__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return self.comp(other) < 0

    def __le__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return self.comp(other) <= 0

    def __gt__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return self.comp(other) > 0

    def __ge__(self, other):
        if not _isOperand(other):
            return NotImplemented
        return self.comp(other) >= 0

    def __hash__(self):
        # Integral values hash like the int they equal.
        if self._denominator == 1:
            return hash(self._sign * self._numerator)
        return hash((self._sign, self._numerator, self._denominator))

    def __str__(self):
        s = "-" if self._sign == NEG else ""
        if self._denominator == 1:
            return f"{s}{self._numerator}"
        return f"{s}{self._numerator}/{self._denominator}"

    def __repr__(self):
        p = self._sign * self._numerator
        return f"Rational({p}, {self._denominator})"


def _isOperand(v):
    return isinstance(v, (Rational, int))


def _promote(v):
    """
    Promote an int operand to a Rational. Rationals pass through unchanged.
    """
    if isinstance(v, Rational):
        return v
    if isinstance(v, int):
        return Rational.fromInt(v)
    raise TypeError(f"unsupported operand type {type(v).__name__}")
