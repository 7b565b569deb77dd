"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Elliptic curves in long Weierstrass form

    y^2 + a1*x*y + a3*y = x^3 + a2*x^2 + a4*x + a6

with integer coefficients. The b- and c-invariants and the discriminant
follow the usual definitions, see e.g. Silverman, The Arithmetic of Elliptic
Curves, III.1.
"""

import operator

from elliptic.rational import Rational


class Curve:
    """
    Curve is an immutable record of the five Weierstrass coefficients. No
    check for singularity is made on construction, but the group law in
    elliptic.point is only meaningful when isSingular is False.
    """

    def __init__(self, a1, a2, a3, a4, a6):
        # operator.index rejects floats rather than truncating them.
        self._coefficients = tuple(operator.index(a) for a in (a1, a2, a3, a4, a6))

    @classmethod
    def fromCoefficients(cls, a1, a2, a3, a4, a6):
        return cls(a1, a2, a3, a4, a6)

    @property
    def coefficients(self):
        """
        The tuple (a1, a2, a3, a4, a6).
        """
        return self._coefficients

    @property
    def a1(self):
        return self._coefficients[0]

    @property
    def a2(self):
        return self._coefficients[1]

    @property
    def a3(self):
        return self._coefficients[2]

    @property
    def a4(self):
        return self._coefficients[3]

    @property
    def a6(self):
        return self._coefficients[4]

    @property
    def b2(self):
        return self.a1 ** 2 + 4 * self.a2

    @property
    def b4(self):
        return 2 * self.a4 + self.a1 * self.a3

    @property
    def b6(self):
        return self.a3 ** 2 + 4 * self.a6

    @property
    def b8(self):
        a1, a2, a3, a4, a6 = self._coefficients
        return (
            a1 ** 2 * a6 + 4 * a2 * a6 - a1 * a3 * a4 + a2 * a3 ** 2 - a4 ** 2
        )

    @property
    def c4(self):
        return self.b2 ** 2 - 24 * self.b4

    @property
    def c6(self):
        b2 = self.b2
        return -(b2 ** 3) + 36 * b2 * self.b4 - 216 * self.b6

    @property
    def discriminant(self):
        b2, b4, b6, b8 = self.b2, self.b4, self.b6, self.b8
        return -(b2 ** 2) * b8 - 8 * b4 ** 3 - 27 * b6 ** 2 + 9 * b2 * b4 * b6

    def isSingular(self):
        return self.discriminant == 0

    def jInvariant(self):
        """
        jInvariant returns c4^3 / discriminant. Raises DivideByZero for a
        singular curve.
        """
        return Rational.fromInt(self.c4 ** 3) / self.discriminant

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self):
        return hash(self._coefficients)

    def __str__(self):
        a1, a2, a3, a4, a6 = self._coefficients
        lhs = "y^2" + _terms([(a1, "x*y"), (a3, "y")])
        rhs = "x^3" + _terms([(a2, "x^2"), (a4, "x"), (a6, "")])
        return f"{lhs} = {rhs}"

    def __repr__(self):
        return "Curve(%d, %d, %d, %d, %d)" % self._coefficients


def _terms(pairs):
    """
    Render the non-zero coefficient/monomial pairs as signed terms, e.g.
    [(-1, "x^2"), (-10, "x")] -> " - x^2 - 10*x".
    """
    s = ""
    for c, mono in pairs:
        if c == 0:
            continue
        s += " - " if c < 0 else " + "
        mag = abs(c)
        if not mono:
            s += str(mag)
        elif mag == 1:
            s += mono
        else:
            s += f"{mag}*{mono}"
    return s
