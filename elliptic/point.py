"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Rational points on a long Weierstrass curve and the group law.

All group operations are performed in affine coordinates with exact Rational
arithmetic. The point at infinity (the origin, the group identity) has no
coordinates. For a non-singular curve, the sum of two points P and Q is found
by intersecting the line through them (the tangent line when P == Q) with the
curve and reflecting the third intersection point. Writing the line as
y = λx + ν, the third point is

    x3 = λ^2 + a1*λ - a2 - x1 - x2
    y3 = -(λ + a1)*x3 - ν - a3

References:
  [AEC]: The Arithmetic of Elliptic Curves (Silverman), III.2
"""

from elliptic import CurveMismatch
from elliptic.rational import Rational
from elliptic.util.intmath import bitsMSBFirst


def _toRational(v):
    if isinstance(v, Rational):
        return v
    if isinstance(v, int):
        return Rational.fromInt(v)
    raise TypeError(f"coordinate must be a Rational or int, not {type(v).__name__}")


def tangentSlope(curve, x, y):
    """
    The slope λ of the tangent line at (x, y). The caller must exclude the
    vertical tangent of a 2-torsion point.
    """
    a1, a2, a3, a4, _ = curve.coefficients
    numerator = 3 * x * x + 2 * a2 * x + a4 - a1 * y
    denominator = 2 * y + a1 * x + a3
    return numerator / denominator


def tangentLine(curve, x, y):
    """
    The slope λ and intercept ν of the tangent line at (x, y). Both share the
    denominator 2y + a1*x + a3.
    """
    a1, a2, a3, a4, a6 = curve.coefficients
    denominator = 2 * y + a1 * x + a3
    lam = (3 * x * x + 2 * a2 * x + a4 - a1 * y) / denominator
    nu = (-(x * x * x) + a4 * x + 2 * a6 - a3 * y) / denominator
    return lam, nu


def secantLine(x1, y1, x2, y2):
    """
    The slope λ and intercept ν of the line through (x1, y1) and (x2, y2),
    where x1 != x2.
    """
    denominator = x2 - x1
    lam = (y2 - y1) / denominator
    nu = (y1 * x2 - x1 * y2) / denominator
    return lam, nu


class Point:
    """
    Point is an immutable point on a Curve, either the origin or a finite
    point (x, y) with Rational coordinates. Since this accepts arbitrary x and
    y coordinates, it allows creation of points that are not on the curve.
    Use verify to check.
    """

    def __init__(self, curve, x, y):
        """
        Args:
            curve (Curve): The owning curve.
            x (Rational or int): The x coordinate.
            y (Rational or int): The y coordinate.
        """
        self._curve = curve
        self._x = _toRational(x)
        self._y = _toRational(y)

    @classmethod
    def new(cls, curve, x, y):
        return cls(curve, x, y)

    @classmethod
    def origin(cls, curve):
        """
        origin returns the point at infinity of the curve.
        """
        p = cls.__new__(cls)
        p._curve = curve
        p._x = None
        p._y = None
        return p

    @property
    def curve(self):
        return self._curve

    @property
    def x(self):
        """The x coordinate, None for the origin."""
        return self._x

    @property
    def y(self):
        """The y coordinate, None for the origin."""
        return self._y

    def isOrigin(self):
        return self._x is None

    def sameCurve(self, other):
        return self._curve == other._curve

    def verify(self):
        """
        verify returns True if the point satisfies the curve equation. The
        origin always does.
        """
        if self.isOrigin():
            return True
        a1, a2, a3, a4, a6 = self._curve.coefficients
        x, y = self._x, self._y
        lhs = y * y + a1 * x * y + a3 * y
        rhs = x * x * x + a2 * x * x + a4 * x + a6
        return lhs == rhs

    def neg(self):
        """
        neg returns the inverse point, the reflection (x, -y - a1*x - a3) of
        (x, y).
        """
        if self.isOrigin():
            return self
        curve = self._curve
        y = -self._y - curve.a1 * self._x - curve.a3
        return Point(curve, self._x, y)

    def isInverse(self, other):
        return self == other.neg()

    def _checkCurve(self, other):
        if not self.sameCurve(other):
            raise CurveMismatch(
                f"cannot combine points on {self._curve!r} and {other._curve!r}"
            )

    def add(self, other):
        """
        add returns the sum of self and other. Raises CurveMismatch if the
        points belong to different curves.
        """
        self._checkCurve(other)

        # The origin is the identity. Thus, ∞ + P = P and P + ∞ = P.
        if self.isOrigin():
            return other
        if other.isOrigin():
            return self

        # P + (-P) = ∞. Catches the vertical line before a slope is computed.
        if self.isInverse(other):
            return Point.origin(self._curve)

        curve = self._curve
        x1, y1, x2, y2 = self._x, self._y, other._x, other._y
        if x1 == x2:
            # Same x and not inverses, so P == Q. Use the tangent line.
            lam, nu = tangentLine(curve, x1, y1)
        else:
            lam, nu = secantLine(x1, y1, x2, y2)

        x3 = lam * lam + curve.a1 * lam - curve.a2 - x1 - x2
        y3 = -(lam + curve.a1) * x3 - nu - curve.a3
        return Point(curve, x3, y3)

    def sub(self, other):
        """
        sub returns self - other.
        """
        self._checkCurve(other)
        return self.add(other.neg())

    def double(self):
        """
        double returns 2 * self.
        """
        if self.isOrigin():
            return self

        # A 2-torsion point has a vertical tangent.
        if self.isInverse(self):
            return Point.origin(self._curve)

        curve = self._curve
        x1, y1 = self._x, self._y
        lam = tangentSlope(curve, x1, y1)
        x3 = lam * lam + lam * curve.a1 - curve.a2 - 2 * x1
        y3 = -curve.a1 * x3 - curve.a3 + lam * (x1 - x3) - y1
        return Point(curve, x3, y3)

    def scalarMultiply(self, n):
        """
        scalarMultiply returns n * self using left-to-right double-and-add.

        Args:
            n (int): The signed scalar.

        Returns:
            Point: The product.
        """
        if not isinstance(n, int):
            raise TypeError(f"cannot scale a point by {type(n).__name__}")
        if n == 0 or self.isOrigin():
            return Point.origin(self._curve)

        point = self
        if n < 0:
            n = -n
            point = point.neg()

        # Start from the leading 1 bit. Each following bit doubles the
        # accumulator and, for a 1, adds the point once more.
        acc = point
        for bit in bitsMSBFirst(n)[1:]:
            acc = acc.double()
            if bit:
                acc = acc.add(point)
        return acc

    def __neg__(self):
        return self.neg()

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return self.scalarMultiply(n)

    __rmul__ = __mul__

    def __eq__(self, other):
        """
        Points are equal if they share a curve and are both the origin or have
        the same coordinates. Points on different curves are never equal.
        """
        if not isinstance(other, Point):
            return NotImplemented
        if not self.sameCurve(other):
            return False
        return self._x == other._x and self._y == other._y

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash((self._curve, self._x, self._y))

    def __str__(self):
        if self.isOrigin():
            return "Origin"
        return f"({self._x}, {self._y})"

    def __repr__(self):
        return f"Point({self._curve!r}, {self})"
