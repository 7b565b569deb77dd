"""
Copyright (c) 2019, the Decred developers
See LICENSE for details
"""

import random

import pytest

from elliptic.curve import Curve
from elliptic.point import Point
from elliptic.rational import Rational
from elliptic.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def randRational():
    def _randRational(bound=1000):
        q = 0
        while q == 0:
            q = random.randint(-bound, bound)
        return Rational(random.randint(-bound, bound), q)

    return _randRational


@pytest.fixture
def randCurvePoint():
    def _randCurvePoint(bound=10):
        """
        Pick a1..a4 and an integral point (x, y), then solve for a6 so that the
        point lies on the curve. Singular curves are rejected.
        """
        while True:
            a1, a2, a3, a4 = (random.randint(-bound, bound) for _ in range(4))
            x, y = random.randint(-bound, bound), random.randint(-bound, bound)
            a6 = y * y + a1 * x * y + a3 * y - x ** 3 - a2 * x * x - a4 * x
            curve = Curve(a1, a2, a3, a4, a6)
            if curve.isSingular():
                continue
            return Point(curve, x, y)

    return _randCurvePoint
