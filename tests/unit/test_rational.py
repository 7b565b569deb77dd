"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import random

import pytest

from elliptic import DivideByZero
from elliptic.rational import NEG, POS, Rational
from elliptic.util.intmath import gcd


def test_construction():
    tests = [
        # (numerator, denominator, sign, p, q)
        (0, 1, POS, 0, 1),
        (0, -7, POS, 0, 1),
        (6, 4, POS, 3, 2),
        (-6, 4, NEG, 3, 2),
        (6, -4, NEG, 3, 2),
        (-6, -4, POS, 3, 2),
        (12, 3, POS, 4, 1),
        (-65, 6, NEG, 65, 6),
    ]
    for n, d, sign, p, q in tests:
        r = Rational(n, d)
        assert r.sign == sign, (n, d)
        assert r.numerator == p, (n, d)
        assert r.denominator == q, (n, d)

    with pytest.raises(DivideByZero):
        Rational(1, 0)


def test_new():
    r = Rational.new(NEG, 10, 4)
    assert (r.sign, r.numerator, r.denominator) == (NEG, 5, 2)
    # No negative zero.
    z = Rational.new(NEG, 0, 5)
    assert (z.sign, z.numerator, z.denominator) == (POS, 0, 1)
    assert z == Rational.zero()

    with pytest.raises(DivideByZero):
        Rational.new(POS, 1, 0)
    with pytest.raises(ValueError):
        Rational.new(POS, -1, 2)
    with pytest.raises(ValueError):
        Rational.new(0, 1, 2)


def test_fromInt():
    assert str(Rational.fromInt(5)) == "5"
    assert str(Rational.fromInt(-5)) == "-5"
    assert Rational.fromInt(0) == Rational.zero()
    big = 2 ** 200 + 1
    assert Rational.fromInt(-big).numerator == big


def test_reduction():
    random.seed(0)
    for _ in range(200):
        p = random.randint(-(10 ** 6), 10 ** 6)
        q = random.randint(1, 10 ** 6) * random.choice((1, -1))
        k = random.randint(1, 1000) * random.choice((1, -1))
        r = Rational(p, q)
        assert gcd(r.numerator, r.denominator) == 1
        assert r == Rational(k * p, k * q)


def test_string():
    tests = [
        (Rational(3) + Rational(2), "5"),
        (Rational(1, 2) - Rational(1, 3), "1/6"),
        (Rational(1, 3) - Rational(1, 2), "-1/6"),
        (Rational(4, -6), "-2/3"),
        (Rational(0, -6), "0"),
        (Rational(-65, 6), "-65/6"),
    ]
    for r, want in tests:
        assert str(r) == want
    assert repr(Rational(-2, 3)) == "Rational(-2, 3)"


def test_parse():
    assert Rational.parse("5") == 5
    assert Rational.parse("-1/6") == Rational(-1, 6)
    assert Rational.parse(" +4/8 ") == Rational(1, 2)
    for bad in ("", "1/", "/2", "1/-2", "a/b", "1.5", "1//2"):
        with pytest.raises(ValueError):
            Rational.parse(bad)
    with pytest.raises(DivideByZero):
        Rational.parse("1/0")


def test_add_sub():
    tests = [
        # (a, b, a + b, a - b)
        (Rational(3), Rational(2), Rational(5), Rational(1)),
        (Rational(1, 2), Rational(1, 3), Rational(5, 6), Rational(1, 6)),
        (Rational(-1, 2), Rational(1, 3), Rational(-1, 6), Rational(-5, 6)),
        (Rational(1, 2), Rational(-1, 3), Rational(1, 6), Rational(5, 6)),
        (Rational(-1, 2), Rational(-1, 3), Rational(-5, 6), Rational(-1, 6)),
        (Rational(1, 2), Rational(-1, 2), Rational(0), Rational(1)),
        (Rational(0), Rational(-7, 3), Rational(-7, 3), Rational(7, 3)),
    ]
    for a, b, wantSum, wantDiff in tests:
        assert a.add(b) == wantSum, (a, b)
        assert a + b == wantSum, (a, b)
        assert a.sub(b) == wantDiff, (a, b)
        assert a - b == wantDiff, (a, b)

    s = Rational(1, 2) + Rational(-1, 2)
    assert s.sign == POS
    assert s.denominator == 1


def test_mul_div():
    tests = [
        # (a, b, a * b, a / b)
        (Rational(2, 3), Rational(3, 4), Rational(1, 2), Rational(8, 9)),
        (Rational(-2, 3), Rational(3, 4), Rational(-1, 2), Rational(-8, 9)),
        (Rational(-2, 3), Rational(-3, 4), Rational(1, 2), Rational(8, 9)),
        (Rational(0), Rational(-3, 4), Rational(0), Rational(0)),
        (Rational(7), Rational(1, 7), Rational(1), Rational(49)),
    ]
    for a, b, wantProd, wantQuot in tests:
        assert a.mul(b) == wantProd, (a, b)
        assert a * b == wantProd, (a, b)
        assert a.div(b) == wantQuot, (a, b)
        assert a / b == wantQuot, (a, b)

    # A zero product is the canonical zero, whatever the signs.
    z = Rational(-3, 4) * Rational(0)
    assert (z.sign, z.numerator, z.denominator) == (POS, 0, 1)


def test_divide_by_zero(randRational):
    random.seed(1)
    for _ in range(20):
        a = randRational()
        with pytest.raises(DivideByZero):
            a / Rational.zero()
        with pytest.raises(ZeroDivisionError):
            a.div(0)
    with pytest.raises(DivideByZero):
        Rational.zero().reciprocal()
    with pytest.raises(DivideByZero):
        1 / Rational(0)


def test_neg():
    assert -Rational(2, 3) == Rational(-2, 3)
    assert Rational(2, 3).neg().neg() == Rational(2, 3)
    z = Rational.zero().neg()
    assert z.sign == POS
    assert abs(Rational(-2, 3)) == Rational(2, 3)
    assert +Rational(-2, 3) == Rational(-2, 3)


def test_mixed_int():
    r = Rational(1, 2)
    assert r + 1 == Rational(3, 2)
    assert 1 + r == Rational(3, 2)
    assert r - 1 == Rational(-1, 2)
    assert 1 - r == Rational(1, 2)
    assert 3 * r == Rational(3, 2)
    assert r * -3 == Rational(-3, 2)
    assert r / 2 == Rational(1, 4)
    assert 2 / r == Rational(4)
    assert Rational(10, 2) == 5
    assert 5 == Rational(10, 2)
    assert Rational(1, 2) != 0

    with pytest.raises(TypeError):
        r + 0.5
    with pytest.raises(TypeError):
        r * "2"


def test_pow():
    assert Rational(-2, 3) ** 3 == Rational(-8, 27)
    assert Rational(-2, 3) ** 2 == Rational(4, 9)
    assert Rational(-2, 3) ** -3 == Rational(-27, 8)
    assert Rational(5, 7) ** 0 == 1
    with pytest.raises(DivideByZero):
        Rational(0) ** -1


def test_ordering():
    assert Rational(1, 3) < Rational(1, 2)
    assert Rational(-1, 2) < Rational(-1, 3)
    assert Rational(-1, 2) < 0 < Rational(1, 100)
    assert Rational(4, 2) <= 2
    assert Rational(4, 2) >= 2
    assert Rational(5, 2) > 2
    assert Rational(1, 2).comp(Rational(2, 4)) == 0
    assert sorted([Rational(1, 2), Rational(-3), Rational(1, 3)]) == [
        Rational(-3),
        Rational(1, 3),
        Rational(1, 2),
    ]


def test_hash():
    assert hash(Rational(6, 4)) == hash(Rational(-3, -2))
    assert hash(Rational(4, 2)) == hash(2)
    assert len({Rational(1, 2), Rational(2, 4), Rational(-1, 2)}) == 2


def test_predicates():
    assert Rational(0, 5).isZero()
    assert not Rational(0, 5)
    assert Rational(1, 5)
    assert Rational(10, 5).isInteger()
    assert not Rational(10, 4).isInteger()


def test_field_laws(randRational):
    random.seed(2)
    zero = Rational.zero()
    for _ in range(200):
        a, b, c = randRational(), randRational(), randRational()
        assert a + (-a) == zero
        assert a - a == zero
        assert a * b == b * a
        assert a + b == b + a
        assert (a + b) + c == a + (b + c)
        assert (a * b) * c == a * (b * c)
        assert a * (b + c) == a * b + a * c
        if not b.isZero():
            assert (a / b) * b == a
        if not a.isZero():
            assert a * a.reciprocal() == 1


def test_big_values():
    # Far beyond machine integers, with no loss of precision.
    a = Rational(-65, 6)
    for _ in range(6):
        a = a * a + 3 * a
    assert gcd(a.numerator, a.denominator) == 1
    assert a.denominator == 6 ** 64
    b = Rational(2 ** 300 + 1, 3 ** 150)
    assert (b - Rational(1, 3 ** 150)) * 3 ** 150 == 2 ** 300


def test_non_integer_parts():
    tests = [
        # (numerator, denominator)
        (0.5, 1),
        (1, 2.0),
        (1.0, 1),
        ("1", 2),
        (Rational(1, 2), 1),
    ]
    for n, d in tests:
        with pytest.raises(TypeError):
            Rational(n, d)
        with pytest.raises(TypeError):
            Rational.new(POS, n, d)
    for v in (0.5, 2.0, "3"):
        with pytest.raises(TypeError):
            Rational.fromInt(v)
    # Non-ASCII digits are not accepted as text input.
    with pytest.raises(ValueError):
        Rational.parse("١١")
