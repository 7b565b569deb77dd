"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Exact arithmetic on rational points of elliptic curves in long Weierstrass
form.
"""


class EllipticError(Exception):
    pass


class DivideByZero(EllipticError, ZeroDivisionError):
    """
    Raised on division of a Rational by zero. Subclasses ZeroDivisionError so
    callers expecting the builtin behavior still catch it.
    """

    pass


class CurveMismatch(EllipticError):
    """
    Raised when points from two different curves are combined.
    """

    pass


class MalformedCurveRecord(EllipticError):
    """
    Raised when a line of the curve database cannot be parsed.

    Args:
        msg str: The reason the record was rejected.
        lineNo int: The 1-based line number in the database file, if known.
    """

    def __init__(self, msg, lineNo=None):
        if lineNo is not None:
            msg = f"line {lineNo}: {msg}"
        super().__init__(msg)
        self.lineNo = lineNo
