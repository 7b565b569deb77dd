"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Reader for flat-file curve databases, one curve per line:

    <conductor> <isogeny class> <number in class> [a1,a2,a3,a4,a6] <rank> <torsion>

e.g.

    11 a 1 [0,-1,1,-10,-20] 0 5

A line is validated completely before its Curve is built.
"""

import re

from elliptic import MalformedCurveRecord, config
from elliptic.curve import Curve
from elliptic.util import helpers


log = helpers.getLogger("DB")

FIELD_COUNT = 6
COEFFICIENT_COUNT = 5

INT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
UINT_RE = re.compile(r"^\d+$", re.ASCII)
CLASS_RE = re.compile(r"^[A-Za-z]+$")


def parseUnsigned(s, name):
    if not UINT_RE.match(s):
        raise MalformedCurveRecord(f"{name} is not an unsigned integer: {s!r}")
    return int(s)


def parseCoefficients(s):
    """
    Parse the bracketed coefficient field.

    Args:
        s (str): e.g. "[0,-1,1,-10,-20]".

    Returns:
        tuple(int): (a1, a2, a3, a4, a6).
    """
    if len(s) < 2 or s[0] != "[" or s[-1] != "]":
        raise MalformedCurveRecord(f"coefficients must be bracketed: {s!r}")
    parts = s[1:-1].split(",")
    if len(parts) != COEFFICIENT_COUNT:
        raise MalformedCurveRecord(
            f"expected {COEFFICIENT_COUNT} coefficients, got {len(parts)}: {s!r}"
        )
    for part in parts:
        if not INT_RE.match(part):
            raise MalformedCurveRecord(f"invalid coefficient {part!r} in {s!r}")
    return tuple(int(part) for part in parts)


class CurveRecord:
    """
    A curve along with its database metadata.
    """

    def __init__(self, conductor, isogenyClass, numberInClass, curve, rank, torsion):
        self.conductor = conductor
        self.isogenyClass = isogenyClass
        self.numberInClass = numberInClass
        self.curve = curve
        self.rank = rank
        self.torsion = torsion

    @property
    def label(self):
        """
        The curve label, e.g. "11a1".
        """
        return f"{self.conductor}{self.isogenyClass}{self.numberInClass}"

    def __eq__(self, other):
        if not isinstance(other, CurveRecord):
            return NotImplemented
        return (
            self.conductor == other.conductor
            and self.isogenyClass == other.isogenyClass
            and self.numberInClass == other.numberInClass
            and self.curve == other.curve
            and self.rank == other.rank
            and self.torsion == other.torsion
        )

    def __str__(self):
        coeffs = ",".join(str(a) for a in self.curve.coefficients)
        return (
            f"{self.conductor} {self.isogenyClass} {self.numberInClass} "
            f"[{coeffs}] {self.rank} {self.torsion}"
        )

    def __repr__(self):
        return f"CurveRecord({self})"


def parseCurveLine(line):
    """
    Parse one database line.

    Args:
        line (str): The line, with or without the trailing newline.

    Returns:
        CurveRecord: The parsed record.
    """
    fields = line.split()
    if len(fields) != FIELD_COUNT:
        raise MalformedCurveRecord(
            f"expected {FIELD_COUNT} fields, got {len(fields)}: {line.strip()!r}"
        )
    conductor = parseUnsigned(fields[0], "conductor")
    isoClass = fields[1]
    if not CLASS_RE.match(isoClass):
        raise MalformedCurveRecord(f"invalid isogeny class {isoClass!r}")
    numberInClass = parseUnsigned(fields[2], "number in class")
    coeffs = parseCoefficients(fields[3])
    rank = parseUnsigned(fields[4], "rank")
    torsion = parseUnsigned(fields[5], "torsion")
    return CurveRecord(
        conductor, isoClass, numberInClass, Curve(*coeffs), rank, torsion
    )


def readCurveDatabase(path=None, strict=True):
    """
    Read every curve in the database file. Blank lines and lines starting with
    "#" are skipped.

    Args:
        path (str or Path): Optional. The database file. Defaults to the
            configured "curveDB" path.
        strict (bool): Optional. Default True. If True, the first malformed
            line raises MalformedCurveRecord. If False, malformed lines are
            logged and skipped.

    Returns:
        list(CurveRecord): The records in file order.
    """
    if path is None:
        path = config.load().get("curveDB")
    records = []
    with open(path, "r") as f:
        for lineNo, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            try:
                records.append(parseCurveLine(stripped))
            except MalformedCurveRecord as e:
                if strict:
                    raise MalformedCurveRecord(str(e), lineNo=lineNo) from e
                log.warning(f"skipping line {lineNo} of {path}: {e}")
    log.debug(f"read {len(records)} curves from {path}")
    return records
