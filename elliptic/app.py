"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Command-line entry point. Reads the configured curve database and prints a
summary line for each curve.

    python -m elliptic [--curvedb PATH] [--loglevel LEVEL]
"""

import os

from elliptic import MalformedCurveRecord, config, db
from elliptic.util import helpers


LOG_NAME = "elliptic.log"

log = helpers.getLogger("APP")


def describe(record):
    """
    A one-line summary of a database record.

    Args:
        record (db.CurveRecord): The record.

    Returns:
        str: e.g. "11a1  y^2 + y = x^3 - x^2 - 10*x - 20  rank 0  torsion 5
            disc -161051  j -122023936/161051".
    """
    curve = record.curve
    j = "undefined" if curve.isSingular() else str(curve.jInvariant())
    return (
        f"{record.label}  {curve}  rank {record.rank}  torsion {record.torsion}"
        f"  disc {curve.discriminant}  j {j}"
    )


def main(args=None):
    """
    Load the configuration, prepare logging and print the curve database.

    Args:
        args (list(str)): Optional. Command-line arguments. If None, sys.argv
            is parsed.

    Returns:
        int: The process exit code.
    """
    cfg = config.load(args=args)
    logDir = os.path.join(os.path.dirname(cfg.path), "logs")
    helpers.mkdir(logDir)
    helpers.prepareLogging(os.path.join(logDir, LOG_NAME), logLvl=cfg.logLevel())

    try:
        records = db.readCurveDatabase()
    except (OSError, MalformedCurveRecord) as e:
        log.error(f"failed to read the curve database: {helpers.formatTraceback(e)}")
        return 1

    for record in records:
        if record.curve.isSingular():
            log.warning(f"{record.label} is singular")
        print(describe(record))
    return 0

