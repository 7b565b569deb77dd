"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Integer helpers for the exact arithmetic types.
"""


def gcd(a, b):
    """
    gcd returns the greatest common divisor of two non-negative integers using
    the Euclidean algorithm. gcd(a, 0) is a, so gcd(0, 0) is 0.

    Args:
        a (int): A non-negative integer.
        b (int): A non-negative integer.

    Returns:
        int: The greatest common divisor.
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd is defined on magnitudes, got {a}, {b}")
    while b != 0:
        a, b = b, a % b
    return a


def bitsMSBFirst(n):
    """
    The binary digits of a positive integer, most significant first. The
    first digit is always 1.

    Args:
        n (int): A positive integer.

    Returns:
        list(int): The digits, each 0 or 1.
    """
    if n <= 0:
        raise ValueError(f"expected a positive integer, got {n}")
    bits = []
    while n > 0:
        bits.append(n & 1)
        n >>= 1
    bits.reverse()
    return bits
