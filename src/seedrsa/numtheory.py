"""Elementary number theory: greatest common divisor, least common multiple, Bezout coefficients and inverses.

All loops are iterative and use truncating division, so results for negative operands match the usual
"remainder follows the dividend" convention rather than Python's floored `%`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from seedrsa.codec import trunc_div
from seedrsa.codec import trunc_mod


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The last non-zero remainder, `a` itself if `b` is zero.
    """
    while b != 0:
        a, b = b, trunc_mod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple. `gcd(a, b)` must not be zero."""
    return trunc_div(a * b, gcd(a, b))


def extended_gcd(a: int, b: int) -> tuple[int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = gcd(a, b).

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The Bezout coefficients `(x, y)`.
    """
    r0, r1 = b, a
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = trunc_div(r0, r1)
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return t0, s0


def mod_inverse(a: int, m: int) -> int | None:
    """Modular multiplicative inverse of `a` modulo `m`.

    The Bezout coefficient is reduced with the truncating remainder and is *not* shifted into `[0, m)`, so a negative
    representative may come back. Add `m` (or reduce with `%`) when a canonical value is needed.

    Args:
        a: The value to invert.
        m: The modulus.

    Returns:
        A value `x` with `a*x ≡ 1 (mod m)`, or None if `a` and `m` are not coprime.
    """
    if gcd(a, m) != 1:
        return None
    x, _ = extended_gcd(a, m)
    return trunc_mod(x, m)
