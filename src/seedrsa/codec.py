"""Decimal text codec for arbitrary-precision integers, and truncating integer division.

Every integer that crosses a boundary (ciphertext segments, the public identity, CLI arguments) travels as canonical
base-10 text. Python's `//` and `%` floor towards negative infinity, so the truncating quotient and remainder used by
the number theory helpers live here as well.

Typical usage example:

    num = string_to_number("-523892389328392")
    text = number_to_string(num)
    r = trunc_mod(-7, 26)  # -7
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import re

_DECIMAL = re.compile(r"[+-]?[0-9]+")
# Below CPython's default cap on int/str conversion (4300 digits).
_CHUNK_DIGITS = 4000


def string_to_number(text: str) -> int:
    """Parse a base-10 integer.

    Args:
        text: Optionally signed run of ASCII digits.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If `text` is not a plain decimal integer.
    """
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"Not a decimal integer: {text!r}")
    digits = text.lstrip("+-")
    num = 0
    for i in range(0, len(digits), _CHUNK_DIGITS):
        piece = digits[i:i + _CHUNK_DIGITS]
        num = num * 10**len(piece) + int(piece)
    return -num if text.startswith("-") else num


def number_to_string(num: int) -> str:
    """Canonical base-10 text of `num`, without leading zeros.

    Converted in `_CHUNK_DIGITS` pieces, so there is no limit on the number of digits.
    """
    if num < 0:
        return "-" + number_to_string(-num)
    base = 10**_CHUNK_DIGITS
    chunks = []
    while num >= base:
        num, low = divmod(num, base)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(num))
    return "".join(reversed(chunks))


def trunc_div(a: int, b: int) -> int:
    """Quotient of `a / b` rounded towards zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder of truncating division. The sign follows the dividend `a`."""
    return a - b * trunc_div(a, b)
