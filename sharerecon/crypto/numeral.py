"""Numeral decoder: base-encoded share values to ints.

Digits are ``0-9`` (values 0-9) and ``a-z`` / ``A-Z`` (values 10-35).  The
same mapping applies to every base, including bases above 36, where it
simply never reaches the upper digit values.

API
---
char_to_digit(ch)      -> digit value
decode(value, base)    -> int
"""

from __future__ import annotations

from sharerecon.config import MIN_BASE
from sharerecon.errors import (
    InvalidBaseError,
    InvalidCharacterError,
    InvalidDigitError,
    NumeralError,
)


def char_to_digit(ch: str) -> int:
    """Map one character to its digit value."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    raise InvalidCharacterError(ch)


def decode(value: str, base: int) -> int:
    """Decode *value*, written most significant digit first, in *base*.

    No sign, whitespace, prefix or separator is accepted; every character
    must be a digit below *base*.
    """
    if base < MIN_BASE:
        raise InvalidBaseError(f"Base must be >= {MIN_BASE}, got {base}")
    if not value:
        raise NumeralError("Empty numeral")
    result = 0
    for ch in value:
        digit = char_to_digit(ch)
        if digit >= base:
            raise InvalidDigitError(ch, base)
        result = result * base + digit
    return result
