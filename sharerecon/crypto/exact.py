"""Exact integer arithmetic.

All values are plain Python ints; nothing is reduced or truncated.
"""

from __future__ import annotations

from sharerecon.errors import NonExactDivisionError


def exact_div(a: int, b: int) -> int:
    """Return ``a / b``, which must leave no remainder."""
    if b == 0:
        raise ZeroDivisionError("Exact division by zero")
    q, r = divmod(a, b)
    if r:
        raise NonExactDivisionError(a, b)
    return q
