"""Error taxonomy for share decoding and secret reconstruction.

Every error is fatal for the test case it occurs in.
"""

from __future__ import annotations


class ReconstructionError(Exception):
    """Base class for every failure raised by sharerecon."""


# ---------- numerals ----------


class NumeralError(ReconstructionError):
    """A share value could not be decoded."""


class InvalidDigitError(NumeralError):
    """A digit is outside the range allowed by the numeral's base."""

    def __init__(self, char: str, base: int) -> None:
        super().__init__(f"Invalid digit {char!r} for base {base}")
        self.char = char
        self.base = base


class InvalidCharacterError(NumeralError):
    """A character is not part of the digit alphabet at all."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid character in number: {char!r}")
        self.char = char


class InvalidBaseError(NumeralError):
    """The declared base cannot encode a numeral."""


# ---------- share records ----------


class ShareFormatError(ReconstructionError):
    """The share record is malformed."""


class ShareCountMismatchError(ShareFormatError):
    """The number of decoded shares differs from the declared ``n``."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Number of shares parsed does not match 'n' (n={expected}, parsed={actual})"
        )
        self.expected = expected
        self.actual = actual


# ---------- solving ----------


class SingularSystemError(ReconstructionError):
    """The points do not determine a unique polynomial."""


class NonExactDivisionError(ReconstructionError, ArithmeticError):
    """A division required by a solver leaves a remainder."""

    def __init__(self, numerator: int, denominator: int) -> None:
        super().__init__(f"{numerator} is not divisible by {denominator}")
        self.numerator = numerator
        self.denominator = denominator


class SolverDisagreementError(ReconstructionError):
    """Two solving strategies returned different secrets."""
