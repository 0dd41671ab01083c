"""Share record models.

The raw input record is validated with pydantic (``ShareKeys`` and
``ShareEntry``); once every value is decoded the result is a ``ShareSet``,
an immutable mapping of x to y ordered by x.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, field_validator, model_validator

from sharerecon.config import MIN_BASE
from sharerecon.errors import ShareFormatError

Point = Tuple[int, int]


class ShareKeys(BaseModel):
    """The ``keys`` metadata: total share count and threshold."""

    n: int
    k: int

    @model_validator(mode="after")
    def _check_threshold(self) -> "ShareKeys":
        if self.k < 1 or self.k > self.n:
            raise ValueError(f"Invalid threshold: k={self.k}, n={self.n}")
        return self


class ShareEntry(BaseModel):
    """One encoded share value.  ``base`` is always written in base 10."""

    base: int
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def _value_as_text(cls, v: Any) -> Any:
        # JSON numbers are read back as their decimal text.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("base")
    @classmethod
    def _check_base(cls, v: int) -> int:
        if v < MIN_BASE:
            raise ValueError(f"base must be >= {MIN_BASE}, got {v}")
        return v


@dataclass(frozen=True)
class ShareSet:
    """Decoded shares ``{x: y}`` with their ``n`` / ``k`` metadata."""

    n: int
    k: int
    shares: Dict[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze ascending-x order regardless of how the dict was built.
        object.__setattr__(self, "shares", dict(sorted(self.shares.items())))

    def points(self) -> List[Point]:
        """All shares as ``(x, y)`` points, ascending by x."""
        return list(self.shares.items())

    def select(self, k: Optional[int] = None) -> List[Point]:
        """The first *k* points by ascending x (defaults to the threshold)."""
        if k is None:
            k = self.k
        if k < 1:
            raise ShareFormatError(f"Cannot select {k} shares")
        if k > len(self.shares):
            raise ShareFormatError(
                f"Need {k} shares for reconstruction, only {len(self.shares)} available"
            )
        return self.points()[:k]
