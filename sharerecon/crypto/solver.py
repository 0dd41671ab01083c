"""Exact polynomial solvers over the integers.

Given k points with pairwise distinct x, both solvers recover the constant
term of the unique degree-(k-1) polynomial through them.  Divisions are
checked: a remainder raises ``NonExactDivisionError`` instead of truncating.

API
---
GaussianSolver().solve(points)         -> secret   (reference strategy)
GaussianSolver().coefficients(points)  -> [a_0, ..., a_{k-1}]
LagrangeSolver().solve(points)         -> secret
get_solver(name)                       -> Solver
"""

from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

from sharerecon.crypto.exact import exact_div
from sharerecon.errors import ReconstructionError, SingularSystemError
from sharerecon.utils.logging import get_logger

Point = Tuple[int, int]

logger = get_logger(__name__)


def _check_points(points: Sequence[Point]) -> None:
    if not points:
        raise ReconstructionError("Need at least one point")


class Solver:
    """Recovers the constant term of the polynomial through *points*."""

    name: str = ""

    def solve(self, points: Sequence[Point]) -> int:
        raise NotImplementedError


class LagrangeSolver(Solver):
    """Lagrange interpolation evaluated at x=0.

    Each basis value ``L_i = prod(0 - x_j) / prod(x_i - x_j)`` is kept as a
    numerator/denominator pair.  The terms are brought over the least common
    multiple of the denominators, so the only division is the final one.
    """

    name = "lagrange"

    def solve(self, points: Sequence[Point]) -> int:
        _check_points(points)
        k = len(points)
        terms: List[Tuple[int, int, int]] = []
        for i in range(k):
            xi, yi = points[i]
            num = 1
            den = 1
            for j in range(k):
                if j == i:
                    continue
                xj = points[j][0]
                num *= -xj          # (0 - x_j)
                den *= xi - xj      # (x_i - x_j)
            if den == 0:
                raise SingularSystemError(f"Duplicate x value {xi}: no unique polynomial")
            terms.append((yi, num, den))

        common = math.lcm(*(den for _, _, den in terms))
        total = 0
        for yi, num, den in terms:
            total += yi * num * exact_div(common, den)
        secret = exact_div(total, common)
        logger.debug("lagrange: k=%d common denominator=%d", k, common)
        return secret


class GaussianSolver(Solver):
    """Gaussian elimination on the Vandermonde system ``M . A = Y``.

    ``M[i][j] = x_i ** j``, so ``A[0]`` is the constant term.  Pivots are
    chosen by largest magnitude (first such row on ties) and each pivot row
    is normalised by exact division before the rows below are eliminated.
    """

    name = "gauss"

    def solve(self, points: Sequence[Point]) -> int:
        return self.coefficients(points)[0]

    def coefficients(self, points: Sequence[Point]) -> List[int]:
        """Return all polynomial coefficients, lowest degree first."""
        _check_points(points)
        k = len(points)
        mat = [[x ** j for j in range(k)] for x, _ in points]
        vec = [y for _, y in points]

        # ---- forward elimination ----
        for p in range(k):
            best = max(range(p, k), key=lambda r: abs(mat[r][p]))
            if mat[best][p] == 0:
                raise SingularSystemError(
                    f"Zero pivot in column {p}: x values are not pairwise distinct"
                )
            if best != p:
                mat[p], mat[best] = mat[best], mat[p]
                vec[p], vec[best] = vec[best], vec[p]

            pivot = mat[p][p]
            for c in range(p, k):
                mat[p][c] = exact_div(mat[p][c], pivot)
            vec[p] = exact_div(vec[p], pivot)

            for r in range(p + 1, k):
                factor = mat[r][p]
                if factor == 0:
                    continue
                for c in range(p, k):
                    mat[r][c] -= factor * mat[p][c]
                vec[r] -= factor * vec[p]

        # ---- back substitution ----
        coeffs = [0] * k
        for i in range(k - 1, -1, -1):
            coeffs[i] = vec[i] - sum(mat[i][j] * coeffs[j] for j in range(i + 1, k))
        logger.debug("gauss: k=%d coefficients=%s", k, coeffs)
        return coeffs


SOLVERS: Dict[str, Solver] = {
    GaussianSolver.name: GaussianSolver(),
    LagrangeSolver.name: LagrangeSolver(),
}


def get_solver(name: str) -> Solver:
    """Look up a solver by name (``"gauss"`` or ``"lagrange"``)."""
    try:
        return SOLVERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown solver '{name}' (expected one of: {', '.join(sorted(SOLVERS))})"
        ) from None
