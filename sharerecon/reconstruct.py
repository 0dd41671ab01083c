"""Reconstruction driver.

Loader -> decoder -> first k shares by ascending x -> solver -> secret.
Each test case is independent; nothing is shared between runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Union

from sharerecon import config
from sharerecon.crypto.solver import SOLVERS, Point, get_solver
from sharerecon.errors import ReconstructionError, SolverDisagreementError
from sharerecon.shares.loader import load_share_file
from sharerecon.shares.models import ShareSet
from sharerecon.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReconstructionResult:
    index: int
    source: str
    secret: int
    n: int
    k: int
    strategy: str
    points: Tuple[Point, ...]


@dataclass(frozen=True)
class CaseOutcome:
    """Result of one test case: either ``result`` or ``error`` is set."""

    index: int
    source: str
    result: Optional[ReconstructionResult] = None
    error: Optional[ReconstructionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def solve_points(
    points: Sequence[Point],
    strategy: Optional[str] = None,
    cross_check: Optional[bool] = None,
) -> int:
    """Run the chosen solver on *points*; optionally verify with every other one."""
    strategy = strategy or config.DEFAULT_STRATEGY
    if cross_check is None:
        cross_check = config.CROSS_CHECK
    secret = get_solver(strategy).solve(points)
    if cross_check:
        for name, solver in SOLVERS.items():
            if name == strategy:
                continue
            other = solver.solve(points)
            if other != secret:
                raise SolverDisagreementError(
                    f"Solvers disagree: {strategy}={secret}, {name}={other}"
                )
    return secret


def reconstruct_secret(
    share_set: ShareSet,
    strategy: Optional[str] = None,
    cross_check: Optional[bool] = None,
) -> int:
    """Reconstruct the secret from the first ``k`` shares of *share_set*."""
    return solve_points(share_set.select(), strategy, cross_check)


def reconstruct_file(
    path: Union[str, Path],
    index: int = 1,
    strategy: Optional[str] = None,
    cross_check: Optional[bool] = None,
) -> ReconstructionResult:
    """Load the share file at *path* and reconstruct its secret."""
    strategy = strategy or config.DEFAULT_STRATEGY
    share_set = load_share_file(path)
    points = share_set.select()
    secret = solve_points(points, strategy, cross_check)
    logger.info(
        "test case %d (%s): n=%d k=%d strategy=%s", index, path, share_set.n, share_set.k, strategy
    )
    return ReconstructionResult(
        index=index,
        source=str(path),
        secret=secret,
        n=share_set.n,
        k=share_set.k,
        strategy=strategy,
        points=tuple(points),
    )


def run_test_cases(
    paths: Sequence[Union[str, Path]],
    strategy: Optional[str] = None,
    cross_check: Optional[bool] = None,
    keep_going: bool = False,
    on_outcome: Optional[Callable[[CaseOutcome], None]] = None,
) -> List[CaseOutcome]:
    """Reconstruct every file in *paths*, in order, numbering cases from 1.

    Without *keep_going* the first failure propagates.  With it, failures
    are recorded in the returned outcomes and the remaining cases still run.
    *on_outcome* sees every outcome as it happens, including the failure
    that stops the run.
    """
    outcomes: List[CaseOutcome] = []
    for index, path in enumerate(paths, start=1):
        try:
            result = reconstruct_file(path, index, strategy, cross_check)
        except ReconstructionError as exc:
            outcome = CaseOutcome(index=index, source=str(path), error=exc)
            outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)
            if not keep_going:
                raise
            logger.warning("test case %d (%s) failed: %s", index, path, exc)
            continue
        outcome = CaseOutcome(index=index, source=str(path), result=result)
        outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)
    return outcomes
