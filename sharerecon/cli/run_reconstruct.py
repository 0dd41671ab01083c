#!/usr/bin/env python3
"""Reconstruct Shamir secrets from share files.

Usage:
    sharerecon testcase1.json testcase2.json
    python -m sharerecon.cli.run_reconstruct testcase1.json testcase2.json
    sharerecon --strategy lagrange --cross-check --keep-going a.json b.json c.json

For each file, in order, prints ``Secret for test case <i>: <secret>``.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from sharerecon import config
from sharerecon.crypto.solver import SOLVERS
from sharerecon.errors import ReconstructionError
from sharerecon.reconstruct import CaseOutcome, run_test_cases
from sharerecon.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sharerecon",
        description="Reconstruct the secret of each share file.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="share record (JSON)")
    parser.add_argument(
        "--strategy",
        choices=sorted(SOLVERS),
        default=config.DEFAULT_STRATEGY,
        help="solver used for reconstruction (default: %(default)s)",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        default=config.CROSS_CHECK,
        help="verify the secret with every solver",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="continue with the next test case after a failure",
    )
    parser.add_argument("--log-level", default=None, help="logging level (default: $LOG_LEVEL)")
    parser.add_argument("--log-json", action="store_true", help="emit logs as JSON")
    return parser


def _report(outcome: CaseOutcome) -> None:
    if outcome.ok:
        print(f"Secret for test case {outcome.index}: {outcome.result.secret}")
        return
    logger.error("test case %d (%s) failed: %s", outcome.index, outcome.source, outcome.error)
    print(f"Error for test case {outcome.index}: {outcome.error}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check a default (e.g. from SHARERECON_STRATEGY) against choices
    if args.strategy not in SOLVERS:
        parser.error(
            f"argument --strategy: invalid choice: {args.strategy!r} "
            f"(choose from {', '.join(sorted(SOLVERS))})"
        )
    configure_logging(args.log_level, json_output=args.log_json)

    if len(args.files) < config.MIN_TEST_CASES:
        print(parser.format_usage().rstrip())
        return 0

    # Secrets are arbitrary precision; printing them must not hit the
    # int/str conversion cap of Python 3.11+.
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    try:
        outcomes = run_test_cases(
            args.files,
            args.strategy,
            args.cross_check,
            keep_going=args.keep_going,
            on_outcome=_report,
        )
    except ReconstructionError:
        return 1
    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
