"""Global configuration for sharerecon."""

import os

# ---------- Input record layout ----------
# Every top-level field except this one is a share keyed by its x value.
KEYS_FIELD = "keys"

# ---------- Numeral decoding ----------
MIN_BASE = 2

# ---------- Driver ----------
MIN_TEST_CASES = 2   # CLI prints usage below this many input files

# Env var SHARERECON_STRATEGY selects the solver: "gauss" (reference) or
# "lagrange".
DEFAULT_STRATEGY = os.environ.get("SHARERECON_STRATEGY", "gauss")

# Run both solvers and compare their answers.
CROSS_CHECK = os.environ.get("SHARERECON_CROSS_CHECK", "").lower() in ("1", "true", "yes", "on")

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
