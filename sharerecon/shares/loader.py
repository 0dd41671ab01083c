"""Share Set loader.

Reads a share record (JSON object) of the form::

    {
      "keys": {"n": 4, "k": 3},
      "1":    {"base": "10", "value": "4"},
      "2":    {"base": "16", "value": "ff"},
      ...
    }

Every field other than ``keys`` is a share keyed by its decimal x value.
Each value is decoded with ``sharerecon.crypto.numeral.decode``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from sharerecon.config import KEYS_FIELD
from sharerecon.crypto import numeral
from sharerecon.errors import ShareCountMismatchError, ShareFormatError
from sharerecon.shares.models import ShareEntry, ShareKeys, ShareSet
from sharerecon.utils.logging import get_logger

logger = get_logger(__name__)


def _parse_x(key: str) -> int:
    if not (key.isascii() and key.isdigit()):
        raise ShareFormatError(f"Share key {key!r} is not a non-negative decimal integer")
    return int(key)


def build_share_set(keys: ShareKeys, entries: Mapping[str, ShareEntry]) -> ShareSet:
    """Decode validated *entries* and check them against ``keys.n``."""
    shares: Dict[int, int] = {}
    for key, entry in entries.items():
        x = _parse_x(key)
        shares[x] = numeral.decode(entry.value, entry.base)
        logger.debug("share x=%d base=%d decoded (%d bits)", x, entry.base, shares[x].bit_length())
    if len(shares) != keys.n:
        raise ShareCountMismatchError(keys.n, len(shares))
    return ShareSet(n=keys.n, k=keys.k, shares=shares)


def parse_share_record(record: Mapping[str, Any]) -> ShareSet:
    """Validate a parsed JSON *record* and decode it into a ``ShareSet``."""
    if not isinstance(record, Mapping):
        raise ShareFormatError("Share record must be a JSON object")
    if KEYS_FIELD not in record:
        raise ShareFormatError(f"Share record has no '{KEYS_FIELD}' field")
    try:
        keys = ShareKeys.model_validate(record[KEYS_FIELD])
        entries = {
            key: ShareEntry.model_validate(value)
            for key, value in record.items()
            if key != KEYS_FIELD
        }
    except ValidationError as exc:
        raise ShareFormatError(f"Invalid share record: {exc}") from exc
    return build_share_set(keys, entries)


def parse_share_json(text: str) -> ShareSet:
    """Parse JSON *text* into a ``ShareSet``."""
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ShareFormatError(f"Invalid share JSON: {exc}") from exc
    return parse_share_record(record)


def load_share_file(path: Union[str, Path]) -> ShareSet:
    """Read and parse the share record stored at *path*."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise ShareFormatError(f"Cannot read share file {path}: {exc}") from exc
    logger.debug("loaded share file %s", path)
    return parse_share_json(text)
