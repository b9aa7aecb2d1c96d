"""
core.rng
Deterministic RNG helpers that do NOT rely on Python's built-in hash().

Same (base_seed + inputs) => same Random stream across platforms & runs,
so a match can be replayed from its seed and match number alone.
"""

from __future__ import annotations

import hashlib
import json
import random
from typing import Any


def stable_int_seed(*parts: Any, salt: str = "nexus-league") -> int:
    """Return a stable 32-bit seed derived from arbitrary inputs.

    SHA-256 over a canonical JSON dump of `parts`; `default=str` lets enums
    and other non-JSON values take part.
    """
    payload = json.dumps(parts, sort_keys=True, ensure_ascii=False, separators=(",", ":"), default=str)
    digest = hashlib.sha256((salt + "|" + payload).encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big", signed=False)


def rng_from(*parts: Any, base_seed: int) -> random.Random:
    """Create a Random instance from (base_seed + parts)."""
    return random.Random(stable_int_seed(base_seed, *parts))


def match_rng(base_seed: int, match_no: int, stream: str = "match") -> random.Random:
    """Random stream for one match. `stream` separates resolution from narrative draws."""
    return rng_from(stream, int(match_no), base_seed=int(base_seed))
