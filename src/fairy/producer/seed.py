"""Deterministic seeding helpers for the shared random source.

Every producer of a :class:`~fairy.fairy.Fairy` draws from a single
:class:`random.Random`.  This module turns user-facing seeds into such
generators.  Integer seeds are passed through unchanged; string seeds are
canonicalized so that variations in case or whitespace do not affect the
resulting stream, then hashed with SHA-256 under a fixed namespace.

:func:`derive_seed` computes independent child seeds (HMAC-SHA256 with strict
domain separation) for callers that want one generator per worker thread
while keeping the whole run reproducible.
"""

from __future__ import annotations

import hashlib
import hmac
import random
import re
import unicodedata
from typing import Final

from fairy.utils.errors import InvalidArgumentError

__all__ = ["Seed", "canonicalize_seed", "seed_to_int", "rng_for", "derive_seed"]

Seed = int | str

# ---------------------------------------------------------------------------
# Domain separation constants
# ---------------------------------------------------------------------------

_NS_SEED: Final = b"fairy/v1/seed"
_NS_CHILD: Final = b"fairy/v1/child"


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------


def canonicalize_seed(seed: str) -> str:
    """Normalize a string seed for hashing.

    The normalization steps are:

    - strip leading/trailing whitespace
    - collapse internal whitespace runs to a single space
    - lowercase
    - NFC normalize (not NFKC)
    """

    normalized = unicodedata.normalize("NFC", seed.strip())
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.lower()


def seed_to_int(seed: Seed) -> int:
    """Return the integer form of ``seed``."""

    if isinstance(seed, bool):
        raise InvalidArgumentError("seed must be an int or str, not bool")
    if isinstance(seed, int):
        return seed
    if isinstance(seed, str):
        digest = hashlib.sha256(_NS_SEED + canonicalize_seed(seed).encode("utf-8")).digest()
        return int.from_bytes(digest, "big")
    raise InvalidArgumentError(f"seed must be an int or str, not {type(seed).__name__}")


# ---------------------------------------------------------------------------
# Reproducible RNG
# ---------------------------------------------------------------------------


def rng_for(seed: Seed | None = None) -> random.Random:
    """Return a generator for ``seed``; ``None`` yields a system-seeded one."""

    if seed is None:
        return random.Random()
    return random.Random(seed_to_int(seed))


def derive_seed(seed: Seed, label: str) -> int:
    """Derive a stable child seed for ``label`` (e.g. a worker name) from ``seed``."""

    key = str(seed_to_int(seed)).encode("ascii")
    data = _NS_CHILD + canonicalize_seed(label).encode("utf-8")
    digest = hmac.new(key, data, hashlib.sha256).digest()
    return int.from_bytes(digest[:8], "big")
