"""
Session sampling for rendering passes.

Every mode draws a fresh sample on each render so the set and its order
change between tab visits.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

from core.config import MAX_SESSION_ITEMS

T = TypeVar("T")


def sample_session(
    entries: Sequence[T],
    limit: int = MAX_SESSION_ITEMS,
    rng: Optional[random.Random] = None
) -> list[T]:
    """
    Shuffle a copy of entries and keep the first `limit`.

    Args:
        entries: Full collection (left untouched)
        limit: Maximum sample size
        rng: Random source (module-level random when omitted)

    Returns:
        min(len(entries), limit) entries in random order
    """
    shuffled = list(entries)
    (rng or random).shuffle(shuffled)
    return shuffled[:limit]
