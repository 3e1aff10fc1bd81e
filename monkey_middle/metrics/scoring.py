"""Monkey-business score: product of the busiest monkeys' inspection counts."""

from __future__ import annotations

import math
from collections.abc import Sequence

from monkey_middle.config.constants import TOP_K


def top_inspection_counts(counts: Sequence[int], k: int = TOP_K) -> list[int]:
    """Return the `k` largest inspection counts, largest first.

    A troop smaller than `k` contributes every count it has. Ties need no
    tie-break rule since only the counts, not monkey identities, are returned.
    """
    if k < 1:
        raise ValueError("k must be >= 1")
    return sorted(counts, reverse=True)[:k]


def monkey_business(counts: Sequence[int], k: int = TOP_K) -> int:
    """Multiply the `k` largest inspection counts."""
    return math.prod(top_inspection_counts(counts, k))
