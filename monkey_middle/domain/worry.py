"""Worry-management strategies applied between operation and test.

Relief mode floor-divides by three. Bounded mode reduces modulo the least
common multiple of every test divisor in the troop: each divisor divides
that modulus, so ``(v % m) % d == v % d`` and no routing decision changes
while stored values stay below the modulus.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Protocol

from monkey_middle.config.constants import RELIEF_DIVISOR
from monkey_middle.config.types import WorryMode
from monkey_middle.domain.troop import Troop


class WorryReducer(Protocol):
    """Anything that maps a post-operation worry level to its stored value."""

    def reduce(self, value: int) -> int: ...


class ReliefReducer:
    """Lossy relief step: discard all but a third of the worry."""

    def __init__(self, divisor: int = RELIEF_DIVISOR) -> None:
        if divisor < 1:
            raise ValueError("relief divisor must be >= 1")
        self.divisor = divisor

    def reduce(self, value: int) -> int:
        return value // self.divisor


class ModulusReducer:
    """Keep worry levels below `modulus` without changing divisibility tests."""

    def __init__(self, modulus: int) -> None:
        if modulus < 1:
            raise ValueError("modulus must be >= 1")
        self.modulus = modulus

    def reduce(self, value: int) -> int:
        return value % self.modulus


def least_common_multiple(values: Iterable[int]) -> int:
    """Return the LCM of positive integers (1 for an empty iterable)."""
    result = 1
    for value in values:
        if value < 1:
            raise ValueError("lcm inputs must be >= 1")
        result = result * value // math.gcd(result, value)
    return result


def troop_modulus(troop: Troop) -> int:
    """LCM of every test divisor in `troop`."""
    return least_common_multiple(troop.divisors())


def build_worry_reducer(mode: WorryMode, troop: Troop) -> ReliefReducer | ModulusReducer:
    """Select the reducer for a whole run."""
    if mode == WorryMode.RELIEF:
        return ReliefReducer()
    if mode == WorryMode.BOUNDED:
        return ModulusReducer(troop_modulus(troop))
    raise ValueError(f"unsupported worry mode: {mode!r}")
