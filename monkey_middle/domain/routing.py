"""Divisibility test and destination routing."""

from __future__ import annotations

from dataclasses import dataclass


def is_divisible(value: int, divisor: int) -> bool:
    """Return True when `divisor` divides `value` evenly."""
    return value % divisor == 0


@dataclass(frozen=True)
class ThrowTest:
    """Route an item to `if_true` or `if_false` by divisibility of its worry level.

    Targets are monkey indices into the same troop; range checks happen when
    the troop is assembled since a single test cannot see the troop size.
    """

    divisor: int
    if_true: int
    if_false: int

    def __post_init__(self) -> None:
        if self.divisor < 1:
            raise ValueError("divisor must be >= 1")
        if self.if_true < 0 or self.if_false < 0:
            raise ValueError("throw targets must be >= 0")

    def route(self, value: int) -> int:
        """Return the destination monkey index for an item at `value`."""
        return self.if_true if is_divisible(value, self.divisor) else self.if_false

    def targets(self) -> tuple[int, int]:
        return (self.if_true, self.if_false)
