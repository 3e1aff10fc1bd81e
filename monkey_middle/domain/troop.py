"""Monkeys, their item queues, and the fixed-size troop that owns them.

Monkeys address each other only by integer index into ``Troop.monkeys``.
Items are moved between queues, never copied or dropped, so the total
item count of a troop is constant for the life of a run.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from monkey_middle.domain.operation import Operation
from monkey_middle.domain.routing import ThrowTest


@dataclass
class Item:
    """A single held item and its current worry level."""

    worry: int


@dataclass(frozen=True)
class MonkeySpec:
    """Immutable setup block describing one monkey before a run starts."""

    starting_items: tuple[int, ...]
    operation: Operation
    test: ThrowTest

    def __post_init__(self) -> None:
        if any(worry < 0 for worry in self.starting_items):
            raise ValueError("starting items must be >= 0")


@dataclass
class Monkey:
    """A monkey's mutable queue and counter plus its fixed operation and test."""

    monkey_id: int
    operation: Operation
    test: ThrowTest
    queue: deque[Item] = field(default_factory=deque)
    inspected_count: int = 0

    @classmethod
    def from_spec(cls, monkey_id: int, spec: MonkeySpec) -> Monkey:
        """Create a monkey with a fresh queue and a zeroed counter."""
        return cls(
            monkey_id=monkey_id,
            operation=spec.operation,
            test=spec.test,
            queue=deque(Item(worry) for worry in spec.starting_items),
        )

    def worry_levels(self) -> list[int]:
        return [item.worry for item in self.queue]


@dataclass
class Troop:
    """Stable-indexed collection of monkeys shared by one run."""

    monkeys: list[Monkey]

    @classmethod
    def create(cls, specs: Iterable[MonkeySpec]) -> Troop:
        """Build a fresh troop, validating every throw target against its size."""
        spec_list = list(specs)
        if not spec_list:
            raise ValueError("troop must contain at least one monkey")
        n_monkeys = len(spec_list)
        for monkey_id, spec in enumerate(spec_list):
            for target in spec.test.targets():
                if not 0 <= target < n_monkeys:
                    raise ValueError(
                        f"monkey {monkey_id} throws to monkey {target}, "
                        f"valid targets are 0..{n_monkeys - 1}"
                    )
        monkeys = [Monkey.from_spec(monkey_id, spec) for monkey_id, spec in enumerate(spec_list)]
        return cls(monkeys=monkeys)

    def __len__(self) -> int:
        return len(self.monkeys)

    def __getitem__(self, index: int) -> Monkey:
        return self.monkeys[index]

    def divisors(self) -> list[int]:
        return [monkey.test.divisor for monkey in self.monkeys]

    def inspection_counts(self) -> tuple[int, ...]:
        return tuple(monkey.inspected_count for monkey in self.monkeys)

    def total_items(self) -> int:
        """Total items held across every queue."""
        return sum(len(monkey.queue) for monkey in self.monkeys)


def total_starting_items(specs: Sequence[MonkeySpec]) -> int:
    return sum(len(spec.starting_items) for spec in specs)
