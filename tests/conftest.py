"""Shared fixtures: the canonical four-monkey example."""

from __future__ import annotations

import pytest

from monkey_middle.domain.operation import Operand, Operation, Operator
from monkey_middle.domain.routing import ThrowTest
from monkey_middle.domain.troop import MonkeySpec

SAMPLE_NOTES = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def _op(operator: Operator, right: Operand) -> Operation:
    return Operation(left=Operand.old(), operator=operator, right=right)


@pytest.fixture
def sample_notes() -> str:
    return SAMPLE_NOTES


@pytest.fixture
def sample_specs() -> list[MonkeySpec]:
    return [
        MonkeySpec(
            starting_items=(79, 98),
            operation=_op(Operator.MUL, Operand.constant(19)),
            test=ThrowTest(divisor=23, if_true=2, if_false=3),
        ),
        MonkeySpec(
            starting_items=(54, 65, 75, 74),
            operation=_op(Operator.ADD, Operand.constant(6)),
            test=ThrowTest(divisor=19, if_true=2, if_false=0),
        ),
        MonkeySpec(
            starting_items=(79, 60, 97),
            operation=_op(Operator.MUL, Operand.old()),
            test=ThrowTest(divisor=13, if_true=1, if_false=3),
        ),
        MonkeySpec(
            starting_items=(74,),
            operation=_op(Operator.ADD, Operand.constant(3)),
            test=ThrowTest(divisor=17, if_true=0, if_false=1),
        ),
    ]
