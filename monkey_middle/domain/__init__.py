"""Domain layer: items, monkeys, arithmetic, routing, and worry reducers."""

from monkey_middle.domain.operation import Operand, OperandKind, Operation, Operator
from monkey_middle.domain.routing import ThrowTest, is_divisible
from monkey_middle.domain.troop import Item, Monkey, MonkeySpec, Troop, total_starting_items
from monkey_middle.domain.worry import (
    ModulusReducer,
    ReliefReducer,
    WorryReducer,
    build_worry_reducer,
    least_common_multiple,
    troop_modulus,
)

__all__ = [
    "Item",
    "ModulusReducer",
    "Monkey",
    "MonkeySpec",
    "Operand",
    "OperandKind",
    "Operation",
    "Operator",
    "ReliefReducer",
    "ThrowTest",
    "Troop",
    "WorryReducer",
    "build_worry_reducer",
    "is_divisible",
    "least_common_multiple",
    "total_starting_items",
    "troop_modulus",
]
