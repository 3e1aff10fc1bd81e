"""Inspection arithmetic: closed operator/operand sets and one evaluator.

``old - old`` and ``old / old`` are degenerate and evaluate to the fixed
values 0 and 1 regardless of ``old``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    """Binary operator applied during inspection."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class OperandKind(Enum):
    """Whether an operand is the item's current value or a fixed constant."""

    OLD = "old"
    CONSTANT = "constant"


@dataclass(frozen=True)
class Operand:
    """One side of an operation."""

    kind: OperandKind
    value: int = 0  # ignored for OLD

    def __post_init__(self) -> None:
        if self.kind == OperandKind.CONSTANT and self.value < 0:
            raise ValueError("constant operand must be >= 0")

    @classmethod
    def old(cls) -> Operand:
        return cls(kind=OperandKind.OLD)

    @classmethod
    def constant(cls, value: int) -> Operand:
        return cls(kind=OperandKind.CONSTANT, value=value)

    @property
    def is_old(self) -> bool:
        return self.kind == OperandKind.OLD

    def resolve(self, old: int) -> int:
        return old if self.is_old else self.value

    def __str__(self) -> str:
        return "old" if self.is_old else str(self.value)


@dataclass(frozen=True)
class Operation:
    """``new = left <operator> right``, evaluated by :meth:`apply`."""

    left: Operand
    operator: Operator
    right: Operand

    def __post_init__(self) -> None:
        if (
            self.operator == Operator.DIV
            and not self.right.is_old
            and self.right.value == 0
        ):
            raise ValueError("operation divides by constant zero")

    def apply(self, old: int) -> int:
        """Return the new worry level for an item currently at `old`."""
        if self.left.is_old and self.right.is_old:
            if self.operator == Operator.SUB:
                return 0
            if self.operator == Operator.DIV:
                return 1
        lhs = self.left.resolve(old)
        rhs = self.right.resolve(old)
        if self.operator == Operator.ADD:
            return lhs + rhs
        if self.operator == Operator.SUB:
            return lhs - rhs
        if self.operator == Operator.MUL:
            return lhs * rhs
        if self.operator == Operator.DIV:
            return lhs // rhs
        raise ValueError(f"unsupported operator: {self.operator!r}")

    def __str__(self) -> str:
        return f"new = {self.left} {self.operator.value} {self.right}"
