"""Parser for the textual monkey notes that seed a simulation.

Each block looks like::

    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3

Blocks are separated by one blank line. Malformed input raises ``ValueError``
naming the block; throw-target ranges are checked later by ``Troop.create``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from monkey_middle.domain.operation import Operand, Operation, Operator
from monkey_middle.domain.routing import ThrowTest
from monkey_middle.domain.troop import MonkeySpec

logger = logging.getLogger(__name__)

_OPERATORS = {op.value: op for op in Operator}


def _parse_int(raw: str, label: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{label} must be an integer, got {raw!r}") from exc


def _field(line: str, prefix: str) -> str:
    """Strip `prefix` from `line` or fail with the expected prefix."""
    stripped = line.strip()
    if not stripped.startswith(prefix):
        raise ValueError(f"expected line starting with {prefix!r}, got {stripped!r}")
    return stripped[len(prefix) :].strip()


def _parse_operand(raw: str) -> Operand:
    if raw == "old":
        return Operand.old()
    value = _parse_int(raw, "operand")
    if value < 0:
        raise ValueError(f"operand must be 'old' or a non-negative integer, got {raw!r}")
    return Operand.constant(value)


def parse_operation(raw: str) -> Operation:
    """Parse the right-hand side of an ``Operation:`` line (``new = a op b``)."""
    tokens = raw.split()
    if len(tokens) != 5 or tokens[0] != "new" or tokens[1] != "=":
        raise ValueError(f"operation must look like 'new = old * 19', got {raw!r}")
    left, operator, right = tokens[2:]
    if operator not in _OPERATORS:
        valid = ", ".join(_OPERATORS)
        raise ValueError(f"operator must be one of {valid}, got {operator!r}")
    return Operation(
        left=_parse_operand(left),
        operator=_OPERATORS[operator],
        right=_parse_operand(right),
    )


def _parse_starting_items(raw: str) -> tuple[int, ...]:
    parts = [part.strip() for part in raw.split(",") if part.strip()]
    return tuple(_parse_int(part, "starting item") for part in parts)


def _last_int(line: str, prefix: str, label: str) -> int:
    words = _field(line, prefix).split()
    if not words:
        raise ValueError(f"{label} is missing")
    return _parse_int(words[-1], label)


def parse_monkey_block(block: str, expected_index: int) -> MonkeySpec:
    """Parse one ``Monkey N:`` block whose header must read `expected_index`."""
    lines = [line for line in block.splitlines() if line.strip()]
    if len(lines) != 6:
        raise ValueError(f"monkey block {expected_index} must have 6 lines, got {len(lines)}")
    header = lines[0].strip()
    if not (header.startswith("Monkey ") and header.endswith(":")):
        raise ValueError(f"monkey block {expected_index} has malformed header {header!r}")
    index = _parse_int(header[len("Monkey ") : -1].strip(), "monkey index")
    if index != expected_index:
        raise ValueError(f"expected monkey {expected_index}, got monkey {index}")

    try:
        starting_items = _parse_starting_items(_field(lines[1], "Starting items:"))
        operation = parse_operation(_field(lines[2], "Operation:"))
        test = ThrowTest(
            divisor=_last_int(lines[3], "Test: divisible by", "divisor"),
            if_true=_last_int(lines[4], "If true: throw to monkey", "true target"),
            if_false=_last_int(lines[5], "If false: throw to monkey", "false target"),
        )
        return MonkeySpec(starting_items=starting_items, operation=operation, test=test)
    except ValueError as exc:
        raise ValueError(f"monkey block {expected_index}: {exc}") from exc


def parse_notes(text: str) -> list[MonkeySpec]:
    """Parse every monkey block in `text`, in order."""
    normalized = text.replace("\r\n", "\n").strip()
    if not normalized:
        raise ValueError("notes contain no monkey blocks")
    blocks = [block for block in normalized.split("\n\n") if block.strip()]
    specs = [parse_monkey_block(block, index) for index, block in enumerate(blocks)]
    logger.debug("Parsed %d monkey blocks", len(specs))
    return specs


def load_notes(path: Path) -> list[MonkeySpec]:
    """Read and parse a notes file."""
    return parse_notes(Path(path).read_text(encoding="utf-8"))
