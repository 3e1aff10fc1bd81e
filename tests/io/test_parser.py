"""Tests for monkey_middle.io.parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from monkey_middle.domain.operation import Operand, Operator
from monkey_middle.domain.troop import MonkeySpec
from monkey_middle.io.parser import load_notes, parse_monkey_block, parse_notes, parse_operation


class TestParseNotes:
    def test_matches_hand_built_specs(
        self, sample_notes: str, sample_specs: list[MonkeySpec]
    ) -> None:
        assert parse_notes(sample_notes) == sample_specs

    def test_windows_line_endings(self, sample_notes: str, sample_specs: list[MonkeySpec]) -> None:
        assert parse_notes(sample_notes.replace("\n", "\r\n")) == sample_specs

    def test_empty_notes_rejected(self) -> None:
        with pytest.raises(ValueError, match="no monkey blocks"):
            parse_notes("  \n\n")

    def test_out_of_sequence_header(self, sample_notes: str) -> None:
        with pytest.raises(ValueError, match="expected monkey 1, got monkey 2"):
            parse_notes(sample_notes.replace("Monkey 1:", "Monkey 2:", 1))

    def test_load_notes(self, tmp_path: Path, sample_notes: str) -> None:
        path = tmp_path / "notes.txt"
        path.write_text(sample_notes)
        assert len(load_notes(path)) == 4


class TestParseMonkeyBlock:
    BLOCK = """Monkey 0:
  Starting items:
  Operation: new = 3 - old
  Test: divisible by 5
    If true: throw to monkey 0
    If false: throw to monkey 0"""

    def test_empty_starting_items(self) -> None:
        spec = parse_monkey_block(self.BLOCK, 0)
        assert spec.starting_items == ()
        assert spec.operation.left == Operand.constant(3)
        assert spec.operation.operator == Operator.SUB
        assert spec.operation.right == Operand.old()
        assert spec.test.divisor == 5

    def test_missing_line(self) -> None:
        block = "\n".join(self.BLOCK.splitlines()[:5])
        with pytest.raises(ValueError, match="6 lines"):
            parse_monkey_block(block, 0)

    def test_malformed_header(self) -> None:
        with pytest.raises(ValueError, match="malformed header"):
            parse_monkey_block(self.BLOCK.replace("Monkey 0:", "Ape 0:"), 0)

    def test_non_integer_item(self) -> None:
        block = self.BLOCK.replace("Starting items:", "Starting items: 4, x")
        with pytest.raises(ValueError, match="monkey block 0: starting item"):
            parse_monkey_block(block, 0)

    def test_zero_divisor(self) -> None:
        block = self.BLOCK.replace("divisible by 5", "divisible by 0")
        with pytest.raises(ValueError, match="divisor"):
            parse_monkey_block(block, 0)

    def test_wrong_field_order(self) -> None:
        lines = self.BLOCK.splitlines()
        lines[2], lines[3] = lines[3], lines[2]
        with pytest.raises(ValueError, match="Operation:"):
            parse_monkey_block("\n".join(lines), 0)


class TestParseOperation:
    def test_old_times_old(self) -> None:
        operation = parse_operation("new = old * old")
        assert operation.apply(9) == 81

    def test_unknown_operator(self) -> None:
        with pytest.raises(ValueError, match="operator"):
            parse_operation("new = old % 3")

    def test_unknown_operand(self) -> None:
        with pytest.raises(ValueError, match="operand"):
            parse_operation("new = old + new")

    def test_wrong_shape(self) -> None:
        with pytest.raises(ValueError, match="new = old"):
            parse_operation("old * 19")

    def test_division_by_zero_constant(self) -> None:
        with pytest.raises(ValueError, match="zero"):
            parse_operation("new = old / 0")
