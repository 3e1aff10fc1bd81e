"""Tests for monkey_middle.domain.worry."""

from __future__ import annotations

import pytest

from monkey_middle.config.types import WorryMode
from monkey_middle.domain.troop import MonkeySpec, Troop
from monkey_middle.domain.worry import (
    ModulusReducer,
    ReliefReducer,
    build_worry_reducer,
    least_common_multiple,
    troop_modulus,
)


class TestReliefReducer:
    def test_floor_divides_by_three(self) -> None:
        reducer = ReliefReducer()
        assert reducer.reduce(1501) == 500
        assert reducer.reduce(2) == 0
        assert reducer.reduce(3) == 1

    def test_rejects_zero_divisor(self) -> None:
        with pytest.raises(ValueError):
            ReliefReducer(divisor=0)


class TestModulusReducer:
    def test_reduces_below_modulus(self) -> None:
        reducer = ModulusReducer(96577)
        for value in (0, 96576, 96577, 10**20 + 3):
            assert 0 <= reducer.reduce(value) < 96577

    def test_rejects_zero_modulus(self) -> None:
        with pytest.raises(ValueError):
            ModulusReducer(0)


class TestLeastCommonMultiple:
    def test_pairwise_coprime_divisors(self) -> None:
        assert least_common_multiple([23, 19, 13, 17]) == 96577

    def test_shared_factors(self) -> None:
        assert least_common_multiple([4, 6, 10]) == 60

    def test_empty_is_one(self) -> None:
        assert least_common_multiple([]) == 1

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            least_common_multiple([3, 0])


def test_troop_modulus(sample_specs: list[MonkeySpec]) -> None:
    assert troop_modulus(Troop.create(sample_specs)) == 96577


def test_build_worry_reducer_selects_by_mode(sample_specs: list[MonkeySpec]) -> None:
    troop = Troop.create(sample_specs)
    relief = build_worry_reducer(WorryMode.RELIEF, troop)
    bounded = build_worry_reducer(WorryMode.BOUNDED, troop)
    assert isinstance(relief, ReliefReducer)
    assert isinstance(bounded, ModulusReducer)
    assert bounded.modulus == 96577
