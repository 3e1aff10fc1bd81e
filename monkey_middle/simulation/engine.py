"""Round engine: sequential monkey turns over one shared troop.

Monkeys take turns in ascending index order against the live troop, not a
snapshot. An item thrown to a higher index is inspected again later in the
same round; one thrown to a lower index waits for the next round.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path

import pyarrow.parquet as pq

from monkey_middle.config.constants import FLUSH_THRESHOLD, RESULT_SCHEMA_VERSION
from monkey_middle.config.types import SimulationConfig, SimulationResult, WorryMode
from monkey_middle.domain.troop import Item, MonkeySpec, Troop
from monkey_middle.domain.worry import ModulusReducer, WorryReducer, build_worry_reducer
from monkey_middle.metrics.scoring import monkey_business
from monkey_middle.simulation.persistence import empty_round_columns, flush_round_columns

logger = logging.getLogger(__name__)

RoundObserver = Callable[[int, Troop], None]
"""Called with (1-based round number, troop) after every completed round."""


class EngineState(Enum):
    """Lifecycle of a round engine."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    DONE = "done"


def play_turn(troop: Troop, monkey_id: int, reducer: WorryReducer) -> int:
    """Inspect and throw every item monkey `monkey_id` holds when its turn starts.

    Items the monkey throws to itself stay queued for its next turn.
    Returns the number of inspections performed.
    """
    monkey = troop[monkey_id]
    n_items = len(monkey.queue)
    for _ in range(n_items):
        item = monkey.queue.popleft()
        worry = reducer.reduce(monkey.operation.apply(item.worry))
        target = monkey.test.route(worry)
        troop[target].queue.append(Item(worry))
        monkey.inspected_count += 1
    return n_items


def play_round(troop: Troop, reducer: WorryReducer) -> int:
    """Give every monkey one turn in index order; return total inspections."""
    return sum(play_turn(troop, monkey_id, reducer) for monkey_id in range(len(troop)))


class RoundEngine:
    """Drive a troop through a fixed number of rounds exactly once."""

    def __init__(
        self,
        troop: Troop,
        reducer: WorryReducer,
        rounds: int,
        observer: RoundObserver | None = None,
    ) -> None:
        if rounds < 1:
            raise ValueError("rounds must be >= 1")
        self.troop = troop
        self.reducer = reducer
        self.rounds = rounds
        self.observer = observer
        self.state = EngineState.NOT_STARTED
        self.round_index = 0

    def step(self) -> int:
        """Play the next round and advance the state machine."""
        if self.state == EngineState.DONE:
            raise RuntimeError("engine already finished all rounds")
        self.state = EngineState.RUNNING
        inspections = play_round(self.troop, self.reducer)
        self.round_index += 1
        if self.observer is not None:
            self.observer(self.round_index, self.troop)
        if self.round_index == self.rounds:
            self.state = EngineState.DONE
        return inspections

    def run(self) -> tuple[int, ...]:
        """Play every remaining round and return the final inspection counts."""
        if self.state == EngineState.DONE:
            raise RuntimeError("engine already finished all rounds")
        while self.state != EngineState.DONE:
            inspections = self.step()
            logger.debug("Round %d: %d inspections", self.round_index, inspections)
        return self.troop.inspection_counts()


def run_simulation(
    specs: Sequence[MonkeySpec],
    config: SimulationConfig | None = None,
    out_dir: Path | None = None,
) -> SimulationResult:
    """Run one simulation on a fresh troop built from `specs`.

    When `out_dir` is given, per-round counters are streamed to
    ``logs/round_log_<run_id>.parquet`` and the result to ``results/<run_id>.json``.
    """
    config = config or SimulationConfig()
    troop = Troop.create(specs)
    reducer = build_worry_reducer(config.worry_mode, troop)
    modulus = reducer.modulus if isinstance(reducer, ModulusReducer) else None
    run_id = config.run_id
    logger.info(
        "Starting %s: %d monkeys, %d items, modulus=%s",
        run_id,
        len(troop),
        troop.total_items(),
        modulus,
    )

    if out_dir is None:
        counts = RoundEngine(troop, reducer, config.rounds).run()
    else:
        counts = _run_with_round_log(troop, reducer, config, Path(out_dir))

    result = SimulationResult(
        run_id=run_id,
        worry_mode=config.worry_mode,
        rounds=config.rounds,
        modulus=modulus,
        inspection_counts=counts,
        monkey_business=monkey_business(counts, k=config.top_k),
    )
    logger.info("Finished %s: monkey business %d", run_id, result.monkey_business)

    if out_dir is not None:
        results_dir = Path(out_dir) / "results"
        results_dir.mkdir(parents=True, exist_ok=True)
        payload = {"schema_version": RESULT_SCHEMA_VERSION, **result.to_payload()}
        (results_dir / f"{run_id}.json").write_text(
            json.dumps(payload, ensure_ascii=False, indent=2)
        )
    return result


def _run_with_round_log(
    troop: Troop,
    reducer: WorryReducer,
    config: SimulationConfig,
    out_dir: Path,
) -> tuple[int, ...]:
    logs_dir = out_dir / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    round_log_path = logs_dir / f"round_log_{config.run_id}.parquet"
    round_columns = empty_round_columns()
    writer: pq.ParquetWriter | None = None

    def record(round_number: int, current: Troop) -> None:
        nonlocal writer
        for monkey in current.monkeys:
            round_columns["run_id"].append(config.run_id)
            round_columns["worry_mode"].append(config.worry_mode.value)
            round_columns["round"].append(round_number)
            round_columns["monkey_id"].append(monkey.monkey_id)
            round_columns["inspected_count"].append(monkey.inspected_count)
            round_columns["queue_length"].append(len(monkey.queue))
        if len(round_columns["run_id"]) >= FLUSH_THRESHOLD:
            writer = flush_round_columns(round_columns, round_log_path, writer)

    try:
        counts = RoundEngine(troop, reducer, config.rounds, observer=record).run()
        writer = flush_round_columns(round_columns, round_log_path, writer)
    finally:
        if writer is not None:
            writer.close()
    return counts


def run_both_modes(
    specs: Sequence[MonkeySpec],
    out_dir: Path | None = None,
) -> list[SimulationResult]:
    """Run relief and bounded mode at their canonical round counts."""
    return [
        run_simulation(specs, SimulationConfig.for_mode(mode), out_dir=out_dir)
        for mode in (WorryMode.RELIEF, WorryMode.BOUNDED)
    ]
