"""Simulation engine: round loop, run orchestration, and Parquet round log."""

from monkey_middle.simulation.engine import (
    EngineState,
    RoundEngine,
    play_round,
    play_turn,
    run_both_modes,
    run_simulation,
)
from monkey_middle.simulation.persistence import flush_round_columns

__all__ = [
    "EngineState",
    "RoundEngine",
    "flush_round_columns",
    "play_round",
    "play_turn",
    "run_both_modes",
    "run_simulation",
]
