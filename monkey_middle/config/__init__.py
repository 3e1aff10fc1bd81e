"""Configuration layer: constants and typed config dataclasses."""

from monkey_middle.config.constants import (
    BOUNDED_ROUNDS,
    FLUSH_THRESHOLD,
    RELIEF_DIVISOR,
    RELIEF_ROUNDS,
    RESULT_SCHEMA_VERSION,
    TOP_K,
)
from monkey_middle.config.types import SimulationConfig, SimulationResult, WorryMode

__all__ = [
    "BOUNDED_ROUNDS",
    "FLUSH_THRESHOLD",
    "RELIEF_DIVISOR",
    "RELIEF_ROUNDS",
    "RESULT_SCHEMA_VERSION",
    "SimulationConfig",
    "SimulationResult",
    "TOP_K",
    "WorryMode",
]
