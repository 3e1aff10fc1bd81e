"""Configuration dataclasses and the per-run result container."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from monkey_middle.config.constants import BOUNDED_ROUNDS, RELIEF_ROUNDS, TOP_K

__all__ = [
    "SimulationConfig",
    "SimulationResult",
    "WorryMode",
]


class WorryMode(Enum):
    """How worry levels are kept in check between operation and test."""

    RELIEF = "relief"
    BOUNDED = "bounded"


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime knobs for one simulation run."""

    rounds: int = RELIEF_ROUNDS
    worry_mode: WorryMode = WorryMode.RELIEF
    top_k: int = TOP_K

    def __post_init__(self) -> None:
        if not isinstance(self.worry_mode, WorryMode):
            raise ValueError("worry_mode must be a WorryMode")
        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")
        if self.top_k < 1:
            raise ValueError("top_k must be >= 1")

    @classmethod
    def for_mode(cls, worry_mode: WorryMode, rounds: int | None = None) -> SimulationConfig:
        """Build a config using the canonical round count for `worry_mode`."""
        if rounds is None:
            rounds = RELIEF_ROUNDS if worry_mode == WorryMode.RELIEF else BOUNDED_ROUNDS
        return cls(rounds=rounds, worry_mode=worry_mode)

    @property
    def run_id(self) -> str:
        """Reproducible identifier for this mode/round-count pairing."""
        return f"{self.worry_mode.value}_r{self.rounds}"


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Final counters and score for one completed run."""

    run_id: str
    worry_mode: WorryMode
    rounds: int
    modulus: int | None  # None in relief mode
    inspection_counts: tuple[int, ...]
    monkey_business: int

    def to_payload(self) -> dict[str, object]:
        """JSON-serialisable view of the result."""
        return {
            "run_id": self.run_id,
            "worry_mode": self.worry_mode.value,
            "rounds": self.rounds,
            "modulus": self.modulus,
            "inspection_counts": list(self.inspection_counts),
            "monkey_business": self.monkey_business,
        }
