"""Input parsing and output schemas."""

from monkey_middle.io.parser import load_notes, parse_monkey_block, parse_notes, parse_operation
from monkey_middle.io.schemas import ROUND_LOG_SCHEMA

__all__ = [
    "ROUND_LOG_SCHEMA",
    "load_notes",
    "parse_monkey_block",
    "parse_notes",
    "parse_operation",
]
