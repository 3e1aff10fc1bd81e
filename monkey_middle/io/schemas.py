"""Parquet schema for the per-round log stream."""

from __future__ import annotations

import pyarrow as pa

ROUND_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("worry_mode", pa.string()),
        ("round", pa.int64()),
        ("monkey_id", pa.int64()),
        ("inspected_count", pa.int64()),
        ("queue_length", pa.int64()),
    ]
)
