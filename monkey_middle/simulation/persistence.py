"""Parquet persistence helpers for the round log stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from monkey_middle.io.schemas import ROUND_LOG_SCHEMA

RoundColumns = dict[str, list[int | str]]


def empty_round_columns() -> RoundColumns:
    return {field.name: [] for field in ROUND_LOG_SCHEMA}


def flush_round_columns(
    round_columns: RoundColumns,
    round_log_path: Path,
    round_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Append buffered per-round counters to the run's round log.

    The writer is opened lazily on the first non-empty flush, so a run that
    records no rounds leaves no file behind. Buffers are emptied in place and
    the (possibly new) writer is handed back to the caller, who closes it.
    """
    n_rows = len(round_columns["round"])
    if n_rows == 0:
        return round_writer
    writer = round_writer or pq.ParquetWriter(round_log_path, ROUND_LOG_SCHEMA)
    writer.write_table(pa.Table.from_pydict(round_columns, schema=ROUND_LOG_SCHEMA))
    for column in round_columns.values():
        del column[:]
    return writer
