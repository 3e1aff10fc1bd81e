"""Centralized domain constants for the item-passing simulation.

All magic numbers shared by more than one module are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

RELIEF_ROUNDS = 20
"""Canonical round count for relief-mode runs."""

BOUNDED_ROUNDS = 10_000
"""Canonical round count for bounded-mode runs."""

RELIEF_DIVISOR = 3
"""Worry level is floor-divided by this value after each relief-mode inspection."""

TOP_K = 2
"""Number of most active monkeys combined into the monkey-business score."""

FLUSH_THRESHOLD = 8_192
"""Flush round-log rows to Parquet once this in-memory row count is reached."""

RESULT_SCHEMA_VERSION = 1
"""Version tag written into every per-run JSON result payload."""
