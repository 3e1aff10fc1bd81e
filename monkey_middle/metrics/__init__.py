"""Scoring of completed runs."""

from monkey_middle.metrics.scoring import monkey_business, top_inspection_counts

__all__ = ["monkey_business", "top_inspection_counts"]
