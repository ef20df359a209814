"""Trade journal: input reconciliation, aggregation and storage service."""

from tradepilot.journal.aggregate import (
    aggregate_calendar,
    aggregate_categories,
    classify_day,
    summarize_daily,
)
from tradepilot.journal.reconcile import CountReconciler, build_entry, reconcile_counts
from tradepilot.journal.service import JournalService

__all__ = [
    "CountReconciler",
    "JournalService",
    "aggregate_calendar",
    "aggregate_categories",
    "build_entry",
    "classify_day",
    "reconcile_counts",
    "summarize_daily",
]
