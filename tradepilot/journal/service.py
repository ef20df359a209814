"""Journal service: connects the entry repository to the aggregation folds."""

import logging
from datetime import date
from typing import Optional, Union

from tradepilot.db.store import JournalRepository
from tradepilot.journal.aggregate import (
    aggregate_calendar,
    aggregate_categories,
    summarize_daily,
)
from tradepilot.journal.calendar import entries_on
from tradepilot.journal.reconcile import build_entry
from tradepilot.models import (
    AggregationBucket,
    Bias,
    DailySummary,
    Direction,
    JournalOverview,
    TradeEntry,
)

logger = logging.getLogger(__name__)


class JournalService:
    """Adds entries and computes summaries over a repository snapshot.

    The service holds the snapshot loaded at construction. Adding an entry
    builds a new collection with the entry in front and saves it; the
    previous snapshot is never modified.
    """

    def __init__(self, repository: JournalRepository):
        self._repository = repository
        self._entries: tuple[TradeEntry, ...] = tuple(repository.load())

    @property
    def entries(self) -> tuple[TradeEntry, ...]:
        return self._entries

    def add(self, entry: TradeEntry) -> TradeEntry:
        """Prepend an already-built entry and persist the collection."""
        entries = (entry, *self._entries)
        self._repository.save(entries)
        self._entries = entries
        logger.debug("Added entry %s for %s", entry.id, entry.date)
        return entry

    def add_entry(
        self,
        entry_date: Union[date, str],
        pnl: Optional[str] = "0",
        trades: Optional[str] = "1",
        long_count: Optional[str] = "1",
        short_count: Optional[str] = "0",
        direction: Direction = Direction.LONG,
        bias: Bias = Bias.BULLISH,
        reason: str = "",
        image: Optional[str] = None,
    ) -> TradeEntry:
        """Reconcile raw form input into an entry and store it."""
        entry = build_entry(
            entry_date,
            pnl=pnl,
            trades=trades,
            long_count=long_count,
            short_count=short_count,
            direction=direction,
            bias=bias,
            reason=reason,
            image=image,
        )
        return self.add(entry)

    def entries_for(self, day: Optional[date] = None) -> list[TradeEntry]:
        """All entries, or only those on ``day``."""
        if day is None:
            return list(self._entries)
        return entries_on(self._entries, day)

    def calendar(self, year_month: str) -> dict[str, AggregationBucket]:
        return aggregate_calendar(self._entries, year_month)

    def overview(self) -> JournalOverview:
        return aggregate_categories(self._entries)

    def daily_summary(self) -> DailySummary:
        return summarize_daily(self._entries)
