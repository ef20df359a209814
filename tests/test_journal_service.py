"""Tests for the journal service.

**Feature: trading-dashboard**
"""

import tempfile
from datetime import date
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from tradepilot.db.store import DataStore, InMemoryJournalRepository, SqliteJournalRepository
from tradepilot.journal.reconcile import build_entry
from tradepilot.journal.service import JournalService
from tradepilot.models import Bias, Direction


class TestAddEntry:
    """
    **Feature: trading-dashboard, Property: Prepend-Only Collection**

    *For any* sequence of additions, the newest entry is first and earlier
    snapshots are left untouched.
    """

    def test_add_prepends_and_saves(self):
        repository = InMemoryJournalRepository()
        service = JournalService(repository)

        first = service.add_entry(date(2025, 1, 1), pnl="10")
        second = service.add_entry(date(2025, 1, 2), pnl="-5")

        assert service.entries == (second, first)
        assert repository.load() == [second, first]
        assert repository.save_count == 2

    def test_previous_snapshot_is_not_mutated(self):
        service = JournalService(InMemoryJournalRepository())
        service.add_entry(date(2025, 1, 1))
        snapshot = service.entries

        service.add_entry(date(2025, 1, 2))

        assert len(snapshot) == 1
        assert len(service.entries) == 2

    def test_loads_existing_entries_once(self):
        existing = build_entry(date(2024, 12, 31), pnl="3")
        service = JournalService(InMemoryJournalRepository([existing]))
        assert service.entries == (existing,)

    @given(pnls=st.lists(st.integers(-1000, 1000), min_size=1, max_size=20))
    @settings(max_examples=50)
    def test_newest_first(self, pnls):
        service = JournalService(InMemoryJournalRepository())
        added = [service.add_entry(date(2025, 1, 1), pnl=str(p)) for p in pnls]
        assert list(service.entries) == list(reversed(added))

    def test_persists_through_sqlite(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = DataStore(Path(tmpdir) / "test.db")
            service = JournalService(SqliteJournalRepository(store))
            entry = service.add_entry(
                "2025-02-03", pnl="$40", trades="4", long_count="3", short_count="3",
                direction=Direction.SHORT, bias=Bias.BEARISH, reason="trend day",
            )

            reopened = JournalService(SqliteJournalRepository(store))

            assert reopened.entries == (entry,)
            assert (entry.long_count, entry.short_count) == (3, 1)


class TestServiceSummaries:
    """Summaries are recomputed from the current snapshot."""

    def _service(self) -> JournalService:
        service = JournalService(InMemoryJournalRepository())
        service.add_entry(date(2025, 1, 1), pnl="10", trades="2", long_count="2")
        service.add_entry(date(2025, 1, 1), pnl="-5", direction=Direction.SHORT,
                          bias=Bias.BEARISH)
        service.add_entry(date(2025, 1, 2), pnl="0")
        service.add_entry(date(2025, 2, 1), pnl="7")
        return service

    def test_entries_for_day(self):
        service = self._service()
        assert len(service.entries_for(date(2025, 1, 1))) == 2
        assert len(service.entries_for(date(2025, 3, 1))) == 0
        assert len(service.entries_for()) == 4

    def test_calendar(self):
        ledger = self._service().calendar("2025-01")
        assert set(ledger) == {"2025-01-01", "2025-01-02"}
        assert ledger["2025-01-01"].pnl == 5
        assert ledger["2025-01-01"].trades == 3

    def test_overview(self):
        overview = self._service().overview()
        assert overview.win_loss.as_dict() == {"Win": 2, "Loss": 2}
        assert overview.by_direction.as_dict() == {"Long": 4, "Short": 1}
        assert overview.by_bias.as_dict() == {"Bullish": 3, "Bearish": 1}

    def test_daily_summary(self):
        summary = self._service().daily_summary()
        assert summary.count == 4
        assert summary.win_rate == 50
        assert summary.best_day.key == "2025-02-01"

    def test_empty_service(self):
        service = JournalService(InMemoryJournalRepository())
        assert service.calendar("2025-01") == {}
        assert service.daily_summary().best_day is None
