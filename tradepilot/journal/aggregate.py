"""Aggregation folds over journal entries.

All functions are pure and recompute from the entries they are given.
Note the deliberate tie handling: a calendar day whose net P/L is exactly
zero counts as a win day, while an individual entry with zero P/L counts
as a loss in the win/loss statistics.
"""

from typing import Iterable, Literal

from tradepilot.models.journal import Bias, Direction, TradeEntry
from tradepilot.models.summary import (
    AggregationBucket,
    Category,
    CategoryBreakdown,
    DailySummary,
    JournalOverview,
    round_half_up,
)

DayClass = Literal["win", "loss", "empty"]


def _in_month(entry: TradeEntry, year_month: str) -> bool:
    return entry.date.isoformat()[:7] == year_month


def aggregate_calendar(
    entries: Iterable[TradeEntry], year_month: str
) -> dict[str, AggregationBucket]:
    """Build the day-keyed ledger for one month.

    Args:
        entries: Journal entries (any order).
        year_month: Target month as ``YYYY-MM``.

    Returns:
        Mapping of ``YYYY-MM-DD`` to the day's bucket. Days without
        entries are absent.
    """
    ledger: dict[str, AggregationBucket] = {}
    for entry in entries:
        if not _in_month(entry, year_month):
            continue
        key = entry.date.isoformat()
        current = ledger.get(key) or AggregationBucket(key=key)
        ledger[key] = AggregationBucket(
            key=key,
            count=current.count + 1,
            pnl=current.pnl + entry.pnl,
            trades=current.trades + entry.trades,
        )
    return ledger


def classify_day(bucket: AggregationBucket) -> DayClass:
    """Classify a calendar day; zero net P/L is a win day."""
    if bucket.trades > 0 and bucket.pnl >= 0:
        return "win"
    if bucket.trades > 0 and bucket.pnl < 0:
        return "loss"
    return "empty"


def direction_counts(entry: TradeEntry) -> tuple[int, int]:
    """Long/short counts of an entry, derived from direction on legacy records."""
    if entry.long_count is not None:
        longs = max(0, entry.long_count)
    else:
        longs = 1 if entry.direction is Direction.LONG else 0
    if entry.short_count is not None:
        shorts = max(0, entry.short_count)
    else:
        shorts = 1 if entry.direction is Direction.SHORT else 0
    return longs, shorts


def _breakdown(first: str, first_value: int, second: str, second_value: int) -> CategoryBreakdown:
    return CategoryBreakdown(
        first=Category(name=first, value=first_value),
        second=Category(name=second, value=second_value),
    )


def aggregate_categories(entries: Iterable[TradeEntry]) -> JournalOverview:
    """Win/loss, long/short and bullish/bearish totals over all entries."""
    wins = losses = longs = shorts = bullish = bearish = 0
    for entry in entries:
        if entry.pnl > 0:
            wins += 1
        else:
            losses += 1
        entry_longs, entry_shorts = direction_counts(entry)
        longs += entry_longs
        shorts += entry_shorts
        if entry.bias is Bias.BULLISH:
            bullish += 1
        elif entry.bias is Bias.BEARISH:
            bearish += 1

    return JournalOverview(
        win_loss=_breakdown("Win", wins, "Loss", losses),
        by_direction=_breakdown("Long", longs, "Short", shorts),
        by_bias=_breakdown("Bullish", bullish, "Bearish", bearish),
    )


def summarize_daily(entries: Iterable[TradeEntry]) -> DailySummary:
    """Entry count, win rate, average P/L, per-day net P/L and best day."""
    entries = list(entries)
    count = len(entries)
    if count == 0:
        return DailySummary()

    wins = sum(1 for entry in entries if entry.pnl > 0)
    total_pnl = sum(entry.pnl for entry in entries)

    by_day: dict[str, float] = {}
    for entry in entries:
        key = entry.date.isoformat()
        by_day[key] = by_day.get(key, 0.0) + entry.pnl

    # max() keeps the first day seen on ties
    best_key = max(by_day, key=by_day.__getitem__)
    best_day = AggregationBucket(
        key=best_key,
        count=sum(1 for entry in entries if entry.date.isoformat() == best_key),
        pnl=by_day[best_key],
        trades=sum(entry.trades for entry in entries if entry.date.isoformat() == best_key),
    )

    return DailySummary(
        count=count,
        win_rate=round_half_up(wins / count * 100),
        avg_pnl=total_pnl / count,
        by_day=by_day,
        best_day=best_day,
    )
