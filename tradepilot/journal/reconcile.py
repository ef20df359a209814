"""Long/short count reconciliation for journal entries.

The counts on an entry always add up to its trade count. When the two
disagree, the long count is kept (clamped to the trade count) and the
short count becomes the complement.
"""

import uuid
from datetime import date
from typing import Optional, Union

from tradepilot.journal.parsing import parse_money, parse_non_neg_int, parse_trades
from tradepilot.models.journal import Bias, Direction, TradeEntry


def counts_for_direction(direction: Direction) -> tuple[int, int]:
    """Counts for a single-trade entry."""
    if Direction(direction) is Direction.LONG:
        return 1, 0
    return 0, 1


def clamp_complement(trades: int, edited: int) -> tuple[int, int]:
    """Clamp ``edited`` to ``[0, trades]`` and pair it with its complement."""
    kept = min(trades, max(0, edited))
    return kept, max(0, trades - kept)


def reconcile_counts(
    trades: int, long_count: int, short_count: int, direction: Direction
) -> tuple[int, int]:
    """Normalize a submitted ``(long, short)`` pair.

    Args:
        trades: Parsed trade count (>= 1).
        long_count: Parsed long count.
        short_count: Parsed short count.
        direction: Selected direction, used when ``trades <= 1``.

    Returns:
        ``(long, short)`` satisfying the count invariant.
    """
    if trades <= 1:
        return counts_for_direction(direction)
    if long_count + short_count == trades:
        return long_count, short_count
    return clamp_complement(trades, long_count)


class CountReconciler:
    """Tracks the count fields of an entry form while the user edits it.

    Each ``on_*`` transition takes the raw input of the field that changed
    and returns the normalized ``(long, short)`` pair. The long and short
    fields only apply while the trade count is above one.
    """

    def __init__(self, direction: Direction = Direction.LONG, trades: int = 1):
        self.direction = Direction(direction)
        self.trades = max(1, trades)
        self.long_count, self.short_count = counts_for_direction(self.direction)
        if self.trades > 1:
            self.long_count, self.short_count = clamp_complement(self.trades, self.long_count)

    @property
    def counts(self) -> tuple[int, int]:
        return self.long_count, self.short_count

    @property
    def split_visible(self) -> bool:
        """Whether separate long/short counts apply to the current trade count."""
        return self.trades > 1

    def on_trades_changed(self, raw: Optional[str]) -> tuple[int, int]:
        self.trades = parse_trades(raw)
        if self.trades > 1:
            # Long survives up to the new cap; short absorbs the rest.
            self.long_count, self.short_count = clamp_complement(self.trades, self.long_count)
        else:
            self.long_count, self.short_count = counts_for_direction(self.direction)
        return self.counts

    def on_long_changed(self, raw: Optional[str]) -> tuple[int, int]:
        if self.trades <= 1:
            return self.counts
        self.long_count, self.short_count = clamp_complement(
            self.trades, parse_non_neg_int(raw)
        )
        return self.counts

    def on_short_changed(self, raw: Optional[str]) -> tuple[int, int]:
        if self.trades <= 1:
            return self.counts
        self.short_count, self.long_count = clamp_complement(
            self.trades, parse_non_neg_int(raw)
        )
        return self.counts

    def on_direction_changed(self, direction: Direction) -> tuple[int, int]:
        self.direction = Direction(direction)
        if self.trades <= 1:
            self.long_count, self.short_count = counts_for_direction(self.direction)
        return self.counts


def new_entry_id() -> str:
    return uuid.uuid4().hex


def build_entry(
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
    """Build a normalized journal entry from raw form input.

    Malformed numbers fall back to their defaults instead of failing. The
    date is not parsed leniently: anything other than a ``date`` or a
    ``YYYY-MM-DD`` string raises pydantic's ``ValidationError``.

    Args:
        entry_date: Trading day (``date`` or ``YYYY-MM-DD``).
        pnl: Raw P/L text; ``"$"`` and other symbols are ignored.
        trades: Raw trade count.
        long_count: Raw long count (used when trades > 1).
        short_count: Raw short count (used when trades > 1).
        direction: Trade direction.
        bias: Market bias.
        reason: Free-text notes.
        image: Optional screenshot reference.

    Returns:
        A TradeEntry with a fresh identifier.
    """
    direction = Direction(direction)
    trade_count = parse_trades(trades)
    longs, shorts = reconcile_counts(
        trade_count,
        parse_non_neg_int(long_count),
        parse_non_neg_int(short_count),
        direction,
    )
    return TradeEntry(
        id=new_entry_id(),
        date=entry_date,
        pnl=parse_money(pnl),
        trades=trade_count,
        direction=direction,
        bias=Bias(bias),
        reason=reason or "",
        image=image or None,
        long_count=longs,
        short_count=shorts,
    )
