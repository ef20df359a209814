"""Month navigation and layout helpers for the profit calendar."""

import calendar
import re
from datetime import date
from typing import Iterable, NamedTuple

from tradepilot.models.journal import TradeEntry
from tradepilot.models.summary import AggregationBucket

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

_YEAR_MONTH = re.compile(r"^(\d{4})-(\d{2})$")


class MonthLayout(NamedTuple):
    year: int
    month: int
    first_weekday: int  # Monday == 0
    days: int


def parse_year_month(year_month: str) -> tuple[int, int]:
    """Split ``YYYY-MM`` into ``(year, month)``.

    Raises:
        ValueError: If the value is not a valid year-month.
    """
    match = _YEAR_MONTH.match(year_month or "")
    if not match:
        raise ValueError(f"Invalid year-month: {year_month!r} (expected YYYY-MM)")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month in {year_month!r}")
    return year, month


def current_year_month(today: date | None = None) -> str:
    return (today or date.today()).isoformat()[:7]


def month_layout(year_month: str) -> MonthLayout:
    year, month = parse_year_month(year_month)
    first_weekday, days = calendar.monthrange(year, month)
    return MonthLayout(year=year, month=month, first_weekday=first_weekday, days=days)


def shift_month(year_month: str, delta: int) -> str:
    """Move ``delta`` months forward (negative for back)."""
    year, month = parse_year_month(year_month)
    index = year * 12 + (month - 1) + delta
    new_year, new_month = divmod(index, 12)
    return f"{new_year:04d}-{new_month + 1:02d}"


def day_key(layout: MonthLayout, day: int) -> str:
    return f"{layout.year:04d}-{layout.month:02d}-{day:02d}"


def month_totals(ledger: dict[str, AggregationBucket]) -> tuple[int, float]:
    """Total trades and net P/L across a month's ledger."""
    trades = sum(bucket.trades for bucket in ledger.values())
    pnl = sum(bucket.pnl for bucket in ledger.values())
    return trades, pnl


def entries_on(entries: Iterable[TradeEntry], day: date) -> list[TradeEntry]:
    return [entry for entry in entries if entry.date == day]
