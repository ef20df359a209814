"""Data models for TradePilot."""

from tradepilot.models.backtest import BacktestFingerprint, BacktestResult, EquityPoint
from tradepilot.models.journal import Bias, Direction, TradeEntry
from tradepilot.models.news import NewsEvent
from tradepilot.models.strategy import Strategy
from tradepilot.models.summary import (
    AggregationBucket,
    Category,
    CategoryBreakdown,
    DailySummary,
    JournalOverview,
)

__all__ = [
    "AggregationBucket",
    "BacktestFingerprint",
    "BacktestResult",
    "Bias",
    "Category",
    "CategoryBreakdown",
    "DailySummary",
    "Direction",
    "EquityPoint",
    "JournalOverview",
    "NewsEvent",
    "Strategy",
    "TradeEntry",
]
