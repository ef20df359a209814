"""Aggregated journal summary models."""

import math
from typing import Optional
from pydantic import BaseModel, Field


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding toward +infinity."""
    return int(math.floor(value + 0.5))


class AggregationBucket(BaseModel):
    """Count / P&L / trade totals keyed by a date or category."""

    key: str = Field(..., description="Date (YYYY-MM-DD) or category name")
    count: int = Field(default=0, ge=0, description="Number of entries")
    pnl: float = Field(default=0.0, description="Summed P/L")
    trades: int = Field(default=0, ge=0, description="Summed trade count")

    model_config = {"frozen": True}


class Category(BaseModel):
    """A named category total."""

    name: str
    value: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class CategoryBreakdown(BaseModel):
    """Two-category split rendered as a percentage pair."""

    first: Category
    second: Category

    model_config = {"frozen": True}

    @property
    def total(self) -> int:
        return self.first.value + self.second.value

    def __getitem__(self, name: str) -> int:
        for category in (self.first, self.second):
            if category.name == name:
                return category.value
        raise KeyError(name)

    def as_dict(self) -> dict[str, int]:
        return {self.first.name: self.first.value, self.second.name: self.second.value}

    def percentages(self) -> tuple[int, int]:
        """Return the percentage pair.

        The first share is rounded; the second is its complement so the
        pair always sums to exactly 100.
        """
        total = self.total
        first = round_half_up(self.first.value / total * 100) if total else 0
        return first, 100 - first


class JournalOverview(BaseModel):
    """Categorical breakdowns over the whole journal."""

    win_loss: CategoryBreakdown
    by_direction: CategoryBreakdown
    by_bias: CategoryBreakdown

    model_config = {"frozen": True}


class DailySummary(BaseModel):
    """Entry-level statistics with per-day net P/L."""

    count: int = Field(default=0, ge=0)
    win_rate: int = Field(default=0, ge=0, le=100)
    avg_pnl: float = Field(default=0.0)
    by_day: dict[str, float] = Field(default_factory=dict)
    best_day: Optional[AggregationBucket] = Field(default=None)

    model_config = {"frozen": True}
