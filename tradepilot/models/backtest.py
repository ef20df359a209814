"""Simulated backtest data models."""

from pydantic import BaseModel, Field


class BacktestFingerprint(BaseModel):
    """Input tuple that seeds a simulated backtest."""

    strategy_id: str = Field(default="", description="Strategy identifier")
    timeframe: str = Field(default="", description="Chart timeframe (e.g. M15)")
    from_date: str = Field(default="", description="Window start (YYYY-MM-DD)")
    to_date: str = Field(default="", description="Window end (YYYY-MM-DD)")
    trade_count: int = Field(default=0, description="Simulated trade cap")

    model_config = {"frozen": True}

    def as_string(self) -> str:
        """Concatenate the fields in order; the trade count is rendered in decimal."""
        return (
            f"{self.strategy_id}{self.timeframe}"
            f"{self.from_date}{self.to_date}{self.trade_count}"
        )


class EquityPoint(BaseModel):
    """One point of a simulated equity curve."""

    index: int = Field(..., ge=0, description="Zero-based position in the series")
    equity: float = Field(..., ge=0, description="Equity floored at zero")

    model_config = {"frozen": True}


class BacktestResult(BaseModel):
    """Simulated performance statistics."""

    win_rate: int = Field(..., ge=45, le=75, description="Win rate percentage")
    expectancy: float = Field(..., description="Expectancy in R multiples")
    equity: list[EquityPoint] = Field(default_factory=list, description="Equity curve")

    model_config = {"frozen": True}
