"""Strategy preset data model."""

from pydantic import BaseModel, Field


class Strategy(BaseModel):
    """A named strategy preset used to fingerprint simulated backtests."""

    id: str = Field(..., min_length=1, description="Strategy identifier")
    name: str = Field(..., min_length=1, description="Display name")
    rr: float = Field(default=2.0, gt=0, description="Target reward:risk")
    timeframe: str = Field(default="M15", description="Chart timeframe")

    model_config = {"frozen": True}
