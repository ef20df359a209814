"""TradeEntry data model."""

from datetime import date as date_type
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Direction(str, Enum):
    """Dominant trade direction of a journal entry."""

    LONG = "long"
    SHORT = "short"


class Bias(str, Enum):
    """Market bias recorded with a journal entry."""

    BULLISH = "bullish"
    BEARISH = "bearish"


class TradeEntry(BaseModel):
    """Represents one trade-journal record.

    Entries built by the reconciler always carry counts that sum to
    ``trades``. Records loaded from older journals may have no
    ``long_count``/``short_count``; aggregation derives them from
    ``direction`` in that case.
    """

    id: str = Field(..., min_length=1, description="Opaque entry identifier")
    date: date_type = Field(..., description="Trading day of the entry")
    pnl: float = Field(default=0.0, description="Net P/L for the entry")
    trades: int = Field(default=1, ge=1, description="Number of trades taken")
    direction: Direction = Field(default=Direction.LONG, description="Trade direction")
    bias: Bias = Field(default=Bias.BULLISH, description="Market bias")
    reason: str = Field(default="", description="Reason / notes")
    image: Optional[str] = Field(default=None, description="Screenshot reference")
    long_count: Optional[int] = Field(
        default=None, ge=0, alias="longCount", description="Long trades in the entry"
    )
    short_count: Optional[int] = Field(
        default=None, ge=0, alias="shortCount", description="Short trades in the entry"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def to_record(self) -> dict:
        """Serialize to the persisted JSON-compatible schema."""
        return self.model_dump(mode="json", by_alias=True)
