"""Economic calendar event model."""

from typing import Literal, Optional
from pydantic import BaseModel, Field


class NewsEvent(BaseModel):
    """Represents a scheduled economic release."""

    time: str = Field(..., description="Release time (HH:MM)")
    ccy: str = Field(..., min_length=3, max_length=3, description="Currency code")
    title: str = Field(..., min_length=1, description="Event name")
    impact: Literal["low", "medium", "high"] = Field(..., description="Expected impact")
    forecast: Optional[str] = Field(default=None)
    previous: Optional[str] = Field(default=None)
    actual: Optional[str] = Field(default=None)

    model_config = {"frozen": True}
