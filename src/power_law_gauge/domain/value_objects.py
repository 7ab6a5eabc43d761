"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe characteristics of entities
but have no conceptual identity.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class ValuationBand(BaseModel):
    """Support and resistance around a fair value."""

    fair_value: float = Field(..., gt=0)
    support_multiplier: float = Field(..., gt=0, lt=1)
    resist_multiplier: float = Field(..., gt=1)

    model_config = {"frozen": True}

    @computed_field
    @property
    def support(self) -> float:
        """Lower bound (fair_value * support_multiplier)."""
        return self.fair_value * self.support_multiplier

    @computed_field
    @property
    def resist(self) -> float:
        """Upper bound (fair_value * resist_multiplier)."""
        return self.fair_value * self.resist_multiplier


class PriceQuote(BaseModel):
    """A spot price resolved by a quote source."""

    symbol: str
    price: float = Field(..., gt=0, allow_inf_nan=False)
    change_24h: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="24h change in percent, if the source reports it",
    )
    source: str
    fetched_at: datetime

    model_config = {"frozen": True}
