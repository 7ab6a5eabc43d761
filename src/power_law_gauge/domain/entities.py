"""
Core Domain Entities.

This module defines the results the valuation core produces: the closed
status enumeration, its display metadata and the per-evaluation result
objects consumed by the presentation layer.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class StatusKind(str, Enum):
    """Valuation status, ordered by increasing price relative to fair value."""

    DEEP_VALUE = "DEEP_VALUE"
    UNDERVALUED = "UNDERVALUED"
    FAIR_VALUE = "FAIR_VALUE"
    ABOVE_FAIR = "ABOVE_FAIR"
    OVERVALUED = "OVERVALUED"

    @property
    def rank(self) -> int:
        """Position in the cheap-to-expensive ordering (0-based)."""
        return list(StatusKind).index(self)

    @property
    def style(self) -> "StatusStyle":
        return STATUS_STYLES[self]


class StatusStyle(BaseModel):
    """Static display metadata for a status."""

    label: str
    glyph: str
    color: str = Field(..., pattern=r"^#[0-9a-fA-F]{6}$")

    model_config = {"frozen": True}


STATUS_STYLES: Dict[StatusKind, StatusStyle] = {
    StatusKind.DEEP_VALUE: StatusStyle(label="Deeply Undervalued", glyph="🟢", color="#00d395"),
    StatusKind.UNDERVALUED: StatusStyle(label="Undervalued", glyph="🟢", color="#00d395"),
    StatusKind.FAIR_VALUE: StatusStyle(label="Fair Value", glyph="🔵", color="#4da6ff"),
    StatusKind.ABOVE_FAIR: StatusStyle(label="Above Fair", glyph="🟠", color="#ff9500"),
    StatusKind.OVERVALUED: StatusStyle(label="Overvalued", glyph="🔴", color="#ff6b6b"),
}


class ValuationResult(BaseModel):
    """Classification of one price against one power-law fair value."""

    price: float = Field(..., gt=0)
    fair_value: float = Field(..., gt=0)
    support: float = Field(..., gt=0)
    resist: float = Field(..., gt=0)
    deviation_pct: float
    status: StatusKind
    gauge_position: float = Field(..., ge=0, le=1)

    model_config = {"frozen": True}


class CrossRateResult(BaseModel):
    """Secondary relation: primary price expressed in the reference asset."""

    reference_price: float = Field(..., gt=0)
    cross_rate: float = Field(..., gt=0)
    fair_value: float = Field(..., gt=0)
    deviation_pct: float

    model_config = {"frozen": True}


class EvaluationResult(BaseModel):
    """Complete output of one evaluator call."""

    evaluated_at: datetime
    days: float = Field(..., gt=0, description="Days since genesis")
    primary: ValuationResult
    secondary: Optional[CrossRateResult] = None

    model_config = {"frozen": True}

    @property
    def secondary_deviation_pct(self) -> Optional[float]:
        if self.secondary is None:
            return None
        return self.secondary.deviation_pct
