"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. Invalid band
multipliers are configuration defects and are rejected on construction.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

# Timestamp of the Bitcoin genesis block
GENESIS = datetime(2009, 1, 3, 18, 15, 5, tzinfo=timezone.utc)


class ModelParameters(BaseModel):
    """Regression coefficients of one power-law curve: log10(P) = a + b*log10(days)."""

    coefficient_a: float = Field(..., description="Intercept in log10 space")
    coefficient_b: float = Field(..., description="Slope (power exponent)")

    model_config = {"frozen": True}


# BTC/USD trend line
DEFAULT_PRIMARY_MODEL = ModelParameters(coefficient_a=-17.01, coefficient_b=5.82)

# BTC priced in troy ounces of gold
DEFAULT_SECONDARY_MODEL = ModelParameters(coefficient_a=-19.14, coefficient_b=5.50)


class BandConfig(BaseModel):
    """Support/resistance multipliers and the fair-value corridor."""

    support_multiplier: float = Field(default=0.35, gt=0, lt=1)
    resist_multiplier: float = Field(default=3.5, gt=1)
    lower_fair_ratio: float = Field(default=0.7, gt=0)
    upper_fair_ratio: float = Field(default=1.3, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_ordering(self) -> "BandConfig":
        if not (
            self.support_multiplier
            < self.lower_fair_ratio
            < self.upper_fair_ratio
            < self.resist_multiplier
        ):
            raise ValueError(
                "band ratios must satisfy support_multiplier < lower_fair_ratio "
                f"< upper_fair_ratio < resist_multiplier, got {self.support_multiplier}, "
                f"{self.lower_fair_ratio}, {self.upper_fair_ratio}, {self.resist_multiplier}"
            )
        return self


class ValuationConfig(BaseModel):
    """Everything the valuation core is parameterized by."""

    genesis: datetime = Field(default=GENESIS)
    primary_model: ModelParameters = Field(default=DEFAULT_PRIMARY_MODEL)
    secondary_model: Optional[ModelParameters] = Field(
        default=None, description="Set to model a second (cross-rate) relation"
    )
    bands: BandConfig = Field(default_factory=BandConfig)

    model_config = {"frozen": True}

    @field_validator("genesis")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def relation_count(self) -> int:
        """Number of modeled reference relations (1 or 2)."""
        return 1 if self.secondary_model is None else 2


class FeedConfig(BaseModel):
    """Where to fetch one asset's spot price from."""

    symbol: str = Field(default="BTC")
    coingecko_id: Optional[str] = Field(default="bitcoin")
    coinbase_pair: Optional[str] = Field(default="BTC-USD")
    default_price: Optional[float] = Field(
        default=None, gt=0, description="Last-resort fixed price"
    )

    @model_validator(mode="after")
    def _check_has_source(self) -> "FeedConfig":
        if not (self.coingecko_id or self.coinbase_pair or self.default_price is not None):
            raise ValueError(
                f"feed {self.symbol} needs coingecko_id, coinbase_pair or default_price"
            )
        return self


class QuotesConfig(BaseModel):
    """Configuration for quote retrieval."""

    vs_currency: str = Field(default="usd")
    timeout_seconds: float = Field(default=10.0, gt=0)
    primary: FeedConfig = Field(default_factory=FeedConfig)
    reference: Optional[FeedConfig] = Field(default=None)


class RetrySettings(BaseModel):
    """Retry policy applied to each quote source."""

    max_attempts: int = Field(default=2, ge=1, le=10)
    base_delay_seconds: float = Field(default=0.5, ge=0)
    max_delay_seconds: float = Field(default=5.0, ge=0)


class CircuitBreakerSettings(BaseModel):
    """Circuit breaker policy applied to each quote source."""

    failure_threshold: int = Field(default=3, ge=1)
    recovery_timeout_seconds: float = Field(default=300.0, ge=0)


class DisplayConfig(BaseModel):
    """Widget presentation settings."""

    title: str = Field(default="Power Law")
    gauge_width: int = Field(default=28, ge=6, le=200)
    url: str = Field(default="https://loknlod.github.io/Bitcoin-Power-Law/")


class WidgetConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    valuation: ValuationConfig = Field(default_factory=ValuationConfig)
    quotes: QuotesConfig = Field(default_factory=QuotesConfig)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    circuit_breaker: CircuitBreakerSettings = Field(
        default_factory=CircuitBreakerSettings,
    )
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _check_relations(self) -> "WidgetConfig":
        if self.quotes.reference is not None and self.valuation.secondary_model is None:
            raise ValueError(
                "quotes.reference is set but valuation.secondary_model is missing"
            )
        return self
