"""
Static Quote Source.

Returns a fixed price. Used as the last link of a QuoteChain when a
configured default should stand in for live data, and as a test double.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from power_law_gauge.domain.value_objects import PriceQuote


class StaticQuoteSource:
    """Fixed-price source."""

    def __init__(
        self,
        symbol: str,
        price: float,
        name: str = "default",
        change_24h: Optional[float] = None,
    ) -> None:
        """
        Initialize static source.

        Args:
            symbol: Asset symbol reported on the quote
            price: Price returned by every fetch
            name: Source name used in logs
            change_24h: Optional fixed 24h change
        """
        self.symbol = symbol
        self.price = price
        self.change_24h = change_24h
        self._name = name
        self.fetch_count = 0

    @property
    def name(self) -> str:
        return self._name

    def fetch(self) -> PriceQuote:
        self.fetch_count += 1
        return PriceQuote(
            symbol=self.symbol,
            price=self.price,
            change_24h=self.change_24h,
            source=self._name,
            fetched_at=datetime.now(timezone.utc),
        )
