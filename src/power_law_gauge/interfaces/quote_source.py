"""
Quote Source Protocol.

Defines the abstract interface for price retrieval. Every spot-price
source (HTTP APIs, fixed defaults, test doubles) implements this protocol
so it can be placed in a QuoteChain.

A source is responsible for:
    - Fetching one spot price for one asset
    - Raising QuoteSourceError on transport or payload problems

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Sources never fall back on their own; ordering is the chain's job
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from power_law_gauge.domain.value_objects import PriceQuote


class QuoteSourceError(Exception):
    """Raised when a single source cannot produce a usable quote."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


@runtime_checkable
class QuoteSource(Protocol):
    """Abstract interface for a spot-price source."""

    @property
    def name(self) -> str:
        """Short identifier used in logs and circuit names."""
        ...

    def fetch(self) -> PriceQuote:
        """
        Fetch the current spot price.

        Returns:
            PriceQuote with a positive price

        Raises:
            QuoteSourceError: If the source is unreachable or the payload
                              is malformed
        """
        ...
