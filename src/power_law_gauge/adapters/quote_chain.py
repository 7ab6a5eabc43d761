"""
Quote Chain - Ordered Fallback Over Quote Sources.

Tries each source in order until one returns a quote. Each attempt can
be wrapped in retry and a per-source circuit breaker. Callers see a
single resolved quote or an explicit QuotesUnavailable.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from power_law_gauge.domain.value_objects import PriceQuote
from power_law_gauge.interfaces.quote_source import QuoteSource, QuoteSourceError
from power_law_gauge.resilience.error_handler import (
    CircuitBreakerOpen,
    ErrorHandler,
    RetryExhausted,
)

logger = logging.getLogger(__name__)


class QuotesUnavailable(Exception):
    """Raised when every source in a chain failed."""

    def __init__(self, symbol: str, failures: List[Tuple[str, Exception]]) -> None:
        summary = ", ".join(f"{name}: {error}" for name, error in failures) or "no sources"
        super().__init__(f"No quote for {symbol} ({summary})")
        self.symbol = symbol
        self.failures = failures


class QuoteChain:
    """Resolves one asset's price from an ordered list of sources."""

    def __init__(
        self,
        symbol: str,
        sources: Sequence[QuoteSource],
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize quote chain.

        Args:
            symbol: Asset symbol this chain resolves
            sources: Sources in order of preference
            error_handler: Optional retry/circuit breaker wrapper
        """
        self.symbol = symbol
        self.sources = list(sources)
        self.error_handler = error_handler

    @property
    def source_names(self) -> List[str]:
        return [source.name for source in self.sources]

    def fetch(self) -> PriceQuote:
        """
        Fetch from the first source that succeeds.

        Returns:
            The first successfully resolved quote

        Raises:
            QuotesUnavailable: When all sources fail
        """
        failures: List[Tuple[str, Exception]] = []

        for source in self.sources:
            try:
                quote = self._fetch_from(source)
            except (QuoteSourceError, RetryExhausted, CircuitBreakerOpen) as e:
                failures.append((source.name, e))
                logger.warning(f"{self.symbol} quote from {source.name} failed: {e}")
                continue

            if failures:
                logger.info(
                    f"{self.symbol} resolved by fallback source {source.name} "
                    f"after {len(failures)} failure(s)"
                )
            return quote

        logger.error(f"All quote sources failed for {self.symbol}")
        raise QuotesUnavailable(self.symbol, failures)

    def _fetch_from(self, source: QuoteSource) -> PriceQuote:
        if self.error_handler is None:
            return source.fetch()

        return self.error_handler.with_circuit_breaker(
            lambda: self.error_handler.retry(
                source.fetch,
                operation_name=f"{source.name} {self.symbol} fetch",
            ),
            circuit_name=f"{source.name}:{self.symbol}",
        )
