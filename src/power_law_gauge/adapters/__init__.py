"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package. Following the
Hexagonal Architecture (Ports & Adapters) pattern.

Quote Sources:
    - CoinGeckoQuoteSource: CoinGecko simple price API
    - CoinbaseQuoteSource: Coinbase spot price API
    - StaticQuoteSource: Fixed default price / test double
    - QuoteChain: Ordered fallback over sources

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Design Principles:
    - All sources implement the QuoteSource protocol
    - Easily swappable via Dependency Injection
    - No valuation logic in adapters
"""

from power_law_gauge.adapters.console_logger import ConsoleAuditLogger
from power_law_gauge.adapters.http_sources import (
    CoinbaseQuoteSource,
    CoinGeckoQuoteSource,
)
from power_law_gauge.adapters.metrics_collector import InMemoryMetricsCollector
from power_law_gauge.adapters.quote_chain import QuoteChain, QuotesUnavailable
from power_law_gauge.adapters.static_source import StaticQuoteSource

__all__ = [
    "CoinbaseQuoteSource",
    "CoinGeckoQuoteSource",
    "ConsoleAuditLogger",
    "InMemoryMetricsCollector",
    "QuoteChain",
    "QuotesUnavailable",
    "StaticQuoteSource",
]
