"""
Pipeline Factory - Wire a GaugePipeline From Configuration.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from power_law_gauge.adapters.console_logger import ConsoleAuditLogger
from power_law_gauge.adapters.http_sources import (
    CoinbaseQuoteSource,
    CoinGeckoQuoteSource,
)
from power_law_gauge.adapters.metrics_collector import InMemoryMetricsCollector
from power_law_gauge.adapters.quote_chain import QuoteChain
from power_law_gauge.adapters.static_source import StaticQuoteSource
from power_law_gauge.config.models import FeedConfig, QuotesConfig, WidgetConfig
from power_law_gauge.interfaces.quote_source import QuoteSource
from power_law_gauge.pipeline.gauge_pipeline import (
    AuditLoggerProtocol,
    GaugePipeline,
    MetricsCollectorProtocol,
)
from power_law_gauge.resilience.error_handler import ErrorHandler
from power_law_gauge.valuation.evaluator import ValuationEvaluator
from power_law_gauge.validation.quote_validator import QuoteValidator

logger = logging.getLogger(__name__)


def build_sources(
    feed: FeedConfig,
    quotes: QuotesConfig,
    session: Optional[requests.Session] = None,
) -> List[QuoteSource]:
    """Sources for one feed, in fallback order: CoinGecko, Coinbase, default."""
    sources: List[QuoteSource] = []
    if feed.coingecko_id:
        sources.append(
            CoinGeckoQuoteSource(
                feed.symbol,
                feed.coingecko_id,
                vs_currency=quotes.vs_currency,
                timeout_seconds=quotes.timeout_seconds,
                session=session,
            )
        )
    if feed.coinbase_pair:
        sources.append(
            CoinbaseQuoteSource(
                feed.symbol,
                feed.coinbase_pair,
                timeout_seconds=quotes.timeout_seconds,
                session=session,
            )
        )
    if feed.default_price is not None:
        sources.append(StaticQuoteSource(feed.symbol, feed.default_price))
    if not sources:
        raise ValueError(f"No quote sources configured for {feed.symbol}")
    return sources


def create_pipeline(
    config: WidgetConfig,
    session: Optional[requests.Session] = None,
    audit_logger: Optional[AuditLoggerProtocol] = None,
    metrics_collector: Optional[MetricsCollectorProtocol] = None,
) -> GaugePipeline:
    """
    Create a fully wired pipeline.

    Args:
        config: Validated widget configuration
        session: Shared HTTP session (a new one is created if omitted)
        audit_logger: Defaults to a non-verbose ConsoleAuditLogger
        metrics_collector: Defaults to InMemoryMetricsCollector

    Returns:
        GaugePipeline ready to run
    """
    session = session or requests.Session()
    error_handler = ErrorHandler.from_settings(config.retry, config.circuit_breaker)

    primary_feed = config.quotes.primary
    primary_chain = QuoteChain(
        primary_feed.symbol,
        build_sources(primary_feed, config.quotes, session),
        error_handler=error_handler,
    )

    reference_chain = None
    reference_feed = config.quotes.reference
    if reference_feed is not None:
        reference_chain = QuoteChain(
            reference_feed.symbol,
            build_sources(reference_feed, config.quotes, session),
            error_handler=error_handler,
        )

    logger.debug(
        f"Pipeline wired: {primary_chain.source_names}"
        + (f", reference {reference_chain.source_names}" if reference_chain else "")
    )

    return GaugePipeline(
        primary_chain=primary_chain,
        evaluator=ValuationEvaluator(config.valuation),
        audit_logger=audit_logger or ConsoleAuditLogger(verbose=False),
        metrics_collector=metrics_collector or InMemoryMetricsCollector(),
        reference_chain=reference_chain,
        quote_validator=QuoteValidator(),
    )
