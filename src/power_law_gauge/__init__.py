"""
Power Law Gauge - Bitcoin Fair-Value Widget.

Estimates a long-run "fair value" for Bitcoin from a power-law regression
on time since the genesis block, compares it with the live market price
and renders a compact status gauge.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Pure valuation core, no I/O
    - Dependency Injection for testability
    - Configuration-driven behavior via YAML

Main Components:
    - valuation: Time-base, power-law model, classifier, evaluator
    - domain: Value types (ValuationResult, StatusKind, PriceQuote, ...)
    - adapters: Quote sources, fallback chain, loggers, metrics
    - pipeline: Fetch -> validate -> evaluate orchestration
    - presentation: Price formatting and widget layout
    - config: Configuration models and loaders

Example:
    >>> from datetime import datetime, timezone
    >>> from power_law_gauge.config.models import ValuationConfig
    >>> from power_law_gauge.valuation import ValuationEvaluator
    >>> evaluator = ValuationEvaluator(ValuationConfig())
    >>> result = evaluator.evaluate(datetime.now(timezone.utc), price=98_000)
    >>> print(result.primary.status.value)

"""

import logging

__version__ = "0.2.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Power Law Gauge.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import power_law_gauge
        >>> power_law_gauge.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("power_law_gauge").setLevel(level)
    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
