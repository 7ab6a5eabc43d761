"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List

import pytest

from power_law_gauge.adapters.console_logger import ConsoleAuditLogger
from power_law_gauge.adapters.metrics_collector import InMemoryMetricsCollector
from power_law_gauge.adapters.quote_chain import QuoteChain
from power_law_gauge.adapters.static_source import StaticQuoteSource
from power_law_gauge.config.models import (
    GENESIS,
    DEFAULT_SECONDARY_MODEL,
    ValuationConfig,
    WidgetConfig,
)
from power_law_gauge.valuation.evaluator import ValuationEvaluator
from tests.fixtures.sources import FailingQuoteSource

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    """Repository root (holds config/default.yaml)."""
    return PROJECT_ROOT


@pytest.fixture
def reference_now() -> datetime:
    """Standard evaluation instant for testing."""
    return datetime(2024, 12, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def day_5000() -> datetime:
    """Exactly 5000 days after genesis."""
    return GENESIS + timedelta(days=5000)


@pytest.fixture
def valuation_config() -> ValuationConfig:
    """Single-relation (BTC/USD) valuation config."""
    return ValuationConfig()


@pytest.fixture
def dual_valuation_config() -> ValuationConfig:
    """Two-relation (BTC/USD + BTC/gold) valuation config."""
    return ValuationConfig(secondary_model=DEFAULT_SECONDARY_MODEL)


@pytest.fixture
def evaluator(valuation_config: ValuationConfig) -> ValuationEvaluator:
    return ValuationEvaluator(valuation_config)


@pytest.fixture
def dual_evaluator(dual_valuation_config: ValuationConfig) -> ValuationEvaluator:
    return ValuationEvaluator(dual_valuation_config)


@pytest.fixture
def default_config() -> WidgetConfig:
    """Create default widget configuration."""
    return WidgetConfig()


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def btc_chain() -> QuoteChain:
    """BTC chain whose first source is down."""
    sources: List = [
        FailingQuoteSource("coingecko"),
        StaticQuoteSource("BTC", 60_000.0, name="coinbase", change_24h=1.5),
    ]
    return QuoteChain("BTC", sources)


@pytest.fixture
def gold_chain() -> QuoteChain:
    return QuoteChain("XAU", [StaticQuoteSource("XAU", 2_000.0, name="coingecko")])
