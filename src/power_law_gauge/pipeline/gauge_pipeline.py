"""
Gauge Pipeline - Main Orchestrator.

The GaugePipeline coordinates one widget refresh:
    1. Resolve the primary (and optional reference) quote
    2. Validate quotes
    3. Evaluate against the power-law model
    4. Record metrics and audit events
"""

from __future__ import annotations

import logging
import time
import uuid
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field

from power_law_gauge.adapters.quote_chain import QuotesUnavailable
from power_law_gauge.domain.entities import EvaluationResult
from power_law_gauge.domain.value_objects import PriceQuote
from power_law_gauge.valuation.evaluator import ValuationEvaluator
from power_law_gauge.validation.quote_validator import ValidationError

logger = logging.getLogger(__name__)


class QuoteChainProtocol(Protocol):
    """Protocol for quote chains."""

    symbol: str

    @property
    def source_names(self) -> List[str]:
        ...

    def fetch(self) -> PriceQuote:
        ...


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_fetch_start(self, symbol: str, sources: list) -> None:
        ...

    def log_quote_resolved(self, quote: PriceQuote, duration_seconds: float) -> None:
        ...

    def log_evaluation(self, result: EvaluationResult) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_gauge(
        self, name: str, value: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


class QuoteValidatorProtocol(Protocol):
    """Protocol for quote validators."""

    def validate(self, quote: PriceQuote, now: Optional[datetime] = None) -> None:
        ...


class GaugeSnapshot(BaseModel):
    """Everything one refresh produced, ready for rendering."""

    correlation_id: str
    evaluation: EvaluationResult
    quote: PriceQuote
    reference_quote: Optional[PriceQuote] = None
    duration_seconds: float = Field(..., ge=0)
    metrics: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class GaugePipeline:
    """Main orchestrator for a widget refresh."""

    def __init__(
        self,
        primary_chain: QuoteChainProtocol,
        evaluator: ValuationEvaluator,
        audit_logger: AuditLoggerProtocol,
        metrics_collector: MetricsCollectorProtocol,
        reference_chain: Optional[QuoteChainProtocol] = None,
        quote_validator: Optional[QuoteValidatorProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            primary_chain: Resolves the primary asset price
            evaluator: Valuation core
            audit_logger: For audit trail
            metrics_collector: For performance metrics
            reference_chain: Resolves the reference asset price (optional)
            quote_validator: Validates quotes before evaluation (optional)

        Raises:
            ValueError: If a reference chain is given to a single-relation evaluator
        """
        if reference_chain is not None and evaluator.relation_count < 2:
            raise ValueError(
                "reference_chain requires an evaluator with a secondary model"
            )
        self.primary_chain = primary_chain
        self.evaluator = evaluator
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.reference_chain = reference_chain
        self.quote_validator = quote_validator

    def run(self, now: Optional[datetime] = None) -> GaugeSnapshot:
        """
        Execute one refresh.

        Args:
            now: Evaluation instant (defaults to current UTC time)

        Returns:
            GaugeSnapshot with evaluation and the quotes it was based on

        Raises:
            QuotesUnavailable: If the primary price could not be resolved
            ValidationError: If the primary quote fails validation
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)
        now = now or datetime.now(timezone.utc)

        # 1. Resolve quotes
        quote, reference_quote = self._fetch_quotes()

        # 2. Validate quotes
        if self.quote_validator:
            self.quote_validator.validate(quote, now)
            if reference_quote is not None:
                try:
                    self.quote_validator.validate(reference_quote, now)
                except ValidationError as e:
                    self.audit_logger.log_anomaly(
                        f"Reference quote rejected, skipping cross rate: {e}",
                        severity="WARNING",
                    )
                    reference_quote = None

        # 3. Evaluate
        evaluation = self.evaluator.evaluate(
            now,
            quote.price,
            reference_quote.price if reference_quote is not None else None,
        )
        self.audit_logger.log_evaluation(evaluation)

        # 4. Record metrics
        total_duration = time.perf_counter() - start_time
        self.metrics_collector.record_timing("refresh_total_seconds", total_duration)
        self.metrics_collector.record_gauge(
            "deviation_pct", evaluation.primary.deviation_pct
        )
        self.metrics_collector.record_gauge(
            "gauge_position", evaluation.primary.gauge_position
        )

        return GaugeSnapshot(
            correlation_id=correlation_id,
            evaluation=evaluation,
            quote=quote,
            reference_quote=reference_quote,
            duration_seconds=total_duration,
            metrics=self.metrics_collector.get_metrics(),
        )

    def _fetch_quotes(self) -> tuple[PriceQuote, Optional[PriceQuote]]:
        """Fetch primary and reference quotes, concurrently when both are needed."""
        if self.reference_chain is None:
            return self._fetch(self.primary_chain), None

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="quote") as pool:
            primary_future = pool.submit(self._fetch, self.primary_chain)
            reference_future = pool.submit(self._fetch, self.reference_chain)

            quote = primary_future.result()
            try:
                reference_quote: Optional[PriceQuote] = reference_future.result()
            except QuotesUnavailable as e:
                # The cross rate is informational; degrade to one relation
                self.audit_logger.log_anomaly(
                    f"Reference quote unavailable, skipping cross rate: {e}",
                    severity="WARNING",
                    context={"symbol": e.symbol},
                )
                self.metrics_collector.record_count(
                    "quote_failures_total", 1, {"symbol": e.symbol}
                )
                reference_quote = None

        return quote, reference_quote

    def _fetch(self, chain: QuoteChainProtocol) -> PriceQuote:
        """Resolve one chain with timing and audit."""
        fetch_start = time.perf_counter()
        self.audit_logger.log_fetch_start(chain.symbol, chain.source_names)

        try:
            quote = chain.fetch()
        except QuotesUnavailable:
            if chain is self.primary_chain:
                self.metrics_collector.record_count(
                    "quote_failures_total", 1, {"symbol": chain.symbol}
                )
            raise

        duration = time.perf_counter() - fetch_start
        self.audit_logger.log_quote_resolved(quote, duration)
        self.metrics_collector.record_timing(
            "quote_fetch_seconds",
            duration,
            {"symbol": quote.symbol, "source": quote.source},
        )
        return quote
