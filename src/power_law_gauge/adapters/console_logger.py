"""
Console Audit Logger.

A simple audit logger that prints pipeline events to the console,
tagged with the run's correlation id.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from power_law_gauge.domain.entities import EvaluationResult
from power_law_gauge.domain.value_objects import PriceQuote


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log all events. If False, only results and anomalies.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_fetch_start(self, symbol: str, sources: list) -> None:
        """Log the start of a quote fetch."""
        if self._verbose:
            self._log("INFO", f"Fetching {symbol} from {', '.join(sources)}")

    def log_quote_resolved(self, quote: PriceQuote, duration_seconds: float) -> None:
        """Log a resolved quote."""
        if self._verbose:
            self._log(
                "INFO",
                f"{quote.symbol} = {quote.price} via {quote.source} "
                f"({duration_seconds:.3f}s)",
            )

    def log_evaluation(self, result: EvaluationResult) -> None:
        """Log the outcome of an evaluation."""
        primary = result.primary
        message = (
            f"Day {result.days:.0f}: fair {primary.fair_value:.2f}, "
            f"deviation {primary.deviation_pct:+.1f}%, {primary.status.value}"
        )
        if result.secondary is not None:
            message += f", cross-rate deviation {result.secondary.deviation_pct:+.1f}%"
        self._log("INFO", message)

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly or warning."""
        if context:
            details = ", ".join(f"{k}={v}" for k, v in sorted(context.items()))
            message = f"{message} ({details})"
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        """Internal logging method."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
