"""
Resilience Package - Error Handling for Quote Retrieval.

This package provides resilience patterns used by the quote chain:
    - ErrorHandler: Retry and per-source circuit breaker

Design Principles:
    - Retry with backoff for transient errors
    - Circuit breaker for persistent failures
    - Never used by the valuation core itself
"""

from power_law_gauge.resilience.error_handler import (
    ErrorHandler,
    CircuitBreakerOpen,
    CircuitState,
    RetryExhausted,
)

__all__ = ["ErrorHandler", "CircuitBreakerOpen", "CircuitState", "RetryExhausted"]
