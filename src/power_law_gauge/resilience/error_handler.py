"""
Error Handler - Retry and Circuit Breaking for Quote Sources.

Provides:
    - Retry with exponential backoff around a single source fetch
    - One circuit breaker per "<source>:<symbol>" name

Design Notes:
    - A widget refresh is short-lived; defaults are two attempts and a
      five second delay cap so a dead API cannot stall a refresh
    - An open circuit rejects immediately, letting QuoteChain fall
      through to the next source
    - Recovery timing uses a monotonic clock
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Type, TypeVar

from power_law_gauge.config.models import CircuitBreakerSettings, RetrySettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CircuitState(Enum):
    """Circuit breaker states."""
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class CircuitBreakerOpen(Exception):
    """Raised when a call is rejected by an open circuit."""

    def __init__(self, circuit_name: str, retry_in_seconds: float) -> None:
        super().__init__(
            f"Circuit {circuit_name} is open, retry in {retry_in_seconds:.0f}s"
        )
        self.circuit_name = circuit_name
        self.retry_in_seconds = retry_in_seconds


class RetryExhausted(Exception):
    """Raised when all retry attempts are exhausted."""


@dataclass
class RetryConfig:
    """Backoff policy: delay = base * exponential_base ** (attempt - 1), capped."""
    max_attempts: int = 2
    base_delay_seconds: float = 0.5
    max_delay_seconds: float = 5.0
    exponential_base: float = 2.0
    retryable_exceptions: Tuple[Type[BaseException], ...] = (Exception,)


@dataclass
class CircuitBreakerConfig:
    """When to open a circuit and how long to keep it open."""
    failure_threshold: int = 3
    recovery_timeout_seconds: float = 300.0
    success_threshold: int = 1


@dataclass
class Circuit:
    """Mutable state of one named circuit."""
    name: str
    config: CircuitBreakerConfig
    clock: Callable[[], float] = time.monotonic
    state: CircuitState = CircuitState.CLOSED
    failure_count: int = 0
    success_count: int = 0
    opened_at: Optional[float] = field(default=None)

    def before_call(self) -> None:
        """Reject while open; move to half-open once the timeout has passed."""
        if self.state is not CircuitState.OPEN:
            return
        elapsed = self.clock() - (self.opened_at or 0.0)
        remaining = self.config.recovery_timeout_seconds - elapsed
        if remaining > 0:
            raise CircuitBreakerOpen(self.name, remaining)
        self.state = CircuitState.HALF_OPEN
        self.success_count = 0
        logger.info(f"Circuit {self.name} half-open, trying one call")

    def record_success(self) -> None:
        if self.state is CircuitState.HALF_OPEN:
            self.success_count += 1
            if self.success_count < self.config.success_threshold:
                return
            logger.info(f"Circuit {self.name} closed after recovery")
        self.state = CircuitState.CLOSED
        self.failure_count = 0
        self.opened_at = None

    def record_failure(self) -> None:
        self.failure_count += 1
        if self.state is CircuitState.HALF_OPEN:
            self._open(f"Circuit {self.name} re-opened after failed recovery")
        elif self.failure_count >= self.config.failure_threshold:
            self._open(f"Circuit {self.name} opened after {self.failure_count} failures")

    def _open(self, message: str) -> None:
        self.state = CircuitState.OPEN
        self.opened_at = self.clock()
        self.success_count = 0
        logger.warning(message)


class ErrorHandler:
    """
    Retry and circuit breaking shared by all quote chains of a pipeline.

    Circuits are kept per name for the lifetime of the handler, so a
    long-running host that refreshes repeatedly skips a source that keeps
    failing until its recovery timeout has passed.
    """

    def __init__(
        self,
        retry_config: Optional[RetryConfig] = None,
        circuit_breaker_config: Optional[CircuitBreakerConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize error handler.

        Args:
            retry_config: Backoff policy
            circuit_breaker_config: Circuit thresholds
            sleep: Delay function between attempts
            clock: Monotonic time source for circuit recovery
        """
        self.retry_config = retry_config or RetryConfig()
        self.circuit_breaker_config = circuit_breaker_config or CircuitBreakerConfig()
        self._sleep = sleep
        self._clock = clock
        self._circuits: Dict[str, Circuit] = {}

    @classmethod
    def from_settings(
        cls,
        retry: RetrySettings,
        circuit_breaker: CircuitBreakerSettings,
    ) -> "ErrorHandler":
        """Build a handler from the YAML-backed settings models."""
        return cls(
            retry_config=RetryConfig(
                max_attempts=retry.max_attempts,
                base_delay_seconds=retry.base_delay_seconds,
                max_delay_seconds=retry.max_delay_seconds,
            ),
            circuit_breaker_config=CircuitBreakerConfig(
                failure_threshold=circuit_breaker.failure_threshold,
                recovery_timeout_seconds=circuit_breaker.recovery_timeout_seconds,
            ),
        )

    def retry(self, func: Callable[[], T], operation_name: str = "operation") -> T:
        """
        Call func until it succeeds or max_attempts is reached.

        Raises:
            RetryExhausted: Chained to the last failure
        """
        attempts = self.retry_config.max_attempts
        last_error: Optional[BaseException] = None

        for attempt in range(1, attempts + 1):
            try:
                result = func()
            except self.retry_config.retryable_exceptions as e:
                last_error = e
                if attempt == attempts:
                    break
                delay = self._calculate_delay(attempt)
                logger.warning(
                    f"{operation_name} failed (attempt {attempt}/{attempts}), "
                    f"retrying in {delay:.2f}s: {e}"
                )
                self._sleep(delay)
                continue

            if attempt > 1:
                logger.info(f"{operation_name} succeeded on attempt {attempt}")
            return result

        logger.error(f"{operation_name} failed after {attempts} attempts: {last_error}")
        raise RetryExhausted(
            f"{operation_name} failed after {attempts} attempts"
        ) from last_error

    def _calculate_delay(self, attempt: int) -> float:
        config = self.retry_config
        delay = config.base_delay_seconds * config.exponential_base ** (attempt - 1)
        return min(delay, config.max_delay_seconds)

    def with_circuit_breaker(self, func: Callable[[], T], circuit_name: str) -> T:
        """
        Call func through the named circuit.

        Raises:
            CircuitBreakerOpen: If the circuit is open; func is not called
        """
        circuit = self.circuit(circuit_name)
        circuit.before_call()
        try:
            result = func()
        except Exception:
            circuit.record_failure()
            raise
        circuit.record_success()
        return result

    def circuit(self, circuit_name: str) -> Circuit:
        """Get or create the named circuit."""
        if circuit_name not in self._circuits:
            self._circuits[circuit_name] = Circuit(
                circuit_name, self.circuit_breaker_config, clock=self._clock
            )
        return self._circuits[circuit_name]

    def get_circuit_state(self, circuit_name: str) -> CircuitState:
        return self.circuit(circuit_name).state

    def reset_circuit(self, circuit_name: str) -> None:
        """Forget a circuit's history (it starts closed again)."""
        if self._circuits.pop(circuit_name, None) is not None:
            logger.info(f"Circuit {circuit_name} reset to closed state")
