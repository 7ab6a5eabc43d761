"""
Quote Validator - Validate Resolved Quotes Before Evaluation.

Validates quotes handed over by the retrieval layer:
    - Price is finite and positive
    - Price within a plausible range for the asset
    - Quote is not dated in the future

Design Notes:
    - Fail-fast principle
    - Clear error messages
    - Collects all problems before raising
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from power_law_gauge.domain.value_objects import PriceQuote

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when quote validation fails."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class QuoteValidator:
    """
    Validates quotes before they reach the valuation core.

    Validates:
        - Price is finite and within [min_price, max_price]
        - fetched_at is not in the future (beyond a small clock skew)
    """

    def __init__(
        self,
        min_price: float = 1e-9,
        max_price: float = 1e12,
        max_clock_skew: timedelta = timedelta(minutes=5),
    ) -> None:
        """
        Initialize quote validator.

        Args:
            min_price: Smallest accepted price
            max_price: Largest accepted price
            max_clock_skew: Tolerance for quotes stamped slightly ahead
        """
        self.min_price = min_price
        self.max_price = max_price
        self.max_clock_skew = max_clock_skew

    def validate(self, quote: PriceQuote, now: Optional[datetime] = None) -> None:
        """
        Validate a quote.

        Args:
            quote: The resolved quote
            now: Reference time (defaults to current UTC time)

        Raises:
            ValidationError: If validation fails
        """
        errors: List[str] = []

        price_error = self._validate_price(quote.price)
        if price_error:
            errors.append(price_error)

        time_error = self._validate_timestamp(quote.fetched_at, now)
        if time_error:
            errors.append(time_error)

        if errors:
            error_message = f"{quote.symbol} from {quote.source}: " + "; ".join(errors)
            logger.error(f"Quote validation failed: {error_message}")
            raise ValidationError(error_message)

        logger.debug(f"Quote validated: {quote.symbol}={quote.price} ({quote.source})")

    def _validate_price(self, price: float) -> Optional[str]:
        """Validate the price value."""
        if not math.isfinite(price):
            return f"Price {price} is not finite"

        if price < self.min_price or price > self.max_price:
            return (
                f"Price {price} outside plausible range "
                f"[{self.min_price}, {self.max_price}]"
            )

        return None

    def _validate_timestamp(
        self,
        fetched_at: datetime,
        now: Optional[datetime],
    ) -> Optional[str]:
        """Validate the quote timestamp."""
        now = now or datetime.now(timezone.utc)
        if fetched_at.tzinfo is None:
            fetched_at = fetched_at.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        if fetched_at > now + self.max_clock_skew:
            return f"Quote time {fetched_at.isoformat()} is in the future"

        return None

    def validate_price_only(self, price: float) -> None:
        """
        Validate just the price (utility method).

        Args:
            price: Price to validate

        Raises:
            ValidationError: If price is invalid
        """
        error = self._validate_price(price)
        if error:
            raise ValidationError(error, field="price")
