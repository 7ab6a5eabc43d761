"""
Validation Package - Input Validation and Preconditions.

This package provides validation for:
    - QuoteValidator: Validate quotes before evaluation
    - PreconditionError: Domain violations inside the valuation core

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
"""

from power_law_gauge.validation.preconditions import (
    PreconditionError,
    require_band_order,
    require_positive,
)
from power_law_gauge.validation.quote_validator import (
    QuoteValidator,
    ValidationError,
)

__all__ = [
    "PreconditionError",
    "QuoteValidator",
    "ValidationError",
    "require_band_order",
    "require_positive",
]
