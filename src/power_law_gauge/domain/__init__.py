"""
Domain Layer - Core Value Types.

This package contains the domain model for the Power Law Gauge.
All types here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - StatusKind: Closed, ordered valuation status enumeration
    - ValuationResult: Classification of a price against fair value
    - CrossRateResult: Secondary (reference asset) relation
    - EvaluationResult: Complete evaluator output

Value Objects:
    - ValuationBand: Support/resistance around a fair value
    - PriceQuote: A spot price resolved by a quote source

Design Principles:
    - Immutable (frozen models)
    - Display metadata as a lookup table, not branching logic
    - No infrastructure dependencies
"""

from power_law_gauge.domain.entities import (
    STATUS_STYLES,
    CrossRateResult,
    EvaluationResult,
    StatusKind,
    StatusStyle,
    ValuationResult,
)
from power_law_gauge.domain.value_objects import PriceQuote, ValuationBand

__all__ = [
    "STATUS_STYLES",
    "CrossRateResult",
    "EvaluationResult",
    "PriceQuote",
    "StatusKind",
    "StatusStyle",
    "ValuationBand",
    "ValuationResult",
]
