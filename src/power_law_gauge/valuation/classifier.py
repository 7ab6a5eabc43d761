"""
Band & Classifier.

Places a price relative to its power-law fair value:
    - support/resistance bounds from fixed multipliers
    - signed deviation percentage
    - one of five ordered statuses
    - normalized log-scale gauge position between support and resistance

Design Notes:
    - Status bands are checked cheapest first, first match wins
    - All comparisons are strict "<"
    - Display metadata lives in domain.entities.STATUS_STYLES
"""

from __future__ import annotations

import math

from power_law_gauge.domain.entities import StatusKind, ValuationResult
from power_law_gauge.domain.value_objects import ValuationBand
from power_law_gauge.validation.preconditions import (
    require_band_order,
    require_positive,
)

DEFAULT_LOWER_FAIR_RATIO = 0.7
DEFAULT_UPPER_FAIR_RATIO = 1.3


def deviation_pct(price: float, fair_value: float) -> float:
    """Signed percent difference of price from fair value."""
    return (price - fair_value) / fair_value * 100


def classify_status(
    price: float,
    fair_value: float,
    support: float,
    resist: float,
    lower_fair_ratio: float = DEFAULT_LOWER_FAIR_RATIO,
    upper_fair_ratio: float = DEFAULT_UPPER_FAIR_RATIO,
) -> StatusKind:
    """Map a price onto the cheap-to-expensive status bands."""
    if price < support:
        return StatusKind.DEEP_VALUE
    if price < fair_value * lower_fair_ratio:
        return StatusKind.UNDERVALUED
    if price < fair_value * upper_fair_ratio:
        return StatusKind.FAIR_VALUE
    if price < resist:
        return StatusKind.ABOVE_FAIR
    return StatusKind.OVERVALUED


def gauge_position(price: float, support: float, resist: float) -> float:
    """
    Where price sits between support (0.0) and resistance (1.0) on a log scale.

    Prices outside the band are clamped to the gauge ends.
    """
    log_support = math.log10(support)
    span = math.log10(resist) - log_support
    position = (math.log10(price) - log_support) / span
    return max(0.0, min(1.0, position))


def classify(
    price: float,
    fair_value: float,
    support_multiplier: float,
    resist_multiplier: float,
    lower_fair_ratio: float = DEFAULT_LOWER_FAIR_RATIO,
    upper_fair_ratio: float = DEFAULT_UPPER_FAIR_RATIO,
) -> ValuationResult:
    """
    Classify a price against a fair value.

    Args:
        price: Observed price, > 0
        fair_value: Model fair value, > 0
        support_multiplier: Support as a fraction of fair value, in (0, 1)
        resist_multiplier: Resistance as a multiple of fair value, > 1
        lower_fair_ratio: Below this fraction of fair value is "undervalued"
        upper_fair_ratio: At or above this multiple is "above fair"

    Returns:
        ValuationResult with bounds, deviation, status and gauge position

    Raises:
        PreconditionError: On non-positive inputs, inverted multipliers or
            a fair corridor outside the support-resistance range
    """
    price = require_positive(price, "price")
    fair_value = require_positive(fair_value, "fair_value")
    require_band_order(support_multiplier, resist_multiplier, lower_fair_ratio, upper_fair_ratio)

    band = ValuationBand(
        fair_value=fair_value,
        support_multiplier=support_multiplier,
        resist_multiplier=resist_multiplier,
    )

    return ValuationResult(
        price=price,
        fair_value=fair_value,
        support=band.support,
        resist=band.resist,
        deviation_pct=deviation_pct(price, fair_value),
        status=classify_status(
            price,
            fair_value,
            band.support,
            band.resist,
            lower_fair_ratio,
            upper_fair_ratio,
        ),
        gauge_position=gauge_position(price, band.support, band.resist),
    )
