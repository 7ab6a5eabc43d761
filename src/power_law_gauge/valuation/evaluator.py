"""
Valuation Evaluator - composes time-base, model and classifier.

One evaluator handles one or two modeled relations:
    - primary: asset price in the quote currency (status + gauge)
    - secondary (optional): asset price in a reference asset, e.g. gold;
      only a deviation percentage is computed, it never affects status
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from power_law_gauge.config.models import ValuationConfig
from power_law_gauge.domain.entities import CrossRateResult, EvaluationResult
from power_law_gauge.valuation.classifier import classify, deviation_pct
from power_law_gauge.valuation.power_law import fair_value
from power_law_gauge.valuation.time_base import elapsed_days
from power_law_gauge.validation.preconditions import (
    PreconditionError,
    require_positive,
)

logger = logging.getLogger(__name__)


class ValuationEvaluator:
    """Pure evaluator; identical inputs give identical results."""

    def __init__(self, config: Optional[ValuationConfig] = None) -> None:
        """
        Initialize evaluator.

        Args:
            config: Genesis, model coefficients and bands. Defaults to
                    the single-relation BTC/USD model.
        """
        self.config = config or ValuationConfig()

    @property
    def relation_count(self) -> int:
        return self.config.relation_count

    def evaluate(
        self,
        now: datetime,
        price: float,
        reference_price: Optional[float] = None,
    ) -> EvaluationResult:
        """
        Evaluate a live price at a point in time.

        Args:
            now: Evaluation instant (naive values are taken as UTC)
            price: Primary asset price in the quote currency
            reference_price: Reference asset price in the same currency

        Returns:
            EvaluationResult with the primary classification and, when a
            reference price is given, the cross-rate deviation

        Raises:
            PreconditionError: On non-positive inputs, or a reference price
                               without a configured secondary model
        """
        bands = self.config.bands
        days = elapsed_days(now, self.config.genesis)

        primary = classify(
            price,
            fair_value(days, self.config.primary_model),
            bands.support_multiplier,
            bands.resist_multiplier,
            bands.lower_fair_ratio,
            bands.upper_fair_ratio,
        )

        secondary = None
        if reference_price is not None:
            secondary = self._evaluate_cross_rate(days, price, reference_price)

        logger.debug(
            f"Evaluated day {days:.1f}: price={price} fair={primary.fair_value:.2f} "
            f"status={primary.status.value}"
        )

        return EvaluationResult(
            evaluated_at=now,
            days=days,
            primary=primary,
            secondary=secondary,
        )

    def _evaluate_cross_rate(
        self,
        days: float,
        price: float,
        reference_price: float,
    ) -> CrossRateResult:
        """Price in units of the reference asset against its own trend line."""
        if self.config.secondary_model is None:
            raise PreconditionError(
                "reference_price given but no secondary_model is configured",
                field="reference_price",
            )
        reference_price = require_positive(reference_price, "reference_price")

        cross_rate = price / reference_price
        secondary_fair = fair_value(days, self.config.secondary_model)

        return CrossRateResult(
            reference_price=reference_price,
            cross_rate=cross_rate,
            fair_value=secondary_fair,
            deviation_pct=deviation_pct(cross_rate, secondary_fair),
        )
