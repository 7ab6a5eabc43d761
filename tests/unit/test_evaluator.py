"""
Unit Tests for ValuationEvaluator.

Test Aspects Covered:
    ✅ Business Logic: Single and dual relation evaluation
    ✅ Edge Cases: Missing reference price, substituted models
    ✅ Error Handling: Reference without secondary model, bad prices
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta

import pytest

from power_law_gauge.config.models import (
    GENESIS,
    BandConfig,
    ModelParameters,
    ValuationConfig,
)
from power_law_gauge.domain.entities import StatusKind
from power_law_gauge.valuation.evaluator import ValuationEvaluator
from power_law_gauge.valuation.power_law import fair_value
from power_law_gauge.validation.preconditions import PreconditionError


class TestSingleRelation:
    """Test cases for the BTC/USD-only evaluator."""

    def test_fair_value_at_day_5000(
        self,
        evaluator: ValuationEvaluator,
        day_5000: datetime,
    ) -> None:
        """
        SCENARIO: Evaluate 5000 days after genesis
        EXPECTED: Primary fair value matches the power-law formula
        """
        result = evaluator.evaluate(day_5000, price=30_000)

        expected = 10 ** (-17.01 + 5.82 * math.log10(5000))
        assert result.days == pytest.approx(5000)
        assert result.primary.fair_value == pytest.approx(expected)
        assert result.primary.support == pytest.approx(expected * 0.35)
        assert result.primary.resist == pytest.approx(expected * 3.5)

    def test_no_secondary(self, evaluator: ValuationEvaluator, day_5000: datetime) -> None:
        """
        SCENARIO: No reference price
        EXPECTED: secondary is None
        """
        result = evaluator.evaluate(day_5000, price=30_000)

        assert result.secondary is None
        assert result.secondary_deviation_pct is None
        assert evaluator.relation_count == 1

    def test_status_from_price(self, evaluator: ValuationEvaluator, day_5000: datetime) -> None:
        """
        SCENARIO: Price 10x fair value
        EXPECTED: OVERVALUED
        """
        fair = fair_value(5000, evaluator.config.primary_model)

        result = evaluator.evaluate(day_5000, price=fair * 10)

        assert result.primary.status == StatusKind.OVERVALUED

    def test_evaluated_at_recorded(self, evaluator: ValuationEvaluator, day_5000: datetime) -> None:
        result = evaluator.evaluate(day_5000, price=30_000)

        assert result.evaluated_at == day_5000

    def test_reference_without_secondary_model(
        self,
        evaluator: ValuationEvaluator,
        day_5000: datetime,
    ) -> None:
        """
        SCENARIO: Reference price passed to a single-relation evaluator
        EXPECTED: PreconditionError
        """
        with pytest.raises(PreconditionError) as exc_info:
            evaluator.evaluate(day_5000, price=60_000, reference_price=2_000)

        assert exc_info.value.field == "reference_price"

    def test_non_positive_price(self, evaluator: ValuationEvaluator, day_5000: datetime) -> None:
        with pytest.raises(PreconditionError):
            evaluator.evaluate(day_5000, price=0)

    def test_at_genesis(self, evaluator: ValuationEvaluator) -> None:
        """
        SCENARIO: Evaluated exactly at genesis (zero elapsed days)
        EXPECTED: PreconditionError from the model
        """
        with pytest.raises(PreconditionError):
            evaluator.evaluate(GENESIS, price=1.0)


class TestDualRelation:
    """Test cases for the BTC/USD + BTC/gold evaluator."""

    def test_cross_rate_deviation(
        self,
        dual_evaluator: ValuationEvaluator,
        day_5000: datetime,
    ) -> None:
        """
        SCENARIO: price 60000, reference 2000
        EXPECTED: cross rate 30, deviation against the secondary model
        """
        result = dual_evaluator.evaluate(day_5000, price=60_000, reference_price=2_000)

        secondary_fair = fair_value(5000, dual_evaluator.config.secondary_model)
        assert result.secondary is not None
        assert result.secondary.cross_rate == pytest.approx(30.0)
        assert result.secondary.fair_value == pytest.approx(secondary_fair)
        assert result.secondary_deviation_pct == pytest.approx(
            (30 - secondary_fair) / secondary_fair * 100
        )

    def test_secondary_does_not_gate_status(
        self,
        evaluator: ValuationEvaluator,
        dual_evaluator: ValuationEvaluator,
        day_5000: datetime,
    ) -> None:
        """
        SCENARIO: Same price with and without a reference relation
        EXPECTED: Identical primary result
        """
        single = evaluator.evaluate(day_5000, price=60_000)
        dual = dual_evaluator.evaluate(day_5000, price=60_000, reference_price=10.0)

        assert single.primary == dual.primary

    def test_reference_optional(
        self,
        dual_evaluator: ValuationEvaluator,
        day_5000: datetime,
    ) -> None:
        """
        SCENARIO: Dual evaluator without reference price
        EXPECTED: Primary only
        """
        result = dual_evaluator.evaluate(day_5000, price=60_000)

        assert dual_evaluator.relation_count == 2
        assert result.secondary is None

    @pytest.mark.parametrize("reference", [0, -2_000, float("nan")])
    def test_invalid_reference(
        self,
        dual_evaluator: ValuationEvaluator,
        day_5000: datetime,
        reference: float,
    ) -> None:
        with pytest.raises(PreconditionError):
            dual_evaluator.evaluate(day_5000, price=60_000, reference_price=reference)


class TestSubstitutedModels:
    """Alternate configuration objects."""

    def test_custom_model_and_bands(self) -> None:
        """
        SCENARIO: Flat model (b=0) with fair value 100 and tight bands
        EXPECTED: Fair value 100 regardless of date; tight bands applied
        """
        config = ValuationConfig(
            primary_model=ModelParameters(coefficient_a=2.0, coefficient_b=0.0),
            bands=BandConfig(
                support_multiplier=0.5,
                resist_multiplier=2.0,
                lower_fair_ratio=0.8,
                upper_fair_ratio=1.2,
            ),
        )
        evaluator = ValuationEvaluator(config)

        result = evaluator.evaluate(GENESIS + timedelta(days=1234), price=85.0)

        assert result.primary.fair_value == pytest.approx(100.0)
        assert result.primary.support == pytest.approx(50.0)
        assert result.primary.status == StatusKind.FAIR_VALUE

    def test_custom_genesis(self) -> None:
        """
        SCENARIO: Genesis moved forward by 1000 days
        EXPECTED: Day count shrinks by 1000
        """
        config = ValuationConfig(genesis=GENESIS + timedelta(days=1000))
        evaluator = ValuationEvaluator(config)

        result = evaluator.evaluate(GENESIS + timedelta(days=5000), price=30_000)

        assert result.days == pytest.approx(4000)

    def test_default_config(self) -> None:
        """
        SCENARIO: No config passed
        EXPECTED: Default BTC/USD model
        """
        evaluator = ValuationEvaluator()

        assert evaluator.config.primary_model.coefficient_b == 5.82
        assert evaluator.config.bands.support_multiplier == 0.35
