"""
Valuation Package - The Pure Core.

    - time_base: elapsed days since genesis
    - power_law: fair value from the log-log trend line
    - classifier: bands, deviation, status, gauge position
    - evaluator: composition for one or two relations

Nothing in this package performs I/O.
"""

from power_law_gauge.valuation.classifier import (
    classify,
    classify_status,
    deviation_pct,
    gauge_position,
)
from power_law_gauge.valuation.evaluator import ValuationEvaluator
from power_law_gauge.valuation.power_law import fair_value
from power_law_gauge.valuation.time_base import elapsed_days

__all__ = [
    "ValuationEvaluator",
    "classify",
    "classify_status",
    "deviation_pct",
    "elapsed_days",
    "fair_value",
    "gauge_position",
]
