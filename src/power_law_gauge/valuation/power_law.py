"""
Power-law model.

    log10(fair_value) = a + b * log10(days)

The coefficients are tuning constants from configuration; nothing here
fits them.
"""

from __future__ import annotations

import math

from power_law_gauge.config.models import ModelParameters
from power_law_gauge.validation.preconditions import require_positive


def fair_value(days: float, params: ModelParameters) -> float:
    """
    Evaluate the power-law trend line at `days` since genesis.

    Args:
        days: Elapsed days, must be > 0
        params: Regression coefficients

    Returns:
        Fair value in the model's quote currency

    Raises:
        PreconditionError: If days is not a positive finite number
    """
    days = require_positive(days, "days")
    exponent = params.coefficient_a + params.coefficient_b * math.log10(days)
    return 10 ** exponent
