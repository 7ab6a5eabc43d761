"""
Preconditions for the valuation core.

The core only accepts already-validated positive numbers. A violation
here is a wiring or configuration defect, so it raises immediately
instead of degrading.
"""

from __future__ import annotations

import math


class PreconditionError(ValueError):
    """Raised when the valuation core is called outside its domain."""

    def __init__(self, message: str, field: str = "") -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def require_positive(value: float, name: str) -> float:
    """Return value unchanged if it is a finite number > 0."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise PreconditionError(f"{name} must be a number, got {value!r}", field=name)
    if not math.isfinite(value) or value <= 0:
        raise PreconditionError(f"{name} must be finite and > 0, got {value}", field=name)
    return float(value)


def require_band_order(
    support_multiplier: float,
    resist_multiplier: float,
    lower_fair_ratio: float,
    upper_fair_ratio: float,
) -> None:
    """
    Support must sit below fair value and resistance above it, with the
    fair-value corridor strictly between them:
    support < lower_fair_ratio < upper_fair_ratio < resist.
    """
    if not 0 < support_multiplier < 1:
        raise PreconditionError(
            f"support_multiplier must be in (0, 1), got {support_multiplier}",
            field="support_multiplier",
        )
    if resist_multiplier <= 1:
        raise PreconditionError(
            f"resist_multiplier must be > 1, got {resist_multiplier}",
            field="resist_multiplier",
        )
    if not support_multiplier < lower_fair_ratio < upper_fair_ratio < resist_multiplier:
        raise PreconditionError(
            "fair ratios must satisfy support_multiplier < lower_fair_ratio "
            f"< upper_fair_ratio < resist_multiplier, got {support_multiplier}, "
            f"{lower_fair_ratio}, {upper_fair_ratio}, {resist_multiplier}",
            field="fair_ratios",
        )
