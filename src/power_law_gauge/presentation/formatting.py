"""
Display formatting for prices, percentages and ratios.

Price rules:
    - below 1,000: two decimals          ($812.35)
    - 1,000 and above: rounded, grouped  ($52,000)
    - 1,000,000 and above: millions      ($1.25M)
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (round() would round to even)."""
    return int(math.floor(value + 0.5))


def to_fixed(value: float, places: int) -> str:
    """Fixed decimals, halves rounded away from zero on the exact binary value."""
    quantum = Decimal(1).scaleb(-places)
    # + 0.0 turns -0.0 into 0.0
    return str(Decimal(value + 0.0).quantize(quantum, rounding=ROUND_HALF_UP))


def format_price(price: float, currency_symbol: str = "$") -> str:
    if price >= 1_000_000:
        return f"{currency_symbol}{price / 1_000_000:.2f}M"
    if price >= 1_000:
        return f"{currency_symbol}{round_half_up(price):,}"
    return f"{currency_symbol}{price:.2f}"


def format_deviation(deviation_pct: float) -> str:
    """Signed whole percent, e.g. "+4%" or "-37%"."""
    sign = "+" if deviation_pct >= 0 else ""
    return f"{sign}{to_fixed(deviation_pct, 0)}%"


def format_change(change_pct: float) -> str:
    """24h change with one decimal, e.g. "+1.2% (24h)"."""
    sign = "+" if change_pct >= 0 else ""
    return f"{sign}{to_fixed(change_pct, 1)}% (24h)"


def format_ratio(ratio: float) -> str:
    """Cross rate: more decimals for small ratios, grouping for large ones."""
    if ratio >= 1_000:
        return f"{ratio:,.0f}"
    if ratio >= 10:
        return f"{ratio:.2f}"
    return f"{ratio:.3f}"
