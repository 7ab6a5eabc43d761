"""
Presentation Package - Formatting and Widget Layout.

Consumes evaluation output only; never computes valuation numbers.
"""

from power_law_gauge.presentation.formatting import (
    format_change,
    format_deviation,
    format_price,
    format_ratio,
)
from power_law_gauge.presentation.widget import WidgetView, build_view, render_text

__all__ = [
    "WidgetView",
    "build_view",
    "format_change",
    "format_deviation",
    "format_price",
    "format_ratio",
    "render_text",
]
