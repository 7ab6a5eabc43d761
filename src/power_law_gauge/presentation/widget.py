"""
Widget Layout.

Turns a GaugeSnapshot into a WidgetView (text, colors, gauge segments)
and renders that view as plain text for a terminal.

Layout:
    header     logo, title, status glyph
    price      spot price, optional 24h change
    gauge      green 33% / blue 34% / red remainder, marker at gauge position
    info       fair value and deviation
    reference  cross rate and its deviation (dual-relation only)
    status     status label in status color
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from power_law_gauge.config.models import DisplayConfig
from power_law_gauge.pipeline.gauge_pipeline import GaugeSnapshot
from power_law_gauge.presentation.formatting import (
    format_change,
    format_deviation,
    format_price,
    format_ratio,
    round_half_up,
)

BACKGROUND = "#0d0d0d"
TEXT = "#ffffff"
LOGO = "₿"
LOGO_COLOR = "#f7931a"
GREEN = "#00d395"
BLUE = "#4da6ff"
RED = "#ff6b6b"

_SEGMENT_CHARS = {GREEN: "░", BLUE: "▒", RED: "▓"}
MARKER_CHAR = "●"


class GaugeSegment(BaseModel):
    color: str
    width: int = Field(..., ge=0)

    model_config = {"frozen": True}


class TextLine(BaseModel):
    text: str
    color: str = TEXT

    model_config = {"frozen": True}


class WidgetView(BaseModel):
    """Everything a renderer needs; no valuation logic left to do."""

    title: str
    glyph: str
    price: TextLine
    change: Optional[TextLine] = None
    segments: List[GaugeSegment]
    marker_index: int = Field(..., ge=0)
    fair: TextLine
    deviation: TextLine
    reference: Optional[TextLine] = None
    status: TextLine
    url: str
    background: str = BACKGROUND

    model_config = {"frozen": True}

    @property
    def gauge_width(self) -> int:
        return sum(segment.width for segment in self.segments)


def _deviation_color(deviation_pct: float) -> str:
    # Above fair is "expensive" (red), below is "cheap" (green)
    return RED if deviation_pct >= 0 else GREEN


def gauge_segments(width: int) -> List[GaugeSegment]:
    green = round_half_up(width * 0.33)
    blue = round_half_up(width * 0.34)
    return [
        GaugeSegment(color=GREEN, width=green),
        GaugeSegment(color=BLUE, width=blue),
        GaugeSegment(color=RED, width=width - green - blue),
    ]


def build_view(snapshot: GaugeSnapshot, display: Optional[DisplayConfig] = None) -> WidgetView:
    """Lay out a snapshot for display."""
    display = display or DisplayConfig()
    evaluation = snapshot.evaluation
    primary = evaluation.primary
    style = primary.status.style

    change = None
    if snapshot.quote.change_24h is not None:
        change_pct = snapshot.quote.change_24h
        change = TextLine(
            text=format_change(change_pct),
            color=GREEN if change_pct >= 0 else RED,
        )

    reference = None
    if evaluation.secondary is not None and snapshot.reference_quote is not None:
        secondary = evaluation.secondary
        reference = TextLine(
            text=(
                f"{snapshot.quote.symbol}/{snapshot.reference_quote.symbol}: "
                f"{format_ratio(secondary.cross_rate)} "
                f"({format_deviation(secondary.deviation_pct)})"
            ),
            color=_deviation_color(secondary.deviation_pct),
        )

    width = display.gauge_width
    marker = min(round_half_up(primary.gauge_position * width), width - 1)

    return WidgetView(
        title=display.title,
        glyph=style.glyph,
        price=TextLine(text=format_price(primary.price)),
        change=change,
        segments=gauge_segments(width),
        marker_index=marker,
        fair=TextLine(text=f"Fair: {format_price(primary.fair_value)}", color=BLUE),
        deviation=TextLine(
            text=format_deviation(primary.deviation_pct),
            color=_deviation_color(primary.deviation_pct),
        ),
        reference=reference,
        status=TextLine(text=style.label, color=style.color),
        url=display.url,
    )


def render_gauge(view: WidgetView) -> str:
    cells: List[str] = []
    for segment in view.segments:
        cells.extend(_SEGMENT_CHARS.get(segment.color, "-") * segment.width)
    cells[view.marker_index] = MARKER_CHAR
    return "".join(cells)


def render_text(view: WidgetView) -> str:
    """Plain-text rendering, one widget row per line."""
    width = view.gauge_width
    header = f"{LOGO} {view.title}"
    lines = [
        header + view.glyph.rjust(max(width - len(header), 1)),
        view.price.text,
    ]
    if view.change is not None:
        lines.append(view.change.text)
    lines.append(render_gauge(view))
    lines.append(view.fair.text + view.deviation.text.rjust(max(width - len(view.fair.text), 1)))
    if view.reference is not None:
        lines.append(view.reference.text)
    lines.append(view.status.text)
    return "\n".join(lines)
