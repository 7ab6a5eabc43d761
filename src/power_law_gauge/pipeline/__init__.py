"""
Pipeline Package - Orchestration.

Components:
    - GaugePipeline: Fetch -> validate -> evaluate for one refresh
    - GaugeSnapshot: Immutable output of a refresh
    - create_pipeline: Wiring from WidgetConfig

Design Principles:
    - All dependencies injected via constructor
    - Stateless between refreshes (circuit state lives in the ErrorHandler)
"""

from power_law_gauge.pipeline.factory import build_sources, create_pipeline
from power_law_gauge.pipeline.gauge_pipeline import GaugePipeline, GaugeSnapshot

__all__ = ["GaugePipeline", "GaugeSnapshot", "build_sources", "create_pipeline"]
