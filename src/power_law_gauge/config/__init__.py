"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Power Law Gauge:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - WidgetConfig: Root configuration object
    - ValuationConfig: Genesis instant, model coefficients, bands
    - QuotesConfig: Quote feeds for the primary and reference asset
    - RetrySettings / CircuitBreakerSettings: Resilience policy
    - DisplayConfig: Widget presentation

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. "dual" for the gold relation)
"""

from power_law_gauge.config.loader import ConfigLoader, load_config
from power_law_gauge.config.models import (
    GENESIS,
    BandConfig,
    DisplayConfig,
    FeedConfig,
    ModelParameters,
    QuotesConfig,
    ValuationConfig,
    WidgetConfig,
)

__all__ = [
    "GENESIS",
    "BandConfig",
    "ConfigLoader",
    "DisplayConfig",
    "FeedConfig",
    "ModelParameters",
    "QuotesConfig",
    "ValuationConfig",
    "WidgetConfig",
    "load_config",
]
