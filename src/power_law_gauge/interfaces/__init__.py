"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for
external dependencies. Following the Dependency Inversion Principle, the
pipeline depends on these abstractions, not on concrete implementations.

Protocols:
    - QuoteSource: Spot-price retrieval abstraction
"""

from power_law_gauge.interfaces.quote_source import QuoteSource, QuoteSourceError

__all__ = ["QuoteSource", "QuoteSourceError"]
