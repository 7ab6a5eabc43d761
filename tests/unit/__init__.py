"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_time_base.py, test_power_law.py, test_classifier.py: Valuation core
    - test_evaluator.py: One- and two-relation evaluation
    - test_valuation_properties.py: Property-based checks (hypothesis)
    - test_config_loader.py, test_config_models.py: Configuration
    - test_http_sources.py, test_quote_chain.py: Quote retrieval
    - test_formatting.py, test_widget.py: Presentation
"""
