"""
Test Suite for Power Law Gauge.

Test organization:
    - unit/: Valuation core, config, quote sources, presentation
    - integration/: Pipeline refreshes and the command line
    - fixtures/: Shared test doubles

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
