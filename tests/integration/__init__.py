"""
Integration Tests - Full Refresh Tests.

These tests run the pipeline from quote chains to rendered output.
Static and failing quote sources, or a stubbed requests session, stand
in for the price APIs.

Test Files:
    - test_gauge_pipeline.py: Refresh workflow and config wiring
    - test_cli.py: Exit codes and printed widget
"""
