"""
Test Fixtures - Shared Test Doubles.

This package contains reusable test helpers:
    - sources.FailingQuoteSource: quote source that always fails

Usage:
    Import directly in test files; pytest fixtures live in conftest.py.
"""
