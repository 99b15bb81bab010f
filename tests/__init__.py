"""
Test Suite for Site Filters.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Pipeline tests across registry, filters and config
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/site_filters           # With coverage
"""
