"""
Integration Tests - Filter Pipelines End to End.

These tests verify that the registry, built-in filters and configuration
work together.

Test Files:
    - test_filter_pipeline.py: Filter chains, error propagation, YAML pipelines
"""
