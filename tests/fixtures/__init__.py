"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration with three pipelines
    - profiles/production.yaml: Profile overlay for the sample config
    - plugins.py: Filter classes loaded lazily by import path
"""
