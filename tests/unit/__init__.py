"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_filter_base.py: Assigns, run() contract, filename diagnostics
    - test_filter_registry.py: Identifier registration and lookup
    - test_markdown_filter.py: Markdown rendering
    - test_template_filter.py: Variable substitution
    - test_config_loader.py: Configuration loading/validation
    - test_domain_entities.py: Content entities and result objects
"""
