"""
Registry Module - Filter Lookup by Identifier.

This module provides the registry that maps filter identifiers to
filter classes, enabling config-driven filter selection and custom
filter registration.

Components:
    - FilterRegistry: Central registry for filter classes
    - FilterInfo: Metadata about a registered identifier
    - UnknownFilterError: Raised by require() for unknown identifiers
    - default_registry: Process-wide registry used by Filter.identifier()
"""

from site_filters.registry.filter_registry import (
    FilterInfo,
    FilterRegistry,
    FilterRegistryProtocol,
    UnknownFilterError,
    default_registry,
)

__all__ = [
    "FilterRegistry",
    "FilterInfo",
    "FilterRegistryProtocol",
    "UnknownFilterError",
    "default_registry",
]
