"""
Filters Package - Filter Base Class and Built-in Filters.

Importing this package registers the built-in filters in the default
registry, so Filter.named("markdown") works out of the box.

Filters:
    - Filter: Base class, holds assigns and defines run()
    - MarkdownFilter: Markdown to HTML ("markdown", "bluecloth")
    - TemplateFilter: $variable substitution ("template")

Design Principles:
    - One filter instance per filtering operation
    - Context injected via constructor assigns
    - Filters never write to global state
"""

from __future__ import annotations

from typing import Dict, Tuple, Type, TypeVar

from site_filters.filters.base import (
    Filter,
    FilterError,
    InvalidAssignError,
    describe_assigns,
    filter_params,
)
from site_filters.filters.markdown_filter import MarkdownFilter
from site_filters.filters.template_filter import TemplateFilter
from site_filters.registry.filter_registry import FilterRegistryProtocol

RegistryT = TypeVar("RegistryT", bound=FilterRegistryProtocol)

BUILTIN_FILTERS: Dict[Type[Filter], Tuple[str, ...]] = {
    MarkdownFilter: ("markdown", "bluecloth"),
    TemplateFilter: ("template",),
}


def register_builtin_filters(registry: RegistryT) -> RegistryT:
    """Register the built-in filters into the given registry and return it."""
    for filter_class, identifiers in BUILTIN_FILTERS.items():
        registry.register(filter_class, *identifiers)
    return registry


__all__ = [
    "Filter",
    "FilterError",
    "InvalidAssignError",
    "describe_assigns",
    "filter_params",
    "MarkdownFilter",
    "TemplateFilter",
    "BUILTIN_FILTERS",
    "register_builtin_filters",
]
