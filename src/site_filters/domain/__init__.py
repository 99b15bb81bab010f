"""
Domain Layer - Content Entities and Value Objects.

This package contains the small content model filters operate on.
Only the attributes filters and diagnostics need are modelled; loading
a site from disk is not part of this package.

Entities:
    - Item: A unit of site content (page, asset, ...)
    - ItemRep: One rendered representation of an item
    - Layout: A layout that items are laid out in
    - SiteConfig: Site-wide settings passed to filters as an assign

Value Objects:
    - StageResult: Outcome of a single filter step
    - FilterRunResult: Outcome of a whole filter pipeline
"""

from site_filters.domain.entities import Item, ItemRep, Layout, SiteConfig
from site_filters.domain.value_objects import FilterRunResult, StageResult

__all__ = [
    "Item",
    "ItemRep",
    "Layout",
    "SiteConfig",
    "StageResult",
    "FilterRunResult",
]
