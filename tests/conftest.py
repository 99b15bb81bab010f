"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest

from site_filters.domain.entities import Item, ItemRep, Layout, SiteConfig
from site_filters.filters import Filter, register_builtin_filters
from site_filters.registry.filter_registry import FilterRegistry


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding fixture files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def registry(monkeypatch: pytest.MonkeyPatch) -> FilterRegistry:
    """
    Fresh registry installed as Filter.registry for the duration of a test.

    Filter subclasses declared inside a test register here instead of in
    the process-wide registry.
    """
    isolated = FilterRegistry()
    monkeypatch.setattr(Filter, "registry", isolated)
    return isolated


@pytest.fixture
def builtin_registry() -> FilterRegistry:
    """Standalone registry holding only the built-in filters."""
    return register_builtin_filters(FilterRegistry())


@pytest.fixture
def page() -> Item:
    """A sample page item."""
    return Item(
        identifier="/about/",
        content="# $title\n\nWritten by $author.",
        attributes={"title": "About", "author": "Denis"},
    )


@pytest.fixture
def page_rep() -> ItemRep:
    """Default rep of the sample page."""
    return ItemRep(name="default", item_identifier="/about/")


@pytest.fixture
def layout() -> Layout:
    """A sample layout."""
    return Layout(identifier="/default/", content="<html>$content</html>")


@pytest.fixture
def site_config() -> SiteConfig:
    """Default site configuration."""
    return SiteConfig()


@pytest.fixture
def item_assigns(page: Item, page_rep: ItemRep, site_config: SiteConfig) -> Dict[str, Any]:
    """Assigns as passed when filtering an item rep."""
    return {"item": page, "item_rep": page_rep, "config": site_config}
