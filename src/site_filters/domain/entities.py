"""
Core Domain Entities.

Content items, their representations and layouts, as seen by filters.
Filters receive these as assigns and read them; they never mutate them.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


def normalize_identifier(value: str) -> str:
    """Identifiers always start and end with a slash: /about/ ."""
    stripped = value.strip("/")
    return f"/{stripped}/" if stripped else "/"


class Item(BaseModel):
    """A unit of site content."""

    identifier: str = Field(..., description="Path-like identifier, e.g. /about/")
    content: str = Field(default="", description="Raw, unfiltered content")
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("identifier")
    @classmethod
    def check_identifier(cls, v: str) -> str:
        return normalize_identifier(v)

    def __getitem__(self, key: str) -> Any:
        return self.attributes.get(key)


class ItemRep(BaseModel):
    """One compiled representation of an item (default, print, ...)."""

    name: str = Field(default="default", min_length=1)
    item_identifier: str = Field(..., description="Identifier of the owning item")

    model_config = {"frozen": True}


class Layout(BaseModel):
    """A layout that item content is embedded in."""

    identifier: str
    content: str = ""
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("identifier")
    @classmethod
    def check_identifier(cls, v: str) -> str:
        return normalize_identifier(v)


class SiteConfig(BaseModel):
    """Site-wide settings made available to filters."""

    output_dir: str = "output"
    text_extensions: List[str] = Field(
        default_factory=lambda: ["html", "md", "markdown", "txt", "css", "js"]
    )
    extra: Dict[str, Any] = Field(default_factory=dict)
