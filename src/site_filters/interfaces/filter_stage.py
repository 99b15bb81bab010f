"""
Text Filter Protocol.

Defines the capability every filter provides. Concrete filters subclass
site_filters.filters.Filter, but the pipeline only relies on this shape.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - One filter instance per filtering operation
    - Context (item, layout, config) injected via constructor assigns
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TextFilterProtocol(Protocol):
    """Abstract interface for text filters."""

    @property
    def filename(self) -> str:
        """Human-readable label of what is being filtered."""
        ...

    def run(self, content: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Transform content.

        Args:
            content: Unprocessed content
            params: Filter-specific parameters

        Returns:
            The filtered content
        """
        ...


class TextFilterFactory(Protocol):
    """Callable producing a filter bound to a set of assigns (a filter class)."""

    def __call__(self, assigns: Optional[Mapping[str, Any]] = None) -> TextFilterProtocol:
        ...
