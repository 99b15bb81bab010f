"""
Filter Base Class.

Filter is the superclass for all textual filters. A filter is created
with a mapping of assigns (the item being filtered, its rep, the layout,
the site config, ...). Each assign is then available three ways:

    >>> f = SomeFilter({"foo": "bar"})
    >>> f.assigns["foo"]
    'bar'
    >>> f.foo()
    'bar'
    >>> f._foo
    'bar'

Subclasses override run() and declare the identifiers they are known
by, either with the class keyword or with the class-level helpers:

    class MarkdownFilter(Filter, identifiers=("markdown", "bluecloth")):
        def run(self, content, params=None):
            ...

    class TidyFilter(Filter):
        ...
    TidyFilter.identifier("tidy")
"""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Sequence, Type, Union

from site_filters.registry.filter_registry import (
    FilterClassOrPath,
    FilterRegistryProtocol,
    default_registry,
)

# Bound by the constructor itself; an assign cannot replace it.
RESERVED_ASSIGN_NAMES = frozenset({"assigns"})


class InvalidAssignError(ValueError):
    """Raised when an assign name cannot be bound on a filter instance."""


class FilterError(Exception):
    """Raised when a filter cannot transform its input."""


def _constant(value: Any) -> Callable[[], Any]:
    def accessor() -> Any:
        return value

    return accessor


def _assign_name(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    name = str(key)
    if not name:
        raise InvalidAssignError("Assign name must not be empty")
    if name.startswith("__") and name.endswith("__"):
        raise InvalidAssignError(f"Assign name '{name}' is reserved by Python")
    if name in RESERVED_ASSIGN_NAMES:
        raise InvalidAssignError(f"Assign name '{name}' is reserved by Filter")
    return name


def filter_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Copy of the params passed to run(), empty when none were given."""
    return dict(params) if params else {}


def describe_assigns(assigns: Mapping[str, Any]) -> str:
    """
    Label of what is being filtered, for error messages and logs.

    Either "layout <identifier>" or "item <identifier> (rep <name>)",
    or "?" when neither a layout nor an item is assigned. Missing
    attributes show up as "?" so that the label never raises.
    """
    layout = assigns.get("layout")
    if layout:
        return f"layout {getattr(layout, 'identifier', '?')}"

    item = assigns.get("item")
    if item:
        rep_name = getattr(assigns.get("item_rep"), "name", "?")
        return f"item {getattr(item, 'identifier', '?')} (rep {rep_name})"

    return "?"


class Filter:
    """
    Base class for text filters.

    Abstract: subclass and override run() to implement a filter.
    """

    registry: ClassVar[FilterRegistryProtocol] = default_registry

    def __init_subclass__(
        cls,
        identifiers: Union[str, Sequence[Any]] = (),
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if isinstance(identifiers, str):
            identifiers = (identifiers,)
        if identifiers:
            cls.identifiers(*identifiers)

    def __init__(self, assigns: Optional[Mapping[str, Any]] = None) -> None:
        """
        Create a filter with access to the given assigns.

        Args:
            assigns: Variables made available during filtering. The mapping
                is kept as-is, not copied.

        Raises:
            InvalidAssignError: If a key cannot be bound as an attribute
        """
        self.assigns: Mapping[str, Any] = assigns if assigns is not None else {}
        for key, value in self.assigns.items():
            name = _assign_name(key)
            setattr(self, "_" + name, value)
            setattr(self, name, _constant(value))

    # -- registration -------------------------------------------------------

    @classmethod
    def identifiers(cls, *identifiers: Any) -> None:
        """Register this filter class under the given identifiers."""
        cls.register(cls, *identifiers)

    @classmethod
    def identifier(cls, identifier: Any) -> None:
        """Register this filter class under a single identifier."""
        cls.register(cls, identifier)

    @classmethod
    def register(cls, class_or_path: FilterClassOrPath, *identifiers: Any) -> None:
        """
        Register a filter class (or an import path naming one) under identifiers.

        Args:
            class_or_path: Filter class, or "package.module:ClassName"
            *identifiers: Identifiers to assign to the filter
        """
        cls.registry.register(class_or_path, *identifiers)

    @classmethod
    def named(cls, name: Any) -> Optional[Type["Filter"]]:
        """
        Find the filter class registered under name.

        Returns:
            The filter class, or None if nothing is registered under name
        """
        return cls.registry.find(name)

    # -- filtering ----------------------------------------------------------

    def run(self, content: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Run the filter on the given content.

        Args:
            content: The unprocessed content
            params: Parameters that modify the filter's behaviour

        Returns:
            The filtered content
        """
        raise NotImplementedError("Filter subclasses must implement run()")

    @cached_property
    def filename(self) -> str:
        """
        Label of what is being filtered; see describe_assigns().

        Assigns never change after construction, so the label is computed
        once. An assign named "filename" shadows it on that instance.
        """
        return describe_assigns(self.assigns)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {describe_assigns(self.assigns)}>"
