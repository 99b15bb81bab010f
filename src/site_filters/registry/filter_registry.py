"""
Filter Registry - Identifier to Filter Class Lookup.

This module provides a thread-safe registry mapping filter identifiers
(the names used in compilation rules and configuration) to filter
classes. A class may be registered under several identifiers, and
registering an identifier again replaces the previous class.

Usage:
    registry = FilterRegistry()
    registry.register(MarkdownFilter, "markdown", "bluecloth")
    registry.register("mysite.filters:TypographyFilter", "typography")

    filter_class = registry.find("markdown")
    filter_class = registry.require("typography")  # raises if unknown
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from typing import Any, Dict, List, Optional, Protocol, Type, Union

logger = logging.getLogger(__name__)

FilterClassOrPath = Union[Type[Any], str]


class UnknownFilterError(LookupError):
    """Raised when a filter identifier is not registered."""

    def __init__(self, name: str, known: Optional[List[str]] = None) -> None:
        self.name = name
        self.known = sorted(known or [])
        message = f"No filter registered as '{name}'"
        if self.known:
            message += f" (known filters: {', '.join(self.known)})"
        super().__init__(message)


def normalize_identifier(identifier: Any) -> str:
    """Canonical string form of an identifier (enum members use their value)."""
    if isinstance(identifier, Enum):
        identifier = identifier.value
    name = str(identifier)
    if not name:
        raise ValueError("Filter identifier must not be empty")
    return name


def import_filter_class(path: str) -> Type[Any]:
    """
    Import a class given as "package.module:ClassName" or "package.module.ClassName".

    Raises:
        ImportError: If the module cannot be imported
        AttributeError: If the module has no such attribute
    """
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ImportError(f"Invalid filter import path: '{path}'")

    module = importlib.import_module(module_name)
    return getattr(module, attr)


@dataclass
class FilterInfo:
    """Metadata about a registered identifier."""

    identifier: str
    filter_class: Optional[Type[Any]] = None
    import_path: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.filter_class is not None

    @property
    def description(self) -> str:
        """First line of the filter class docstring, if loaded."""
        if self.filter_class is None or not self.filter_class.__doc__:
            return ""
        return self.filter_class.__doc__.strip().splitlines()[0]

    @property
    def class_name(self) -> str:
        if self.filter_class is not None:
            return f"{self.filter_class.__module__}.{self.filter_class.__qualname__}"
        return self.import_path or "?"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "identifier": self.identifier,
            "class": self.class_name,
            "resolved": self.is_resolved,
            "description": self.description,
        }


class FilterRegistryProtocol(Protocol):
    """Protocol for filter registry implementations."""

    def register(self, filter_class: FilterClassOrPath, *identifiers: Any) -> None:
        """Register a filter class under one or more identifiers."""
        ...

    def find(self, name: Any) -> Optional[Type[Any]]:
        """Get the filter class registered under name, or None."""
        ...

    def require(self, name: Any) -> Type[Any]:
        """Get the filter class registered under name, or raise."""
        ...


class FilterRegistry:
    """
    Thread-safe registry of filter classes.

    Supports:
        - Several identifiers per class
        - Last registration wins for a repeated identifier
        - Lazy registration by import path
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._filters: Dict[str, FilterInfo] = {}
        self._lock = RLock()
        logger.debug("FilterRegistry initialized")

    def register(self, filter_class: FilterClassOrPath, *identifiers: Any) -> None:
        """
        Register a filter class under the given identifiers.

        Args:
            filter_class: Filter class, or an import path string naming it
            *identifiers: One or more identifiers for the filter

        Raises:
            ValueError: If no identifier is given or an identifier is empty
        """
        if not identifiers:
            raise ValueError("At least one filter identifier is required")
        names = [normalize_identifier(i) for i in identifiers]

        with self._lock:
            for name in names:
                if isinstance(filter_class, str):
                    info = FilterInfo(identifier=name, import_path=filter_class)
                else:
                    info = FilterInfo(identifier=name, filter_class=filter_class)

                previous = self._filters.get(name)
                if previous is not None:
                    logger.debug(
                        f"Filter '{name}' re-registered: "
                        f"{previous.class_name} -> {info.class_name}"
                    )
                self._filters[name] = info

            logger.info(f"Registered filter {self._describe(filter_class)} as {names}")

    def find(self, name: Any) -> Optional[Type[Any]]:
        """
        Get the filter class registered under a name.

        Args:
            name: Filter identifier

        Returns:
            Filter class or None if not registered

        Raises:
            ImportError: If a lazily registered import path cannot be loaded
        """
        key = normalize_identifier(name)
        with self._lock:
            info = self._filters.get(key)
            if info is None:
                return None
            if info.filter_class is None:
                info.filter_class = import_filter_class(info.import_path or "")
                logger.debug(f"Resolved filter '{key}' to {info.class_name}")
            return info.filter_class

    def require(self, name: Any) -> Type[Any]:
        """
        Get the filter class registered under a name.

        Raises:
            UnknownFilterError: If nothing is registered under name
        """
        filter_class = self.find(name)
        if filter_class is None:
            raise UnknownFilterError(normalize_identifier(name), self.identifiers())
        return filter_class

    def unregister(self, name: Any) -> bool:
        """
        Remove an identifier.

        Returns:
            True if it was removed, False if not found
        """
        key = normalize_identifier(name)
        with self._lock:
            if key not in self._filters:
                logger.warning(f"Cannot unregister: filter '{key}' not found")
                return False

            del self._filters[key]
            logger.info(f"Unregistered filter: {key}")
            return True

    def identifiers(self) -> List[str]:
        """All registered identifiers."""
        with self._lock:
            return list(self._filters)

    def identifiers_for(self, filter_class: Type[Any]) -> List[str]:
        """Identifiers currently pointing at the given (loaded) class."""
        with self._lock:
            return [
                name
                for name, info in self._filters.items()
                if info.filter_class is filter_class
            ]

    def list_all(self) -> Dict[str, FilterInfo]:
        """
        List all registered identifiers.

        Returns:
            Dictionary of identifier to FilterInfo
        """
        with self._lock:
            return dict(self._filters)

    @property
    def registered_count(self) -> int:
        """Total number of registered identifiers."""
        with self._lock:
            return len(self._filters)

    def clear(self) -> None:
        """Remove all registered filters."""
        with self._lock:
            self._filters.clear()
            logger.info("Cleared all filters from registry")

    def __contains__(self, name: Any) -> bool:
        with self._lock:
            return normalize_identifier(name) in self._filters

    @staticmethod
    def _describe(filter_class: FilterClassOrPath) -> str:
        if isinstance(filter_class, str):
            return filter_class
        return filter_class.__name__


# Process-wide registry used by the class-level helpers on Filter.
default_registry = FilterRegistry()
