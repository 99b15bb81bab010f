"""
Unit Tests for the Filter base class.

Test Aspects Covered:
    ✅ Business Logic: Assign injection, filename diagnostics
    ✅ Error Handling: Abstract run(), unbindable assign names
    ✅ Edge Cases: Empty assigns, shadowed methods and filename, shared values
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

import pytest

from site_filters.domain.entities import Item, ItemRep, Layout
from site_filters.filters.base import Filter, InvalidAssignError
from site_filters.interfaces.filter_stage import TextFilterProtocol
from site_filters.registry.filter_registry import FilterRegistry


class UpcaseFilter(Filter):
    """Test filter that upper-cases content."""

    def run(self, content: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return content.upper()


class TestAssigns:
    """Tests for assign injection."""

    def test_assign_available_three_ways(self) -> None:
        """
        SCENARIO: Filter created with a mapping of assigns
        EXPECTED: Each value reachable via assigns, accessor and slot
        """
        # Arrange
        value = ["shared"]

        # Act
        f = Filter({"foo": value})

        # Assert
        assert f.assigns["foo"] is value
        assert f.foo() is value
        assert f._foo is value

    def test_assigns_mapping_is_not_copied(self) -> None:
        """The mapping passed in is the one exposed."""
        assigns = {"foo": 1}

        f = Filter(assigns)

        assert f.assigns is assigns

    def test_values_are_shared_not_copied(self) -> None:
        """Mutating a value is visible through every view."""
        attributes = {"title": "Before"}
        f = Filter({"attributes": attributes})

        attributes["title"] = "After"

        assert f.assigns["attributes"]["title"] == "After"
        assert f.attributes()["title"] == "After"
        assert f._attributes["title"] == "After"

    def test_empty_assigns(self) -> None:
        """No assigns means an empty mapping and no accessors."""
        f = Filter()

        assert dict(f.assigns) == {}
        assert not hasattr(f, "item")

    def test_instances_are_isolated(self) -> None:
        """
        SCENARIO: Two instances with the same key and different values
        EXPECTED: Each sees its own value, independent of creation order
        """
        a = Filter({"x": 1})
        b = Filter({"x": 2})

        assert a.x() == 1
        assert b.x() == 2
        assert not hasattr(Filter, "x")

    def test_accessor_shadows_method_for_one_instance(self) -> None:
        """An assign named like a method shadows it on that instance only."""
        shadowed = UpcaseFilter({"run": "not a filter"})
        plain = UpcaseFilter()

        assert shadowed.run() == "not a filter"
        assert plain.run("abc") == "ABC"

    def test_non_identifier_names_are_bound(self) -> None:
        """Names that are not Python identifiers are still reachable."""
        f = Filter({"site config": {"output": "out"}})

        assert getattr(f, "site config")() == {"output": "out"}
        assert getattr(f, "_site config") == {"output": "out"}

    def test_enum_keys_use_their_value(self) -> None:
        """Enum keys are bound under their value."""

        class Key(str, Enum):
            ITEM = "item"

        f = Filter({Key.ITEM: "page"})

        assert f.item() == "page"

    @pytest.mark.parametrize("name", ["", "__class__", "__dict__", "assigns"])
    def test_unbindable_names_raise(self, name: str) -> None:
        """Empty, dunder and reserved names are rejected."""
        with pytest.raises(InvalidAssignError):
            Filter({name: 1})

    def test_invalid_assign_error_is_value_error(self) -> None:
        """InvalidAssignError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Filter({"__init__": 1})


class TestRunContract:
    """Tests for the abstract run() contract."""

    def test_base_run_not_implemented(self) -> None:
        """Calling run() on the base class raises NotImplementedError."""
        with pytest.raises(NotImplementedError, match="must implement run"):
            Filter().run("content")

    def test_subclass_without_override_not_implemented(self) -> None:
        """A subclass that forgets run() also raises."""

        class Lazy(Filter):
            pass

        with pytest.raises(NotImplementedError):
            Lazy().run("content", {"a": 1})

    def test_subclass_run_returns_transformed_text(self) -> None:
        """An overriding subclass returns its own output."""
        assert UpcaseFilter().run("hello", {}) == "HELLO"

    def test_filter_satisfies_protocol(self) -> None:
        """Filter instances satisfy TextFilterProtocol."""
        assert isinstance(UpcaseFilter(), TextFilterProtocol)


class TestFilename:
    """Tests for the filename diagnostic."""

    def test_layout_takes_precedence(self, page: Item, page_rep: ItemRep, layout: Layout) -> None:
        """With a layout assigned, the label names the layout."""
        f = Filter({"layout": layout, "item": page, "item_rep": page_rep})

        assert f.filename == "layout /default/"

    def test_item_with_rep(self, page: Item, page_rep: ItemRep) -> None:
        """With an item and rep, the label names both."""
        f = Filter({"item": page, "item_rep": page_rep})

        assert f.filename == "item /about/ (rep default)"

    def test_item_without_rep(self, page: Item) -> None:
        """A missing rep is shown as ?."""
        f = Filter({"item": page})

        assert f.filename == "item /about/ (rep ?)"

    def test_nothing_assigned(self) -> None:
        """Without layout or item the label is ?."""
        assert Filter({"config": {}}).filename == "?"

    def test_falsy_layout_ignored(self, page: Item, page_rep: ItemRep) -> None:
        """A falsy layout assign falls through to the item."""
        f = Filter({"layout": None, "item": page, "item_rep": page_rep})

        assert f.filename == "item /about/ (rep default)"

    def test_repr_includes_filename(self, page: Item, page_rep: ItemRep) -> None:
        """repr() shows the class and label."""
        f = UpcaseFilter({"item": page, "item_rep": page_rep})

        assert repr(f) == "<UpcaseFilter item /about/ (rep default)>"

    def test_filename_assign_shadows_label_for_one_instance(
        self, page: Item, page_rep: ItemRep
    ) -> None:
        """
        SCENARIO: One instance gets an assign named "filename"
        EXPECTED: That instance exposes the assign, others keep the label
        """
        # Act
        shadowed = Filter({"filename": "custom", "item": page, "item_rep": page_rep})
        plain = Filter({"item": page, "item_rep": page_rep})

        # Assert
        assert shadowed.filename() == "custom"
        assert shadowed._filename == "custom"
        assert repr(shadowed) == "<Filter item /about/ (rep default)>"
        assert plain.filename == "item /about/ (rep default)"
        assert Filter().filename == "?"


class TestDeclaration:
    """Tests for class-level registration helpers."""

    def test_identifier_registers_class(self, registry: FilterRegistry) -> None:
        """identifier() registers the class under one name."""

        class Tidy(Filter):
            pass

        Tidy.identifier("tidy")

        assert Filter.named("tidy") is Tidy

    def test_identifiers_registers_all_names(self, registry: FilterRegistry) -> None:
        """identifiers() registers the class under every name."""

        class Md(Filter):
            pass

        Md.identifiers("md", "mkd")

        assert Filter.named("md") is Md
        assert Filter.named("mkd") is Md

    def test_class_keyword_registers_at_definition(self, registry: FilterRegistry) -> None:
        """The identifiers= class keyword registers at class creation."""

        class Smart(Filter, identifiers=("smartypants", "rubypants")):
            pass

        class Single(Filter, identifiers="single"):
            pass

        assert registry.find("smartypants") is Smart
        assert registry.find("rubypants") is Smart
        assert registry.find("single") is Single

    def test_register_by_import_path(self, registry: FilterRegistry) -> None:
        """register() accepts an import path resolved on lookup."""
        Filter.register("tests.fixtures.plugins:ShoutFilter", "shout")

        shout = Filter.named("shout")

        assert shout is not None
        assert shout().run("hey") == "HEY"

    def test_named_unknown_returns_none(self, registry: FilterRegistry) -> None:
        """named() returns None for unknown identifiers."""
        assert Filter.named("doesnotexist") is None

    def test_subclass_registry_override(self) -> None:
        """A subclass with its own registry registers there."""
        own = FilterRegistry()

        class PluginBase(Filter):
            registry = own

        class Plugin(PluginBase, identifiers="plugin"):
            pass

        assert own.find("plugin") is Plugin
        assert Filter.named("plugin") is None
