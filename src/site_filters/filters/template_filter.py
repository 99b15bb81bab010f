"""
Template Filter Implementation.

Substitutes $name / ${name} placeholders in content. Values come from,
in order of precedence:
    1. params["variables"]
    2. attributes of the item (or layout) being filtered
    3. scalar assigns (str, int, float, bool)
"""

from __future__ import annotations

from string import Template
from typing import Any, Dict, Mapping, Optional

from site_filters.filters.base import Filter, FilterError, describe_assigns, filter_params

SCALAR_TYPES = (str, int, float, bool)


def template_variables(
    assigns: Mapping[str, Any],
    overrides: Mapping[str, Any],
) -> Dict[str, str]:
    """Collect placeholder values from assigns, then apply overrides."""
    variables: Dict[str, str] = {}

    for name, value in assigns.items():
        if isinstance(value, SCALAR_TYPES):
            variables[str(name)] = str(value)

    source = assigns.get("layout") or assigns.get("item")
    attributes = getattr(source, "attributes", None) or {}
    for name, value in attributes.items():
        variables[str(name)] = str(value)

    for name, value in overrides.items():
        variables[str(name)] = str(value)

    return variables


class TemplateFilter(Filter, identifiers="template"):
    """Substitute $variables from assigns and params."""

    def run(self, content: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Fill in placeholders.

        Params:
            variables: Extra values, overriding everything else
            strict: Raise on undefined placeholders (default True); when
                False they are left untouched

        Raises:
            FilterError: On an undefined or malformed placeholder in strict mode
        """
        options = filter_params(params)
        strict = options.get("strict", True)
        variables = template_variables(self.assigns, options.get("variables") or {})

        template = Template(content)
        if not strict:
            return template.safe_substitute(variables)

        label = describe_assigns(self.assigns)
        try:
            return template.substitute(variables)
        except KeyError as e:
            raise FilterError(f"{label}: undefined variable '{e.args[0]}'") from e
        except ValueError as e:
            raise FilterError(f"{label}: {e}") from e
