"""
Markdown Filter Implementation.

Renders Markdown to HTML with the Python-Markdown engine. Registered as
"markdown" and, for sites whose rules were written against the BlueCloth
engine, as "bluecloth".
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import markdown

from site_filters.filters.base import Filter, filter_params


class MarkdownFilter(Filter, identifiers=("markdown", "bluecloth")):
    """Convert Markdown content to HTML."""

    def run(self, content: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render content as Markdown.

        Params are passed to the engine unchanged, e.g.
        {"extensions": ["tables"], "output_format": "html"}.
        """
        return markdown.markdown(content, **filter_params(params))
