"""
Site Filters - Pluggable Text Filters for Static Site Generation.

Filters transform the content of site items (Markdown to HTML, variable
substitution, ...). Each filter is a class registered under one or more
identifiers so that compilation rules and configuration files can refer
to it by name.

Architecture:
    - Filter base class with per-instance assigns
    - Registry mapping identifiers to filter classes
    - Pipeline chaining filter steps over one piece of content
    - Configuration-driven pipelines via YAML

Main Components:
    - domain: Content entities (Item, ItemRep, Layout) and result objects
    - interfaces: Protocols the pipeline depends on
    - filters: Filter base class and built-in filters
    - registry: Identifier -> filter class lookup
    - pipeline: Filter chain orchestration
    - config: Configuration models and loaders

Example:
    >>> from site_filters.filters import Filter
    >>> markdown = Filter.named("markdown")
    >>> markdown().run("*hello*")
    '<p><em>hello</em></p>'

"""

import logging
from typing import Union

__version__ = "0.1.0"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Site Filters.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level or level name (default: INFO)
        format: Log message format

    Example:
        >>> import site_filters
        >>> site_filters.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("site_filters").setLevel(level)
