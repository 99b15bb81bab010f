"""
Interfaces Layer - Abstract Protocols for Dependencies.

High-level modules (the pipeline) depend on these protocols rather than
on the concrete Filter base class, so any object with a matching run()
can take part in a filter chain.

Protocols:
    - TextFilterProtocol: A text transformation with a diagnostic label
    - TextFilterFactory: Something that builds a filter from assigns
"""

from site_filters.interfaces.filter_stage import TextFilterFactory, TextFilterProtocol

__all__ = ["TextFilterProtocol", "TextFilterFactory"]
