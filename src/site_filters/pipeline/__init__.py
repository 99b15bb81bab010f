"""
Pipeline Package - Filter Chain Orchestration.

Components:
    - FilterPipeline: Runs an ordered chain of filter steps over content
    - run_filters: Convenience wrapper returning only the filtered content
"""

from site_filters.pipeline.filter_pipeline import FilterPipeline, run_filters

__all__ = ["FilterPipeline", "run_filters"]
