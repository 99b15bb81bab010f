"""
Filter Pipeline - Runs a Chain of Filters over Content.

Each step names a filter by identifier. The pipeline resolves every step
up front, then for each step creates a filter bound to the assigns of the
item being compiled, runs it, and feeds its output to the next step.

Filtering is all-or-nothing: an exception from any filter is logged and
propagated unchanged, and no partial content is returned.

Importing this module imports site_filters.filters, which registers the
built-in filters in the default registry.
"""

from __future__ import annotations

import logging
import time
from typing import Any, List, Mapping, Optional, Tuple

from site_filters.config.models import FilterStepConfig, PipelineConfig
from site_filters.domain.value_objects import FilterRunResult, StageResult
from site_filters.filters import describe_assigns
from site_filters.interfaces.filter_stage import TextFilterFactory, TextFilterProtocol
from site_filters.registry.filter_registry import FilterRegistryProtocol, default_registry

logger = logging.getLogger(__name__)


class FilterPipeline:
    """Orchestrates a chain of filter steps."""

    def __init__(
        self,
        steps: List[FilterStepConfig],
        registry: Optional[FilterRegistryProtocol] = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            steps: Ordered filter steps
            registry: Registry to resolve identifiers in (default: process-wide)
        """
        self.steps = list(steps)
        self.registry: FilterRegistryProtocol = (
            registry if registry is not None else default_registry
        )

    @classmethod
    def from_config(
        cls,
        config: PipelineConfig,
        registry: Optional[FilterRegistryProtocol] = None,
    ) -> "FilterPipeline":
        """Build a pipeline from its configuration."""
        return cls(config.filters, registry=registry)

    def apply(
        self,
        content: str,
        assigns: Optional[Mapping[str, Any]] = None,
    ) -> FilterRunResult:
        """
        Run all steps over content.

        Args:
            content: Unfiltered content
            assigns: Assigns passed to every filter (item, item_rep, ...)

        Returns:
            FilterRunResult with the final content and one StageResult per step

        Raises:
            UnknownFilterError: If a step names an unregistered filter
            Exception: Whatever a filter raises, unchanged
        """
        assigns = assigns if assigns is not None else {}
        label = describe_assigns(assigns)
        resolved = self._resolve_steps()

        stages: List[StageResult] = []
        for step, filter_class in resolved:
            content, stage = self._execute_step(
                step, filter_class, content, assigns, label
            )
            stages.append(stage)

        return FilterRunResult(content=content, filename=label, stages=stages)

    def _resolve_steps(self) -> List[Tuple[FilterStepConfig, TextFilterFactory]]:
        """Look up every step before running any of them."""
        return [(step, self.registry.require(step.name)) for step in self.steps]

    def _execute_step(
        self,
        step: FilterStepConfig,
        filter_class: TextFilterFactory,
        content: str,
        assigns: Mapping[str, Any],
        label: str,
    ) -> Tuple[str, StageResult]:
        """Execute a single filter step."""
        stage_start = time.perf_counter()
        logger.debug(f"Running filter '{step.name}' on {label}")

        try:
            instance: TextFilterProtocol = filter_class(assigns)
            output = instance.run(content, step.params)
        except Exception:
            logger.error(f"Filter '{step.name}' failed on {label}")
            raise

        stage_duration = time.perf_counter() - stage_start
        logger.debug(
            f"Completed filter '{step.name}' on {label}: "
            f"{len(content)} -> {len(output)} chars ({stage_duration:.3f}s)"
        )

        stage = StageResult(
            filter_name=step.name,
            input_length=len(content),
            output_length=len(output),
            duration_seconds=stage_duration,
            params=dict(step.params),
        )
        return output, stage


def run_filters(
    content: str,
    filters: List[Any],
    assigns: Optional[Mapping[str, Any]] = None,
    registry: Optional[FilterRegistryProtocol] = None,
) -> str:
    """
    Convenience function to filter content through a list of steps.

    Args:
        content: Unfiltered content
        filters: Steps as identifiers, (identifier, params) pairs or dicts
        assigns: Assigns passed to every filter
        registry: Registry to resolve identifiers in

    Returns:
        The filtered content
    """
    pipeline = FilterPipeline([_to_step(f) for f in filters], registry=registry)
    return pipeline.apply(content, assigns).content


def _to_step(step: Any) -> FilterStepConfig:
    if isinstance(step, FilterStepConfig):
        return step
    if isinstance(step, tuple):
        name, params = step
        return FilterStepConfig(name=name, params=params or {})
    if isinstance(step, dict):
        return FilterStepConfig.model_validate(step)
    return FilterStepConfig(name=str(step))

