"""
Value Objects for Domain Layer.

Immutable records describing what a filter run did.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class StageResult(BaseModel):
    """Result of running a single filter step."""

    filter_name: str
    input_length: int = Field(ge=0)
    output_length: int = Field(ge=0)
    duration_seconds: float = Field(ge=0)
    params: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class FilterRunResult(BaseModel):
    """Result of running a whole filter pipeline over one piece of content."""

    content: str
    filename: str = "?"
    stages: List[StageResult] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def stage_names(self) -> List[str]:
        return [stage.filter_name for stage in self.stages]

    @property
    def total_duration_seconds(self) -> float:
        return sum(stage.duration_seconds for stage in self.stages)
