"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from site_filters import configure_logging


class FilterStepConfig(BaseModel):
    """One step of a filter pipeline: a filter identifier and its params."""

    name: str = Field(..., min_length=1, description="Filter identifier")
    params: Dict[str, Any] = Field(default_factory=dict)


class PipelineConfig(BaseModel):
    """An ordered chain of filter steps."""

    description: str = ""
    filters: List[FilterStepConfig] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def expand_step_list(cls, value: Any) -> Any:
        """Allow a pipeline to be written as a bare list of steps."""
        if isinstance(value, list):
            return {"filters": value}
        return value

    @field_validator("filters", mode="before")
    @classmethod
    def expand_shorthand(cls, value: Any) -> Any:
        """Allow `- markdown` as shorthand for `- name: markdown`."""
        if not isinstance(value, list):
            return value
        return [{"name": step} if isinstance(step, str) else step for step in value]


class LoggingConfig(BaseModel):
    """Logging settings; apply() hands them to site_filters.configure_logging."""

    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    def apply(self) -> None:
        configure_logging(self.level, self.format)


class FilteringConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    plugins: Dict[str, str] = Field(
        default_factory=dict,
        description="Identifier -> import path of extra filter classes",
    )
    pipelines: Dict[str, PipelineConfig] = Field(default_factory=dict)

    def pipeline(self, name: str) -> Optional[PipelineConfig]:
        return self.pipelines.get(name)
