"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - FilteringConfig: Root configuration object
    - LoggingConfig: Log level and format
    - PipelineConfig: Named chain of filter steps
    - FilterStepConfig: One filter identifier with its params

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Profiles overlay the base file from a profiles/ directory beside it
"""

from site_filters.config.loader import (
    ConfigLoader,
    load_config,
    overlay_profile,
    read_yaml,
    register_plugins,
)
from site_filters.config.models import (
    FilteringConfig,
    FilterStepConfig,
    LoggingConfig,
    PipelineConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "overlay_profile",
    "read_yaml",
    "register_plugins",
    "FilteringConfig",
    "FilterStepConfig",
    "LoggingConfig",
    "PipelineConfig",
]
