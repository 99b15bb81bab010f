"""
Configuration Loader - YAML Loading with Profile Overlays.

A site keeps one base config file and, next to it, a `profiles/`
directory with one overlay file per profile:

    filters.yaml
    profiles/
        production.yaml

Loading with profile="production" merges profiles/production.yaml over
filters.yaml (see overlay_profile) before validation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from site_filters.config.models import FilteringConfig
from site_filters.registry.filter_registry import FilterRegistryProtocol

logger = logging.getLogger(__name__)

PROFILES_DIR = "profiles"

# Sections whose keys are merged one by one; other top-level keys are replaced.
MERGED_SECTIONS = ("logging", "plugins")


def read_yaml(path: Path) -> Dict[str, Any]:
    """
    Read a YAML config file; an empty file is an empty mapping.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is not a mapping
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    return data


def overlay_profile(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge a profile overlay over a base config.

    Rules:
        - logging, plugins: merged key by key
        - pipelines: merged by pipeline name. Keys given for a pipeline
          replace the base value, so an overlay's `filters` list replaces
          the base chain as a whole. A pipeline set to null is removed.
        - any other key: replaced
    """
    result = dict(base)
    for key, value in overlay.items():
        if key == "pipelines" and isinstance(value, dict):
            result[key] = _overlay_pipelines(result.get(key) or {}, value)
        elif key in MERGED_SECTIONS and isinstance(value, dict):
            result[key] = {**(result.get(key) or {}), **value}
        else:
            result[key] = value
    return result


def _overlay_pipelines(
    base: Dict[str, Any],
    overlay: Dict[str, Any],
) -> Dict[str, Any]:
    pipelines = dict(base)
    for name, pipeline in overlay.items():
        if pipeline is None:
            pipelines.pop(name, None)
            continue
        current = _as_pipeline_dict(pipelines.get(name))
        pipelines[name] = {**current, **_as_pipeline_dict(pipeline)}
    return pipelines


def _as_pipeline_dict(pipeline: Any) -> Dict[str, Any]:
    """A pipeline may be written as a bare list of steps."""
    if pipeline is None:
        return {}
    if isinstance(pipeline, list):
        return {"filters": pipeline}
    return dict(pipeline)


class ConfigLoader:
    """Loads and validates filtering configuration."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> FilteringConfig:
        """
        Load a config file, optionally with a profile overlay.

        Args:
            config_path: Path to YAML config file
            profile: Name of a file in profiles/ next to the config file

        Returns:
            Validated FilteringConfig object

        Raises:
            FileNotFoundError: If config file or profile doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        data = read_yaml(path)

        if profile:
            data = overlay_profile(data, read_yaml(self.profile_path(path, profile)))

        config = FilteringConfig.model_validate(data)
        logger.info(
            f"Loaded {len(config.pipelines)} pipeline(s) from {path}"
            + (f" with profile '{profile}'" if profile else "")
        )
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> FilteringConfig:
        """Validate configuration given as a dictionary."""
        return FilteringConfig.model_validate(config_dict)

    def profile_path(self, config_path: Path, profile: str) -> Path:
        """
        Location of a profile overlay for a config file.

        Raises:
            FileNotFoundError: If the profile file doesn't exist
        """
        path = config_path.parent / PROFILES_DIR / f"{profile}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {profile} ({path})")
        return path

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
    apply_logging: bool = False,
) -> FilteringConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths
        apply_logging: Configure logging from the config's logging section

    Returns:
        Validated FilteringConfig object
    """
    config = ConfigLoader(base_path=base_path).load(config_path, profile)
    if apply_logging:
        config.logging.apply()
    return config


def register_plugins(config: FilteringConfig, registry: FilterRegistryProtocol) -> None:
    """
    Register the plugin filters named in config.

    Plugins are registered by import path and only imported when first
    looked up.
    """
    for identifier, import_path in config.plugins.items():
        registry.register(import_path, identifier)
