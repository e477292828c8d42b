# folio/config/loader.py
"""
Layered configuration loading for folio.

Merge strategy:
    1. Package defaults (folio/config/default.yaml) - always loaded
    2. Workspace config (.folio/config.yaml) - overrides defaults
    3. Explicit config file (CLI --config) - overrides both

The merged dict is validated by FolioConfig, so callers never need
fallback logic.

Usage:
    from folio.config.loader import load_folio_config

    config = load_folio_config()
    config.validation.max_future_days
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from folio.config.schema import FolioConfig
from folio.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from folio.core.paths import FolioPaths
from folio.logging.logger import get_logger
from folio.logging.tags import CONFIG

logger = get_logger(__name__)


# =============================================================================
# YAML Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively.
    Lists are replaced entirely (not merged).

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def load_defaults() -> Dict[str, Any]:
    """Load the bundled package defaults."""
    return load_yaml(FolioPaths.defaults())


def load_workspace_config() -> Optional[Dict[str, Any]]:
    """
    Load the workspace config (.folio/config.yaml).

    Returns:
        The config dictionary, or None if the workspace has no config.
    """
    path = FolioPaths.config()
    if not path.exists():
        logger.debug(f"{CONFIG} No workspace config at {path}")
        return None
    return load_yaml(path)


def load_config_dict(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load the merged configuration as a raw dictionary (no validation).

    Args:
        path: Optional explicit config file layered on top of everything else.
    """
    merged = load_defaults()

    workspace = load_workspace_config()
    if workspace:
        merged = deep_merge(merged, workspace)

    if path is not None:
        merged = deep_merge(merged, load_yaml(path))

    return merged


def load_folio_config(path: Optional[Union[str, Path]] = None) -> FolioConfig:
    """
    Load and validate the complete folio configuration.

    Args:
        path: Optional explicit config file (highest precedence).

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist
        ConfigParseError: If any layer is not valid YAML
        ConfigValidationError: If the merged config doesn't match the schema
    """
    data = load_config_dict(path)
    source = Path(path) if path is not None else FolioPaths.config()

    try:
        config = FolioConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", path=source) from e

    logger.debug(f"{CONFIG} Effective config: {config.model_dump()}")
    return config


def get_config_source(path: Optional[Union[str, Path]] = None) -> str:
    """Human-readable description of where config is loaded from."""
    if path is not None:
        return f"{path} (explicit)"

    workspace = FolioPaths.config()
    if workspace.exists():
        return f"{workspace} (overriding defaults)"
    return f"{FolioPaths.defaults()} (package defaults)"


__all__ = [
    "load_yaml",
    "deep_merge",
    "load_defaults",
    "load_workspace_config",
    "load_config_dict",
    "load_folio_config",
    "get_config_source",
]
