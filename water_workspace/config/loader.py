# water_workspace/config/loader.py
"""
Layered configuration loading.

This module implements the config merge strategy:
    1. Package defaults (water_workspace/config/default.yaml) - always loaded
    2. Workspace config (<root>/.water/config.yaml) - overrides defaults

The result is a complete WorkspaceConfig where every value is guaranteed to exist.

Usage:
    from water_workspace.config.loader import load_workspace_config

    config = load_workspace_config()              # CWD workspace
    config = load_workspace_config(root=path)     # explicit root
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from water_workspace.config.schema import WorkspaceConfig
from water_workspace.core.config import load_yaml, validate_model
from water_workspace.core.paths import WaterPaths
from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "default.yaml"
SECTION = "workspace"


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


def load_defaults() -> dict[str, Any]:
    """Load the packaged defaults, unwrapped from the `workspace` section."""
    raw = load_yaml(DEFAULTS_PATH)
    return raw.get(SECTION, raw)


def load_user_config(path: Path) -> dict[str, Any] | None:
    """
    Load workspace overrides.

    Returns:
        Override dictionary, or None if the file doesn't exist
    """
    if not path.exists():
        logger.debug(f"{CONFIG} No workspace config at {path}")
        return None

    raw = load_yaml(path)
    return raw.get(SECTION, raw)


def load_workspace_config(
    root: Optional[Path] = None,
    config_path: Optional[Path] = None,
) -> WorkspaceConfig:
    """
    Load the merged workspace configuration.

    Args:
        root: Workspace root (defaults to WaterPaths.root())
        config_path: Explicit override file (defaults to <root>/.water/config.yaml)

    Raises:
        ConfigParseError: If a YAML file is invalid
        ConfigValidationError: If the merged config doesn't match the schema
    """
    if config_path is None:
        config_path = WaterPaths.state_dir(root) / "config.yaml" if root is not None else WaterPaths.config()

    merged = load_defaults()
    overrides = load_user_config(config_path)
    if overrides:
        merged = deep_merge(merged, overrides)
        logger.debug(f"{CONFIG} Applied workspace overrides from {config_path}")

    return validate_model(merged, WorkspaceConfig, config_path if overrides else DEFAULTS_PATH)


__all__ = ["deep_merge", "load_defaults", "load_user_config", "load_workspace_config"]
