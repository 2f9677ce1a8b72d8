# water_workspace/core/config.py
"""
Centralized YAML loading for water-workspace.

Every YAML file the tool reads (packaged defaults, workspace overrides,
module files) goes through load_yaml() so errors always carry the file path.

Usage:
    from water_workspace.core.config import load_yaml, validate_model

    data = load_yaml(path)
    config = validate_model(data, WorkspaceConfig, path)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from water_workspace.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from water_workspace.logging.logger import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def load_yaml(path: Union[str, Path], *, error_cls: Type[ConfigError] = ConfigParseError) -> Dict[str, Any]:
    """
    Load a YAML file and return as dictionary.

    Args:
        path: Path to YAML file
        error_cls: Error raised for parse failures (module files use ModuleFileError)

    Returns:
        Dictionary of config data (empty file -> empty dict)

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigError: If path is a directory
        error_cls: If YAML or UTF-8 is invalid or the root is not a mapping
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
        raise error_cls(f"Invalid YAML syntax: {e}", path=p) from e
    except UnicodeDecodeError as e:
        raise error_cls(f"Invalid UTF-8: {e}", path=p) from e
    except OSError as e:
        raise error_cls(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise error_cls("Config root must be a mapping (dict)", path=p)

    logger.debug(f"Loaded YAML from {p}")
    return data


def validate_model(
    data: Dict[str, Any],
    schema: Type[M],
    path: Optional[Path] = None,
    *,
    error_cls: Type[ConfigError] = ConfigValidationError,
) -> M:
    """
    Validate raw data against a pydantic schema.

    Raises:
        error_cls: With a flattened, one-line-per-error message
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise error_cls(f"Invalid {schema.__name__}: {errors}", path=path) from e


__all__ = ["load_yaml", "validate_model"]
