# water_workspace/core/__init__.py
"""Shared plumbing: errors, paths, YAML loading, hashing."""

from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    InheritanceCycleError,
    ModuleFileError,
    PinDeclarationError,
    UnknownModuleError,
    UnknownStandardPinError,
    WaterError,
)
from .paths import WaterPaths

__all__ = [
    "WaterError",
    "PinDeclarationError",
    "UnknownStandardPinError",
    "InheritanceCycleError",
    "UnknownModuleError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ModuleFileError",
    "WaterPaths",
]
