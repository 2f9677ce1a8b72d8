# water_workspace/core/exceptions.py
"""
All exceptions for water-workspace.

Hierarchy:
    WaterError
    ├── PinDeclarationError - Invalid PIN declaration
    │   └── UnknownStandardPinError - Mnemonic not in the standard catalog
    ├── InheritanceCycleError - inheritsFrom chain loops back on itself
    ├── UnknownModuleError - inheritsFrom / show target is not registered
    └── ConfigError - Configuration failures (carries the file path)
        ├── ConfigNotFoundError
        ├── ConfigParseError
        ├── ConfigValidationError
        └── ModuleFileError - Invalid water.yaml module file
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class WaterError(Exception):
    """Base error for everything raised by water-workspace."""

    pass


# =============================================================================
# PIN Declaration Errors
# =============================================================================


class PinDeclarationError(WaterError):
    """A PIN could not be declared."""

    pass


class UnknownStandardPinError(PinDeclarationError):
    """Raised when a standardPin mnemonic is not in the catalog."""

    def __init__(self, mnemonic: str, available: Sequence[str]):
        self.mnemonic = mnemonic
        self.available = list(available)
        super().__init__(
            f"Unknown standard Water PIN: {mnemonic!r}. "
            f"Available: {', '.join(self.available)}"
        )


# =============================================================================
# Inheritance Errors
# =============================================================================


class InheritanceCycleError(WaterError):
    """Raised when inheritsFrom references form a cycle."""

    def __init__(self, cycle: Sequence[str]):
        self.cycle = list(cycle)
        super().__init__(f"Inheritance cycle detected: {' -> '.join(self.cycle)}")


class UnknownModuleError(WaterError):
    """Raised when a module address is not registered in the workspace."""

    def __init__(self, address: str, referenced_by: Optional[str] = None):
        self.address = address
        self.referenced_by = referenced_by
        message = f"Unknown module: {address!r}"
        if referenced_by is not None:
            message += f" (referenced by {referenced_by!r})"
        super().__init__(message)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(WaterError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


class ModuleFileError(ConfigError):
    """Raised when a module's water.yaml cannot be loaded or applied."""

    pass


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
]
