"""
water-workspace - PIN descriptors and module discovery for Water workspaces.

Modules declare the configuration contracts (PINs) they provide and require;
water-workspace merges inherited PINs, renders a deterministic
`<artifactId>-<version>.water.json` descriptor per module and only rewrites
it when its content changes.

Quick Start:
    >>> from water_workspace import ModuleDescriptor, resolve_effective_pins
    >>> d = ModuleDescriptor(name=":user")
    >>> d.module_id = "it.water.user"
    >>> d.output(lambda out: out.standard_pin("authentication-issuer"))
    >>> [p.id for p in resolve_effective_pins(d).outputs]
    ['it.water.integration.authentication-issuer']

Architecture:
    water_workspace/
    ├── core/        # errors, paths, YAML loading, hashing
    ├── config/      # layered workspace config (defaults + .water/config.yaml)
    ├── pins/        # PIN model, catalog, DSL, inheritance, serializer, emission
    ├── workspace/   # discovery walker, module files, configure/finalize host
    └── cli/         # `water` command line
"""

from water_workspace.core.exceptions import (
    ConfigError,
    InheritanceCycleError,
    PinDeclarationError,
    UnknownModuleError,
    UnknownStandardPinError,
    WaterError,
)
from water_workspace.pins import (
    ModuleDescriptor,
    StandardPins,
    render_descriptor,
    resolve_effective_pins,
)
from water_workspace.workspace import Workspace, discover

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "InheritanceCycleError",
    "ModuleDescriptor",
    "PinDeclarationError",
    "StandardPins",
    "UnknownModuleError",
    "UnknownStandardPinError",
    "WaterError",
    "Workspace",
    "discover",
    "render_descriptor",
    "resolve_effective_pins",
    "__version__",
]
