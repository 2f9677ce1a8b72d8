# water_workspace/pins/__init__.py
"""
PIN (configuration contract) model.

Modules declare the PINs they provide (output) and require (input) through
ModuleDescriptor; the resolver merges inherited PINs, the serializer renders
the .water.json document and the emitter persists it.
"""

from .cache import DescriptorCache
from .catalog import StandardPins
from .containers import ModulePropertiesContainer, PinInputContainer, PinOutputContainer
from .descriptor import ModuleDescriptor
from .emission import (
    ArtifactCoordinate,
    DescriptorEmitter,
    EmissionResult,
    EmissionStatus,
    PublishedArtifact,
    descriptor_output_file,
)
from .inheritance import EffectivePins, InheritanceResolver, resolve_effective_pins
from .property import PinProperty
from .serializer import SCHEMA_VERSION, render_descriptor
from .specs import InputPin, OutputPin

__all__ = [
    "ArtifactCoordinate",
    "DescriptorCache",
    "DescriptorEmitter",
    "EffectivePins",
    "EmissionResult",
    "EmissionStatus",
    "InheritanceResolver",
    "InputPin",
    "ModuleDescriptor",
    "ModulePropertiesContainer",
    "OutputPin",
    "PinInputContainer",
    "PinOutputContainer",
    "PinProperty",
    "PublishedArtifact",
    "SCHEMA_VERSION",
    "StandardPins",
    "descriptor_output_file",
    "render_descriptor",
    "resolve_effective_pins",
]
