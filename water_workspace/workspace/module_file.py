# water_workspace/workspace/module_file.py
"""
Module file (`water.yaml`) loading.

The module file is both the discovery marker and the module's declarations:

    group: it.water.user
    name: User-service
    version: 3.0.0
    waterDescriptor:
      moduleId: it.water.user
      displayName: User Service
      inheritsFrom: [":User-api"]
      properties:
        - {key: it.water.user.registration.enabled, required: false, defaultValue: "false"}
      output:
        - standardPin: jdbc
          properties: [{key: db.schema, required: false, defaultValue: public}]
        - pin: it.water.integration.authentication-issuer
          required: true
          properties: [{key: water.authentication.service.issuer, defaultValue: water}]
      input:
        - standardPin: api-gateway
          required: true
        - pin: it.water.other

Files are validated with pydantic, then replayed through the ModuleDescriptor
DSL so YAML and Python declarations behave identically.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from water_workspace.core.config import load_yaml, validate_model
from water_workspace.core.exceptions import ModuleFileError
from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import CONFIG
from water_workspace.pins.containers import PinInputContainer, PinOutputContainer
from water_workspace.pins.descriptor import ModuleDescriptor
from water_workspace.pins.property import PinProperty
from water_workspace.pins.specs import InputPin, OutputPin

logger = get_logger(__name__)


# =============================================================================
# Schema
# =============================================================================


class _Decl(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class PropertyDecl(_Decl):
    key: str = Field(..., min_length=1)
    required: bool = True
    sensitive: bool = False
    default_value: str = Field(default="", alias="defaultValue")
    description: str = ""
    type: str = "string"
    env_var: str = Field(default="", alias="envVar")

    def configure(self, prop: PinProperty) -> None:
        prop.required = self.required
        prop.sensitive = self.sensitive
        prop.default_value = self.default_value
        prop.description = self.description
        prop.type = self.type
        prop.env_var = self.env_var


class _PinDecl(_Decl):
    pin: Optional[str] = None
    standard_pin: Optional[str] = Field(default=None, alias="standardPin")
    required: Optional[bool] = None

    @model_validator(mode="after")
    def _exactly_one_kind(self):
        if (self.pin is None) == (self.standard_pin is None):
            raise ValueError("exactly one of 'pin' or 'standardPin' must be set")
        return self


class OutputPinDecl(_PinDecl):
    properties: List[PropertyDecl] = Field(default_factory=list)

    def configure(self, spec: OutputPin) -> None:
        if self.required is not None:
            spec.required = self.required
        for prop in self.properties:
            spec.property(prop.key, prop.configure)

    def apply(self, container: PinOutputContainer) -> None:
        if self.standard_pin is not None:
            container.standard_pin(self.standard_pin, self.configure)
        else:
            container.pin(self.pin, self.configure)


class InputPinDecl(_PinDecl):
    def configure(self, spec: InputPin) -> None:
        if self.required is not None:
            spec.required = self.required

    def apply(self, container: PinInputContainer) -> None:
        if self.standard_pin is not None:
            container.standard_pin(self.standard_pin, self.configure)
        else:
            container.pin(self.pin, self.configure)


class DescriptorDecl(_Decl):
    module_id: Optional[str] = Field(default=None, alias="moduleId")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    description: Optional[str] = None
    inherits_from: List[str] = Field(default_factory=list, alias="inheritsFrom")
    properties: List[PropertyDecl] = Field(default_factory=list)
    output: List[OutputPinDecl] = Field(default_factory=list)
    input: List[InputPinDecl] = Field(default_factory=list)


class ModuleFile(_Decl):
    group: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None
    water_descriptor: Optional[DescriptorDecl] = Field(default=None, alias="waterDescriptor")


# =============================================================================
# Loading
# =============================================================================


def load_module_file(path: Path) -> ModuleFile:
    """
    Load and validate a module file.

    Raises:
        ModuleFileError: If the file is missing, malformed or invalid
    """
    path = Path(path)
    if not path.is_file():
        raise ModuleFileError("Module file not found", path=path)
    data = load_yaml(path, error_cls=ModuleFileError)
    return validate_model(data, ModuleFile, path, error_cls=ModuleFileError)


def apply_descriptor(decl: Optional[DescriptorDecl], descriptor: ModuleDescriptor) -> List[str]:
    """
    Replay declarations through the descriptor DSL.

    Returns:
        inheritsFrom addresses, for the host to link once all modules are loaded

    Raises:
        UnknownStandardPinError: If a standardPin mnemonic is unknown
    """
    if decl is None:
        return []

    descriptor.module_id = decl.module_id
    descriptor.display_name = decl.display_name
    descriptor.description = decl.description

    def _properties(container) -> None:
        for prop in decl.properties:
            container.property(prop.key, prop.configure)

    def _output(container: PinOutputContainer) -> None:
        for pin in decl.output:
            pin.apply(container)

    def _input(container: PinInputContainer) -> None:
        for pin in decl.input:
            pin.apply(container)

    descriptor.properties(_properties)
    descriptor.output(_output)
    descriptor.input(_input)

    logger.debug(
        f"{CONFIG} {descriptor.name or '<root>'}: moduleId={decl.module_id!r}, "
        f"{len(decl.output)} outputs, {len(decl.input)} inputs, "
        f"inheritsFrom={decl.inherits_from}"
    )
    return list(decl.inherits_from)


__all__ = [
    "DescriptorDecl",
    "InputPinDecl",
    "ModuleFile",
    "OutputPinDecl",
    "PropertyDecl",
    "apply_descriptor",
    "load_module_file",
]
