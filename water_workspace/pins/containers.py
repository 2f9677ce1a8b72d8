# water_workspace/pins/containers.py
"""
DSL containers for PIN and module-property declarations.

Each container accumulates declarations for one module, in declaration
order, and exposes them only as read-only tuples. The order is preserved
all the way to the serialized descriptor.

Usage:
    out = PinOutputContainer()
    out.standard_pin("jdbc", lambda spec: spec.property("db.schema"))
    out.pin("it.water.custom", lambda spec: spec.property("custom.key"))

    inp = PinInputContainer()
    inp.standard_pin("api-gateway")                      # required from catalog
    inp.pin("it.water.other", lambda spec: setattr(spec, "required", False))
"""

from __future__ import annotations

from typing import List, Tuple

from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import PINS
from water_workspace.pins.catalog import StandardPins
from water_workspace.pins.property import Configure, PinProperty, apply_configure
from water_workspace.pins.specs import InputPin, OutputPin, upsert_property

logger = get_logger(__name__)


class PinOutputContainer:
    """Output PIN declarations (`output { ... }` block)."""

    def __init__(self) -> None:
        self._pins: List[OutputPin] = []

    def pin(self, id: str, configure: Configure[OutputPin] = None) -> OutputPin:
        """Declare a custom output PIN with an explicit property schema."""
        spec = apply_configure(OutputPin(id), configure)
        self._pins.append(spec)
        logger.debug(f"{PINS} Declared output pin {id!r} ({len(spec.properties)} properties)")
        return spec

    def standard_pin(self, mnemonic: str, configure: Configure[OutputPin] = None) -> OutputPin:
        """
        Declare a standard output PIN from the catalog.

        With `configure`, the catalog copy is extended before being appended;
        catalog properties come first, then the newly declared ones.

        Raises:
            UnknownStandardPinError: If `mnemonic` is not in the catalog
        """
        spec = apply_configure(StandardPins.require(mnemonic), configure)
        self._pins.append(spec)
        logger.debug(f"{PINS} Declared standard output pin {mnemonic!r} -> {spec.id!r}")
        return spec

    @property
    def pins(self) -> Tuple[OutputPin, ...]:
        return tuple(self._pins)


class PinInputContainer:
    """Input PIN declarations (`input { ... }` block)."""

    def __init__(self) -> None:
        self._pins: List[InputPin] = []

    def pin(self, id: str, configure: Configure[InputPin] = None) -> InputPin:
        """Declare an input PIN; required unless `configure` says otherwise."""
        spec = apply_configure(InputPin(id, required=True), configure)
        self._pins.append(spec)
        logger.debug(f"{PINS} Declared input pin {id!r} (required={spec.required})")
        return spec

    def standard_pin(self, mnemonic: str, configure: Configure[InputPin] = None) -> InputPin:
        """
        Declare a standard input PIN.

        `required` is taken from the catalog entry and may be overridden by
        `configure`.

        Raises:
            UnknownStandardPinError: If `mnemonic` is not in the catalog
        """
        base = StandardPins.require(mnemonic)
        spec = apply_configure(InputPin(base.id, required=base.required), configure)
        self._pins.append(spec)
        logger.debug(f"{PINS} Declared standard input pin {mnemonic!r} (required={spec.required})")
        return spec

    @property
    def pins(self) -> Tuple[InputPin, ...]:
        return tuple(self._pins)


class ModulePropertiesContainer:
    """Module-level property declarations (`properties { ... }` block)."""

    def __init__(self) -> None:
        self._properties: List[PinProperty] = []

    # Defined before property() below, which shadows the builtin in the class body.
    @property
    def properties(self) -> Tuple[PinProperty, ...]:
        return tuple(self._properties)

    def property(self, key: str, configure: Configure[PinProperty] = None) -> PinProperty:
        spec = apply_configure(PinProperty(key), configure)
        upsert_property(self._properties, spec)
        return spec


__all__ = ["ModulePropertiesContainer", "PinInputContainer", "PinOutputContainer"]
