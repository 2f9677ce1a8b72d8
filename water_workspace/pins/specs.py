# water_workspace/pins/specs.py
"""
Output and input PIN specs.

An output PIN is a named group of properties a module provides values for.
An input PIN is a capability a module requires from some other module's output.
"""

from __future__ import annotations

from typing import List, Tuple

from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import PINS
from water_workspace.pins.property import Configure, PinProperty, apply_configure

logger = get_logger(__name__)


def upsert_property(properties: List[PinProperty], spec: PinProperty) -> None:
    """
    Add `spec` to `properties`.

    An existing key is replaced in place (last write wins, position kept).
    """
    for i, existing in enumerate(properties):
        if existing.key == spec.key:
            logger.debug(f"{PINS} Property {spec.key!r} redeclared, replacing previous declaration")
            properties[i] = spec
            return
    properties.append(spec)


class OutputPin:
    """
    An output PIN declared by a module.

    DSL:
        pin.property("db.host", lambda p: setattr(p, "default_value", "localhost"))
    """

    def __init__(self, id: str, required: bool = False) -> None:
        self._id = id
        self.required = required
        self._properties: List[PinProperty] = []

    @property
    def id(self) -> str:
        return self._id

    # Defined before property() below, which shadows the builtin in the class body.
    @property
    def properties(self) -> Tuple[PinProperty, ...]:
        """Read-only view; add properties through property()."""
        return tuple(self._properties)

    def property(self, key: str, configure: Configure[PinProperty] = None) -> PinProperty:
        """Declare a property on this PIN and return it."""
        spec = apply_configure(PinProperty(key), configure)
        upsert_property(self._properties, spec)
        return spec

    def add_property(
        self,
        key: str,
        required: bool = True,
        sensitive: bool = False,
        default_value: str = "",
        description: str = "",
    ) -> PinProperty:
        """Positional shorthand used to build catalog entries."""
        spec = PinProperty(
            key=key,
            required=required,
            sensitive=sensitive,
            default_value=default_value,
            description=description,
        )
        upsert_property(self._properties, spec)
        return spec

    def copy(self) -> OutputPin:
        """Deep copy: every property object is cloned too."""
        clone = OutputPin(self._id, self.required)
        clone._properties = [p.copy() for p in self._properties]
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutputPin):
            return NotImplemented
        return (
            self._id == other._id
            and self.required == other.required
            and self._properties == other._properties
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OutputPin(id={self._id!r}, required={self.required}, properties={len(self._properties)})"


class InputPin:
    """
    An input PIN declared by a module.

    `properties` stays empty unless the module also provides an output PIN
    with the same id; the inheritance resolver then attaches clones of them.
    """

    def __init__(self, id: str, required: bool = True) -> None:
        self._id = id
        self.required = required
        self._properties: List[PinProperty] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def properties(self) -> Tuple[PinProperty, ...]:
        return tuple(self._properties)

    def attach_properties(self, properties: Tuple[PinProperty, ...]) -> None:
        """Replace the attached properties with clones of `properties`."""
        self._properties = [p.copy() for p in properties]

    def copy(self) -> InputPin:
        clone = InputPin(self._id, self.required)
        clone._properties = [p.copy() for p in self._properties]
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputPin):
            return NotImplemented
        return (
            self._id == other._id
            and self.required == other.required
            and self._properties == other._properties
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"InputPin(id={self._id!r}, required={self.required})"


__all__ = ["InputPin", "OutputPin", "upsert_property"]
