# water_workspace/pins/descriptor.py
"""
Per-module `waterDescriptor` DSL aggregate.

    descriptor = ModuleDescriptor(name=":User-service")
    descriptor.module_id = "it.water.user"
    descriptor.display_name = "User Service"
    descriptor.output(lambda out: out.standard_pin("authentication-issuer"))
    descriptor.input(lambda inp: inp.standard_pin("jdbc"))

A module that never sets `module_id` opts out: no descriptor is rendered or
emitted for it.

To inherit all PINs (input and output) of another module:

    spring = ModuleDescriptor(name=":User-service-spring")
    spring.module_id = "it.water.user.spring"
    spring.inherits_from(descriptor)

Own `input` / `output` declarations are merged on top of the inherited ones
by InheritanceResolver.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from water_workspace.pins.containers import (
    ModulePropertiesContainer,
    PinInputContainer,
    PinOutputContainer,
)


class ModuleDescriptor:
    """Identity, display metadata, own PINs and inheritance references of one module."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.module_id: Optional[str] = None
        self.display_name: Optional[str] = None
        self.description: Optional[str] = None
        self._output = PinOutputContainer()
        self._input = PinInputContainer()
        self._properties = ModulePropertiesContainer()
        self._inherits_from: List[ModuleDescriptor] = []

    # -------------------------------------------------------------------------
    # DSL blocks
    # -------------------------------------------------------------------------

    def output(self, configure: Callable[[PinOutputContainer], object]) -> None:
        configure(self._output)

    def input(self, configure: Callable[[PinInputContainer], object]) -> None:
        configure(self._input)

    def properties(self, configure: Callable[[ModulePropertiesContainer], object]) -> None:
        configure(self._properties)

    def inherits_from(self, other: ModuleDescriptor) -> None:
        """
        Inherit all PINs declared by `other`.

        Can be called multiple times; later references win ties between
        inherited PINs with the same id.
        """
        self._inherits_from.append(other)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def enabled(self) -> bool:
        """False when the module opted out (module_id never set). An empty id still counts as set."""
        return self.module_id is not None

    @property
    def output_container(self) -> PinOutputContainer:
        return self._output

    @property
    def input_container(self) -> PinInputContainer:
        return self._input

    @property
    def properties_container(self) -> ModulePropertiesContainer:
        return self._properties

    @property
    def inherited(self) -> Tuple[ModuleDescriptor, ...]:
        return tuple(self._inherits_from)

    def __repr__(self) -> str:
        return (
            f"ModuleDescriptor(name={self.name!r}, module_id={self.module_id!r}, "
            f"outputs={len(self._output.pins)}, inputs={len(self._input.pins)}, "
            f"inherits_from={[d.name for d in self._inherits_from]})"
        )


__all__ = ["ModuleDescriptor"]
