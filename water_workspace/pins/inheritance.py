# water_workspace/pins/inheritance.py
"""
Inheritance resolution for module descriptors.

effective(M) = merge(effective(R1), ..., effective(Rn), own(M))

where R1..Rn are M's inheritsFrom references in declaration order.

Merge policy:
- PINs are identified by id; a later source replaces an earlier one wholesale
  (properties and required flag, no per-property merge).
- The module's own declarations are merged last, so they always win.
- A PIN keeps the position of its first appearance.
- An id a module declares twice among its own outputs (or inputs) keeps
  only the last declaration, at the first position; this is logged at WARNING.
- Referenced descriptors are only read; everything returned is a clone.

Precondition: every referenced module has finished its declarative
configuration. The workspace host guarantees this by resolving only in its
finalize phase.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from water_workspace.core.exceptions import InheritanceCycleError
from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import INHERIT
from water_workspace.pins.descriptor import ModuleDescriptor
from water_workspace.pins.specs import InputPin, OutputPin

logger = get_logger(__name__)


@dataclass
class EffectivePins:
    """Merged output and input PINs of one module, ready to serialize."""

    outputs: List[OutputPin] = field(default_factory=list)
    inputs: List[InputPin] = field(default_factory=list)

    def output_ids(self) -> List[str]:
        return [p.id for p in self.outputs]

    def input_ids(self) -> List[str]:
        return [p.id for p in self.inputs]


def _label(descriptor: ModuleDescriptor) -> str:
    return descriptor.name or descriptor.module_id or f"<module@{id(descriptor):x}>"


class InheritanceResolver:
    """
    Resolves effective PINs, depth-first, with cycle detection.

    One resolver may be reused for several modules; results of referenced
    modules are memoized so shared ancestors are resolved once.

    Usage:
        resolver = InheritanceResolver()
        effective = resolver.resolve(descriptor)
    """

    def __init__(self) -> None:
        self._resolved: Dict[int, EffectivePins] = {}

    def resolve(self, descriptor: ModuleDescriptor) -> EffectivePins:
        """
        Return the effective PINs of `descriptor`.

        Raises:
            InheritanceCycleError: If the inheritsFrom chain loops
        """
        effective = self._resolve(descriptor, [])
        result = EffectivePins(
            outputs=[p.copy() for p in effective.outputs],
            inputs=[p.copy() for p in effective.inputs],
        )
        _attach_matching_properties(result)
        return result

    def _resolve(self, descriptor: ModuleDescriptor, stack: List[ModuleDescriptor]) -> EffectivePins:
        key = id(descriptor)
        if key in self._resolved:
            return self._resolved[key]

        if any(d is descriptor for d in stack):
            start = next(i for i, d in enumerate(stack) if d is descriptor)
            cycle = [_label(d) for d in stack[start:]] + [_label(descriptor)]
            raise InheritanceCycleError(cycle)

        outputs: Dict[str, OutputPin] = {}
        inputs: Dict[str, InputPin] = {}

        stack.append(descriptor)
        try:
            for parent in descriptor.inherited:
                inherited = self._resolve(parent, stack)
                _merge(outputs, inherited.outputs, _label(parent))
                _merge(inputs, inherited.inputs, _label(parent))
        finally:
            stack.pop()

        own_name = _label(descriptor)
        _warn_duplicates(descriptor.output_container.pins, "output", own_name)
        _warn_duplicates(descriptor.input_container.pins, "input", own_name)
        _merge(outputs, descriptor.output_container.pins, own_name)
        _merge(inputs, descriptor.input_container.pins, own_name)

        effective = EffectivePins(
            outputs=[p.copy() for p in outputs.values()],
            inputs=[p.copy() for p in inputs.values()],
        )
        self._resolved[key] = effective

        if descriptor.inherited:
            logger.debug(
                f"{INHERIT} {own_name}: inherited from "
                f"{[_label(d) for d in descriptor.inherited]} -> "
                f"outputs={effective.output_ids()}, inputs={effective.input_ids()}"
            )
        return effective


def _merge(target: Dict[str, object], pins: Tuple | List, source: str) -> None:
    for pin in pins:
        if pin.id in target:
            logger.debug(f"{INHERIT} PIN {pin.id!r} overridden by {source}")
        target[pin.id] = pin


def _warn_duplicates(pins: Tuple, kind: str, owner: str) -> None:
    seen = set()
    for pin in pins:
        if pin.id in seen:
            logger.warning(
                f"{INHERIT} {owner}: {kind} PIN {pin.id!r} declared more than once, "
                f"keeping the last declaration"
            )
        seen.add(pin.id)


def _attach_matching_properties(effective: EffectivePins) -> None:
    """Inputs that the module also provides get clones of the output's properties."""
    by_id = {p.id: p for p in effective.outputs}
    for pin in effective.inputs:
        match: Optional[OutputPin] = by_id.get(pin.id)
        if match is not None:
            pin.attach_properties(match.properties)


def resolve_effective_pins(descriptor: ModuleDescriptor) -> EffectivePins:
    """Convenience wrapper around a one-off InheritanceResolver."""
    return InheritanceResolver().resolve(descriptor)


__all__ = ["EffectivePins", "InheritanceResolver", "resolve_effective_pins"]
