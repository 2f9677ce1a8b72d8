# water_workspace/pins/property.py
"""
A single configuration property belonging to a PIN or to a module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

# One callback shape for the whole DSL: receives the new object, mutates it in place.
Configure = Optional[Callable[[T], object]]

MASK = "******"


def apply_configure(target: T, configure: Configure[T]) -> T:
    """Run a DSL configuration callback against `target` and return it."""
    if configure is not None:
        configure(target)
    return target


@dataclass(eq=True)
class PinProperty:
    """
    Describes a single property belonging to a Water PIN.

    Mutable while being declared; every effective PIN holds its own clones.
    `sensitive` values are never shown in plaintext (see display_default()).
    """

    key: str
    required: bool = True
    sensitive: bool = False
    default_value: str = ""
    description: str = ""
    type: str = "string"
    env_var: str = ""

    def copy(self) -> PinProperty:
        """Return an independent clone."""
        return PinProperty(
            key=self.key,
            required=self.required,
            sensitive=self.sensitive,
            default_value=self.default_value,
            description=self.description,
            type=self.type,
            env_var=self.env_var,
        )

    def display_default(self) -> str:
        """Default value safe for logs and console output."""
        if self.sensitive and self.default_value:
            return MASK
        return self.default_value

    def __repr__(self) -> str:
        return (
            f"PinProperty(key={self.key!r}, required={self.required}, "
            f"sensitive={self.sensitive}, default_value={self.display_default()!r}, "
            f"type={self.type!r})"
        )


__all__ = ["Configure", "MASK", "PinProperty", "apply_configure"]
