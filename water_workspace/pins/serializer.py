# water_workspace/pins/serializer.py
"""
Descriptor serialization.

Builds the pretty-printed `<artifactId>-<version>.water.json` document.

The rendered string is the emission step's only cache key, so the output
must be byte-stable: every mapping is built in a fixed insertion order and
nothing is ever sorted or rehashed.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from water_workspace.pins.property import PinProperty
from water_workspace.pins.specs import InputPin, OutputPin

SCHEMA_VERSION = "1.0"


def render_descriptor(
    artifact_id: str,
    module_id: str,
    display_name: Optional[str],
    description: Optional[str],
    module_properties: Sequence[PinProperty],
    output_pins: Sequence[OutputPin],
    input_pins: Sequence[InputPin],
    *,
    schema_version: str = SCHEMA_VERSION,
    mask_sensitive: bool = False,
) -> str:
    """
    Render the descriptor JSON.

    Args:
        artifact_id: Artifact coordinate (group:artifactId:version)
        module_id: Module identifier (modules without one never get here)
        display_name: Human-readable name, may be None
        description: Free text, may be None
        module_properties: Module-level properties
        output_pins: Effective output PINs
        input_pins: Effective input PINs
        mask_sensitive: Mask sensitive defaults, for console display only

    Returns:
        Pretty-printed JSON; both pins.output and pins.input are always present
    """
    descriptor: Dict[str, Any] = {
        "schemaVersion": schema_version,
        "artifactId": artifact_id,
        "moduleId": module_id,
        "displayName": display_name,
        "description": description,
        "properties": _module_properties(module_properties, mask_sensitive),
        "pins": {
            "output": _outputs(output_pins, mask_sensitive),
            "input": _inputs(input_pins),
        },
    }
    return json.dumps(descriptor, indent=2, ensure_ascii=False)


def _default(prop: PinProperty, mask_sensitive: bool) -> str:
    return prop.display_default() if mask_sensitive else prop.default_value


def _module_properties(properties: Sequence[PinProperty], mask_sensitive: bool) -> List[Dict[str, Any]]:
    return [
        {
            "key": prop.key,
            "type": prop.type,
            "envVar": prop.env_var,
            "required": prop.required,
            "sensitive": prop.sensitive,
            "defaultValue": _default(prop, mask_sensitive),
            "description": prop.description,
        }
        for prop in properties
    ]


def _outputs(pins: Sequence[OutputPin], mask_sensitive: bool) -> List[Dict[str, Any]]:
    return [
        {
            "id": pin.id,
            "required": pin.required,
            "properties": [
                {
                    "key": prop.key,
                    "required": prop.required,
                    "sensitive": prop.sensitive,
                    "defaultValue": _default(prop, mask_sensitive),
                }
                for prop in pin.properties
            ],
        }
        for pin in pins
    ]


def _inputs(pins: Sequence[InputPin]) -> List[Dict[str, Any]]:
    return [{"id": pin.id, "required": pin.required} for pin in pins]


__all__ = ["SCHEMA_VERSION", "render_descriptor"]
