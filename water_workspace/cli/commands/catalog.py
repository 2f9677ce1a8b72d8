# water_workspace/cli/commands/catalog.py
"""
Show the standard PIN catalog.

Sensitive defaults are masked.
"""

from __future__ import annotations

from typing import Optional

from water_workspace.cli.ui import ui
from water_workspace.cli.utils import fail
from water_workspace.core.exceptions import UnknownStandardPinError
from water_workspace.pins.catalog import StandardPins


def command(mnemonic: Optional[str] = None) -> None:
    if mnemonic is not None:
        try:
            StandardPins.require(mnemonic)
        except UnknownStandardPinError as e:
            fail(e)
        names = [mnemonic]
    else:
        names = StandardPins.available()

    for name in names:
        spec = StandardPins.require(name)
        required = "required" if spec.required else "optional"
        ui.table(
            f"{name} ({required})",
            ["Key", "Required", "Sensitive", "Default", "Description"],
            [
                (
                    p.key,
                    "yes" if p.required else "no",
                    "yes" if p.sensitive else "no",
                    p.display_default(),
                    p.description,
                )
                for p in spec.properties
            ],
        )
        ui.info(spec.id)
