# water_workspace/cli/commands/show.py
"""
Render one module's descriptor to stdout without writing it.

Sensitive defaults are masked; the emitted file keeps them as declared.
"""

from __future__ import annotations

from pathlib import Path

import typer

from water_workspace.cli.utils import configured_workspace, fail
from water_workspace.core.exceptions import WaterError


def command(address: str, root: Path) -> None:
    workspace = configured_workspace(root)
    try:
        document = workspace.render(address, mask_sensitive=True)
    except WaterError as e:
        fail(e)
    typer.echo(document)
