# water_workspace/cli/commands/discover.py
"""
List module addresses.

Usage:
    water discover            # Current directory
    water discover ./repo     # Explicit root
"""

from __future__ import annotations

from pathlib import Path

import typer

from water_workspace.cli.ui import ui
from water_workspace.cli.utils import fail
from water_workspace.config.loader import load_workspace_config
from water_workspace.core.exceptions import WaterError
from water_workspace.workspace.discovery import WorkspaceWalker
from water_workspace.workspace.tree import FileSystemTree


def command(root: Path) -> None:
    if not root.is_dir():
        ui.error(f"Workspace root not found: {root}")
        raise typer.Exit(code=1)

    try:
        config = load_workspace_config(root=root.resolve())
    except WaterError as e:
        fail(e)

    result = WorkspaceWalker.from_config(config).walk(FileSystemTree(root.resolve()))

    for address in result.addresses:
        typer.echo(f"{config.address_separator}{address}")

    for path, message in result.errors:
        ui.warning(f"Skipped {path}: {message}")
