# water_workspace/cli/utils.py
"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from water_workspace.cli.ui import ui
from water_workspace.core.exceptions import WaterError
from water_workspace.logging.logger import get_logger
from water_workspace.logging.tags import CLI
from water_workspace.workspace.host import Workspace

logger = get_logger(__name__)


def fail(error: Exception) -> NoReturn:
    """Report `error` and exit with status 1."""
    logger.debug(f"{CLI} Command failed: {error!r}")
    ui.error(str(error))
    raise typer.Exit(code=1)


def configured_workspace(root: Path) -> Workspace:
    """Build and configure the workspace at `root`, exiting on any WaterError."""
    if not root.is_dir():
        ui.error(f"Workspace root not found: {root}")
        raise typer.Exit(code=1)
    try:
        workspace = Workspace(root)
        workspace.configure()
    except WaterError as e:
        fail(e)
    return workspace
