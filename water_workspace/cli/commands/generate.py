# water_workspace/cli/commands/generate.py
"""
Generate descriptors.

Usage:
    water generate             # Only rewrite changed descriptors
    water generate --force     # Rewrite everything
"""

from __future__ import annotations

from pathlib import Path

from water_workspace.cli.ui import ui
from water_workspace.cli.utils import configured_workspace, fail
from water_workspace.core.exceptions import WaterError


def command(root: Path, force: bool = False) -> None:
    workspace = configured_workspace(root)
    ui.header("Generate descriptors", str(workspace.root))

    try:
        results = workspace.finalize(force=force)
    except WaterError as e:
        fail(e)

    if not results:
        ui.warning("No module declares a moduleId; nothing to generate")
        return

    ui.table(
        "Descriptors",
        ["Artifact", "Status", "File"],
        [
            (str(r.artifact.coordinate), r.status.value, str(r.output_file.relative_to(workspace.root)))
            for r in results
        ],
    )

    written = sum(1 for r in results if r.written)
    ui.success(f"{written} written, {len(results) - written} up-to-date")
