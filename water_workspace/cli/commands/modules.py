# water_workspace/cli/commands/modules.py
"""
Print module metadata as JSON.

One object per registered module (root first):
    {"address": ":user:api", "parent": ":user", "path": "...",
     "coordinate": "it.water:api:1.0.0", "moduleId": "it.water.user.api"}
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from water_workspace.cli.utils import configured_workspace


def command(root: Path) -> None:
    workspace = configured_workspace(root)
    sep = workspace.config.address_separator

    rows = []
    for project in workspace.modules:
        parent = workspace.parent_of(project)
        rows.append(
            {
                "address": f"{sep}{project.address}",
                "parent": f"{sep}{parent.address}" if parent is not None else None,
                "path": str(project.directory),
                "coordinate": str(project.coordinate),
                "moduleId": project.descriptor.module_id,
            }
        )

    typer.echo(json.dumps(rows, indent=2, ensure_ascii=False))
