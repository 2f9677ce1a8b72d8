# water_workspace/cli/__init__.py
"""
Water CLI.

Usage:
    water discover           # List module addresses under the workspace
    water modules            # Module metadata as JSON
    water catalog            # Standard PIN catalog
    water show :module       # Render one descriptor to stdout
    water generate           # Emit every descriptor
"""

from water_workspace.cli.cli import app

__all__ = ["app"]
