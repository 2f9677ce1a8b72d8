# water_workspace/cli/commands/__init__.py
"""CLI command implementations, imported lazily by water_workspace.cli.cli."""
