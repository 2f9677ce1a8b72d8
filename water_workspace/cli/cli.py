# water_workspace/cli/cli.py
"""
Water CLI - Main application.

Commands:
    water discover     List module addresses found under the workspace
    water modules      Print module metadata (address, parent, path, coordinate) as JSON
    water catalog      Show the standard PIN catalog
    water show         Render one module's descriptor
    water generate     Write every module's descriptor under build/water/

NOTE: Commands use lazy loading - the implementation is imported only when a command is invoked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from water_workspace.logging.logger import configure_logging

app = typer.Typer(
    name="water",
    help="Water workspace tooling: discover modules and generate PIN descriptors.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("discover")
def discover(
    root: Path = typer.Argument(Path("."), help="Workspace root directory."),
) -> None:
    """List module addresses in discovery order."""
    from water_workspace.cli.commands import discover as mod

    mod.command(root=root)


@app.command("modules")
def modules(
    root: Path = typer.Argument(Path("."), help="Workspace root directory."),
) -> None:
    """Print every registered module as JSON."""
    from water_workspace.cli.commands import modules as mod

    mod.command(root=root)


@app.command("catalog")
def catalog(
    mnemonic: Optional[str] = typer.Argument(None, help="Show a single standard PIN."),
) -> None:
    """Show the standard PIN catalog."""
    from water_workspace.cli.commands import catalog as mod

    mod.command(mnemonic=mnemonic)


@app.command("show")
def show(
    address: str = typer.Argument(..., help="Module address, e.g. :user or user:api."),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Workspace root directory."),
) -> None:
    """Render one module's descriptor to stdout."""
    from water_workspace.cli.commands import show as mod

    mod.command(address=address, root=root)


@app.command("generate")
def generate(
    root: Path = typer.Argument(Path("."), help="Workspace root directory."),
    force: bool = typer.Option(False, "--force", "-f", help="Rewrite descriptors even when unchanged."),
) -> None:
    """Generate every module's descriptor."""
    from water_workspace.cli.commands import generate as mod

    mod.command(root=root, force=force)


@app.command("version")
def version() -> None:
    """Show version."""
    from water_workspace import __version__

    typer.echo(f"water-workspace {__version__}")


if __name__ == "__main__":
    app()
