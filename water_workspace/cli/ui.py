# water_workspace/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from water_workspace.cli.ui import ui

    ui.header("Generate descriptors")
    ui.success("Done!")
    ui.error("Something broke")
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


class UI:
    """Consistent console output for all commands."""

    def print(self, msg: str, style: str = "") -> None:
        if style:
            console.print(f"[{style}]{msg}[/{style}]")
        else:
            console.print(msg)

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a fitted command header box."""
        if subtitle:
            content = f"[bold]{title}[/bold]\n[dim]{subtitle}[/dim]"
        else:
            content = f"[bold]{title}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")

    def warning(self, msg: str) -> None:
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}", highlight=False)

    def table(self, title: str, columns: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        table = Table(title=title, show_lines=False)
        for column in columns:
            table.add_column(column, overflow="fold")
        for row in rows:
            table.add_row(*row)
        console.print(table)


ui = UI()

__all__ = ["UI", "console", "ui"]
