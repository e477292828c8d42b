# folio/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from folio.cli.ui import ui, console

    ui.header("folio check", "content/")
    ui.success("Done!")

Every message is escaped before printing, so text containing square
brackets (rule names, YAML snippets) is never read as Rich markup.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()


class UI:
    """Unified output helpers with consistent styling."""

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a command header in a fitted box."""
        content = f"[bold]{escape(title)}[/bold]"
        if subtitle:
            content += f"\n[dim]{escape(subtitle)}[/dim]"
        console.print(Panel.fit(content, border_style="blue"))

    def section(self, title: str) -> None:
        """Print a section header."""
        console.print(f"\n[bold cyan]{escape(title)}[/bold cyan]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}{detail_str}")

    def info(self, msg: str) -> None:
        """Print an info/dim message."""
        console.print(f"[dim]{escape(msg)}[/dim]")

    def table(
        self,
        columns: Sequence[str],
        rows: Iterable[Sequence[str]],
        title: str = "",
    ) -> None:
        """Print rows as a table. Cell text is escaped."""
        table = Table(title=title or None, show_header=True, header_style="bold cyan")
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*(escape(cell) for cell in row))
        console.print(table)

    def yaml(self, text: str, title: str = "") -> None:
        """Print YAML with syntax highlighting inside a panel."""
        console.print(Panel(Syntax(text, "yaml", word_wrap=True), title=title or None, border_style="blue"))


ui = UI()

__all__ = ["ui", "UI", "console"]
