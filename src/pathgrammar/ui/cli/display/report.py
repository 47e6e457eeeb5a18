"""Rendering of strategy comparison reports."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathgrammar.harness import StrategyReport


@final
class ReportDisplay:
    """Handles comparison report display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_report(self, report: StrategyReport, *, title: str, quiet: bool = False) -> None:
        """Print a summary line and a table of divergences, if any."""
        if quiet:
            return

        self.console.print(f"\n[bold]{title} ({report.family.value}):[/bold]")
        self.console.print(f"Paths checked: {report.checked}")
        if report.rejected:
            self.console.print(f"[yellow]Rejected (malformed prefix): {len(report.rejected)}[/yellow]")

        if report.ok:
            self.console.print("[green]No divergences[/green]")
            return

        table = Table(title="Divergences")
        _ = table.add_column("Input", style="cyan", no_wrap=True)
        _ = table.add_column("Expected", style="green")
        _ = table.add_column("Actual", style="red")
        _ = table.add_column("Detail", style="yellow")
        for divergence in report.divergences:
            _ = table.add_row(
                escape(divergence.path),
                escape(" | ".join(divergence.expected)),
                escape(" | ".join(divergence.actual)),
                escape(divergence.detail),
            )
        self.console.print(table)
