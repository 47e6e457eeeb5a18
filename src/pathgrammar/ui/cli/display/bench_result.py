"""Rendering of benchmark timings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table

from pathgrammar.harness import BenchResult


@final
class BenchDisplay:
    """Handles benchmark display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(self, results: Sequence[BenchResult], *, repeat: int, quiet: bool = False) -> None:
        if quiet:
            return

        table = Table(title=f"Benchmark ({repeat} repetitions)")
        _ = table.add_column("Contender", style="cyan")
        _ = table.add_column("Paths", justify="right")
        _ = table.add_column("Total (s)", justify="right", style="yellow")
        _ = table.add_column("Per path (µs)", justify="right", style="green")
        for result in results:
            _ = table.add_row(
                result.name,
                str(result.paths),
                f"{result.total_seconds:.4f}",
                f"{result.per_path_us:.2f}",
            )
        self.console.print(table)
