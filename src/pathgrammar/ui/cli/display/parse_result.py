"""src/pathgrammar/ui/cli/display/parse_result.py
What: Render parsed paths as a Rich table.
Why: Show prefix, root and components side by side for quick inspection.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathgrammar.ui.cli.models import ParseOutcome


@final
class ParseDisplay:
    """Handles parse result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_outcomes(
        self, outcomes: Sequence[ParseOutcome], *, normalized: bool = False, quiet: bool = False
    ) -> None:
        """Display one table row per parsed path.

        Args:
            outcomes: Parse results in input order.
            normalized: Whether to add the normalized form column.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        table = Table(title="Parsed Paths")
        _ = table.add_column("Input", style="cyan", no_wrap=True)
        _ = table.add_column("Prefix", style="magenta")
        _ = table.add_column("Root", style="yellow")
        _ = table.add_column("Components", style="green")
        _ = table.add_column("File Name", style="blue")
        _ = table.add_column("Extension", style="blue")
        if normalized:
            _ = table.add_column("Normalized", style="green")

        for outcome in outcomes:
            value = outcome.value
            if value is None:
                message = escape(str(outcome.error))
                row = [escape(outcome.path), "[red]error[/red]", "", f"[red]{message}[/red]", "", ""]
                if normalized:
                    row.append("")
                _ = table.add_row(*row)
                continue

            row = [
                escape(outcome.path),
                escape(value.prefix.render()) or "-",
                value.root.value,
                escape(", ".join(repr(component.text) for component in value.components)) or "-",
                escape(value.file_name() or "-"),
                "-" if value.extension() is None else escape(repr(value.extension())),
            ]
            if normalized:
                row.append(escape(str(outcome.normalized)) if outcome.normalized is not None else "")
            _ = table.add_row(*row)

        self.console.print(table)
