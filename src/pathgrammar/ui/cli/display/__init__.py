"""Display management for CLI interface."""

from pathgrammar.ui.cli.display.bench_result import BenchDisplay
from pathgrammar.ui.cli.display.parse_result import ParseDisplay
from pathgrammar.ui.cli.display.report import ReportDisplay

__all__ = ["BenchDisplay", "ParseDisplay", "ReportDisplay"]
