"""Compare command implementation."""

from typing import final

from typing_extensions import override

from pathgrammar.harness import StrategyReport, compare_native, compare_strategies
from pathgrammar.ui.cli.args.options import CompareArgs
from pathgrammar.ui.cli.commands.base import CommandExecutor
from pathgrammar.ui.cli.display.report import ReportDisplay


@final
class CompareCommand(CommandExecutor[CompareArgs, list[StrategyReport]]):
    """Run the strategy comparison and, optionally, the native comparison."""

    display: ReportDisplay

    def __init__(self, args: CompareArgs) -> None:
        super().__init__(args)
        self.display = ReportDisplay()

    @override
    def execute(self) -> list[StrategyReport]:
        """Execute the comparison.

        Returns:
            The strategy report first, then the native report when requested.
        """
        corpus = self.resolve_corpus(self.args.corpus, self.args.family)
        reports = [compare_strategies(corpus, self.args.family)]
        self.display.show_report(reports[0], title="Tokenizer strategies", quiet=self.args.quiet)

        if self.args.native:
            native = compare_native(corpus, self.args.family)
            reports.append(native)
            self.display.show_report(native, title="Native pure paths", quiet=self.args.quiet)
        return reports
