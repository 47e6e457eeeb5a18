"""Bench command implementation."""

from typing import final

from typing_extensions import override

from pathgrammar.harness import BenchResult, benchmark
from pathgrammar.ui.cli.args.options import BenchArgs
from pathgrammar.ui.cli.commands.base import CommandExecutor
from pathgrammar.ui.cli.display.bench_result import BenchDisplay


@final
class BenchCommand(CommandExecutor[BenchArgs, list[BenchResult]]):
    """Time every contender over the selected corpus."""

    display: BenchDisplay

    def __init__(self, args: BenchArgs) -> None:
        super().__init__(args)
        self.display = BenchDisplay()

    @override
    def execute(self) -> list[BenchResult]:
        corpus = self.resolve_corpus(self.args.corpus, self.args.family)
        results = benchmark(corpus, self.args.family, self.args.repeat)
        self.display.show_results(results, repeat=self.args.repeat, quiet=self.args.quiet)
        return results
