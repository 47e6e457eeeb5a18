"""Command line interface for pathgrammar."""

import sys
from typing import final

from pathgrammar.harness import StrategyReport
from pathgrammar.platform.logging import logger
from pathgrammar.ui.cli.args import ArgumentParser
from pathgrammar.ui.cli.args.options import (
    BenchArgs,
    CLIArgs,
    CompareArgs,
    InitConfigArgs,
    ParseArgs,
)
from pathgrammar.ui.cli.commands import (
    BenchCommand,
    CompareCommand,
    InitConfigCommand,
    ParseCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ParseArgs):
                outcomes = ParseCommand(args).execute()
                if any(not outcome.success for outcome in outcomes):
                    sys.exit(1)
                return

            if isinstance(args, CompareArgs):
                reports = CompareCommand(args).execute()
                if CommandProcessor._has_strategy_divergence(reports):
                    sys.exit(1)
                return

            if isinstance(args, BenchArgs):
                _ = BenchCommand(args).execute()
                return

            assert isinstance(args, InitConfigArgs)
            if InitConfigCommand(args).execute() is None:
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _has_strategy_divergence(reports: list[StrategyReport]) -> bool:
        """Only the strategy report gates the exit code; native diffs are informational."""

        return bool(reports) and not reports[0].ok


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
