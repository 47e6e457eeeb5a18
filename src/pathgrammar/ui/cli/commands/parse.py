"""Parse command implementation."""

from typing import final

from typing_extensions import override

from pathgrammar.features.algebra import normalize
from pathgrammar.features.value import parse
from pathgrammar.platform.logging import logger
from pathgrammar.shared.errors import PathGrammarError
from pathgrammar.ui.cli.args.options import ParseArgs
from pathgrammar.ui.cli.commands.base import CommandExecutor
from pathgrammar.ui.cli.display.parse_result import ParseDisplay
from pathgrammar.ui.cli.models import ParseOutcome


@final
class ParseCommand(CommandExecutor[ParseArgs, list[ParseOutcome]]):
    """Parse each command line path and render the results."""

    display: ParseDisplay

    def __init__(self, args: ParseArgs) -> None:
        super().__init__(args)
        self.display = ParseDisplay()

    @override
    def execute(self) -> list[ParseOutcome]:
        """Parse every path; one failure never stops the others.

        Returns:
            List of outcomes in input order.
        """
        outcomes: list[ParseOutcome] = []
        family = self.args.family
        for raw in self.args.paths:
            try:
                value = parse(raw, family, strict=self.args.strict)
            except PathGrammarError as e:
                logger.error(
                    "%s",
                    e.reason,
                    extra={"path_event": "parse.error", "path_text": raw, "path_family": family.value},
                )
                outcomes.append(ParseOutcome(path=raw, error=e))
                continue

            logger.debug(
                "Parsed %d components",
                len(value.components),
                extra={"path_event": "parse.success", "path_text": raw, "path_family": family.value},
            )
            normalized = normalize(value) if self.args.normalize else None
            outcomes.append(ParseOutcome(path=raw, value=value, normalized=normalized))

        self.display.show_outcomes(outcomes, normalized=self.args.normalize, quiet=self.args.quiet)
        return outcomes
