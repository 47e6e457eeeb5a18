"""src/pathgrammar/ui/cli/commands/base.py
What: Provide shared wiring for CLI command executors.
Why: Reuse corpus loading and the command contract across subcommands.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from pathgrammar.harness import corpus_for, load_corpus
from pathgrammar.shared.family import Family

ArgsT = TypeVar("ArgsT")
ResultT = TypeVar("ResultT")


class CommandExecutor(ABC, Generic[ArgsT, ResultT]):
    """Base class for command execution."""

    args: ArgsT

    def __init__(self, args: ArgsT) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args

    @abstractmethod
    def execute(self) -> ResultT:
        """Execute the command.

        Returns:
            Command specific results.
        """
        pass

    @staticmethod
    def resolve_corpus(corpus: Path | None, family: Family) -> list[str]:
        """Read ``corpus`` when given, else use the built-in corpus for ``family``."""
        if corpus is None:
            return list(corpus_for(family))
        return load_corpus(corpus)
