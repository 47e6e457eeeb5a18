"""Command execution package for CLI."""

from pathgrammar.ui.cli.commands.base import CommandExecutor
from pathgrammar.ui.cli.commands.bench import BenchCommand
from pathgrammar.ui.cli.commands.compare import CompareCommand
from pathgrammar.ui.cli.commands.init_config import InitConfigCommand
from pathgrammar.ui.cli.commands.parse import ParseCommand

__all__ = [
    "BenchCommand",
    "CommandExecutor",
    "CompareCommand",
    "InitConfigCommand",
    "ParseCommand",
]
