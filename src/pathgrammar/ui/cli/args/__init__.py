"""Command line argument handling package."""

from pathgrammar.ui.cli.args.parser import ArgumentParser
from pathgrammar.ui.cli.args.options import (
    BenchArgs,
    CLIArgs,
    CompareArgs,
    InitConfigArgs,
    ParseArgs,
)

__all__ = ["ArgumentParser", "BenchArgs", "CLIArgs", "CompareArgs", "InitConfigArgs", "ParseArgs"]
