"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from pathgrammar.shared.family import Family


@final
@dataclass(slots=True)
class ParseArgs:
    """Command line arguments for the ``parse`` subcommand."""

    command: Literal["parse"]
    paths: list[str]
    family: Family
    strict: bool
    normalize: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class CompareArgs:
    """Command line arguments for the ``compare`` subcommand."""

    command: Literal["compare"]
    corpus: Path | None
    family: Family
    native: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class BenchArgs:
    """Command line arguments for the ``bench`` subcommand."""

    command: Literal["bench"]
    corpus: Path | None
    family: Family
    repeat: int
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    target: Path | None
    force: bool
    verbose: bool
    quiet: bool


CLIArgs = ParseArgs | CompareArgs | BenchArgs | InitConfigArgs

__all__ = ["BenchArgs", "CLIArgs", "CompareArgs", "InitConfigArgs", "ParseArgs"]
