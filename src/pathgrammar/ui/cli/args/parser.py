"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from pathgrammar.config import settings
from pathgrammar.config.config import Config
from pathgrammar.config.paths import default_log_file
from pathgrammar.platform.logging import logger, setup_logger
from pathgrammar.shared.family import Family
from pathgrammar.ui.cli.args.options import (
    BenchArgs,
    CLIArgs,
    CompareArgs,
    InitConfigArgs,
    ParseArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pathgrammar",
            description="pathgrammar - Parse, compare and benchmark Windows and POSIX path grammars.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        parse_parser = subparsers.add_parser(
            "parse",
            help="Parse paths and show their prefix, root and components",
        )
        _ = parse_parser.add_argument(
            "paths",
            nargs="+",
            help="Path strings to parse",
            metavar="PATH",
        )
        ArgumentParser._add_family_option(parse_parser)
        _ = parse_parser.add_argument(
            "--strict",
            action="store_true",
            help="Reject restricted characters and reserved device names",
        )
        _ = parse_parser.add_argument(
            "--normalize",
            action="store_true",
            help="Show the lexically normalized form of each path",
        )
        ArgumentParser._add_verbosity_options(parse_parser)

        compare_parser = subparsers.add_parser(
            "compare",
            help="Check that both tokenizer strategies agree over a corpus",
        )
        ArgumentParser._add_corpus_option(compare_parser)
        ArgumentParser._add_family_option(compare_parser)
        _ = compare_parser.add_argument(
            "--native",
            action="store_true",
            help="Also diff parsed parts against the standard library's pure path types",
        )
        ArgumentParser._add_verbosity_options(compare_parser)

        bench_parser = subparsers.add_parser(
            "bench",
            help="Time both tokenizer strategies, full parsing and pathlib",
        )
        ArgumentParser._add_corpus_option(bench_parser)
        ArgumentParser._add_family_option(bench_parser)
        _ = bench_parser.add_argument(
            "--repeat",
            type=int,
            default=None,
            metavar="N",
            help="Repetitions over the corpus (defaults to the configured bench_repeat)",
        )
        ArgumentParser._add_verbosity_options(bench_parser)

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a commented configuration file with the current settings",
        )
        _ = init_parser.add_argument(
            "--target",
            type=str,
            help="Destination file (defaults to config/pathgrammar.toml or PATHGRAMMAR_CONFIG)",
            metavar="FILE",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )
        ArgumentParser._add_verbosity_options(init_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If an argument fails validation.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or default_log_file()
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "parse":
            return ParseArgs(
                command="parse",
                paths=list(parsed_args.paths),
                family=ArgumentParser._resolve_family(parser, parsed_args.family),
                strict=bool(parsed_args.strict),
                normalize=bool(parsed_args.normalize),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "compare":
            return CompareArgs(
                command="compare",
                corpus=ArgumentParser._resolve_corpus(parser, parsed_args.corpus),
                family=ArgumentParser._resolve_family(parser, parsed_args.family),
                native=bool(parsed_args.native),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "bench":
            repeat = settings.BENCH_REPEAT if parsed_args.repeat is None else parsed_args.repeat
            if repeat <= 0:
                parser.error("--repeat must be a positive integer")
            return BenchArgs(
                command="bench",
                corpus=ArgumentParser._resolve_corpus(parser, parsed_args.corpus),
                family=ArgumentParser._resolve_family(parser, parsed_args.family),
                repeat=repeat,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "init-config":
            target = Path(parsed_args.target).expanduser() if parsed_args.target else None
            return InitConfigArgs(
                command="init-config",
                target=target,
                force=bool(parsed_args.force),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_family_option(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--family",
            type=str,
            default=None,
            metavar="FAMILY",
            help="Path grammar to use: windows or posix (defaults to the configured family)",
        )

    @staticmethod
    def _add_corpus_option(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--corpus",
            type=str,
            default=None,
            metavar="FILE",
            help="File with one path per line (defaults to the built-in corpus)",
        )

    @staticmethod
    def _add_verbosity_options(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _resolve_family(parser: argparse.ArgumentParser, value: str | None) -> Family:
        """Map ``--family`` to a ``Family``; unset falls back to settings."""
        if value is None:
            return settings.DEFAULT_FAMILY
        try:
            return Family.coerce(value)
        except ValueError as e:
            parser.error(str(e))

    @staticmethod
    def _resolve_corpus(parser: argparse.ArgumentParser, value: str | None) -> Path | None:
        if value is None:
            return None
        corpus = Path(value).expanduser().resolve()
        if not corpus.is_file():
            parser.error(f"Corpus file does not exist: {corpus}")
        return corpus
