"""Differential checks between tokenizer strategies and against ``pathlib``.

Where: harness/compare.py
What: Run both tokenizers over a corpus and diff their components; diff parsed
parts against the standard library's pure path types.
Why: The two strategies must agree exactly; the native comparison is
informational and highlights deliberate grammar differences.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from pathgrammar.features.prefix import recognize
from pathgrammar.features.tokenize import GeneratedTokenizer, ManualTokenizer
from pathgrammar.features.value import parse
from pathgrammar.platform.logging import logger
from pathgrammar.shared.components import ComponentKind
from pathgrammar.shared.errors import PathGrammarError
from pathgrammar.shared.family import Family


@dataclass(frozen=True, slots=True)
class Divergence:
    """One input on which two sides disagree.

    Attributes:
        path: Corpus entry.
        expected: Components (or parts) from the reference side.
        actual: Components (or parts) from the side under test.
        detail: Error text when one side failed to parse.
    """

    path: str
    expected: tuple[str, ...]
    actual: tuple[str, ...]
    detail: str = ""


@dataclass(slots=True)
class StrategyReport:
    """Outcome of a comparison run."""

    family: Family
    checked: int = 0
    divergences: list[Divergence] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.divergences


def compare_strategies(corpus: Iterable[str], family: Family) -> StrategyReport:
    """Tokenize every entry with both strategies and record any difference.

    Entries whose prefix is malformed are listed in ``rejected``; they never
    reach a tokenizer.
    """
    report = StrategyReport(family)
    logger.info(
        "Comparing tokenizer strategies",
        extra={"path_event": "compare.start", "path_family": family.value},
    )
    for path in corpus:
        try:
            recognition = recognize(path, family)
        except PathGrammarError as exc:
            report.rejected.append(path)
            logger.debug("Skipping %r: %s", path, exc)
            continue

        manual = ManualTokenizer(recognition.separators)
        generated = GeneratedTokenizer(recognition.separators)
        expected = tuple(
            str(c) for c in manual.tokenize(path, recognition.start, recognition.end)
        )
        actual = tuple(
            str(c) for c in generated.tokenize(path, recognition.start, recognition.end)
        )
        report.checked += 1
        if expected != actual:
            report.divergences.append(Divergence(path, expected, actual))
            logger.warning(
                "Strategies disagree: manual=%s generated=%s",
                expected,
                actual,
                extra={
                    "path_event": "compare.divergence",
                    "path_text": path,
                    "path_family": family.value,
                },
            )

    logger.info(
        "Compared %d paths, %d divergent, %d rejected",
        report.checked,
        len(report.divergences),
        len(report.rejected),
        extra={"path_event": "compare.complete"},
    )
    return report


def native_parts(path: str, family: Family) -> tuple[str, ...]:
    """``parts`` of the standard library's pure path for ``family``."""
    native: PurePath = PureWindowsPath(path) if family is Family.WINDOWS else PurePosixPath(path)
    return native.parts


def compare_native(corpus: Iterable[str], family: Family) -> StrategyReport:
    """Diff ``PathValue.parts()`` (CurDir removed) against ``pathlib`` parts.

    ``pathlib`` drops ``.`` segments and keeps POSIX ``//`` roots, so some
    divergences are expected.
    """
    report = StrategyReport(family)
    for path in corpus:
        expected = native_parts(path, family)
        try:
            value = parse(path, family)
        except PathGrammarError as exc:
            report.rejected.append(path)
            report.divergences.append(Divergence(path, expected, (), str(exc)))
            continue

        anchor = value.anchor
        names = tuple(c.text for c in value.components if c.kind is not ComponentKind.CUR_DIR)
        actual = (anchor, *names) if anchor else names
        report.checked += 1
        if actual != expected:
            report.divergences.append(Divergence(path, expected, actual))
    logger.debug(
        "Native comparison for %s: %d of %d differ",
        family.value,
        len(report.divergences),
        report.checked,
    )
    return report


__all__ = ["Divergence", "StrategyReport", "compare_native", "compare_strategies", "native_parts"]
