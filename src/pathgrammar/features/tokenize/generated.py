"""
Summary: Tokenizer derived from a declarative grammar built with the rule toolkit.
Why: Second strategy whose output must match the manual scanner, used as a cross-check.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar, final

from pathgrammar.features.tokenize.grammar import Capture, CharRun, Choice, Grammar, Skip
from pathgrammar.shared.components import Component


def build_path_grammar(separators: str) -> Grammar:
    """Return the grammar ``(separator+ | segment+)*`` for ``separators``.

    Every character is either a separator or not, so the grammar is total
    and ``Grammar.scan`` never raises for it.
    """
    separator_run = Skip(CharRun(separators))
    segment = Capture(CharRun(separators, negate=True))
    return Grammar(Choice(separator_run, segment))


@final
class GeneratedTokenizer:
    """Split path text by running the compiled path grammar."""

    name: ClassVar[str] = "generated"

    def __init__(self, separators: str) -> None:
        self.separators: str = separators
        self._grammar: Grammar = build_path_grammar(separators)

    def tokenize(self, text: str, start: int = 0, end: int | None = None) -> Iterator[Component]:
        """Yield components of ``text[start:end]`` one captured segment at a time."""
        stop = len(text) if end is None else end
        for segment_start, segment_end in self._grammar.scan(text, start, stop):
            yield Component.from_span(text, segment_start, segment_end)

    def __repr__(self) -> str:
        return f"GeneratedTokenizer(separators={self.separators!r})"


__all__ = ["GeneratedTokenizer", "build_path_grammar"]
