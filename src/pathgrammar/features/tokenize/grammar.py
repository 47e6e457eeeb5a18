"""Composable parsing rules for grammar-driven tokenizers.

Rules are ordered-choice (PEG style) matchers over a ``str`` span. Each
rule returns a ``RuleMatch`` holding the offset it stopped at and the spans
it captured, or ``None`` when it does not apply. Character classes compile
to regular expressions once, at rule construction.

Example:
    >>> word = Capture(CharRun(" ", negate=True))
    >>> gap = Skip(CharRun(" "))
    >>> list(Grammar(gap | word).scan("a  bc", 0, 5))
    [(0, 1), (3, 5)]
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import final

from typing_extensions import override

Span = tuple[int, int]


@dataclass(frozen=True, slots=True)
class RuleMatch:
    """Successful application of a rule.

    Attributes:
        end: Offset just past the consumed text.
        captures: Spans recorded by ``Capture`` rules, in input order.
    """

    end: int
    captures: tuple[Span, ...] = ()


class GrammarError(Exception):
    """Raised when a grammar cannot consume its whole input."""

    def __init__(self, text: str, position: int) -> None:
        super().__init__(f"no rule matches {text!r} at offset {position}")
        self.text: str = text
        self.position: int = position


class Rule(ABC):
    """Base class for parsing rules."""

    @abstractmethod
    def match(self, text: str, pos: int, end: int) -> RuleMatch | None:
        """Try to apply the rule at ``pos`` without reading past ``end``."""
        pass

    def __or__(self, other: Rule) -> Choice:
        return Choice(self, other)

    def __add__(self, other: Rule) -> Sequence:
        return Sequence(self, other)


@final
class CharRun(Rule):
    """Maximal run of characters in (or, with ``negate``, outside) a set."""

    def __init__(self, chars: str, *, negate: bool = False, minimum: int = 1) -> None:
        if not chars:
            raise ValueError("CharRun needs at least one character")
        self.chars: str = chars
        self.negate: bool = negate
        self.minimum: int = minimum
        caret = "^" if negate else ""
        quantifier = "+" if minimum == 1 else ("*" if minimum == 0 else f"{{{minimum},}}")
        self._pattern: re.Pattern[str] = re.compile(
            f"[{caret}{re.escape(chars)}]{quantifier}", re.DOTALL
        )

    @override
    def match(self, text: str, pos: int, end: int) -> RuleMatch | None:
        found = self._pattern.match(text, pos, end)
        if found is None:
            return None
        return RuleMatch(found.end())

    @override
    def __repr__(self) -> str:
        return f"CharRun({self.chars!r}, negate={self.negate})"


@final
class Skip(Rule):
    """Apply ``rule`` and discard anything it captured."""

    def __init__(self, rule: Rule) -> None:
        self.rule: Rule = rule

    @override
    def match(self, text: str, pos: int, end: int) -> RuleMatch | None:
        result = self.rule.match(text, pos, end)
        if result is None:
            return None
        return RuleMatch(result.end)


@final
class Capture(Rule):
    """Apply ``rule`` and record the span it consumed."""

    def __init__(self, rule: Rule) -> None:
        self.rule: Rule = rule

    @override
    def match(self, text: str, pos: int, end: int) -> RuleMatch | None:
        result = self.rule.match(text, pos, end)
        if result is None:
            return None
        return RuleMatch(result.end, ((pos, result.end),))


@final
class Choice(Rule):
    """Ordered choice: the first alternative that matches wins."""

    def __init__(self, *alternatives: Rule) -> None:
        flattened: list[Rule] = []
        for rule in alternatives:
            if isinstance(rule, Choice):
                flattened.extend(rule.alternatives)
            else:
                flattened.append(rule)
        self.alternatives: tuple[Rule, ...] = tuple(flattened)

    @override
    def match(self, text: str, pos: int, end: int) -> RuleMatch | None:
        for rule in self.alternatives:
            result = rule.match(text, pos, end)
            if result is not None:
                return result
        return None


@final
class Sequence(Rule):
    """All rules in order; fails if any of them fails."""

    def __init__(self, *rules: Rule) -> None:
        self.rules: tuple[Rule, ...] = rules

    @override
    def match(self, text: str, pos: int, end: int) -> RuleMatch | None:
        captures: list[Span] = []
        cursor = pos
        for rule in self.rules:
            result = rule.match(text, cursor, end)
            if result is None:
                return None
            captures.extend(result.captures)
            cursor = result.end
        return RuleMatch(cursor, tuple(captures))


@final
class Repeat(Rule):
    """Apply ``rule`` greedily, at least ``minimum`` times.

    Stops as soon as an application consumes nothing.
    """

    def __init__(self, rule: Rule, minimum: int = 0) -> None:
        self.rule: Rule = rule
        self.minimum: int = minimum

    @override
    def match(self, text: str, pos: int, end: int) -> RuleMatch | None:
        captures: list[Span] = []
        cursor = pos
        count = 0
        while cursor < end:
            result = self.rule.match(text, cursor, end)
            if result is None or result.end == cursor:
                break
            captures.extend(result.captures)
            cursor = result.end
            count += 1
        if count < self.minimum:
            return None
        return RuleMatch(cursor, tuple(captures))


@final
class Grammar:
    """Top-level driver: repeat ``item`` until the input is exhausted, lazily."""

    def __init__(self, item: Rule) -> None:
        self.item: Rule = item

    def scan(self, text: str, pos: int, end: int) -> Iterator[Span]:
        """Yield captured spans one item at a time.

        Raises:
            GrammarError: If ``item`` stops matching before ``end``.
        """
        cursor = pos
        while cursor < end:
            result = self.item.match(text, cursor, end)
            if result is None or result.end == cursor:
                raise GrammarError(text, cursor)
            yield from result.captures
            cursor = result.end

    def parse(self, text: str, pos: int = 0, end: int | None = None) -> list[Span]:
        """Eagerly collect every captured span."""
        return list(self.scan(text, pos, len(text) if end is None else end))


__all__ = [
    "Capture",
    "CharRun",
    "Choice",
    "Grammar",
    "GrammarError",
    "Repeat",
    "Rule",
    "RuleMatch",
    "Sequence",
    "Skip",
    "Span",
]
