"""
Summary: Hand-written single-pass state machine tokenizer.
Why: The fast strategy; one character per step, no lookahead, no tables.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import ClassVar, final

from pathgrammar.shared.components import Component


class ScanState(Enum):
    """States of the manual scanner."""

    SCANNING = "scanning"
    IN_COMPONENT = "in_component"


@final
class ManualTokenizer:
    """Split path text on separator runs with an explicit two-state machine."""

    name: ClassVar[str] = "manual"

    def __init__(self, separators: str) -> None:
        """Initialize the tokenizer.

        Args:
            separators: Characters that end a component.
        """
        self.separators: str = separators

    def tokenize(self, text: str, start: int = 0, end: int | None = None) -> Iterator[Component]:
        """Yield components of ``text[start:end]``.

        Args:
            text: Source text; components keep a reference to it.
            start: First offset to scan.
            end: Offset to stop at; defaults to ``len(text)``.

        Yields:
            Component: Non-empty components in order.
        """
        stop = len(text) if end is None else end
        separators = self.separators
        state = ScanState.SCANNING
        component_start = start

        for offset in range(start, stop):
            at_separator = text[offset] in separators
            if state is ScanState.IN_COMPONENT:
                if at_separator:
                    yield Component.from_span(text, component_start, offset)
                    state = ScanState.SCANNING
            elif not at_separator:
                component_start = offset
                state = ScanState.IN_COMPONENT

        if state is ScanState.IN_COMPONENT:
            yield Component.from_span(text, component_start, stop)

    def __repr__(self) -> str:
        return f"ManualTokenizer(separators={self.separators!r})"


__all__ = ["ManualTokenizer", "ScanState"]
