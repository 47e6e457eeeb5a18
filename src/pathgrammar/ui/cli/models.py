"""src/pathgrammar/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass

from pathgrammar.features.value import PathValue
from pathgrammar.shared.errors import PathGrammarError


@dataclass(slots=True, frozen=True)
class ParseOutcome:
    """Result of parsing one command line path."""

    path: str
    value: PathValue | None = None
    normalized: PathValue | None = None
    error: PathGrammarError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


__all__ = ["ParseOutcome"]
