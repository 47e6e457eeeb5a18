"""Ports for component tokenizers.

Where: features/tokenize.
What: The protocol both tokenizer strategies satisfy.
Why: Let the value layer bind one strategy without knowing which one it is.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar, Protocol, runtime_checkable

from pathgrammar.shared.components import Component


@runtime_checkable
class Tokenizer(Protocol):
    """Splits the remainder of a path into components."""

    name: ClassVar[str]
    separators: str

    def tokenize(self, text: str, start: int = 0, end: int | None = None) -> Iterator[Component]:
        """Yield the components of ``text[start:end]`` lazily.

        Runs of separators collapse, empty segments are never produced, and
        ``.``/``..`` map to CurDir/ParentDir. Calling again restarts the walk.
        """
        ...


__all__ = ["Tokenizer"]
