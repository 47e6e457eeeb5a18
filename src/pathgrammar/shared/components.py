"""Shared path component value objects (tokenizers <-> values <-> algebra).

A component is a view onto the text it was cut from: it keeps the source
string and a span, and slices the text only when asked. Both tokenizer
strategies and every algebra operation produce this one type, so results
from different strategies compare directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, final

from typing_extensions import override

CUR_DIR_TEXT: Final[str] = "."
PARENT_DIR_TEXT: Final[str] = ".."


class ComponentKind(Enum):
    """Classification of a single path segment."""

    NORMAL = "normal"
    CUR_DIR = "cur_dir"
    PARENT_DIR = "parent_dir"
    # Markers only produced by the full ``iter_parts`` walk.
    ROOT_DIR = "root_dir"
    PREFIX = "prefix"


def classify(text: str) -> ComponentKind:
    """Map segment text to its kind: ``.``, ``..`` or a normal name."""
    if text == CUR_DIR_TEXT:
        return ComponentKind.CUR_DIR
    if text == PARENT_DIR_TEXT:
        return ComponentKind.PARENT_DIR
    return ComponentKind.NORMAL


@final
@dataclass(frozen=True, slots=True, eq=False)
class Component:
    """Value and span describing a single path component."""

    kind: ComponentKind
    source: str
    start: int
    end: int

    @classmethod
    def from_span(cls, source: str, start: int, end: int) -> Component:
        """Classify ``source[start:end]`` without copying it."""
        return cls(classify(source[start:end]), source, start, end)

    @classmethod
    def from_text(cls, text: str) -> Component:
        """Build a component owning ``text``."""
        return cls(classify(text), text, 0, len(text))

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    @property
    def is_normal(self) -> bool:
        return self.kind is ComponentKind.NORMAL

    def __len__(self) -> int:
        return self.end - self.start

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self.kind is other.kind and self.text == other.text

    @override
    def __hash__(self) -> int:
        return hash((self.kind, self.text))

    @override
    def __str__(self) -> str:
        return self.text

    @override
    def __repr__(self) -> str:
        return f"Component({self.kind.name}, {self.text!r})"


__all__ = [
    "CUR_DIR_TEXT",
    "PARENT_DIR_TEXT",
    "Component",
    "ComponentKind",
    "classify",
]
