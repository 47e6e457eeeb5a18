"""
Summary: Backing storage of a path value: a borrowed span or an owned buffer.
Why: Parsing a caller's ``str`` should not copy it; algebra results must not pin unrelated text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class Borrowed:
    """View onto ``source[start:end]``; keeps a reference to the caller's string."""

    source: str
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    @property
    def is_borrowed(self) -> bool:
        return True


@final
@dataclass(frozen=True, slots=True)
class Owned:
    """Buffer produced by decoding or by path algebra."""

    buffer: str

    @property
    def source(self) -> str:
        return self.buffer

    @property
    def start(self) -> int:
        return 0

    @property
    def end(self) -> int:
        return len(self.buffer)

    @property
    def text(self) -> str:
        return self.buffer

    @property
    def is_borrowed(self) -> bool:
        return False


Storage = Borrowed | Owned


__all__ = ["Borrowed", "Owned", "Storage"]
