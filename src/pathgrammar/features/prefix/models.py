"""
Summary: Prefix variants, root kinds and the recognizer result record.
Why: Give the value and algebra layers one closed set of anchors to reason about.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, final

from typing_extensions import override


class PrefixKind(Enum):
    """Tag of a ``PathPrefix`` variant."""

    NONE = "none"
    DRIVE_LETTER = "drive_letter"
    UNC = "unc"
    DEVICE_VERBATIM = "device_verbatim"
    DEVICE_UNC = "device_unc"


class RootKind(Enum):
    """Whether a path is anchored within its prefix context."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    # ``C:foo``: relative to the current directory of drive C.
    DRIVE_RELATIVE = "drive_relative"

    @property
    def is_absolute(self) -> bool:
        return self is RootKind.ABSOLUTE

    @property
    def is_relative(self) -> bool:
        return self is not RootKind.ABSOLUTE


@dataclass(frozen=True, slots=True)
class PathPrefix:
    """Leading, non-component part of a path (drive, UNC share or device)."""

    kind: ClassVar[PrefixKind] = PrefixKind.NONE

    def render(self) -> str:
        """Return the canonical text of the prefix."""
        return ""

    def segments(self) -> tuple[str, ...]:
        """Return the literal text segments identifying the prefix."""
        return ()

    def comparison_key(self, case_sensitive: bool) -> tuple[str, tuple[str, ...]]:
        """Key used for equality, ordering and hashing of paths."""
        segments = self.segments()
        if not case_sensitive:
            segments = tuple(segment.casefold() for segment in segments)
        return (self.kind.value, segments)

    def __bool__(self) -> bool:
        return self.kind is not PrefixKind.NONE


@final
@dataclass(frozen=True, slots=True)
class NoPrefix(PathPrefix):
    """Absence of a prefix; the only variant POSIX paths use."""

    kind: ClassVar[PrefixKind] = PrefixKind.NONE


@final
@dataclass(frozen=True, slots=True)
class DriveLetter(PathPrefix):
    """Drive letter prefix such as ``C:``; the letter is stored upper-cased."""

    letter: str
    kind: ClassVar[PrefixKind] = PrefixKind.DRIVE_LETTER

    @override
    def render(self) -> str:
        return f"{self.letter}:"

    @override
    def segments(self) -> tuple[str, ...]:
        return (self.letter,)


@final
@dataclass(frozen=True, slots=True)
class UNC(PathPrefix):
    """``\\\\server\\share`` network prefix."""

    server: str
    share: str
    kind: ClassVar[PrefixKind] = PrefixKind.UNC

    @override
    def render(self) -> str:
        return f"\\\\{self.server}\\{self.share}"

    @override
    def segments(self) -> tuple[str, ...]:
        return (self.server, self.share)


@final
@dataclass(frozen=True, slots=True)
class DeviceVerbatim(PathPrefix):
    """``\\\\?\\payload`` verbatim or ``\\\\.\\payload`` device namespace prefix.

    Attributes:
        payload: Text up to the first separator after the introducer (``C:``, ``COM1``...).
        namespace: ``"?"`` for verbatim paths, ``"."`` for the device namespace.
    """

    payload: str
    namespace: str = "?"
    kind: ClassVar[PrefixKind] = PrefixKind.DEVICE_VERBATIM

    @property
    def is_verbatim(self) -> bool:
        return self.namespace == "?"

    @override
    def render(self) -> str:
        return f"\\\\{self.namespace}\\{self.payload}"

    @override
    def segments(self) -> tuple[str, ...]:
        return (self.namespace, self.payload)


@final
@dataclass(frozen=True, slots=True)
class DeviceUNC(PathPrefix):
    """``\\\\?\\UNC\\server\\share`` verbatim network prefix."""

    server: str
    share: str
    kind: ClassVar[PrefixKind] = PrefixKind.DEVICE_UNC

    @override
    def render(self) -> str:
        return f"\\\\?\\UNC\\{self.server}\\{self.share}"

    @override
    def segments(self) -> tuple[str, ...]:
        return (self.server, self.share)


NO_PREFIX: NoPrefix = NoPrefix()


@dataclass(frozen=True, slots=True)
class Recognition:
    """Result of prefix/root recognition over a span of text.

    Attributes:
        prefix: Recognized prefix variant.
        root: Root kind of the path.
        start: Offset where the component remainder begins.
        end: Offset where the component remainder ends.
        separators: Characters that split the remainder into components.
    """

    prefix: PathPrefix
    root: RootKind
    start: int
    end: int
    separators: str


__all__ = [
    "DeviceUNC",
    "DeviceVerbatim",
    "DriveLetter",
    "NO_PREFIX",
    "NoPrefix",
    "PathPrefix",
    "PrefixKind",
    "Recognition",
    "RootKind",
    "UNC",
]
