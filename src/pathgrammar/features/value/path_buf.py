"""
Summary: Mutable path buffer built on ``PathValue``.
Why: Callers assembling a path step by step should not juggle intermediate values.
"""

from __future__ import annotations

from collections.abc import Iterator

from typing_extensions import override

from pathgrammar.features.prefix import NO_PREFIX, PathPrefix, RootKind
from pathgrammar.features.value.path_value import PathValue
from pathgrammar.shared.components import Component
from pathgrammar.shared.family import Family


class PathBuf:
    """Owned, mutable path.

    Every mutation rewrites the owned buffer and its component index; use
    ``freeze()`` to hand out an immutable ``PathValue``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: PathValue) -> None:
        self._value: PathValue = value.to_owned()

    @classmethod
    def new(cls, family: Family) -> PathBuf:
        """Empty relative buffer."""
        return cls(PathValue.from_parts(family, NO_PREFIX, RootKind.RELATIVE, ()))

    # Mutation ------------------------------------------------------------------------

    def push(self, other: object) -> None:
        """Append ``other``; an absolute or prefixed ``other`` replaces the buffer."""
        from pathgrammar.features.algebra import join

        self._value = join(self._value, other)

    def pop(self) -> bool:
        """Drop the last component; False when there was none."""
        if not self._value.components:
            return False
        self._value = self._value.parent()
        return True

    def set_file_name(self, name: str) -> None:
        from pathgrammar.features.algebra import set_file_name

        self._value = set_file_name(self._value, name)

    def set_extension(self, extension: str) -> bool:
        """Replace or remove the extension; False when there is no file name."""
        from pathgrammar.features.algebra import set_extension

        if self._value.file_name() is None:
            return False
        self._value = set_extension(self._value, extension)
        return True

    def normalize(self) -> None:
        from pathgrammar.features.algebra import normalize

        self._value = normalize(self._value)

    def freeze(self) -> PathValue:
        """Immutable snapshot of the current buffer."""
        return self._value

    # Read access ------------------------------------------------------------------------

    @property
    def family(self) -> Family:
        return self._value.family

    @property
    def prefix(self) -> PathPrefix:
        return self._value.prefix

    @property
    def root(self) -> RootKind:
        return self._value.root

    @property
    def components(self) -> tuple[Component, ...]:
        return self._value.components

    def __iter__(self) -> Iterator[Component]:
        return iter(self._value.components)

    def __len__(self) -> int:
        return len(self._value.components)

    def file_name(self) -> str | None:
        return self._value.file_name()

    def extension(self) -> str | None:
        return self._value.extension()

    def is_absolute(self) -> bool:
        return self._value.is_absolute()

    def serialize(self) -> str:
        return self._value.serialize()

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathBuf):
            return self._value == other._value
        if isinstance(other, PathValue):
            return self._value == other
        return NotImplemented

    @override
    def __str__(self) -> str:
        return self._value.serialize()

    @override
    def __repr__(self) -> str:
        return f"PathBuf({self._value.serialize()!r}, family={self._value.family.value})"


__all__ = ["PathBuf"]
