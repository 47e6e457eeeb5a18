"""Immutable structured path value.

Where: features/value.
What: ``PathValue`` holds the family, prefix, root kind and a lazily tokenized
component sequence over borrowed or owned storage.
Why: Give accessors and algebra one representation that never re-parses the
prefix and only tokenizes the remainder when components are first needed.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import total_ordering
from typing import TYPE_CHECKING, final

from typing_extensions import override

from pathgrammar.features.prefix import (
    PathPrefix,
    PrefixKind,
    Recognition,
    RootKind,
    is_drive_designator,
    separators_for,
)
from pathgrammar.features.tokenize.selection import tokenizer_for
from pathgrammar.features.value.keys import PathKey, path_key
from pathgrammar.features.value.storage import Borrowed, Owned, Storage
from pathgrammar.shared.components import CUR_DIR_TEXT, Component, ComponentKind
from pathgrammar.shared.encoding import encode_text
from pathgrammar.shared.family import Family

if TYPE_CHECKING:
    from pathgrammar.features.value.path_buf import PathBuf

# Prefixes that already end in a share or device name; a lone root separator
# after them is implied and not re-emitted.
_SELF_ANCHORED: frozenset[PrefixKind] = frozenset(
    {PrefixKind.UNC, PrefixKind.DEVICE_VERBATIM, PrefixKind.DEVICE_UNC}
)


def render_anchor(family: Family, prefix: PathPrefix, root: RootKind) -> str:
    """Return the prefix text followed by the root separator, if any."""
    return prefix.render() + (family.separator if root.is_absolute else "")


@final
@total_ordering
class PathValue:
    """Parsed path: family, prefix, root and components over a storage span.

    Values are immutable. Components are tokenized on first access and cached;
    ``iter_components`` always starts a fresh walk over the remainder.
    """

    __slots__ = (
        "family",
        "prefix",
        "root",
        "storage",
        "separators",
        "_remainder_start",
        "_remainder_end",
        "_components",
    )

    def __init__(
        self,
        family: Family,
        prefix: PathPrefix,
        root: RootKind,
        storage: Storage,
        separators: str,
        remainder_start: int,
        remainder_end: int,
        components: tuple[Component, ...] | None = None,
    ) -> None:
        self.family: Family = family
        self.prefix: PathPrefix = prefix
        self.root: RootKind = root
        self.storage: Storage = storage
        self.separators: str = separators
        self._remainder_start: int = remainder_start
        self._remainder_end: int = remainder_end
        self._components: tuple[Component, ...] | None = components

    # Construction -----------------------------------------------------------------

    @classmethod
    def from_recognition(cls, family: Family, storage: Storage, recognition: Recognition) -> PathValue:
        """Bind a recognizer result to its storage; tokenization is deferred."""
        return cls(
            family,
            recognition.prefix,
            recognition.root,
            storage,
            recognition.separators,
            recognition.start,
            recognition.end,
        )

    @classmethod
    def from_parts(
        cls,
        family: Family,
        prefix: PathPrefix,
        root: RootKind,
        components: Iterable[Component],
    ) -> PathValue:
        """Build an owned value by rendering ``components`` canonically.

        The new buffer is the canonical serialization, so every component span
        points into it and ``serialize()`` returns the buffer unchanged.

        On Windows a relative value whose first component reads as a drive
        (``C:x``) is emitted behind a ``.`` component so it re-parses unchanged.
        """
        separator = family.separator
        texts = [component.text for component in components]
        if (
            family is Family.WINDOWS
            and prefix.kind is PrefixKind.NONE
            and root is RootKind.RELATIVE
            and texts
            and is_drive_designator(texts[0])
        ):
            texts.insert(0, CUR_DIR_TEXT)
        if not texts and prefix.kind in _SELF_ANCHORED:
            head = prefix.render()
        else:
            head = render_anchor(family, prefix, root)
        buffer = head + separator.join(texts)

        spans: list[Component] = []
        cursor = len(head)
        for text in texts:
            spans.append(Component.from_span(buffer, cursor, cursor + len(text)))
            cursor += len(text) + len(separator)

        return cls(
            family,
            prefix,
            root,
            Owned(buffer),
            separators_for(family, prefix),
            len(head),
            len(buffer),
            tuple(spans),
        )

    # Components -----------------------------------------------------------------

    def iter_components(self) -> Iterator[Component]:
        """Walk the components from the start of the remainder."""
        return tokenizer_for(self.separators).tokenize(
            self.storage.source, self._remainder_start, self._remainder_end
        )

    @property
    def components(self) -> tuple[Component, ...]:
        """Cached component sequence (Normal, CurDir and ParentDir only)."""
        if self._components is None:
            self._components = tuple(self.iter_components())
        return self._components

    def iter_parts(self) -> Iterator[Component]:
        """Yield a Prefix marker, a RootDir marker, then the components."""
        if self.prefix:
            rendered = self.prefix.render()
            yield Component(ComponentKind.PREFIX, rendered, 0, len(rendered))
        if self.root.is_absolute:
            separator = self.family.separator
            yield Component(ComponentKind.ROOT_DIR, separator, 0, len(separator))
        yield from self.components

    def parts(self) -> tuple[str, ...]:
        """Anchor string (when present) followed by each component's text."""
        anchor = self.anchor
        texts = tuple(component.text for component in self.components)
        return (anchor, *texts) if anchor else texts

    # Accessors ---------------------------------------------------------------------

    @property
    def anchor(self) -> str:
        return render_anchor(self.family, self.prefix, self.root)

    def is_absolute(self) -> bool:
        return self.root.is_absolute

    def is_relative(self) -> bool:
        return self.root.is_relative

    def file_name(self) -> str | None:
        """Text of the last component when it is a normal name."""
        components = self.components
        if components and components[-1].is_normal:
            return components[-1].text
        return None

    def extension(self) -> str | None:
        """Text after the last ``.`` of the file name, ignoring a leading dot.

        Returns ``""`` for a name ending in ``.`` and ``None`` when there is no
        file name or no qualifying dot.
        """
        name = self.file_name()
        if name is None:
            return None
        dot = name.rfind(".")
        if dot <= 0:
            return None
        return name[dot + 1 :]

    def file_stem(self) -> str | None:
        name = self.file_name()
        if name is None:
            return None
        dot = name.rfind(".")
        if dot <= 0:
            return name
        return name[:dot]

    def parent(self) -> PathValue:
        """Value without its last component; a value without components is its own parent."""
        components = self.components
        if not components:
            return self
        return PathValue.from_parts(self.family, self.prefix, self.root, components[:-1])

    def ancestors(self) -> Iterator[PathValue]:
        """Yield this value, then each parent until the component list is empty."""
        current = self
        yield current
        while current.components:
            current = current.parent()
            yield current

    # Serialization ---------------------------------------------------------------------

    def serialize(self) -> str:
        """Canonical text using the family's preferred separator."""
        components = self.components
        if not components and self.prefix.kind in _SELF_ANCHORED:
            return self.prefix.render()
        return self.anchor + self.family.separator.join(component.text for component in components)

    def to_bytes(self) -> bytes:
        """Serialized text encoded the way the family stores paths."""
        return encode_text(self.serialize(), self.family)

    @property
    def is_borrowed(self) -> bool:
        return self.storage.is_borrowed

    @property
    def text(self) -> str:
        """The exact input text this value was parsed from (or its owned buffer)."""
        return self.storage.text

    def to_owned(self) -> PathValue:
        """Copy the referenced span into an owned buffer, keeping the structure."""
        if not self.storage.is_borrowed:
            return self
        shift = self.storage.start
        return PathValue(
            self.family,
            self.prefix,
            self.root,
            Owned(self.storage.text),
            self.separators,
            self._remainder_start - shift,
            self._remainder_end - shift,
        )

    def to_buf(self) -> PathBuf:
        """Return a mutable copy."""
        from pathgrammar.features.value.path_buf import PathBuf

        return PathBuf(self)

    # Algebra shortcuts -----------------------------------------------------------------

    def join(self, other: object) -> PathValue:
        from pathgrammar.features.algebra import join

        return join(self, other)

    def __truediv__(self, other: object) -> PathValue:
        return self.join(other)

    def normalize(self) -> PathValue:
        from pathgrammar.features.algebra import normalize

        return normalize(self)

    def with_file_name(self, name: str) -> PathValue:
        from pathgrammar.features.algebra import set_file_name

        return set_file_name(self, name)

    def with_extension(self, extension: str) -> PathValue:
        from pathgrammar.features.algebra import set_extension

        return set_extension(self, extension)

    def starts_with(self, base: object) -> bool:
        from pathgrammar.features.algebra import starts_with

        return starts_with(self, base)

    def relative_to(self, base: object) -> PathValue | None:
        from pathgrammar.features.algebra import relative_to

        return relative_to(self, base)

    # Comparison ------------------------------------------------------------------------

    def comparison_key(self) -> PathKey:
        return path_key(self.family, self.prefix, self.root, self.components)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.comparison_key() == other.comparison_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.comparison_key() < other.comparison_key()

    @override
    def __hash__(self) -> int:
        return hash(self.comparison_key())

    @override
    def __str__(self) -> str:
        return self.serialize()

    @override
    def __repr__(self) -> str:
        return f"PathValue({self.serialize()!r}, family={self.family.value})"


def is_borrowed_from(value: PathValue, source: str) -> bool:
    """True when ``value`` still references ``source`` without a copy."""
    return isinstance(value.storage, Borrowed) and value.storage.source is source


__all__ = ["PathValue", "is_borrowed_from", "render_anchor"]
