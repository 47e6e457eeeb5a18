"""Path algebra over ``PathValue``.

Where: features/algebra.
What: join, push, set_file_name, set_extension and normalize.
Why: Purely syntactic rewrites that never touch the filesystem and never raise
for well-formed inputs; every result owns its buffer.
"""

from __future__ import annotations

from pathgrammar.features.value import PathBuf, PathValue, parse
from pathgrammar.platform.logging import logger
from pathgrammar.shared.components import Component, ComponentKind


def coerce_path(base: PathValue, other: object) -> PathValue:
    """Turn ``other`` into a value of ``base``'s family.

    Text and path-like inputs are parsed; values from another family are
    re-parsed from their serialization.
    """
    if isinstance(other, PathBuf):
        other = other.freeze()
    if isinstance(other, PathValue):
        if other.family is base.family:
            return other
        logger.debug("Re-parsing %s path %r as %s", other.family.value, other, base.family.value)
        return parse(other.serialize(), base.family)
    return parse(other, base.family)  # type: ignore[arg-type]


def join(base: PathValue, other: object) -> PathValue:
    """Append ``other`` to ``base``.

    An absolute ``other``, or one carrying its own prefix, replaces ``base``.
    """
    other_value = coerce_path(base, other)
    if other_value.root.is_absolute or other_value.prefix:
        return other_value.to_owned()
    return PathValue.from_parts(
        base.family,
        base.prefix,
        base.root,
        base.components + other_value.components,
    )


def push(buf: PathBuf, other: object) -> PathBuf:
    """Append ``other`` to ``buf`` in place and return it."""
    buf.push(other)
    return buf


def set_file_name(value: PathValue, name: str) -> PathValue:
    """Replace the last component; equivalent to ``join(parent(value), name)``."""
    return join(value.parent(), name)


def set_extension(value: PathValue, extension: str) -> PathValue:
    """Replace, append or (with ``""``) remove the extension of the file name.

    A leading ``.`` in ``extension`` is accepted. Values without a file name
    are returned unchanged.
    """
    stem = value.file_stem()
    if stem is None:
        return value
    extension = extension.removeprefix(".")
    name = f"{stem}.{extension}" if extension else stem
    return set_file_name(value, name)


def normalize(value: PathValue) -> PathValue:
    """Drop CurDir and let ParentDir cancel a preceding normal component.

    A ParentDir with nothing to cancel is kept, including directly under the
    root, so the result stays a purely syntactic rewrite. Idempotent. On Windows
    a leading drive-like name keeps a ``.`` in front of it.
    """
    kept: list[Component] = []
    for component in value.components:
        if component.kind is ComponentKind.CUR_DIR:
            continue
        if component.kind is ComponentKind.PARENT_DIR and kept and kept[-1].is_normal:
            _ = kept.pop()
            continue
        kept.append(component)
    return PathValue.from_parts(value.family, value.prefix, value.root, kept)


__all__ = ["coerce_path", "join", "normalize", "push", "set_extension", "set_file_name"]
