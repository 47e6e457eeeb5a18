"""Comparison keys for equality, ordering and hashing of path values.

Windows compares component text and prefix segments case-insensitively
through ``str.casefold``; drive letters are already stored upper-cased.
POSIX compares exactly. Family, prefix and root are always part of the key,
so values from different families never compare equal.
"""

from __future__ import annotations

from collections.abc import Iterable

from pathgrammar.features.prefix import PathPrefix, RootKind
from pathgrammar.shared.components import Component
from pathgrammar.shared.family import Family

ComponentKey = tuple[str, str]
PathKey = tuple[str, tuple[str, tuple[str, ...]], str, tuple[ComponentKey, ...]]


def component_key(component: Component, case_sensitive: bool) -> ComponentKey:
    """Key of one component under the family's case rules."""
    text = component.text
    if not case_sensitive:
        text = text.casefold()
    return (component.kind.value, text)


def components_key(components: Iterable[Component], case_sensitive: bool) -> tuple[ComponentKey, ...]:
    return tuple(component_key(component, case_sensitive) for component in components)


def path_key(
    family: Family, prefix: PathPrefix, root: RootKind, components: Iterable[Component]
) -> PathKey:
    """Full comparison key of a path."""
    case_sensitive = family.case_sensitive
    return (
        family.value,
        prefix.comparison_key(case_sensitive),
        root.value,
        components_key(components, case_sensitive),
    )


__all__ = ["ComponentKey", "PathKey", "component_key", "components_key", "path_key"]
