"""
Summary: Prefix tests and stripping under the family's comparison rules.
Why: ``starts_with``/``relative_to`` must agree with ``==`` on case folding and anchors.
"""

from __future__ import annotations

from pathgrammar.features.algebra.ops import coerce_path
from pathgrammar.features.prefix import NO_PREFIX, RootKind
from pathgrammar.features.value import PathValue, component_key
from pathgrammar.features.value.keys import PathKey
from pathgrammar.platform.logging import logger


def comparison_key(value: PathValue) -> PathKey:
    """Key used for ``==``, ordering and ``hash`` of ``value``."""
    return value.comparison_key()


def _common_length(value: PathValue, base: PathValue) -> int | None:
    """Number of leading components shared with ``base`` when it is a prefix of ``value``."""
    if value.family is not base.family or value.root is not base.root:
        return None
    case_sensitive = value.family.case_sensitive
    if value.prefix.comparison_key(case_sensitive) != base.prefix.comparison_key(case_sensitive):
        return None
    ours, theirs = value.components, base.components
    if len(theirs) > len(ours):
        return None
    for mine, other in zip(ours, theirs):
        if component_key(mine, case_sensitive) != component_key(other, case_sensitive):
            return None
    return len(theirs)


def starts_with(value: PathValue, base: object) -> bool:
    """True when ``base``'s anchor and components lead ``value``."""
    return _common_length(value, coerce_path(value, base)) is not None


def relative_to(value: PathValue, base: object) -> PathValue | None:
    """Components of ``value`` after ``base`` as a relative value, or ``None``.

    Also ``None`` when a remaining component holds one of the family's
    separators, which only a verbatim prefix allows.
    """
    count = _common_length(value, coerce_path(value, base))
    if count is None:
        return None
    remaining = value.components[count:]
    separators = value.family.separators
    if any(char in separators for component in remaining for char in component.text):
        logger.debug("Cannot detach %r from its prefix: component holds a separator", value)
        return None
    return PathValue.from_parts(value.family, NO_PREFIX, RootKind.RELATIVE, remaining)


__all__ = ["comparison_key", "relative_to", "starts_with"]
