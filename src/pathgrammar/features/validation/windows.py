"""
Summary: Strict checks for Windows component names.
Why: Windows rejects some characters and device names that the grammar itself accepts.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from pathgrammar.platform.logging import logger
from pathgrammar.shared.components import Component
from pathgrammar.shared.errors import InvalidCharacterError, RestrictedNameError

RESTRICTED_CHARS: Final[frozenset[str]] = frozenset('<>:"|?*') | frozenset(
    chr(code) for code in range(32)
)
INVALID_LAST_CHARS: Final[str] = ". "

RESERVED_NAMES: Final[frozenset[str]] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{index}" for index in range(1, 10)]
    + [f"LPT{index}" for index in range(1, 10)]
)


def is_reserved_name(name: str) -> bool:
    """True when ``name`` is a device name, with or without an extension.

    ``con``, ``CON.txt`` and ``Lpt1 .log`` all qualify.
    """
    base = name.split(".", 1)[0].rstrip(" ")
    return base.upper() in RESERVED_NAMES


def validate_component(component: Component, *, verbatim: bool = False) -> None:
    """Check one normal component.

    Verbatim paths bypass Win32 name normalization, so trailing characters and
    device names are only checked outside them.

    Raises:
        InvalidCharacterError: On a restricted character, or a trailing dot or space.
        RestrictedNameError: On a reserved device name.
    """
    if not component.is_normal:
        return
    text = component.text
    for offset, char in enumerate(text):
        if char in RESTRICTED_CHARS:
            position = component.start + offset
            logger.debug("Restricted character %r at %d in %r", char, position, component.source)
            raise InvalidCharacterError(
                component.source,
                position,
                position + 1,
                f"component {text!r} contains restricted character {char!r}",
            )
    if verbatim:
        return
    if text[-1] in INVALID_LAST_CHARS:
        logger.debug("Invalid trailing character in %r", text)
        raise InvalidCharacterError(
            component.source,
            component.end - 1,
            component.end,
            f"component {text!r} ends with {text[-1]!r}",
        )
    if is_reserved_name(text):
        logger.debug("Reserved device name %r in %r", text, component.source)
        raise RestrictedNameError(
            component.source,
            component.start,
            component.end,
            f"component uses the reserved name {text!r}",
        )


def validate_windows(components: Iterable[Component], *, verbatim: bool = False) -> None:
    for component in components:
        validate_component(component, verbatim=verbatim)


__all__ = [
    "INVALID_LAST_CHARS",
    "RESERVED_NAMES",
    "RESTRICTED_CHARS",
    "is_reserved_name",
    "validate_component",
    "validate_windows",
]
