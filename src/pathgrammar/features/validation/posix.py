"""
Summary: Strict checks for POSIX component names.
Why: NUL is the one byte a POSIX file name cannot hold.
"""

from __future__ import annotations

from collections.abc import Iterable

from pathgrammar.platform.logging import logger
from pathgrammar.shared.components import Component
from pathgrammar.shared.errors import InvalidCharacterError


def validate_posix(components: Iterable[Component]) -> None:
    """Raise ``InvalidCharacterError`` on the first component holding NUL."""
    for component in components:
        offset = component.text.find("\0")
        if offset < 0:
            continue
        position = component.start + offset
        logger.debug("NUL byte at %d in %r", position, component.source)
        raise InvalidCharacterError(
            component.source, position, position + 1, "component contains a NUL byte"
        )


__all__ = ["validate_posix"]
