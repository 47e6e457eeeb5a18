"""
Summary: Root recognizer for POSIX path grammar.
Why: POSIX anchors are a leading run of slashes and never carry a prefix.
"""

from __future__ import annotations

from pathgrammar.features.prefix.models import NO_PREFIX, Recognition, RootKind
from pathgrammar.shared.family import POSIX_SEPARATOR


def recognize_posix(text: str, start: int = 0, end: int | None = None) -> Recognition:
    """Classify the root of a POSIX path.

    Args:
        text: Source text.
        start: Offset of the path within ``text``.
        end: End offset of the path; defaults to ``len(text)``.

    Returns:
        Recognition: ``ABSOLUTE`` when at least one leading ``/`` is present, with the
        remainder starting after the whole leading run.
    """
    stop = len(text) if end is None else end
    cursor = start
    while cursor < stop and text[cursor] == POSIX_SEPARATOR:
        cursor += 1
    root = RootKind.ABSOLUTE if cursor > start else RootKind.RELATIVE
    return Recognition(NO_PREFIX, root, cursor, stop, POSIX_SEPARATOR)


__all__ = ["recognize_posix"]
