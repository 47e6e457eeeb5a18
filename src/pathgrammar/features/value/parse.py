"""
Summary: Entry point turning raw input into a ``PathValue``.
Why: Run normalizer, recognizer and (optionally) validation in one place so errors surface before a value exists.
"""

from __future__ import annotations

import os

from pathgrammar.config import settings
from pathgrammar.features.prefix import recognize
from pathgrammar.features.validation import validate
from pathgrammar.features.value.path_value import PathValue
from pathgrammar.features.value.storage import Borrowed, Owned, Storage
from pathgrammar.shared.encoding import RawPath, normalize_input
from pathgrammar.shared.family import Family


def parse(
    path: RawPath,
    family: Family | str | None = None,
    *,
    start: int = 0,
    end: int | None = None,
    strict: bool = False,
) -> PathValue:
    """Parse ``path`` under ``family``.

    Args:
        path: ``str``, ``bytes`` or ``os.PathLike``. A ``str`` is referenced, not copied.
        family: Grammar to use; ``None`` selects the configured default family.
        start: Offset where the path begins within ``path``.
        end: Offset where the path ends; defaults to the end of ``path``.
        strict: Also reject restricted characters and reserved names.

    Returns:
        PathValue: Value whose components are tokenized on first access.

    Raises:
        MalformedPrefixError: If a UNC or device prefix is incomplete.
        InvalidEncodingError: If the input cannot be represented under ``family``.
        InvalidCharacterError: In strict mode, on a forbidden character.
        RestrictedNameError: In strict mode, on a reserved Windows device name.
        ValueError: If ``start``/``end`` fall outside the input.
    """
    resolved = settings.DEFAULT_FAMILY if family is None else Family.coerce(family)

    raw = os.fspath(path)
    if isinstance(raw, bytes):
        # Offsets address bytes; decode only the selected span.
        raw = raw[start:end]
        start, end = 0, None

    normalized = normalize_input(raw, resolved)
    text = normalized.text
    stop = len(text) if end is None else end
    if not 0 <= start <= stop <= len(text):
        raise ValueError(f"span {start}..{stop} is outside a path of length {len(text)}")

    recognition = recognize(text, resolved, start, stop)
    storage: Storage = Borrowed(text, start, stop) if normalized.borrowed else Owned(text)
    value = PathValue.from_recognition(resolved, storage, recognition)

    if strict:
        validate(resolved, value.prefix, value.components)

    return value


__all__ = ["parse"]
