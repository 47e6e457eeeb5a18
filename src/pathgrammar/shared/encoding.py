"""
Summary: Raw input normalizer turning str, bytes or PathLike values into parseable text.
Why: Keep encoding checks out of the grammar so recognizers only ever see ``str``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from pathgrammar.platform.logging import logger
from pathgrammar.shared.errors import InvalidEncodingError
from pathgrammar.shared.family import Family

RawPath = str | bytes | os.PathLike[str] | os.PathLike[bytes]

# POSIX paths are arbitrary byte strings; undecodable bytes survive as lone
# surrogates so the text can be encoded back without loss.
POSIX_ENCODING: Final[tuple[str, str]] = ("utf-8", "surrogateescape")

# Windows paths are UTF-16 on disk and may hold unpaired surrogates; WTF-8
# carries them as ``surrogatepass`` sequences.
WINDOWS_ENCODING: Final[tuple[str, str]] = ("utf-8", "surrogatepass")


@dataclass(frozen=True, slots=True)
class NormalizedInput:
    """Text ready for recognition.

    Attributes:
        text: Decoded path text.
        borrowed: True when ``text`` is the caller's own ``str`` object.
    """

    text: str
    borrowed: bool


def encoding_for(family: Family) -> tuple[str, str]:
    """Return the ``(codec, error_handler)`` pair used by ``family``."""
    return WINDOWS_ENCODING if family is Family.WINDOWS else POSIX_ENCODING


def normalize_input(raw: RawPath, family: Family) -> NormalizedInput:
    """Convert ``raw`` into text for ``family``.

    Args:
        raw: Path as ``str``, ``bytes`` or any ``os.PathLike``.
        family: Grammar the text will be parsed under.

    Returns:
        NormalizedInput: Decoded text and whether it references the caller's string.

    Raises:
        InvalidEncodingError: If ``raw`` cannot be represented under ``family``.
        TypeError: If ``raw`` is not path-like.
    """
    value = os.fspath(raw)
    codec, handler = encoding_for(family)

    if isinstance(value, bytes):
        try:
            return NormalizedInput(text=value.decode(codec, handler), borrowed=False)
        except UnicodeDecodeError as exc:
            shown = value.decode("utf-8", "backslashreplace")
            logger.debug("Rejecting undecodable %s path %r: %s", family.value, value, exc)
            raise InvalidEncodingError(
                shown, exc.start, exc.end, f"invalid {codec} byte sequence for {family.value} path"
            ) from exc

    try:
        _ = value.encode(codec, handler)
    except UnicodeEncodeError as exc:
        logger.debug("Rejecting unencodable %s path %r: %s", family.value, value, exc)
        raise InvalidEncodingError(
            value, exc.start, exc.end, f"text cannot be encoded as a {family.value} path"
        ) from exc
    return NormalizedInput(text=value, borrowed=True)


def encode_text(text: str, family: Family) -> bytes:
    """Encode serialized path text back to the family's byte form."""
    codec, handler = encoding_for(family)
    return text.encode(codec, handler)


__all__ = [
    "NormalizedInput",
    "RawPath",
    "encode_text",
    "encoding_for",
    "normalize_input",
]
