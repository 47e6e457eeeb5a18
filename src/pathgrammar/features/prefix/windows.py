"""
Summary: Prefix and root recognizer for Windows path grammar.
Why: Drive letters, UNC shares and device namespaces must be told apart from one character stream.
"""

from __future__ import annotations

from typing import Final

from pathgrammar.features.prefix.models import (
    NO_PREFIX,
    UNC,
    DeviceUNC,
    DeviceVerbatim,
    DriveLetter,
    Recognition,
    RootKind,
)
from pathgrammar.platform.logging import logger
from pathgrammar.shared.errors import MalformedPrefixError
from pathgrammar.shared.family import (
    VERBATIM_SEPARATORS,
    WINDOWS_ALT_SEPARATOR,
    WINDOWS_SEPARATOR,
)

SEPARATORS: Final[str] = WINDOWS_SEPARATOR + WINDOWS_ALT_SEPARATOR
DEVICE_NAMESPACES: Final[str] = "?."
UNC_WORD: Final[str] = "UNC"


def is_drive_designator(text: str, start: int = 0, end: int | None = None) -> bool:
    """True when `text[start:end]` opens with an ASCII letter followed by `:`."""
    stop = len(text) if end is None else end
    if stop - start < 2 or text[start + 1] != ":":
        return False
    letter = text[start]
    return letter.isascii() and letter.isalpha()


def _malformed(text: str, start: int, end: int, reason: str) -> MalformedPrefixError:
    logger.debug("Malformed prefix in %r at %d..%d: %s", text, start, end, reason)
    return MalformedPrefixError(text, start, end, reason)


def _scan_until(text: str, cursor: int, stop: int, stops: str) -> int:
    """Return the first offset in ``[cursor, stop)`` holding one of ``stops``, else ``stop``."""
    while cursor < stop and text[cursor] not in stops:
        cursor += 1
    return cursor


def _after_separator(text: str, cursor: int, stop: int, separators: str) -> int:
    """Skip the single separator that ends a prefix, if present."""
    if cursor < stop and text[cursor] in separators:
        return cursor + 1
    return cursor


def _server_share(
    text: str, origin: int, cursor: int, stop: int, share_stops: str, label: str
) -> tuple[str, str, int]:
    """Consume ``server\\share`` starting at ``cursor``.

    The server must end in a backslash; a ``/`` inside it is malformed.

    Returns:
        tuple[str, str, int]: Server, share and the offset just past the share.

    Raises:
        MalformedPrefixError: If a segment is empty, missing, or holds a ``/``.
    """
    server_end = _scan_until(text, cursor, stop, WINDOWS_SEPARATOR)
    server = text[cursor:server_end]
    if not server:
        raise _malformed(text, origin, server_end, f"{label} prefix is missing a server name")
    if WINDOWS_ALT_SEPARATOR in server:
        raise _malformed(
            text, origin, server_end, f"{label} server name contains an invalid separator '/'"
        )
    if server_end == stop:
        raise _malformed(text, origin, server_end, f"{label} prefix is missing a share name")

    share_start = server_end + 1
    share_end = _scan_until(text, share_start, stop, share_stops)
    share = text[share_start:share_end]
    if not share:
        raise _malformed(text, origin, share_end, f"{label} share name is empty")
    return server, share, share_end


def _recognize_device(text: str, origin: int, stop: int, namespace: str) -> Recognition:
    """Recognize ``\\\\?\\...`` and ``\\\\.\\...`` prefixes."""
    cursor = origin + 4
    verbatim = namespace == "?"
    # Verbatim paths turn off ``/`` as a separator.
    separators = VERBATIM_SEPARATORS if verbatim else SEPARATORS

    word_end = cursor + len(UNC_WORD)
    if (
        verbatim
        and text[cursor:word_end].upper() == UNC_WORD
        and word_end < stop
        and text[word_end] == WINDOWS_SEPARATOR
    ):
        server, share, share_end = _server_share(
            text, origin, word_end + 1, stop, WINDOWS_SEPARATOR, "verbatim UNC"
        )
        if WINDOWS_ALT_SEPARATOR in share:
            raise _malformed(
                text, origin, share_end, "verbatim UNC share name contains an invalid separator '/'"
            )
        remainder = _after_separator(text, share_end, stop, separators)
        return Recognition(DeviceUNC(server, share), RootKind.ABSOLUTE, remainder, stop, separators)

    payload_end = _scan_until(text, cursor, stop, separators)
    payload = text[cursor:payload_end]
    if not payload:
        raise _malformed(text, origin, payload_end, "device prefix is missing its payload")
    remainder = _after_separator(text, payload_end, stop, separators)
    return Recognition(
        DeviceVerbatim(payload, namespace), RootKind.ABSOLUTE, remainder, stop, separators
    )


def _recognize_unc(text: str, origin: int, stop: int) -> Recognition:
    """Recognize ``\\\\server\\share``; ``origin`` points at the first separator."""
    server, share, share_end = _server_share(text, origin, origin + 2, stop, SEPARATORS, "UNC")
    remainder = _after_separator(text, share_end, stop, SEPARATORS)
    return Recognition(UNC(server, share), RootKind.ABSOLUTE, remainder, stop, SEPARATORS)


def recognize_windows(text: str, start: int = 0, end: int | None = None) -> Recognition:
    """Classify the prefix and root of a Windows path.

    Priority: verbatim/device introducers, UNC, drive letter, leading separator,
    otherwise relative.

    Args:
        text: Source text.
        start: Offset of the path within ``text``.
        end: End offset of the path; defaults to ``len(text)``.

    Returns:
        Recognition: Prefix, root kind and the component remainder span.

    Raises:
        MalformedPrefixError: If a UNC or device prefix is incomplete or uses an
            invalid separator.
    """
    stop = len(text) if end is None else end
    length = stop - start

    if length >= 2 and text[start] in SEPARATORS and text[start + 1] in SEPARATORS:
        if length >= 4 and text[start + 2] in DEVICE_NAMESPACES and text[start + 3] in SEPARATORS:
            return _recognize_device(text, start, stop, text[start + 2])
        return _recognize_unc(text, start, stop)

    if is_drive_designator(text, start, stop):
        drive = DriveLetter(text[start].upper())
        cursor = start + 2
        if cursor < stop and text[cursor] in SEPARATORS:
            return Recognition(drive, RootKind.ABSOLUTE, cursor + 1, stop, SEPARATORS)
        return Recognition(drive, RootKind.DRIVE_RELATIVE, cursor, stop, SEPARATORS)

    if length >= 1 and text[start] in SEPARATORS:
        return Recognition(NO_PREFIX, RootKind.ABSOLUTE, start + 1, stop, SEPARATORS)

    return Recognition(NO_PREFIX, RootKind.RELATIVE, start, stop, SEPARATORS)


__all__ = ["is_drive_designator", "recognize_windows"]
