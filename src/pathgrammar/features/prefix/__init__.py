# Path: `src/pathgrammar/features/prefix/__init__.py`
# Summary: Export prefix models and the per-family recognizers.
# Why: Provide a stable import surface for the value layer and tests.

from pathgrammar.shared.family import VERBATIM_SEPARATORS, Family

from .models import (
    NO_PREFIX,
    UNC,
    DeviceUNC,
    DeviceVerbatim,
    DriveLetter,
    NoPrefix,
    PathPrefix,
    PrefixKind,
    Recognition,
    RootKind,
)
from .posix import recognize_posix
from .windows import is_drive_designator, recognize_windows


def separators_for(family: Family, prefix: PathPrefix) -> str:
    """Return the characters that split components after ``prefix``."""
    if isinstance(prefix, DeviceUNC) or (isinstance(prefix, DeviceVerbatim) and prefix.is_verbatim):
        return VERBATIM_SEPARATORS
    return family.separators


def recognize(text: str, family: Family, start: int = 0, end: int | None = None) -> Recognition:
    """Run the recognizer for ``family`` over ``text[start:end]``."""
    if family is Family.WINDOWS:
        return recognize_windows(text, start, end)
    return recognize_posix(text, start, end)


__all__ = [
    "NO_PREFIX",
    "UNC",
    "DeviceUNC",
    "DeviceVerbatim",
    "DriveLetter",
    "NoPrefix",
    "PathPrefix",
    "PrefixKind",
    "Recognition",
    "RootKind",
    "is_drive_designator",
    "recognize",
    "recognize_posix",
    "recognize_windows",
    "separators_for",
]
