# Path: `src/pathgrammar/features/validation/__init__.py`
# Summary: Strict-mode validation entry point dispatching per family.
# Why: Keep platform naming rules out of the grammar; only ``parse(strict=True)`` runs them.

from collections.abc import Iterable

from pathgrammar.features.prefix import DeviceUNC, DeviceVerbatim, PathPrefix
from pathgrammar.shared.components import Component
from pathgrammar.shared.family import Family

from .posix import validate_posix
from .windows import RESERVED_NAMES, RESTRICTED_CHARS, is_reserved_name, validate_windows


def validate(family: Family, prefix: PathPrefix, components: Iterable[Component]) -> None:
    """Run the strict checks of ``family`` over ``components``.

    Raises:
        InvalidCharacterError: On a forbidden character.
        RestrictedNameError: On a reserved Windows device name.
    """
    if family is Family.WINDOWS:
        verbatim = isinstance(prefix, DeviceUNC) or (
            isinstance(prefix, DeviceVerbatim) and prefix.is_verbatim
        )
        validate_windows(components, verbatim=verbatim)
    else:
        validate_posix(components)


__all__ = [
    "RESERVED_NAMES",
    "RESTRICTED_CHARS",
    "is_reserved_name",
    "validate",
    "validate_posix",
    "validate_windows",
]
