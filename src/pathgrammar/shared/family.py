"""
Summary: Path grammar families and their separator tables.
Why: Give every layer one definition of which characters split a path.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Final

WINDOWS_SEPARATOR: Final[str] = "\\"
WINDOWS_ALT_SEPARATOR: Final[str] = "/"
POSIX_SEPARATOR: Final[str] = "/"

# Inside a verbatim (``\\?\``) path only the backslash separates components.
VERBATIM_SEPARATORS: Final[str] = WINDOWS_SEPARATOR


class Family(Enum):
    """Platform path grammar in effect for a parse."""

    WINDOWS = "windows"
    POSIX = "posix"

    @property
    def separator(self) -> str:
        """Canonical separator used when serializing."""
        return WINDOWS_SEPARATOR if self is Family.WINDOWS else POSIX_SEPARATOR

    @property
    def separators(self) -> str:
        """All characters accepted as separators outside verbatim prefixes."""
        if self is Family.WINDOWS:
            return WINDOWS_SEPARATOR + WINDOWS_ALT_SEPARATOR
        return POSIX_SEPARATOR

    @property
    def case_sensitive(self) -> bool:
        return self is Family.POSIX

    @classmethod
    def native(cls) -> Family:
        """Return the family of the running interpreter's host."""
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @classmethod
    def coerce(cls, value: Family | str | None) -> Family:
        """Resolve a family from an enum member, a name, or ``None`` (native).

        Raises:
            ValueError: If ``value`` names no known family.
        """
        if value is None:
            return cls.native()
        if isinstance(value, Family):
            return value
        normalized = value.strip().lower()
        aliases = {"nt": "windows", "win": "windows", "win32": "windows", "unix": "posix"}
        normalized = aliases.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown path family: {value!r}") from None


__all__ = [
    "Family",
    "POSIX_SEPARATOR",
    "VERBATIM_SEPARATORS",
    "WINDOWS_ALT_SEPARATOR",
    "WINDOWS_SEPARATOR",
]
