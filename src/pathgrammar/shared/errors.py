"""
Summary: Exception taxonomy raised while parsing and validating paths.
Why: Callers distinguish malformed prefixes from encoding problems without parsing messages.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a parse failure."""

    MALFORMED_PREFIX = "malformed_prefix"
    INVALID_ENCODING = "invalid_encoding"
    INVALID_CHARACTER = "invalid_character"
    RESTRICTED_NAME = "restricted_name"


class PathGrammarError(ValueError):
    """Base class for every error raised by ``pathgrammar``.

    Attributes:
        kind: Category of the failure.
        path: Text (or a repr of the raw input) that failed to parse.
        start: Offset where the offending segment begins.
        end: Offset where the offending segment ends.
        reason: Human readable description of the failure.
    """

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, path: str, start: int, end: int, reason: str) -> None:
        super().__init__(f"{path!r}: {reason} (range {start}..{end})")
        self.kind = kind
        self.path: str = path
        self.start: int = start
        self.end: int = end
        self.reason: str = reason

    @property
    def segment(self) -> str:
        """The slice of ``path`` the error points at."""
        return self.path[self.start : self.end]


class MalformedPrefixError(PathGrammarError):
    """A UNC or device prefix is missing a segment or uses an invalid separator."""

    def __init__(self, path: str, start: int, end: int, reason: str) -> None:
        super().__init__(ErrorKind.MALFORMED_PREFIX, path, start, end, reason)


class InvalidEncodingError(PathGrammarError):
    """Input cannot be represented under the family's text encoding."""

    def __init__(self, path: str, start: int, end: int, reason: str) -> None:
        super().__init__(ErrorKind.INVALID_ENCODING, path, start, end, reason)


class InvalidCharacterError(PathGrammarError):
    """A component holds a character the platform forbids in file names."""

    def __init__(self, path: str, start: int, end: int, reason: str) -> None:
        super().__init__(ErrorKind.INVALID_CHARACTER, path, start, end, reason)


class RestrictedNameError(PathGrammarError):
    """A component uses a reserved Windows device name."""

    def __init__(self, path: str, start: int, end: int, reason: str) -> None:
        super().__init__(ErrorKind.RESTRICTED_NAME, path, start, end, reason)


class UnknownTokenizerError(ValueError):
    """Raised when configuration names a tokenizer strategy that does not exist."""

    def __init__(self, strategy: str) -> None:
        super().__init__(f"Unknown tokenizer strategy: {strategy}")
        self.strategy: str = strategy


__all__ = [
    "ErrorKind",
    "InvalidCharacterError",
    "InvalidEncodingError",
    "MalformedPrefixError",
    "PathGrammarError",
    "RestrictedNameError",
    "UnknownTokenizerError",
]
