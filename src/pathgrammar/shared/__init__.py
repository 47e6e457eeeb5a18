"""Shared value types used across the grammar, value and algebra layers."""

from pathgrammar.shared.errors import (
    ErrorKind,
    InvalidCharacterError,
    InvalidEncodingError,
    MalformedPrefixError,
    PathGrammarError,
    RestrictedNameError,
    UnknownTokenizerError,
)
from pathgrammar.shared.family import Family

__all__ = [
    "ErrorKind",
    "Family",
    "InvalidCharacterError",
    "InvalidEncodingError",
    "MalformedPrefixError",
    "PathGrammarError",
    "RestrictedNameError",
    "UnknownTokenizerError",
]
