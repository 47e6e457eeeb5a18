"""Cross-platform path grammar parsing and lexical path algebra.

Example:
    >>> from pathgrammar import Family, parse
    >>> value = parse(r"C:\\Users\\me\\..\\you", Family.WINDOWS)
    >>> [str(c) for c in value.normalize().components]
    ['Users', 'you']
"""

from pathgrammar.features.algebra import (
    join,
    normalize,
    push,
    relative_to,
    set_extension,
    set_file_name,
    starts_with,
)
from pathgrammar.features.prefix import (
    UNC,
    DeviceUNC,
    DeviceVerbatim,
    DriveLetter,
    NoPrefix,
    PathPrefix,
    RootKind,
)
from pathgrammar.features.value import Borrowed, Owned, PathBuf, PathValue, parse
from pathgrammar.shared.components import Component, ComponentKind
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
    "UNC",
    "Borrowed",
    "Component",
    "ComponentKind",
    "DeviceUNC",
    "DeviceVerbatim",
    "DriveLetter",
    "ErrorKind",
    "Family",
    "InvalidCharacterError",
    "InvalidEncodingError",
    "MalformedPrefixError",
    "NoPrefix",
    "Owned",
    "PathBuf",
    "PathGrammarError",
    "PathPrefix",
    "PathValue",
    "RestrictedNameError",
    "RootKind",
    "UnknownTokenizerError",
    "join",
    "normalize",
    "parse",
    "push",
    "relative_to",
    "set_extension",
    "set_file_name",
    "starts_with",
]
