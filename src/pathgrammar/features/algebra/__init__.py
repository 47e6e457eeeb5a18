# Path: `src/pathgrammar/features/algebra/__init__.py`
# Summary: Export path algebra operations.
# Why: Single import point for ``PathValue`` shortcuts, ``PathBuf`` and callers.

from .comparison import comparison_key, relative_to, starts_with
from .ops import coerce_path, join, normalize, push, set_extension, set_file_name

__all__ = [
    "coerce_path",
    "comparison_key",
    "join",
    "normalize",
    "push",
    "relative_to",
    "set_extension",
    "set_file_name",
    "starts_with",
]
