# Path: `src/pathgrammar/features/value/__init__.py`
# Summary: Export path values, storage variants and the ``parse`` entry point.
# Why: Provide a stable import surface for algebra, harness and CLI layers.

from .keys import component_key, path_key
from .parse import parse
from .path_buf import PathBuf
from .path_value import PathValue, render_anchor
from .storage import Borrowed, Owned, Storage

__all__ = [
    "Borrowed",
    "Owned",
    "PathBuf",
    "PathValue",
    "Storage",
    "component_key",
    "parse",
    "path_key",
    "render_anchor",
]
