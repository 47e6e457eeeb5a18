# Path: `src/pathgrammar/features/tokenize/__init__.py`
# Summary: Export both tokenizer strategies, the rule toolkit and the active binding.
# Why: Give the value layer and the harness one import point.

from .generated import GeneratedTokenizer, build_path_grammar
from .manual import ManualTokenizer
from .ports import Tokenizer
from .selection import ActiveTokenizer, STRATEGIES, resolve_strategy, tokenizer_for

__all__ = [
    "ActiveTokenizer",
    "GeneratedTokenizer",
    "ManualTokenizer",
    "STRATEGIES",
    "Tokenizer",
    "build_path_grammar",
    "resolve_strategy",
    "tokenizer_for",
]
