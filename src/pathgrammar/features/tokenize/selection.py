"""Where: src/pathgrammar/features/tokenize/selection.py
What: Bind the process-wide tokenizer strategy from settings.
Why: Exactly one strategy is active per process; callers never branch on it.
Assumptions: - Resolution happens once, at import; tests reload the module to switch.
"""

from __future__ import annotations

from functools import cache

from pathgrammar.config import settings
from pathgrammar.features.tokenize.generated import GeneratedTokenizer
from pathgrammar.features.tokenize.manual import ManualTokenizer
from pathgrammar.features.tokenize.ports import Tokenizer
from pathgrammar.platform.logging import logger
from pathgrammar.shared.errors import UnknownTokenizerError

STRATEGIES: dict[str, type[Tokenizer]] = {
    ManualTokenizer.name: ManualTokenizer,
    GeneratedTokenizer.name: GeneratedTokenizer,
}


def resolve_strategy(name: str) -> type[Tokenizer]:
    """Return the tokenizer class registered under ``name``.

    Raises:
        UnknownTokenizerError: If no strategy has that name.
    """
    try:
        return STRATEGIES[name.strip().lower()]
    except KeyError:
        logger.debug("Unknown tokenizer strategy %r; known: %s", name, ", ".join(STRATEGIES))
        raise UnknownTokenizerError(name) from None


ActiveTokenizer: type[Tokenizer] = resolve_strategy(settings.TOKENIZER_STRATEGY)
logger.debug("Tokenizer strategy: %s", ActiveTokenizer.name)


@cache
def tokenizer_for(separators: str) -> Tokenizer:
    """Return the shared active-strategy tokenizer for a separator set."""
    return ActiveTokenizer(separators)


__all__ = ["ActiveTokenizer", "STRATEGIES", "resolve_strategy", "tokenizer_for"]
