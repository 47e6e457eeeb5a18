"""Where: src/pathgrammar/config/settings.py
What: Derived runtime settings sourced from persisted configuration and the environment.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Settings are read once per process; tests reload this module to re-derive them.
Trade-offs: - An unknown family falls back to the host family with a warning; a
  non-positive bench repeat falls back to its default. The tokenizer name is kept
  as given, so an unknown one raises UnknownTokenizerError when a tokenizer is selected.
"""

from __future__ import annotations

import os
from typing import Final

from pathgrammar.config.config import (
    BENCH_REPEAT_DEFAULT,
    TOKENIZER_DEFAULT,
    config as app_config,
)
from pathgrammar.platform.logging import logger
from pathgrammar.shared.family import Family

ENV_TOKENIZER: Final[str] = "PATHGRAMMAR_TOKENIZER"
ENV_FAMILY: Final[str] = "PATHGRAMMAR_FAMILY"


# Tokenizer strategy ----------------------------------------------------------

# Environment wins over the config file so a single run can switch strategy.
_tokenizer = (os.environ.get(ENV_TOKENIZER) or app_config.tokenizer or TOKENIZER_DEFAULT)
TOKENIZER_STRATEGY: str = _tokenizer.strip().lower()


# Default family ----------------------------------------------------------------

_family_name = os.environ.get(ENV_FAMILY) or app_config.default_family
try:
    DEFAULT_FAMILY: Family = Family.coerce(_family_name or None)
except ValueError:
    logger.warning("Unknown default family %r; using host family", _family_name)
    DEFAULT_FAMILY = Family.native()


# Benchmark harness ---------------------------------------------------------------

_bench_repeat = getattr(app_config, "bench_repeat", BENCH_REPEAT_DEFAULT)
BENCH_REPEAT: int = (
    _bench_repeat
    if isinstance(_bench_repeat, int) and _bench_repeat > 0
    else BENCH_REPEAT_DEFAULT
)


__all__ = [
    "BENCH_REPEAT",
    "DEFAULT_FAMILY",
    "ENV_FAMILY",
    "ENV_TOKENIZER",
    "TOKENIZER_STRATEGY",
]
