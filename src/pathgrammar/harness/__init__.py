"""Comparison and benchmark harness built on the public parsing contract."""

from pathgrammar.harness.bench import BenchResult, benchmark
from pathgrammar.harness.compare import (
    Divergence,
    StrategyReport,
    compare_native,
    compare_strategies,
)
from pathgrammar.harness.corpus import corpus_for, load_corpus

__all__ = [
    "BenchResult",
    "Divergence",
    "StrategyReport",
    "benchmark",
    "compare_native",
    "compare_strategies",
    "corpus_for",
    "load_corpus",
]
