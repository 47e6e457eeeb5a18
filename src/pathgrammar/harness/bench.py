"""
Summary: Micro-benchmark of both tokenizers, full parsing and ``pathlib``.
Why: Quantify the cost of the generated strategy against the manual one over the same corpus.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath, PureWindowsPath

from pathgrammar.features.prefix import recognize
from pathgrammar.features.tokenize import GeneratedTokenizer, ManualTokenizer, Tokenizer
from pathgrammar.features.value import parse
from pathgrammar.platform.logging import logger
from pathgrammar.shared.errors import PathGrammarError
from pathgrammar.shared.family import Family


@dataclass(frozen=True, slots=True)
class BenchResult:
    """Timing for one contender.

    Attributes:
        name: Contender label.
        total_seconds: Wall time across every repetition.
        per_path_us: Mean microseconds per path per repetition.
        paths: Number of corpus entries measured.
    """

    name: str
    total_seconds: float
    per_path_us: float
    paths: int


def _time(name: str, repeat: int, paths: int, run: Callable[[], None]) -> BenchResult:
    started = time.perf_counter()
    for _ in range(repeat):
        run()
    elapsed = time.perf_counter() - started
    per_path = elapsed / (repeat * paths) * 1_000_000 if paths else 0.0
    result = BenchResult(name, elapsed, per_path, paths)
    logger.info(
        "%s: %.1f µs/path",
        name,
        per_path,
        extra={"path_event": "bench.result"},
    )
    return result


def _tokenizer_run(tokenizer_cls: type[Tokenizer], spans: Sequence[tuple[str, int, int, str]]) -> Callable[[], None]:
    tokenizers = {separators: tokenizer_cls(separators) for _, _, _, separators in spans}

    def run() -> None:
        for path, start, end, separators in spans:
            for _ in tokenizers[separators].tokenize(path, start, end):
                pass

    return run


def benchmark(corpus: Sequence[str], family: Family, repeat: int) -> list[BenchResult]:
    """Time the manual tokenizer, the generated tokenizer, ``parse`` and ``pathlib``.

    Entries with a malformed prefix are left out of every contender.

    Raises:
        ValueError: If ``repeat`` is not positive.
    """
    if repeat <= 0:
        raise ValueError(f"repeat must be positive, got {repeat}")

    spans: list[tuple[str, int, int, str]] = []
    for path in corpus:
        try:
            recognition = recognize(path, family)
        except PathGrammarError:
            continue
        spans.append((path, recognition.start, recognition.end, recognition.separators))
    valid = [path for path, _, _, _ in spans]
    native_type = PureWindowsPath if family is Family.WINDOWS else PurePosixPath

    def run_parse() -> None:
        for path in valid:
            _ = parse(path, family).components

    def run_native() -> None:
        for path in valid:
            _ = native_type(path).parts

    count = len(valid)
    return [
        _time(ManualTokenizer.name, repeat, count, _tokenizer_run(ManualTokenizer, spans)),
        _time(GeneratedTokenizer.name, repeat, count, _tokenizer_run(GeneratedTokenizer, spans)),
        _time("parse", repeat, count, run_parse),
        _time(f"native ({native_type.__name__})", repeat, count, run_native),
    ]


__all__ = ["BenchResult", "benchmark"]
