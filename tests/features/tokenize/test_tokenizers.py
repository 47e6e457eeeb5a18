"""Tests shared by both tokenizer strategies."""

from __future__ import annotations

import inspect

import pytest

from pathgrammar.features.prefix import recognize
from pathgrammar.features.tokenize import GeneratedTokenizer, ManualTokenizer, Tokenizer
from pathgrammar.harness.corpus import POSIX_CORPUS, WINDOWS_CORPUS
from pathgrammar.shared.components import ComponentKind
from pathgrammar.shared.family import Family

STRATEGIES: tuple[type[Tokenizer], ...] = (ManualTokenizer, GeneratedTokenizer)


@pytest.fixture(params=STRATEGIES, ids=lambda cls: cls.name)
def tokenizer_cls(request: pytest.FixtureRequest) -> type[Tokenizer]:
    """Each tokenizer strategy in turn."""
    return request.param


def _texts(tokenizer: Tokenizer, text: str, start: int = 0, end: int | None = None) -> list[str]:
    return [component.text for component in tokenizer.tokenize(text, start, end)]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a//b/./c/", ["a", "b", ".", "c"]),
        ("", []),
        ("///", []),
        ("..", [".."]),
        ("a", ["a"]),
        ("/lead", ["lead"]),
        ("x\\y", ["x\\y"]),
    ],
)
def test_posix_separator_runs_collapse(
    tokenizer_cls: type[Tokenizer], text: str, expected: list[str]
) -> None:
    assert _texts(tokenizer_cls("/"), text) == expected


def test_windows_accepts_both_separators(tokenizer_cls: type[Tokenizer]) -> None:
    assert _texts(tokenizer_cls("\\/"), "a\\b/c\\\\/d") == ["a", "b", "c", "d"]


def test_components_are_classified(tokenizer_cls: type[Tokenizer]) -> None:
    kinds = [c.kind for c in tokenizer_cls("/").tokenize("a/./../b")]
    assert kinds == [
        ComponentKind.NORMAL,
        ComponentKind.CUR_DIR,
        ComponentKind.PARENT_DIR,
        ComponentKind.NORMAL,
    ]


def test_components_reference_the_source(tokenizer_cls: type[Tokenizer]) -> None:
    source = "a//bc"
    components = list(tokenizer_cls("/").tokenize(source))

    assert [(c.start, c.end) for c in components] == [(0, 1), (3, 5)]
    assert all(c.source is source for c in components)


def test_start_and_end_bound_the_walk(tokenizer_cls: type[Tokenizer]) -> None:
    tokenizer = tokenizer_cls("/")
    assert _texts(tokenizer, "xx/a/b", 3) == ["a", "b"]
    assert _texts(tokenizer, "a/b/c", 0, 3) == ["a", "b"]
    assert _texts(tokenizer, "abc", 1, 2) == ["b"]


def test_iteration_is_lazy_and_restartable(tokenizer_cls: type[Tokenizer]) -> None:
    tokenizer = tokenizer_cls("/")
    walk = tokenizer.tokenize("a/b/c")

    assert inspect.isgenerator(walk)
    assert next(walk).text == "a"
    assert _texts(tokenizer, "a/b/c") == ["a", "b", "c"]
    assert [c.text for c in walk] == ["b", "c"]


def test_satisfies_protocol(tokenizer_cls: type[Tokenizer]) -> None:
    assert isinstance(tokenizer_cls("/"), Tokenizer)


@pytest.mark.parametrize(
    ("family", "corpus"),
    [(Family.POSIX, POSIX_CORPUS), (Family.WINDOWS, WINDOWS_CORPUS)],
    ids=["posix", "windows"],
)
def test_strategies_agree_on_corpus(family: Family, corpus: tuple[str, ...]) -> None:
    """Both strategies produce identical components for every corpus entry."""
    for text in corpus:
        recognition = recognize(text, family)
        manual = list(ManualTokenizer(recognition.separators).tokenize(text, recognition.start, recognition.end))
        generated = list(
            GeneratedTokenizer(recognition.separators).tokenize(text, recognition.start, recognition.end)
        )
        assert manual == generated, text
        assert [(c.start, c.end) for c in manual] == [(c.start, c.end) for c in generated], text
