"""End-to-end behaviour through the public ``pathgrammar`` package."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

import pytest

import pathgrammar
from pathgrammar import (
    UNC,
    DeviceUNC,
    DriveLetter,
    Family,
    PathGrammarError,
    RootKind,
    join,
    normalize,
    parse,
)
from pathgrammar.features.prefix import recognize
from pathgrammar.features.tokenize import GeneratedTokenizer, ManualTokenizer
from pathgrammar.harness.corpus import POSIX_CORPUS, WINDOWS_CORPUS
from pathgrammar.shared.components import ComponentKind

CORPORA = pytest.mark.parametrize(
    ("family", "text"),
    [(Family.POSIX, text) for text in POSIX_CORPUS] + [(Family.WINDOWS, text) for text in WINDOWS_CORPUS],
)


# Small enough to enumerate; reaches the drive, UNC and device recognizer branches.
ALPHABET = "a\\/.:?C"
MAX_LENGTH = 5


def _short_texts() -> Iterator[str]:
    for length in range(MAX_LENGTH + 1):
        for chars in itertools.product(ALPHABET, repeat=length):
            yield "".join(chars)


def _texts(value: pathgrammar.PathValue) -> list[str]:
    return [component.text for component in value.components]


def test_drive_absolute_with_parent_dir() -> None:
    value = parse("C:\\Users\\me\\..\\you", Family.WINDOWS)

    assert value.prefix == DriveLetter("C")
    assert value.root is RootKind.ABSOLUTE
    assert _texts(value) == ["Users", "me", "..", "you"]
    assert value.components[2].kind is ComponentKind.PARENT_DIR
    assert _texts(normalize(value)) == ["Users", "you"]


def test_unc_share_with_extension() -> None:
    value = parse("\\\\server\\share\\dir\\file.txt", Family.WINDOWS)

    assert value.prefix == UNC("server", "share")
    assert value.root is RootKind.ABSOLUTE
    assert _texts(value) == ["dir", "file.txt"]
    assert value.extension() == "txt"


def test_drive_relative() -> None:
    value = parse("C:foo", Family.WINDOWS)

    assert value.prefix == DriveLetter("C")
    assert value.is_relative()
    assert _texts(value) == ["foo"]


def test_posix_separator_runs_and_cur_dir() -> None:
    value = parse("/a//b/./c/", Family.POSIX)

    assert value.root is RootKind.ABSOLUTE
    assert _texts(value) == ["a", "b", ".", "c"]
    assert value.components[2].kind is ComponentKind.CUR_DIR
    assert _texts(normalize(value)) == ["a", "b", "c"]


def test_join_absolute_replaces() -> None:
    joined = join(parse("a/b", Family.POSIX), parse("/etc", Family.POSIX))
    assert joined == parse("/etc", Family.POSIX)


def test_verbatim_unc() -> None:
    value = parse("\\\\?\\UNC\\server\\share\\x", Family.WINDOWS)

    assert value.prefix == DeviceUNC("server", "share")
    assert _texts(value) == ["x"]


@CORPORA
def test_serialization_round_trips(family: Family, text: str) -> None:
    value = parse(text, family)
    assert parse(value.serialize(), family) == value


@CORPORA
def test_no_empty_components(family: Family, text: str) -> None:
    assert all(len(component) > 0 for component in parse(text, family).components)


@CORPORA
def test_normalize_is_idempotent(family: Family, text: str) -> None:
    once = normalize(parse(text, family))
    assert normalize(once) == once


@CORPORA
def test_strategies_are_equivalent(family: Family, text: str) -> None:
    recognition = recognize(text, family)
    span = (text, recognition.start, recognition.end)

    manual = list(ManualTokenizer(recognition.separators).tokenize(*span))
    generated = list(GeneratedTokenizer(recognition.separators).tokenize(*span))

    assert manual == generated


@CORPORA
def test_join_with_absolute_yields_the_absolute_side(family: Family, text: str) -> None:
    other = parse(text, family)
    if not other.is_absolute():
        pytest.skip("only absolute right-hand sides replace the base")
    assert join(parse("base/dir", family), other) == other


@pytest.mark.parametrize("family", [Family.POSIX, Family.WINDOWS])
def test_every_short_text_round_trips(family: Family) -> None:
    failures: list[str] = []
    for text in _short_texts():
        try:
            value = parse(text, family)
        except PathGrammarError:
            continue
        normalized = normalize(value)
        if parse(value.serialize(), family) != value:
            failures.append(f"parse {text!r}")
        if parse(normalized.serialize(), family) != normalized:
            failures.append(f"normalize {text!r}")
        if normalize(normalized) != normalized:
            failures.append(f"idempotence {text!r}")

        recognition = recognize(text, family)
        span = (text, recognition.start, recognition.end)
        manual = list(ManualTokenizer(recognition.separators).tokenize(*span))
        generated = list(GeneratedTokenizer(recognition.separators).tokenize(*span))
        if manual != generated:
            failures.append(f"tokenizers {text!r}")

    assert failures == []
