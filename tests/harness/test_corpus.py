"""Tests for the sample corpora and corpus files."""

from pathlib import Path

import pytest

from pathgrammar.features.value import parse
from pathgrammar.harness import corpus_for, load_corpus
from pathgrammar.harness.corpus import POSIX_CORPUS, WINDOWS_CORPUS
from pathgrammar.shared.family import Family


def test_corpus_for_family() -> None:
    assert corpus_for(Family.POSIX) is POSIX_CORPUS
    assert corpus_for(Family.WINDOWS) is WINDOWS_CORPUS


@pytest.mark.parametrize("family", list(Family), ids=lambda family: family.value)
def test_builtin_corpora_parse_cleanly(family: Family) -> None:
    for text in corpus_for(family):
        _ = parse(text, family).components


def test_load_corpus_skips_blank_lines_and_comments(tmp_path: Path) -> None:
    corpus = tmp_path / "corpus.txt"
    _ = corpus.write_text("# header\n/a/b\n\n   \n  # indented comment\n trailing space \nC:\\x\n", encoding="utf-8")

    assert load_corpus(corpus) == ["/a/b", " trailing space ", "C:\\x"]


def test_load_corpus_keeps_undecodable_bytes(tmp_path: Path) -> None:
    corpus = tmp_path / "corpus.txt"
    _ = corpus.write_bytes(b"/tmp/\xff\n")

    entries = load_corpus(corpus)

    assert entries == ["/tmp/\udcff"]
    assert parse(entries[0], Family.POSIX).to_bytes() == b"/tmp/\xff"


def test_load_corpus_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        _ = load_corpus(tmp_path / "missing.txt")
