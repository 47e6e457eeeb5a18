"""Tests for the mutable ``PathBuf``."""

from __future__ import annotations

import pytest

from pathgrammar.features.value import PathBuf, parse
from pathgrammar.shared.family import Family


def test_new_buffer_is_empty_and_relative() -> None:
    buf = PathBuf.new(Family.POSIX)

    assert len(buf) == 0
    assert not buf.is_absolute()
    assert buf.serialize() == ""


def test_push_appends_and_absolute_replaces() -> None:
    buf = PathBuf.new(Family.POSIX)
    buf.push("usr")
    buf.push("lib/x")
    assert buf.serialize() == "usr/lib/x"

    buf.push("/etc")
    assert buf.serialize() == "/etc"


def test_push_windows_prefixed_value_replaces() -> None:
    buf = parse("C:\\a", Family.WINDOWS).to_buf()
    buf.push("D:b")
    assert str(buf) == "D:b"


def test_pop_until_empty() -> None:
    buf = PathBuf(parse("/a/b", Family.POSIX))

    assert buf.pop()
    assert buf.serialize() == "/a"
    assert buf.pop()
    assert buf.serialize() == "/"
    assert not buf.pop()


def test_set_file_name_and_extension() -> None:
    buf = PathBuf(parse("/a/b", Family.POSIX))

    buf.set_file_name("c.txt")
    assert buf.serialize() == "/a/c.txt"
    assert buf.set_extension("md")
    assert buf.serialize() == "/a/c.md"
    assert buf.extension() == "md"


def test_set_extension_without_file_name() -> None:
    buf = PathBuf(parse("/", Family.POSIX))
    assert not buf.set_extension("txt")
    assert buf.serialize() == "/"


def test_normalize_in_place() -> None:
    buf = PathBuf(parse("a/./b/../c", Family.POSIX))
    buf.normalize()
    assert [c.text for c in buf] == ["a", "c"]


def test_buffer_owns_its_text() -> None:
    text = "/a/b"
    buf = PathBuf(parse(text, Family.POSIX))
    frozen = buf.freeze()

    assert not frozen.is_borrowed
    assert frozen == parse(text, Family.POSIX)
    assert buf == PathBuf(parse("/a//b", Family.POSIX))


def test_buffer_is_unhashable() -> None:
    with pytest.raises(TypeError):
        _ = hash(PathBuf.new(Family.POSIX))


def test_read_access_mirrors_value() -> None:
    buf = PathBuf(parse("C:\\x\\y.txt", Family.WINDOWS))

    assert buf.family is Family.WINDOWS
    assert buf.prefix.render() == "C:"
    assert buf.root.is_absolute
    assert buf.file_name() == "y.txt"
    assert [c.text for c in buf.components] == ["x", "y.txt"]
    assert repr(buf) == "PathBuf('C:\\\\x\\\\y.txt', family=windows)"
