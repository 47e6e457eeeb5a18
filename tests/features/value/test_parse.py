"""Tests for ``parse``: input kinds, spans, encodings and laziness."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest
from pytest_mock import MockerFixture

from pathgrammar.config import settings
from pathgrammar.features.prefix import UNC, DriveLetter, RootKind
from pathgrammar.features.tokenize.selection import tokenizer_for
from pathgrammar.features.value import parse
from pathgrammar.features.value.path_value import is_borrowed_from
from pathgrammar.shared.errors import ErrorKind, InvalidEncodingError, MalformedPrefixError
from pathgrammar.shared.family import Family


def test_str_input_is_borrowed() -> None:
    text = "/usr/lib"
    value = parse(text, Family.POSIX)

    assert value.is_borrowed
    assert is_borrowed_from(value, text)
    assert all(component.source is text for component in value.components)


def test_family_accepts_names_and_aliases() -> None:
    assert parse("a", "posix").family is Family.POSIX
    assert parse("a", "nt").family is Family.WINDOWS


def test_unknown_family_name_raises() -> None:
    with pytest.raises(ValueError, match="Unknown path family"):
        _ = parse("a", "mac")


def test_default_family_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "DEFAULT_FAMILY", Family.WINDOWS)

    value = parse("a\\b")

    assert value.family is Family.WINDOWS
    assert [c.text for c in value.components] == ["a", "b"]


def test_span_selects_part_of_the_input() -> None:
    value = parse("xx/a/byy", Family.POSIX, start=2, end=6)

    assert value.text == "/a/b"
    assert value.is_absolute()
    assert value.serialize() == "/a/b"


@pytest.mark.parametrize(("start", "end"), [(5, 3), (-1, None), (0, 99)])
def test_span_outside_input_raises(start: int, end: int | None) -> None:
    with pytest.raises(ValueError, match="outside"):
        _ = parse("abcd", Family.POSIX, start=start, end=end)


def test_pathlike_input() -> None:
    value = parse(PurePosixPath("/a/b"), Family.POSIX)
    assert value.serialize() == "/a/b"


def test_posix_bytes_keep_undecodable_bytes() -> None:
    value = parse(b"/tmp/\xff", Family.POSIX)

    assert not value.is_borrowed
    assert value.file_name() == "\udcff"
    assert value.to_bytes() == b"/tmp/\xff"


def test_bytes_span_addresses_bytes() -> None:
    value = parse(b"ab/cd", Family.POSIX, start=3)
    assert value.serialize() == "cd"


def test_windows_bytes_accept_wtf8_surrogates() -> None:
    raw = "C:\\a\ud800".encode("utf-8", "surrogatepass")
    value = parse(raw, Family.WINDOWS)

    assert value.file_name() == "a\ud800"
    assert value.to_bytes() == raw


def test_windows_bytes_reject_invalid_utf8() -> None:
    with pytest.raises(InvalidEncodingError) as excinfo:
        _ = parse(b"C:\\\xff", Family.WINDOWS)

    assert excinfo.value.kind is ErrorKind.INVALID_ENCODING
    assert (excinfo.value.start, excinfo.value.end) == (3, 4)


def test_posix_str_rejects_unencodable_surrogate() -> None:
    with pytest.raises(InvalidEncodingError) as excinfo:
        _ = parse("a\ud800", Family.POSIX)

    assert (excinfo.value.start, excinfo.value.end) == (1, 2)


def test_windows_str_accepts_lone_surrogate() -> None:
    assert parse("a\ud800", Family.WINDOWS).file_name() == "a\ud800"


def test_malformed_prefix_raises_before_a_value_exists() -> None:
    with pytest.raises(MalformedPrefixError):
        _ = parse("\\\\server", Family.WINDOWS)


def test_prefix_and_root_are_recognized() -> None:
    drive = parse("C:foo", Family.WINDOWS)
    share = parse("\\\\srv\\share\\x", Family.WINDOWS)

    assert drive.prefix == DriveLetter("C")
    assert drive.root is RootKind.DRIVE_RELATIVE
    assert share.prefix == UNC("srv", "share")
    assert share.root is RootKind.ABSOLUTE


def test_tokenization_is_deferred_and_cached(mocker: MockerFixture) -> None:
    """Components are produced on first access and reused afterwards."""
    spy = mocker.patch(
        "pathgrammar.features.value.path_value.tokenizer_for", wraps=tokenizer_for
    )

    value = parse("/a/b/c", Family.POSIX)
    spy.assert_not_called()

    assert len(value.components) == 3
    assert len(value.components) == 3
    spy.assert_called_once_with("/")

    assert [c.text for c in value.iter_components()] == ["a", "b", "c"]
    assert spy.call_count == 2
