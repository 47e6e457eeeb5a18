"""Tests for the Windows prefix and root recognizer."""

from __future__ import annotations

import pytest

from pathgrammar.features.prefix import (
    NO_PREFIX,
    UNC,
    DeviceUNC,
    DeviceVerbatim,
    DriveLetter,
    PathPrefix,
    RootKind,
    recognize,
    recognize_windows,
)
from pathgrammar.shared.errors import ErrorKind, MalformedPrefixError
from pathgrammar.shared.family import Family


@pytest.mark.parametrize(
    ("text", "prefix", "root", "remainder"),
    [
        ("C:\\Users\\me", DriveLetter("C"), RootKind.ABSOLUTE, "Users\\me"),
        ("c:/Users", DriveLetter("C"), RootKind.ABSOLUTE, "Users"),
        ("C:foo", DriveLetter("C"), RootKind.DRIVE_RELATIVE, "foo"),
        ("C:", DriveLetter("C"), RootKind.DRIVE_RELATIVE, ""),
        ("\\\\server\\share\\dir\\file.txt", UNC("server", "share"), RootKind.ABSOLUTE, "dir\\file.txt"),
        ("\\\\server\\share", UNC("server", "share"), RootKind.ABSOLUTE, ""),
        ("\\\\server\\share/dir", UNC("server", "share"), RootKind.ABSOLUTE, "dir"),
        ("\\\\?\\UNC\\server\\share\\x", DeviceUNC("server", "share"), RootKind.ABSOLUTE, "x"),
        ("\\\\?\\unc\\srv\\sh", DeviceUNC("srv", "sh"), RootKind.ABSOLUTE, ""),
        ("\\\\?\\C:\\Program Files", DeviceVerbatim("C:"), RootKind.ABSOLUTE, "Program Files"),
        ("//?/C:\\x", DeviceVerbatim("C:"), RootKind.ABSOLUTE, "x"),
        ("\\\\?\\UNC", DeviceVerbatim("UNC"), RootKind.ABSOLUTE, ""),
        ("\\\\.\\COM1", DeviceVerbatim("COM1", "."), RootKind.ABSOLUTE, ""),
        ("\\\\.\\pipe/name", DeviceVerbatim("pipe", "."), RootKind.ABSOLUTE, "name"),
        ("\\rooted\\path", NO_PREFIX, RootKind.ABSOLUTE, "rooted\\path"),
        ("/rooted", NO_PREFIX, RootKind.ABSOLUTE, "rooted"),
        ("relative\\path", NO_PREFIX, RootKind.RELATIVE, "relative\\path"),
        ("1:foo", NO_PREFIX, RootKind.RELATIVE, "1:foo"),
        ("", NO_PREFIX, RootKind.RELATIVE, ""),
    ],
)
def test_recognizes_prefix_and_root(
    text: str, prefix: PathPrefix, root: RootKind, remainder: str
) -> None:
    recognition = recognize_windows(text)

    assert recognition.prefix == prefix
    assert recognition.root is root
    assert text[recognition.start : recognition.end] == remainder


def test_verbatim_paths_only_split_on_backslash() -> None:
    assert recognize_windows("\\\\?\\C:\\a/b").separators == "\\"
    assert recognize_windows("\\\\?\\UNC\\s\\h\\a").separators == "\\"
    assert set(recognize_windows("\\\\.\\pipe\\a").separators) == {"\\", "/"}
    assert set(recognize_windows("C:\\a").separators) == {"\\", "/"}


def test_prefix_rendering_is_canonical() -> None:
    assert DriveLetter("C").render() == "C:"
    assert UNC("server", "share").render() == "\\\\server\\share"
    assert DeviceVerbatim("C:").render() == "\\\\?\\C:"
    assert DeviceVerbatim("COM1", ".").render() == "\\\\.\\COM1"
    assert DeviceUNC("server", "share").render() == "\\\\?\\UNC\\server\\share"
    assert not NO_PREFIX
    assert DriveLetter("C")


def test_respects_start_and_end_offsets() -> None:
    text = ">>C:\\a\\b<<"
    recognition = recognize(text, Family.WINDOWS, 2, len(text) - 2)

    assert recognition.prefix == DriveLetter("C")
    assert text[recognition.start : recognition.end] == "a\\b"


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("\\\\server", "missing a share"),
        ("\\\\server\\", "share name is empty"),
        ("\\\\\\share", "missing a server"),
        ("//server/share", "invalid separator"),
        ("\\\\ser/ver\\share", "invalid separator"),
        ("\\\\?\\", "missing its payload"),
        ("\\\\.\\\\x", "missing its payload"),
        ("\\\\?\\UNC\\server", "missing a share"),
        ("\\\\?\\UNC\\\\share", "missing a server"),
        ("\\\\?\\UNC\\server\\", "share name is empty"),
        ("\\\\?\\UNC\\server\\sh/are\\x", "invalid separator"),
    ],
)
def test_malformed_prefixes_raise(text: str, reason: str) -> None:
    with pytest.raises(MalformedPrefixError, match=reason) as excinfo:
        _ = recognize_windows(text)

    error = excinfo.value
    assert error.kind is ErrorKind.MALFORMED_PREFIX
    assert error.path == text
    assert 0 <= error.start <= error.end <= len(text)
