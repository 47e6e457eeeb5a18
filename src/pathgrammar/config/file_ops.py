"""Utility helpers for configuration file persistence."""

from __future__ import annotations

from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")


def read_lines(path: Path) -> list[str]:
    """Read a UTF-8 text file as lines without trailing newlines.

    Undecodable bytes are kept as lone surrogates so POSIX paths survive.
    """

    return path.read_text(encoding="utf-8", errors="surrogateescape").splitlines()


__all__ = ["read_lines", "write_text_file"]
