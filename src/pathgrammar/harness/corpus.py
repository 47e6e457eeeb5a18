"""
Summary: Sample path corpora for the comparison and benchmark harness.
Why: Give both harness entry points a realistic, family-specific input set without fixtures on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pathgrammar.config.file_ops import read_lines
from pathgrammar.platform.logging import logger
from pathgrammar.shared.family import Family

POSIX_CORPUS: Final[tuple[str, ...]] = (
    "",
    "/",
    ".",
    "..",
    "/usr/bin/env",
    "/a//b/./c/",
    "a/b/c",
    "./relative/path/",
    "../x/./y",
    "a/../b",
    "//double/leading",
    "/home/user/.bashrc",
    "archive.tar.gz",
    "trailing/slash///",
    "C:\\not\\a\\drive",
    "/srv/data/2024/q1/report.final.pdf",
)

WINDOWS_CORPUS: Final[tuple[str, ...]] = (
    "",
    "\\",
    "C:",
    "C:\\",
    "C:foo",
    "C:\\Users\\me\\..\\you",
    "c:/Program Files/App/app.exe",
    "\\\\server\\share\\dir\\file.txt",
    "\\\\server\\share",
    "\\\\?\\UNC\\server\\share\\x",
    "\\\\?\\C:\\Program Files\\a/b\\c",
    "\\\\.\\COM1",
    "\\\\.\\pipe\\name/with/slashes",
    "\\rooted\\path",
    "relative\\path\\.\\to\\..\\file",
    "mixed/separators\\\\here/",
    "..\\..\\up",
)


def corpus_for(family: Family) -> tuple[str, ...]:
    """Built-in corpus for ``family``."""
    return WINDOWS_CORPUS if family is Family.WINDOWS else POSIX_CORPUS


def load_corpus(path: Path) -> list[str]:
    """Read one path per line, skipping blank lines and ``#`` comments.

    Raises:
        OSError: If the file cannot be read.
    """
    entries = [
        line for line in read_lines(path) if line.strip() and not line.lstrip().startswith("#")
    ]
    logger.debug("Loaded %d corpus entries from %s", len(entries), path)
    return entries


__all__ = ["POSIX_CORPUS", "WINDOWS_CORPUS", "corpus_for", "load_corpus"]
