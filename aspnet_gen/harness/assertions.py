"""Assertions over generated artifacts.

Files are inspected as rendered text: a ``str`` pattern is a literal
substring, a compiled ``re.Pattern`` is searched anywhere in the file and
anchors follow the pattern's own flags (compile with ``re.MULTILINE`` to
anchor to a single line).  None of these functions touch the filesystem
beyond reading.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..errors import (
    ArtifactAssertionError,
    ContentMismatchError,
    MissingFileError,
    UnexpectedContentError,
)

Pattern = str | re.Pattern[str]


def _resolve(path: str | Path, root: str | Path | None) -> Path:
    candidate = Path(path)
    if root is not None and not candidate.is_absolute():
        return Path(root) / candidate
    return candidate


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise MissingFileError(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ArtifactAssertionError(path, f"{path} is not valid UTF-8 text: {exc.reason}") from exc


def content_contains(text: str, pattern: Pattern) -> bool:
    """Return ``True`` if *pattern* occurs in *text*."""
    if isinstance(pattern, re.Pattern):
        return pattern.search(text) is not None
    return pattern in text


def assert_file_exists(path: str | Path, *, root: str | Path | None = None) -> Path:
    """Fail with :class:`MissingFileError` unless *path* is an existing file."""
    target = _resolve(path, root)
    if not target.is_file():
        raise MissingFileError(target)
    return target


def assert_content_matches(
    path: str | Path,
    pattern: Pattern,
    description: str = "file content check",
    *,
    root: str | Path | None = None,
) -> None:
    """Fail with :class:`ContentMismatchError` if *pattern* is not in the file."""
    target = _resolve(path, root)
    if not content_contains(_read_text(target), pattern):
        raise ContentMismatchError(target, pattern, description)


def assert_content_excludes(
    path: str | Path,
    pattern: Pattern,
    description: str = "file content check",
    *,
    root: str | Path | None = None,
) -> None:
    """Fail with :class:`UnexpectedContentError` if *pattern* is in the file."""
    target = _resolve(path, root)
    if content_contains(_read_text(target), pattern):
        raise UnexpectedContentError(target, pattern, description)
