# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate API Blueprint documents on the filesystem."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Final

from .config import DEFAULT_EXTENSIONS
from .errors import DocumentNotFoundError

ALWAYS_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        "node_modules",
        ".venv",
        "venv",
        "__pycache__",
        ".tox",
    },
)


def discover_documents(
    paths: Iterable[Path],
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    *,
    follow_symlinks: bool = False,
) -> list[Path]:
    """Resolve ``paths`` into an ordered, de-duplicated list of documents.

    Files named explicitly are kept whatever their extension. Directories are
    walked recursively in sorted order and only files ending in one of
    ``extensions`` are collected.

    Args:
        paths: Files and directories supplied by the caller.
        extensions: File suffixes identifying documents inside directories.
        follow_symlinks: When ``True`` walk directories pointed to by symlinks.

    Returns:
        list[Path]: Resolved document paths in discovery order.

    Raises:
        DocumentNotFoundError: If any path does not exist.
    """

    suffixes = tuple(ext.lower() for ext in extensions)
    results: list[Path] = []
    seen: set[Path] = set()
    for entry in paths:
        if not entry.exists():
            raise DocumentNotFoundError(f"no such file or directory: {entry}")
        candidates = _walk(entry, suffixes, follow_symlinks) if entry.is_dir() else iter((entry,))
        for candidate in candidates:
            resolved = candidate.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            results.append(resolved)
    return results


def _walk(base: Path, suffixes: tuple[str, ...], follow_symlinks: bool) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(base, followlinks=follow_symlinks):
        dirnames[:] = sorted(name for name in dirnames if name not in ALWAYS_EXCLUDE_DIRS)
        current = Path(dirpath)
        for filename in sorted(filenames):
            if filename.lower().endswith(suffixes):
                yield current / filename


__all__ = ["ALWAYS_EXCLUDE_DIRS", "discover_documents"]
