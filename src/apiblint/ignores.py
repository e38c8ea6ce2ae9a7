# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse and write ``.apiblint`` ignore baselines."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Final

from .errors import MalformedIgnoreLineError
from .models import IgnoreBaseline, IgnoreEntry, LintWarning
from .text import split_lines

IGNORE_FIELD_SEPARATOR: Final[str] = ":"
IGNORE_FIELD_COUNT: Final[int] = 3
DEFAULT_IGNORE_FILE_EXT: Final[str] = ".apiblint"

TextReader = Callable[[Path], str]
TextWriter = Callable[[Path, str], None]

LOGGER = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Return the UTF-8 contents of ``path``."""

    return path.read_text(encoding="utf-8")


def write_text(path: Path, content: str) -> None:
    """Replace the contents of ``path`` with ``content``."""

    path.write_text(content, encoding="utf-8")


def ignore_file_for(document: Path, ext: str = DEFAULT_IGNORE_FILE_EXT) -> Path:
    """Return the sidecar ignore file path for ``document``."""

    return document.with_name(document.name + ext)


def parse_ignore_file(content: str | None) -> IgnoreBaseline:
    """Parse ignore file ``content`` into a baseline keyed by warning code.

    Each non-blank line holds one ``code:startLine:endLine`` record with
    1-based inclusive line numbers, converted to 0-based here. A malformed
    record aborts the whole parse.

    Args:
        content: Raw file text, or ``None`` when the file does not exist.

    Returns:
        IgnoreBaseline: Entries grouped by code, in file order per code.

    Raises:
        MalformedIgnoreLineError: If any record cannot be parsed.
    """

    grouped: dict[str, list[IgnoreEntry]] = {}
    if not content:
        return IgnoreBaseline(grouped)
    for index, raw_line in enumerate(split_lines(content), start=1):
        line = raw_line.strip()
        if not line:
            continue
        code, entry = _parse_record(index, line)
        grouped.setdefault(code, []).append(entry)
    return IgnoreBaseline(grouped)


def _parse_record(line_number: int, line: str) -> tuple[str, IgnoreEntry]:
    fields = line.split(IGNORE_FIELD_SEPARATOR)
    if len(fields) != IGNORE_FIELD_COUNT:
        raise MalformedIgnoreLineError(line_number, line, "expected 'code:startLine:endLine'")
    code, raw_start, raw_end = (field.strip() for field in fields)
    if not code:
        raise MalformedIgnoreLineError(line_number, line, "missing warning code")
    try:
        start, end = int(raw_start), int(raw_end)
    except ValueError as exc:
        raise MalformedIgnoreLineError(line_number, line, "line numbers must be integers") from exc
    if start < 1 or end < 1:
        raise MalformedIgnoreLineError(line_number, line, "line numbers are 1-based")
    return code, IgnoreEntry(start_line=start - 1, end_line=end - 1)


def load_ignore_baseline(path: Path, reader: TextReader = read_text) -> IgnoreBaseline:
    """Read and parse the ignore file at ``path``.

    Args:
        path: Location of the sidecar ignore file.
        reader: Callable returning file contents; ``FileNotFoundError`` means
            no baseline has been recorded.

    Returns:
        IgnoreBaseline: Parsed baseline, empty when the file is absent.
    """

    try:
        content = reader(path)
    except FileNotFoundError:
        LOGGER.debug("no ignore file at %s", path)
        return IgnoreBaseline()
    baseline = parse_ignore_file(content)
    LOGGER.debug("loaded %d ignore codes from %s", len(baseline), path)
    return baseline


def format_ignore_record(warning: LintWarning) -> str:
    """Return the ignore-file record that suppresses ``warning``."""

    return IGNORE_FIELD_SEPARATOR.join(
        (warning.code, str(warning.start_line + 1), str(warning.end_line + 1)),
    )


def write_ignore_file(path: Path, warnings: Iterable[LintWarning], writer: TextWriter = write_text) -> int:
    """Write one record per warning to ``path``, replacing its contents.

    Args:
        path: Destination ignore file.
        warnings: Warnings to record, written in iteration order.
        writer: Callable persisting the rendered text.

    Returns:
        int: Number of distinct records written.
    """

    records = list(dict.fromkeys(format_ignore_record(warning) for warning in warnings))
    writer(path, "".join(f"{record}\n" for record in records))
    LOGGER.debug("wrote %d ignore records to %s", len(records), path)
    return len(records)


__all__ = [
    "DEFAULT_IGNORE_FILE_EXT",
    "IGNORE_FIELD_SEPARATOR",
    "TextReader",
    "TextWriter",
    "format_ignore_record",
    "ignore_file_for",
    "load_ignore_baseline",
    "parse_ignore_file",
    "read_text",
    "write_ignore_file",
    "write_text",
]
