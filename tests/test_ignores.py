# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for ignore baseline parsing and writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from apiblint.errors import MalformedIgnoreLineError
from apiblint.ignores import (
    format_ignore_record,
    ignore_file_for,
    load_ignore_baseline,
    parse_ignore_file,
    write_ignore_file,
)
from apiblint.models import IgnoreEntry, LintWarning


def _warning(code: str, start_line: int, end_line: int) -> LintWarning:
    return LintWarning(
        code=code,
        description="blah",
        start_line=start_line,
        start_char=0,
        end_line=end_line,
        end_char=3,
    )


def test_parse_groups_records_by_code_and_converts_to_zero_based() -> None:
    content = "W10:21:22\nW6:1:1\n\n   \nW10:40:45\n"

    baseline = parse_ignore_file(content)

    assert baseline == {
        "W10": (IgnoreEntry(start_line=20, end_line=21), IgnoreEntry(start_line=39, end_line=44)),
        "W6": (IgnoreEntry(start_line=0, end_line=0),),
    }


@pytest.mark.parametrize("content", [None, "", "\n\n", "  \n\t\n"])
def test_absent_or_blank_content_yields_empty_baseline(content: str | None) -> None:
    assert parse_ignore_file(content) == {}


def test_surrounding_whitespace_and_crlf_are_tolerated() -> None:
    baseline = parse_ignore_file("  W3:5:7  \r\nW3:9:9\r\n")

    assert baseline.entries_for("W3") == (
        IgnoreEntry(start_line=4, end_line=6),
        IgnoreEntry(start_line=8, end_line=8),
    )
    assert baseline.entries_for("W4") == ()


@pytest.mark.parametrize(
    ("line", "reason"),
    [
        pytest.param("W10:21", "expected 'code:startLine:endLine'", id="too-few-fields"),
        pytest.param("W10:21:22:23", "expected 'code:startLine:endLine'", id="too-many-fields"),
        pytest.param(":21:22", "missing warning code", id="empty-code"),
        pytest.param("W10:abc:22", "line numbers must be integers", id="non-numeric"),
        pytest.param("W10:0:22", "line numbers are 1-based", id="zero-line"),
    ],
)
def test_malformed_record_aborts_parse(line: str, reason: str) -> None:
    with pytest.raises(MalformedIgnoreLineError) as excinfo:
        parse_ignore_file(f"W1:1:1\n{line}\n")

    assert excinfo.value.line_number == 2
    assert excinfo.value.line == line
    assert excinfo.value.reason == reason


def test_load_missing_file_yields_empty_baseline(tmp_path: Path) -> None:
    assert load_ignore_baseline(tmp_path / "missing.apib.apiblint") == {}


def test_load_reads_file_from_disk(tmp_path: Path) -> None:
    path = tmp_path / "doc.apib.apiblint"
    path.write_text("W6:3:4\n", encoding="utf-8")

    baseline = load_ignore_baseline(path)

    assert baseline.entries_for("W6") == (IgnoreEntry(start_line=2, end_line=3),)


def test_load_propagates_unreadable_file() -> None:
    def _reader(path: Path) -> str:
        raise PermissionError(path)

    with pytest.raises(PermissionError):
        load_ignore_baseline(Path("doc.apib.apiblint"), _reader)


def test_ignore_file_sits_beside_document() -> None:
    assert ignore_file_for(Path("api/doc.apib")) == Path("api/doc.apib.apiblint")
    assert ignore_file_for(Path("doc.apib"), ".ignore") == Path("doc.apib.ignore")


def test_format_record_uses_one_based_lines() -> None:
    assert format_ignore_record(_warning("W10", 20, 21)) == "W10:21:22"


def test_written_records_parse_back_to_the_same_spans(tmp_path: Path) -> None:
    path = tmp_path / "doc.apib.apiblint"
    warnings = [_warning("W10", 20, 21), _warning("W6", 0, 0), _warning("W10", 20, 21)]

    count = write_ignore_file(path, warnings)

    assert count == 2
    assert path.read_text(encoding="utf-8") == "W10:21:22\nW6:1:1\n"
    baseline = load_ignore_baseline(path)
    assert baseline.entries_for("W10") == (IgnoreEntry(start_line=20, end_line=21),)
    assert baseline.entries_for("W6") == (IgnoreEntry(start_line=0, end_line=0),)


def test_write_with_no_warnings_empties_file(memory_files) -> None:
    path = Path("doc.apib.apiblint")
    memory_files.files[path] = "W1:1:1\n"

    assert write_ignore_file(path, [], memory_files.write) == 0
    assert memory_files.files[path] == ""


def test_record_numbers_follow_document_line_splitting() -> None:
    with pytest.raises(MalformedIgnoreLineError) as excinfo:
        parse_ignore_file("W1:1:1\x0b\x0c\nbroken\n")

    assert excinfo.value.line_number == 2
