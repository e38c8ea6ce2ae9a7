# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from apiblint.config import LintConfig
from apiblint.models import RawWarning, SourcePosition, SourceSegment
from apiblint.validator import ValidatorOptions

RawWarningFactory = Callable[..., RawWarning]


def _segment(line: int, start_column: int, end_column: int) -> SourceSegment:
    return SourceSegment(
        start=SourcePosition(line=line, column=start_column),
        end=SourcePosition(line=line, column=end_column),
    )


@pytest.fixture
def raw_warning() -> RawWarningFactory:
    """Return a factory building raw warnings from 0-based spans.

    The factory splits multi-line spans into one segment per line, the way
    the validator reports them.
    """

    def _build(
        code: str = "10",
        description: str = "blah",
        *,
        start_line: int,
        start_char: int,
        end_line: int,
        end_char: int,
    ) -> RawWarning:
        segments = []
        for line in range(start_line, end_line + 1):
            first = start_char if line == start_line else 0
            last = end_char if line == end_line else 80
            segments.append(_segment(line + 1, first + 1, last + 1))
        return RawWarning(code=code, description=description, source_map=tuple(segments))

    return _build


class FakeValidator:
    """Validator double returning canned results per document text."""

    def __init__(self, results: dict[str, list[RawWarning] | None | Exception] | None = None) -> None:
        self.results = results or {}
        self.calls: list[tuple[str, ValidatorOptions]] = []

    def validate(self, text: str, options: ValidatorOptions) -> list[RawWarning] | None:
        self.calls.append((text, options))
        result = self.results.get(text)
        if isinstance(result, Exception):
            raise result
        return result


class MemoryFiles:
    """In-memory stand-in for the filesystem reader and writer."""

    def __init__(self, files: dict[Path, str] | None = None) -> None:
        self.files: dict[Path, str] = dict(files or {})
        self.reads: list[Path] = []

    def read(self, path: Path) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def write(self, path: Path, content: str) -> None:
        self.files[path] = content


@pytest.fixture
def fake_validator_cls() -> type[FakeValidator]:
    return FakeValidator


@pytest.fixture
def memory_files() -> MemoryFiles:
    return MemoryFiles()


@pytest.fixture
def config() -> LintConfig:
    return LintConfig(jobs=1)


def document_text(line_count: int) -> str:
    """Return a document of ``line_count`` numbered lines."""

    return "\n".join(f"line {index} " + "x" * 70 for index in range(line_count))


@pytest.fixture
def make_document() -> Callable[[int], str]:
    """Return a factory for documents of numbered lines padded with filler text."""

    return document_text
