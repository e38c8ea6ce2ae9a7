# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build character-precise excerpts of the text surrounding a warning."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..errors import OutOfRangeSpanError
from ..models import ExcerptLine, ExcerptSegment, LintWarning
from ..text import split_lines

LINE_NUMBER_SEPARATOR: Final[str] = ": "


def lpad(value: object, length: int, *, pad_with: str = " ", suffix: str = "") -> str:
    """Left-pad ``value`` to ``length`` characters and append ``suffix``.

    Args:
        value: Value rendered with :func:`str` before padding.
        length: Minimum width of the padded value, excluding ``suffix``.
        pad_with: Single character used for padding.
        suffix: Text appended after padding.

    Returns:
        str: Padded representation of ``value``.
    """

    return str(value).rjust(length, pad_with) + suffix


def line_number_width(line_count: int) -> int:
    """Return the field width needed to align line numbers of a document."""

    return len(str(line_count))


def format_line_number(line_number: int, line_count: int) -> str:
    """Return ``line_number`` padded for a document of ``line_count`` lines."""

    return lpad(line_number, line_number_width(line_count), suffix=LINE_NUMBER_SEPARATOR)


def render_excerpt(lines: Sequence[str], context_size: int, warning: LintWarning) -> list[ExcerptLine]:
    """Render the lines covered by ``warning`` plus surrounding context.

    Args:
        lines: Document lines, 0-indexed to match warning positions.
        context_size: Number of unhighlighted lines shown on each side.
        warning: Normalised warning whose span is highlighted.

    Returns:
        list[ExcerptLine]: Excerpt lines clipped to the document bounds.

    Raises:
        OutOfRangeSpanError: If the warning span lies outside ``lines``.
        ValueError: If ``context_size`` is negative.
    """

    if context_size < 0:
        raise ValueError(f"context size must be non-negative, got {context_size}")
    line_count = len(lines)
    for label, index in (("start", warning.start_line), ("end", warning.end_line)):
        if not 0 <= index < line_count:
            raise OutOfRangeSpanError(
                f"{warning.code} {label} line {index + 1} is outside a document of {line_count} lines",
            )
    first = max(0, warning.start_line - context_size)
    last = min(line_count, warning.end_line + context_size + 1)
    return [_render_line(index, lines[index], warning) for index in range(first, last)]


def _render_line(index: int, line: str, warning: LintWarning) -> ExcerptLine:
    start, end = warning.start_line, warning.end_line
    if index < start or index > end:
        return ExcerptLine(line_number=index + 1, segments=_segments((line, False)), context=True)
    if index == start == end:
        parts = (
            (line[: warning.start_char], False),
            (line[warning.start_char : warning.end_char], True),
            (line[warning.end_char :], False),
        )
    elif index == start:
        parts = ((line[: warning.start_char], False), (line[warning.start_char :], True))
    elif index == end:
        parts = ((line[: warning.end_char], True), (line[warning.end_char :], False))
    else:
        parts = ((line, True),)
    return ExcerptLine(line_number=index + 1, segments=_segments(*parts))


def _segments(*parts: tuple[str, bool]) -> tuple[ExcerptSegment, ...]:
    return tuple(ExcerptSegment(text=text, highlighted=highlighted) for text, highlighted in parts if text)


__all__ = [
    "LINE_NUMBER_SEPARATOR",
    "format_line_number",
    "line_number_width",
    "lpad",
    "render_excerpt",
    "split_lines",
]
