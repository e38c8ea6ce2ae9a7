# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalise fragmented validator source maps into flat warning spans."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from pydantic import ValidationError

from .errors import MalformedPositionError
from .models import LintWarning, RawWarning, SourcePosition

WARNING_CODE_PREFIX: Final[str] = "W"


def extract_position(raw: RawWarning) -> LintWarning:
    """Collapse ``raw`` into a single 0-based span.

    The validator reports multi-line spans as a sequence of single-line
    segments. Only the outer boundary is kept: the start of the first segment
    and the end of the last one.

    Args:
        raw: Warning as reported by the validator.

    Returns:
        LintWarning: Normalised warning with 0-based positions and a prefixed code.

    Raises:
        MalformedPositionError: If the source map is empty, a boundary position
            lacks its line or column, or the resulting span is invalid.
    """

    if not raw.source_map:
        raise MalformedPositionError(f"warning {raw.code!r} has an empty source map")
    start = raw.source_map[0].start
    end = raw.source_map[-1].end
    start_line, start_char = _zero_based(start, raw, "start")
    end_line, end_char = _zero_based(end, raw, "end")
    try:
        return LintWarning(
            code=f"{WARNING_CODE_PREFIX}{raw.code}",
            description=raw.description,
            start_line=start_line,
            start_char=start_char,
            end_line=end_line,
            end_char=end_char,
        )
    except ValidationError as exc:
        raise MalformedPositionError(f"warning {raw.code!r} has an invalid span: {exc}") from exc


def extract_positions(raw_warnings: Iterable[RawWarning]) -> list[LintWarning]:
    """Normalise every warning in ``raw_warnings`` preserving input order."""

    return [extract_position(raw) for raw in raw_warnings]


def _zero_based(position: SourcePosition, raw: RawWarning, label: str) -> tuple[int, int]:
    if position.line is None or position.column is None:
        raise MalformedPositionError(f"warning {raw.code!r} {label} position lacks a line or column")
    return position.line - 1, position.column - 1


__all__ = ["WARNING_CODE_PREFIX", "extract_position", "extract_positions"]
