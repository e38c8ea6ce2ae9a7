# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich text highlighting for warning headers and excerpts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from rich.style import Style
from rich.text import Text

from ..models import ExcerptLine, LintWarning
from .excerpt import format_line_number

CODE_TINT: Final[str] = "ansi256:105"
LINE_NUMBER_STYLE: Final[str] = "yellow"
CONTEXT_LINE_NUMBER_STYLE: Final[str] = "dim yellow"
DIMMED_TEXT_STYLE: Final[str] = "bright_black"
HIGHLIGHT_STYLE: Final[str] = "bold"
DESCRIPTION_STYLE: Final[str] = "red"
EMPTY_CODE_PLACEHOLDER: Final[str] = "-"


def format_code_value(code: str, color_enabled: bool) -> Text:
    """Return a colourised warning code.

    Args:
        code: Warning code string.
        color_enabled: Flag indicating whether colour styling should apply.

    Returns:
        Text: Rich text object containing the warning code.
    """

    clean = code.strip() or EMPTY_CODE_PLACEHOLDER
    text = Text(clean)
    if not color_enabled or clean == EMPTY_CODE_PLACEHOLDER:
        return text
    style = _style_from_code(CODE_TINT)
    if style is not None:
        text.stylize(style)
    return text


def warning_header_text(warning: LintWarning, *, color: bool) -> Text:
    """Return the ``code description [start...end]`` header for ``warning``.

    Positions are shown 1-based to match the excerpt line numbers.
    """

    text = Text()
    text.append_text(format_code_value(warning.code, color))
    text.append(" ")
    text.append(warning.description, style=DESCRIPTION_STYLE if color else None)
    text.append(f" [{warning.start_line + 1}:{warning.start_char + 1}...{warning.end_line + 1}:{warning.end_char + 1}]")
    return text


def excerpt_line_text(line: ExcerptLine, line_count: int, *, color: bool) -> Text:
    """Return ``line`` as Rich text with its padded line number.

    Args:
        line: Excerpt line produced by :func:`render_excerpt`.
        line_count: Total number of lines in the document, used for alignment.
        color: Flag indicating whether colour styling should apply.

    Returns:
        Text: Line number followed by the styled excerpt segments.
    """

    number_style = CONTEXT_LINE_NUMBER_STYLE if line.context else LINE_NUMBER_STYLE
    text = Text(format_line_number(line.line_number, line_count), style=number_style if color else "")
    for segment in line.segments:
        style = HIGHLIGHT_STYLE if segment.highlighted else DIMMED_TEXT_STYLE
        text.append(segment.text, style=style if color else None)
    return text


def excerpt_text(lines: Sequence[ExcerptLine], line_count: int, *, color: bool) -> Text:
    """Join ``lines`` into one newline separated Rich text block."""

    return Text("\n").join(excerpt_line_text(line, line_count, color=color) for line in lines)


def _style_from_code(style_code: str | None) -> Style | None:
    """Return a Rich style constructed from ``style_code`` tokens.

    Args:
        style_code: Style token describing colour information.

    Returns:
        Style | None: Rich style when recognised; otherwise ``None``.
    """

    if not style_code:
        return None
    if style_code.startswith("ansi256:"):
        value = style_code.split(":", 1)[1]
        return Style(color=f"color({value})")
    return Style.parse(style_code)


__all__ = [
    "CODE_TINT",
    "excerpt_line_text",
    "excerpt_text",
    "format_code_value",
    "warning_header_text",
]
