# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render document reports to a Rich console as contiguous blocks."""

from __future__ import annotations

import threading
from typing import Final, Protocol, runtime_checkable

from rich.console import Console, RenderableType
from rich.text import Text

from ..ignores import format_ignore_record
from ..models import DocumentReport, DocumentStatus, ReportedWarning, SuppressedWarning, SuppressionReason
from .highlighting import excerpt_text, warning_header_text

SEPARATOR: Final[str] = "-----------"


@runtime_checkable
class ReportSink(Protocol):
    """Destination receiving one finished document report at a time."""

    def emit(self, report: DocumentReport) -> None:
        """Publish ``report`` in full."""
        ...


def render_report(report: DocumentReport, *, color: bool) -> list[RenderableType]:
    """Return the renderables describing ``report`` in display order.

    Args:
        report: Finished document report.
        color: Flag indicating whether colour styling should apply.

    Returns:
        list[RenderableType]: Header, per-warning blocks and trailing separator.
    """

    blocks: list[RenderableType] = [Text(str(report.path), style="bold" if color else "")]
    if report.status is DocumentStatus.ERROR:
        blocks.append(_styled(f"Error: {report.error}", "bold red", color))
        return blocks
    if report.status is DocumentStatus.UNRECOGNIZED:
        blocks.append(_styled(f"Error: unrecognised linter result: {report.error}", "bold red", color))
        return blocks
    if not report.outcomes:
        blocks.append(_styled("OK", "green", color))
        return blocks

    tally = report.tally
    blocks.append(
        _styled(
            f"{len(report.outcomes)} linting issues found ({tally.reported} reported, {tally.suppressed} ignored)",
            "bold red" if tally.reported else "bold green",
            color,
        ),
    )
    if tally.reported:
        blocks.append(
            Text(f"To ignore any of these instances, add its ignore record to the ignore file: {report.ignore_file}"),
        )
    for outcome in report.outcomes:
        blocks.append(Text(SEPARATOR))
        blocks.append(warning_header_text(outcome.warning, color=color))
        if isinstance(outcome, SuppressedWarning):
            blocks.append(_styled(_suppressed_message(outcome, report), "bright_blue", color))
            continue
        blocks.extend(_reported_block(outcome, report.line_count, color))
    blocks.append(Text(SEPARATOR))
    return blocks


def _reported_block(outcome: ReportedWarning, line_count: int, color: bool) -> list[RenderableType]:
    return [
        excerpt_text(outcome.excerpt, line_count, color=color),
        _styled(f"ignore record: {format_ignore_record(outcome.warning)}", "dim", color),
    ]


def _suppressed_message(outcome: SuppressedWarning, report: DocumentReport) -> str:
    warning = outcome.warning
    lines = f"[{warning.start_line + 1}...{warning.end_line + 1}]"
    if outcome.reason is SuppressionReason.GLOBAL:
        return f"on lines {lines} ignored globally ({warning.code})"
    return f"on lines {lines} ignored by {report.ignore_file}"


def _styled(message: str, style: str, color: bool) -> Text:
    return Text(message, style=style if color else "")


class ConsoleReportSink:
    """Print each report as one uninterrupted block, safe for concurrent producers."""

    def __init__(self, console: Console, *, color: bool) -> None:
        """Create a sink bound to ``console``.

        Args:
            console: Console receiving the rendered output.
            color: Flag indicating whether colour styling should apply.
        """

        self._console = console
        self._color = color
        self._lock = threading.Lock()

    def emit(self, report: DocumentReport) -> None:
        """Render ``report`` fully before taking the lock, then print it atomically."""

        blocks = render_report(report, color=self._color)
        with self._lock:
            for block in blocks:
                self._console.print(block)


class CollectingSink:
    """Keep reports in emission order, for callers that render later."""

    def __init__(self) -> None:
        self.reports: list[DocumentReport] = []
        self._lock = threading.Lock()

    def emit(self, report: DocumentReport) -> None:
        with self._lock:
            self.reports.append(report)


__all__ = ["CollectingSink", "ConsoleReportSink", "ReportSink", "SEPARATOR", "render_report"]
