# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich panel rendering for batch totals."""

from __future__ import annotations

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..batch import BatchSummary


def create_summary_panel(summary: BatchSummary, *, color: bool) -> Panel:
    """Create a Rich panel displaying batch totals.

    Args:
        summary: Accumulated batch results.
        color: Flag indicating whether colour styling should apply.

    Returns:
        Panel: Rich panel containing formatted totals.
    """

    table = Table(
        show_header=False,
        box=box.SIMPLE,
        pad_edge=False,
        expand=False,
    )
    label_style = "yellow" if color else None
    value_style = "orange1" if color else None

    def styled(value: str, style: str | None) -> Text:
        """Return a Rich text entry styled when necessary."""

        return Text(value, style=style) if style else Text(value)

    table.add_column(style=label_style, justify="left", no_wrap=True)
    table.add_column(style=value_style, justify="right", no_wrap=True)

    tally = summary.tally
    rows = (
        ("Documents", tally.documents),
        ("- with warnings", tally.documents_with_warnings),
        ("- errors", summary.error_count),
        ("Warnings reported", tally.reported),
        ("Warnings ignored", tally.suppressed),
    )
    for label, value in rows:
        table.add_row(styled(label, label_style), styled(str(value), value_style))

    verdict = "failed" if summary.exit_code else "passed"
    title = f"apiblint: {verdict}"
    if color:
        title = f"[{'red' if summary.exit_code else 'green'}]{title}[/]"
    panel = Panel.fit(table, title=title, padding=(0, 1))
    if color:
        panel.border_style = "red" if summary.exit_code else "green"
    return panel


__all__ = ["create_summary_panel"]
