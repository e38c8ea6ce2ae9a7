# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Excerpt rendering and console reporting helpers."""

from __future__ import annotations

from .emitters import CollectingSink, ConsoleReportSink, ReportSink, render_report
from .excerpt import format_line_number, lpad, render_excerpt, split_lines
from .highlighting import excerpt_line_text, excerpt_text, format_code_value, warning_header_text

__all__ = [
    "CollectingSink",
    "ConsoleReportSink",
    "ReportSink",
    "excerpt_line_text",
    "excerpt_text",
    "format_code_value",
    "format_line_number",
    "lpad",
    "render_excerpt",
    "render_report",
    "split_lines",
    "warning_header_text",
]
