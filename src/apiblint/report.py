# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the report for a single document."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .config import LintConfig
from .errors import (
    MalformedIgnoreLineError,
    MalformedPositionError,
    OutOfRangeSpanError,
    UnrecognizedResultShape,
    ValidatorError,
)
from .ignores import TextReader, ignore_file_for, load_ignore_baseline, read_text
from .models import (
    DocumentReport,
    DocumentStatus,
    RawWarning,
    ReportedWarning,
    SuppressedWarning,
    WarningOutcome,
)
from .positions import extract_position
from .reporting.excerpt import render_excerpt
from .suppression import SuppressionMatcher
from .text import split_lines
from .validator import Validator

LOGGER = logging.getLogger(__name__)


class DocumentReportBuilder:
    """Lint one document at a time against its ignore baseline.

    The validator and file reader are injected collaborators.
    """

    def __init__(self, config: LintConfig, validator: Validator, *, reader: TextReader = read_text) -> None:
        """Create a builder.

        Args:
            config: Batch configuration.
            validator: Validator producing raw warnings for document text.
            reader: Callable returning file contents; raises ``FileNotFoundError``
                for missing files.
        """

        self._config = config
        self._validator = validator
        self._reader = reader

    @property
    def config(self) -> LintConfig:
        return self._config

    def build(self, path: Path) -> DocumentReport:
        """Read ``path``, validate it, and build its report.

        Args:
            path: Document to lint.

        Returns:
            DocumentReport: Report carrying exactly one status.
        """

        ignore_file = self.ignore_file_for(path)
        try:
            text = self._reader(path)
        except (OSError, UnicodeDecodeError) as exc:
            return DocumentReport(
                path=path,
                status=DocumentStatus.ERROR,
                ignore_file=ignore_file,
                error=f"unable to read document: {exc}",
                exception=exc,
            )
        try:
            raw_warnings = self._validator.validate(text, self._config.validator)
        except ValidatorError as exc:
            LOGGER.debug("validator failed for %s: %s", path, exc)
            return DocumentReport(
                path=path,
                status=DocumentStatus.ERROR,
                ignore_file=ignore_file,
                error=str(exc),
                exception=exc,
            )
        except UnrecognizedResultShape as exc:
            return DocumentReport(
                path=path,
                status=DocumentStatus.UNRECOGNIZED,
                ignore_file=ignore_file,
                error=str(exc),
                exception=exc,
            )
        return self.build_from_text(path, text, raw_warnings or ())

    def build_from_text(self, path: Path, text: str, raw_warnings: Sequence[RawWarning]) -> DocumentReport:
        """Build the report for a document whose warnings are already known.

        A malformed warning, ignore record, or out-of-range span aborts the
        document: the report carries the error and no partial outcomes.

        Args:
            path: Document identifier, also used to locate the ignore file.
            text: Full document text.
            raw_warnings: Validator warnings in the order they were reported.

        Returns:
            DocumentReport: Report for the document.
        """

        ignore_file = self.ignore_file_for(path)
        if not raw_warnings:
            return DocumentReport(path=path, status=DocumentStatus.CLEAN, ignore_file=ignore_file)
        lines = split_lines(text)
        try:
            outcomes = self._process(ignore_file, lines, raw_warnings)
        except (
            MalformedPositionError,
            MalformedIgnoreLineError,
            OutOfRangeSpanError,
            OSError,
            UnicodeDecodeError,
        ) as exc:
            LOGGER.debug("aborting %s: %s", path, exc)
            return DocumentReport(
                path=path,
                status=DocumentStatus.ERROR,
                ignore_file=ignore_file,
                error=f"{type(exc).__name__}: {exc}",
                exception=exc,
            )
        reported = any(isinstance(outcome, ReportedWarning) for outcome in outcomes)
        return DocumentReport(
            path=path,
            status=DocumentStatus.WARNINGS if reported else DocumentStatus.CLEAN,
            outcomes=tuple(outcomes),
            ignore_file=ignore_file,
            line_count=len(lines),
        )

    def ignore_file_for(self, path: Path) -> Path:
        """Return the sidecar ignore file path for ``path``."""

        return ignore_file_for(path, self._config.ignore_file_ext)

    def _process(
        self,
        ignore_file: Path,
        lines: Sequence[str],
        raw_warnings: Sequence[RawWarning],
    ) -> list[WarningOutcome]:
        baseline = load_ignore_baseline(ignore_file, self._reader)
        matcher = SuppressionMatcher(baseline, self._config.fuzz_factor, self._config.ignore_codes)
        outcomes: list[WarningOutcome] = []
        for raw in raw_warnings:
            warning = extract_position(raw)
            reason = matcher.match(warning)
            if reason is not None:
                outcomes.append(SuppressedWarning(warning=warning, reason=reason))
                continue
            excerpt = render_excerpt(lines, self._config.context_size, warning)
            outcomes.append(ReportedWarning(warning=warning, excerpt=tuple(excerpt)))
        return outcomes


__all__ = ["DocumentReportBuilder"]
