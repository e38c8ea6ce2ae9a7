# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint batches of documents and aggregate their tallies."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from .models import BatchTally, DocumentReport, DocumentStatus
from .report import DocumentReportBuilder
from .reporting.emitters import ReportSink

LOGGER = logging.getLogger(__name__)


class BatchSummary:
    """Accumulate per-document results; safe to update from worker threads.

    Addition is commutative, so the final tally does not depend on the order
    in which concurrent documents complete.
    """

    def __init__(self) -> None:
        self._tally = BatchTally()
        self._exit_code = 0
        self._errors = 0
        self._lock = threading.Lock()

    def add(self, report: DocumentReport) -> None:
        """Fold ``report`` into the running totals."""

        with self._lock:
            self._tally = self._tally.add(report.tally)
            self._exit_code = max(self._exit_code, report.exit_code)
            if report.status in {DocumentStatus.ERROR, DocumentStatus.UNRECOGNIZED}:
                self._errors += 1

    @property
    def tally(self) -> BatchTally:
        return self._tally

    @property
    def exit_code(self) -> int:
        """Return the maximum per-document exit code (0 for an empty batch)."""

        return self._exit_code

    @property
    def error_count(self) -> int:
        """Return how many documents ended in a validator or processing error."""

        return self._errors

    @property
    def failed(self) -> bool:
        """Return ``True`` when any warning was reported; suppressed warnings never fail."""

        return self._tally.reported > 0

    @classmethod
    def from_reports(cls, reports: Sequence[DocumentReport]) -> BatchSummary:
        """Build a summary from already collected ``reports``."""

        summary = cls()
        for report in reports:
            summary.add(report)
        return summary


def lint_documents(
    paths: Sequence[Path],
    builder: DocumentReportBuilder,
    sink: ReportSink,
    *,
    summary: BatchSummary | None = None,
    jobs: int = 1,
    cancel_event: threading.Event | None = None,
) -> list[DocumentReport]:
    """Lint ``paths`` concurrently, emitting each report as a whole.

    Args:
        paths: Documents to lint, in the order results are returned.
        builder: Builder producing one report per document.
        sink: Destination receiving each finished report.
        summary: Optional accumulator updated as documents finish.
        jobs: Maximum number of documents processed at once.
        cancel_event: When set, documents that have not started are skipped.

    Returns:
        list[DocumentReport]: Reports for every document that ran, in input order.
    """

    if jobs < 1:
        raise ValueError(f"jobs must be at least 1, got {jobs}")
    cancel = cancel_event or threading.Event()
    target = summary if summary is not None else BatchSummary()

    def _run(path: Path) -> DocumentReport | None:
        if cancel.is_set():
            LOGGER.debug("skipping %s: batch cancelled", path)
            return None
        report = builder.build(path)
        if cancel.is_set():
            LOGGER.debug("discarding %s: batch cancelled", path)
            return None
        sink.emit(report)
        target.add(report)
        return report

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        futures: list[Future[DocumentReport | None]] = [executor.submit(_run, path) for path in paths]
        results = [future.result() for future in futures]
    return [report for report in results if report is not None]


__all__ = ["BatchSummary", "lint_documents"]
