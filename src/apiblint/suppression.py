# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide whether warnings are covered by the ignore baseline."""

from __future__ import annotations

from collections.abc import Iterable

from .models import IgnoreBaseline, IgnoreEntry, LintWarning, SuppressionReason


def should_ignore(
    baseline: IgnoreBaseline,
    fuzz_factor: int,
    warning: LintWarning,
    ignore_codes: Iterable[str] = (),
) -> bool:
    """Return ``True`` when ``warning`` should be withheld from the report.

    Args:
        baseline: Recorded ignore entries keyed by warning code.
        fuzz_factor: Line tolerance applied independently to both span ends.
        warning: Normalised warning under consideration.
        ignore_codes: Codes suppressed regardless of position.

    Returns:
        bool: ``True`` when the warning is globally ignored or matches a baseline entry.
    """

    return SuppressionMatcher(baseline, fuzz_factor, ignore_codes).match(warning) is not None


def entry_matches(entry: IgnoreEntry, warning: LintWarning, fuzz_factor: int) -> bool:
    """Return ``True`` when both span ends lie within ``fuzz_factor`` lines of ``entry``."""

    return (
        abs(warning.start_line - entry.start_line) <= fuzz_factor
        and abs(warning.end_line - entry.end_line) <= fuzz_factor
    )


class SuppressionMatcher:
    """Bind a baseline, fuzz tolerance and global ignore list for repeated lookups."""

    def __init__(
        self,
        baseline: IgnoreBaseline,
        fuzz_factor: int,
        ignore_codes: Iterable[str] = (),
    ) -> None:
        """Create a matcher for one document.

        Args:
            baseline: Parsed ignore baseline for the document.
            fuzz_factor: Non-negative line tolerance.
            ignore_codes: Warning codes suppressed unconditionally.

        Raises:
            ValueError: If ``fuzz_factor`` is negative.
        """

        if fuzz_factor < 0:
            raise ValueError(f"fuzz factor must be non-negative, got {fuzz_factor}")
        self._baseline = baseline
        self._fuzz_factor = fuzz_factor
        self._ignore_codes = frozenset(ignore_codes)

    @property
    def fuzz_factor(self) -> int:
        return self._fuzz_factor

    def match(self, warning: LintWarning) -> SuppressionReason | None:
        """Return why ``warning`` is suppressed, or ``None`` when it must be reported."""

        if warning.code in self._ignore_codes:
            return SuppressionReason.GLOBAL
        entries = self._baseline.entries_for(warning.code)
        if any(entry_matches(entry, warning, self._fuzz_factor) for entry in entries):
            return SuppressionReason.BASELINE
        return None

    def __call__(self, warning: LintWarning) -> bool:
        return self.match(warning) is not None


__all__ = ["SuppressionMatcher", "entry_matches", "should_ignore"]
