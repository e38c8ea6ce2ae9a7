# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Translate parsed command line options into configuration overrides."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..logging import LogLevel


@dataclass(slots=True)
class LintCLIOptions:
    """Options collected by the ``apiblint`` command."""

    files: Sequence[Path]
    fuzzy_line_range: int | None = None
    context_lines: int | None = None
    ignore_codes: Sequence[str] = ()
    log_level: LogLevel = LogLevel.INFO
    no_color: bool = False
    force_color: bool = False
    jobs: int | None = None
    update_baseline: bool = False
    show_summary: bool = True

    @property
    def color(self) -> bool | None:
        """Return ``False`` for monochrome, ``True`` to force colour, ``None`` to auto-detect."""

        if self.no_color:
            return False
        if self.force_color:
            return True
        return None

    def config_overrides(self) -> dict[str, Any]:
        """Return overrides for :func:`apiblint.config.build_config`; unset options stay ``None``."""

        codes = split_codes(self.ignore_codes)
        return {
            "fuzz_factor": self.fuzzy_line_range,
            "context_size": self.context_lines,
            "ignore_codes": codes or None,
            "color": self.color,
            "jobs": self.jobs,
        }


def split_codes(values: Iterable[str]) -> tuple[str, ...]:
    """Flatten repeated and comma separated ``--ignore-codes`` values, keeping order."""

    codes: list[str] = []
    for value in values:
        for code in value.replace(",", " ").split():
            if code not in codes:
                codes.append(code)
    return tuple(codes)


__all__ = ["LintCLIOptions", "split_codes"]
