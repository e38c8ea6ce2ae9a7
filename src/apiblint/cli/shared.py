# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for the CLI (logging, injected services)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..config import LintConfig
from ..ignores import TextReader, TextWriter, read_text, write_text
from ..logging import LogLevel
from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import warn as core_warn
from ..validator import DrafterValidator, Validator

ValidatorFactory = Callable[[LintConfig], Validator]


def default_validator_factory(config: LintConfig) -> Validator:
    """Return a drafter-backed validator configured from ``config``."""

    return DrafterValidator(
        config.drafter_command,
        require_name_flag=config.drafter_require_name_flag,
        timeout=config.drafter_timeout,
    )


@dataclass(slots=True)
class CLIServices:
    """Collaborators the CLI wires into the core; replaced wholesale in tests."""

    validator_factory: ValidatorFactory = default_validator_factory
    reader: TextReader = read_text
    writer: TextWriter = write_text


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI verbosity and colour."""

    level: LogLevel = LogLevel.INFO
    use_color: bool | None = None
    use_emoji: bool = False
    _threshold: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self._threshold = self.level.numeric

    def _enabled(self, level: LogLevel) -> bool:
        return level.numeric >= self._threshold

    def fail(self, message: str) -> None:
        """Log a failure message."""

        if self._enabled(LogLevel.ERROR):
            core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        if self._enabled(LogLevel.WARN):
            core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message."""

        if self._enabled(LogLevel.INFO):
            core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)


__all__ = ["CLILogger", "CLIServices", "ValidatorFactory", "default_validator_factory"]
