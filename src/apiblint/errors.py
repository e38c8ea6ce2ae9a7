# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the apiblint core."""

from __future__ import annotations


class ApibLintError(Exception):
    """Base class for errors raised while linting a document."""


class MalformedPositionError(ApibLintError):
    """Raised when a raw warning carries no usable source map."""


class MalformedIgnoreLineError(ApibLintError):
    """Raised when an ignore file contains an unparsable record."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        """Initialise the error with the offending record.

        Args:
            line_number: 1-based line number of the record within the ignore file.
            line: Raw text of the offending record.
            reason: Short explanation of why the record was rejected.
        """

        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line
        self.reason = reason


class OutOfRangeSpanError(ApibLintError):
    """Raised when a warning span falls outside the supplied document text."""


class ValidatorError(ApibLintError):
    """Raised when the external validator fails to produce a result."""


class UnrecognizedResultShape(ApibLintError):
    """Raised when the validator returns neither a success nor a parse result."""


class DocumentNotFoundError(ApibLintError):
    """Raised when a requested document path does not exist."""


class ConfigError(ApibLintError):
    """Raised when configuration input is invalid."""


__all__ = [
    "ApibLintError",
    "ConfigError",
    "DocumentNotFoundError",
    "MalformedIgnoreLineError",
    "MalformedPositionError",
    "OutOfRangeSpanError",
    "UnrecognizedResultShape",
    "ValidatorError",
]
