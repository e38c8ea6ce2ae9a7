# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the apiblint package."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

_CONTENT_KEY: Final[str] = "content"
_ATTRIBUTES_KEY: Final[str] = "attributes"


class SourcePosition(BaseModel):
    """A 1-based line/column position reported by the validator."""

    model_config = ConfigDict(frozen=True)

    line: int | None = None
    column: int | None = None


class SourceSegment(BaseModel):
    """One single-line fragment of a warning's source map."""

    model_config = ConfigDict(frozen=True)

    start: SourcePosition
    end: SourcePosition


class RawWarning(BaseModel):
    """Capture validator-native warnings prior to normalisation."""

    model_config = ConfigDict(frozen=True)

    code: str = ""
    description: str = ""
    source_map: tuple[SourceSegment, ...] = Field(default_factory=tuple)

    @classmethod
    def from_element(cls, element: Mapping[str, Any]) -> RawWarning:
        """Build a raw warning from an API Elements ``annotation`` element.

        Missing attributes are preserved as ``None`` so that the position
        extractor can reject the warning with a precise error.

        Args:
            element: Refract JSON mapping describing one annotation.

        Returns:
            RawWarning: Raw warning mirroring the annotation payload.
        """

        attributes = _as_mapping(element.get(_ATTRIBUTES_KEY))
        code = _unwrap(attributes.get("code"))
        description = _unwrap(element)
        segments: list[SourceSegment] = []
        for source_map in _as_list(_unwrap(attributes.get("sourceMap"))):
            for positions in _as_list(_unwrap(source_map)):
                pair = _as_list(_unwrap(positions))
                start = pair[0] if pair else None
                end = pair[1] if len(pair) > 1 else None
                segments.append(SourceSegment(start=_position(start), end=_position(end)))
        return cls(
            code="" if code is None else str(code),
            description="" if description is None else str(description),
            source_map=tuple(segments),
        )


def _unwrap(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get(_CONTENT_KEY)
    return value


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, Sequence) and not isinstance(value, str) else []


def _is_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _position(value: Any) -> SourcePosition:
    attributes = _as_mapping(_as_mapping(value).get(_ATTRIBUTES_KEY))
    line = _unwrap(attributes.get("line"))
    column = _unwrap(attributes.get("column"))
    return SourcePosition(
        line=line if _is_number(line) else None,
        column=column if _is_number(column) else None,
    )


class LintWarning(BaseModel):
    """A normalised warning anchored to a 0-based span of document text."""

    model_config = ConfigDict(frozen=True)

    code: str
    description: str
    start_line: int = Field(ge=0)
    start_char: int = Field(ge=0)
    end_line: int = Field(ge=0)
    end_char: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_ordering(self) -> LintWarning:
        """Reject spans whose end precedes their start.

        Returns:
            LintWarning: The validated warning.

        Raises:
            ValueError: If ``(start_line, start_char)`` sorts after ``(end_line, end_char)``.
        """

        if (self.start_line, self.start_char) > (self.end_line, self.end_char):
            raise ValueError("warning span ends before it starts")
        return self


class IgnoreEntry(BaseModel):
    """A previously recorded suppression span (0-based, inclusive)."""

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(ge=0)
    end_line: int = Field(ge=0)


class IgnoreBaseline(Mapping[str, tuple[IgnoreEntry, ...]]):
    """Read-only mapping of warning code to recorded ignore entries."""

    def __init__(self, entries: Mapping[str, Sequence[IgnoreEntry]] | None = None) -> None:
        self._entries: dict[str, tuple[IgnoreEntry, ...]] = {
            code: tuple(items) for code, items in (entries or {}).items()
        }

    def __getitem__(self, code: str) -> tuple[IgnoreEntry, ...]:
        return self._entries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"IgnoreBaseline({self._entries!r})"

    def entries_for(self, code: str) -> tuple[IgnoreEntry, ...]:
        """Return the entries recorded for ``code`` (empty when unknown)."""

        return self._entries.get(code, ())


@dataclass(frozen=True, slots=True)
class ExcerptSegment:
    """A contiguous run of text within an excerpt line."""

    text: str
    highlighted: bool


@dataclass(frozen=True, slots=True)
class ExcerptLine:
    """One rendered line of a warning excerpt."""

    line_number: int
    segments: tuple[ExcerptSegment, ...]
    context: bool = False

    @property
    def text(self) -> str:
        """Return the plain line text without highlighting."""

        return "".join(segment.text for segment in self.segments)

    @property
    def highlighted_text(self) -> str:
        """Return the concatenation of highlighted segments."""

        return "".join(segment.text for segment in self.segments if segment.highlighted)


class DocumentStatus(str, Enum):
    """Outcome category reported for every linted document."""

    CLEAN = "clean"
    WARNINGS = "warnings"
    ERROR = "error"
    UNRECOGNIZED = "unrecognized"

    @property
    def exit_code(self) -> int:
        """Return the process exit code associated with the status."""

        return _STATUS_EXIT_CODES[self]


_STATUS_EXIT_CODES: Final[dict[DocumentStatus, int]] = {
    DocumentStatus.CLEAN: 0,
    DocumentStatus.WARNINGS: 1,
    DocumentStatus.ERROR: 2,
    DocumentStatus.UNRECOGNIZED: 3,
}


class SuppressionReason(str, Enum):
    """Why a warning was withheld from the report."""

    GLOBAL = "global"
    BASELINE = "baseline"


@dataclass(frozen=True, slots=True)
class ReportedWarning:
    """A warning that survived suppression together with its excerpt."""

    warning: LintWarning
    excerpt: tuple[ExcerptLine, ...]
    kind: Literal["reported"] = "reported"


@dataclass(frozen=True, slots=True)
class SuppressedWarning:
    """A warning matched by the global ignore list or the ignore baseline."""

    warning: LintWarning
    reason: SuppressionReason
    kind: Literal["suppressed"] = "suppressed"


WarningOutcome = ReportedWarning | SuppressedWarning


@dataclass(frozen=True, slots=True)
class DocumentTally:
    """Reported and suppressed warning counts for one document."""

    reported: int = 0
    suppressed: int = 0

    def __add__(self, other: DocumentTally) -> DocumentTally:
        return DocumentTally(
            reported=self.reported + other.reported,
            suppressed=self.suppressed + other.suppressed,
        )


@dataclass(frozen=True, slots=True)
class BatchTally:
    """Tallies summed over every processed document."""

    reported: int = 0
    suppressed: int = 0
    documents: int = 0
    documents_with_warnings: int = 0

    def add(self, tally: DocumentTally) -> BatchTally:
        """Return a new tally including ``tally``."""

        return BatchTally(
            reported=self.reported + tally.reported,
            suppressed=self.suppressed + tally.suppressed,
            documents=self.documents + 1,
            documents_with_warnings=self.documents_with_warnings + (1 if tally.reported > 0 else 0),
        )


@dataclass(frozen=True, slots=True)
class DocumentReport:
    """Everything learned while linting one document."""

    path: Path
    status: DocumentStatus
    outcomes: tuple[WarningOutcome, ...] = field(default_factory=tuple)
    ignore_file: Path | None = None
    line_count: int = 0
    error: str | None = None
    exception: Exception | None = field(default=None, compare=False)

    @property
    def tally(self) -> DocumentTally:
        """Return reported and suppressed counts derived from the outcomes."""

        reported = sum(1 for outcome in self.outcomes if isinstance(outcome, ReportedWarning))
        return DocumentTally(reported=reported, suppressed=len(self.outcomes) - reported)

    @property
    def exit_code(self) -> int:
        """Return the exit code associated with :attr:`status`."""

        return self.status.exit_code

    @property
    def warnings(self) -> tuple[LintWarning, ...]:
        """Return every normalised warning, suppressed or not, in input order."""

        return tuple(outcome.warning for outcome in self.outcomes)


__all__ = [
    "BatchTally",
    "DocumentReport",
    "DocumentStatus",
    "DocumentTally",
    "ExcerptLine",
    "ExcerptSegment",
    "IgnoreBaseline",
    "IgnoreEntry",
    "LintWarning",
    "RawWarning",
    "ReportedWarning",
    "SourcePosition",
    "SourceSegment",
    "SuppressedWarning",
    "SuppressionReason",
    "WarningOutcome",
]
