# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loaders for apiblint."""

from __future__ import annotations

import math
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .ignores import DEFAULT_IGNORE_FILE_EXT
from .validator import DEFAULT_DRAFTER_COMMAND, ValidatorOptions

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "apiblint"
DEFAULT_FUZZ_FACTOR: Final[int] = 5
DEFAULT_CONTEXT_SIZE: Final[int] = 2
DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = (".apib",)


def default_parallel_jobs() -> int:
    """Return 75% of available CPU cores (minimum of 1)."""
    cores = os.cpu_count() or 1
    return max(1, math.floor(cores * 0.75))


class LintConfig(BaseModel):
    """Settings shared by every document processed in a batch."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fuzz_factor: int = Field(default=DEFAULT_FUZZ_FACTOR, ge=0)
    context_size: int = Field(default=DEFAULT_CONTEXT_SIZE, ge=0)
    ignore_file_ext: str = DEFAULT_IGNORE_FILE_EXT
    ignore_codes: tuple[str, ...] = Field(default_factory=tuple)
    color: bool | None = None
    jobs: int = Field(default_factory=default_parallel_jobs, ge=1)
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    validator: ValidatorOptions = Field(default_factory=ValidatorOptions)
    drafter_command: tuple[str, ...] = DEFAULT_DRAFTER_COMMAND
    drafter_require_name_flag: str | None = None
    drafter_timeout: float | None = Field(default=None, gt=0)

    @field_validator("ignore_file_ext")
    @classmethod
    def _require_ext(cls, value: str) -> str:
        """Reject an empty ignore file extension, which would alias the document itself."""

        if not value:
            raise ValueError("ignore file extension must not be empty")
        return value

    @field_validator("ignore_codes", mode="before")
    @classmethod
    def _split_codes(cls, value: Any) -> Any:
        """Accept a whitespace or comma separated string of codes."""

        if isinstance(value, str):
            return tuple(code for code in value.replace(",", " ").split() if code)
        return value

    @field_validator("drafter_command")
    @classmethod
    def _require_command(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("drafter command must not be empty")
        return value


def load_pyproject_section(root: Path) -> dict[str, Any]:
    """Return the ``[tool.apiblint]`` table from ``root/pyproject.toml``.

    Keys are normalised from kebab-case to snake_case.

    Args:
        root: Directory expected to contain ``pyproject.toml``.

    Returns:
        dict[str, Any]: Configuration fragment; empty when the file or table is absent.

    Raises:
        ConfigError: If the file cannot be decoded or the table is malformed.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return {str(key).replace("-", "_"): value for key, value in section.items()}


def build_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    root: Path | None = None,
) -> LintConfig:
    """Merge pyproject settings with explicit ``overrides`` into a :class:`LintConfig`.

    Args:
        overrides: Values taking precedence over the file; ``None`` values are ignored.
        root: Directory searched for ``pyproject.toml``; skipped when ``None``.

    Returns:
        LintConfig: Validated configuration.

    Raises:
        ConfigError: If the merged values fail validation.
    """

    merged: dict[str, Any] = load_pyproject_section(root) if root is not None else {}
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    try:
        return LintConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "DEFAULT_CONTEXT_SIZE",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_FUZZ_FACTOR",
    "LintConfig",
    "build_config",
    "default_parallel_jobs",
    "load_pyproject_section",
]
