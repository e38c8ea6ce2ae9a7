# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from apiblint.config import (
    DEFAULT_CONTEXT_SIZE,
    DEFAULT_FUZZ_FACTOR,
    LintConfig,
    build_config,
    default_parallel_jobs,
    load_pyproject_section,
)
from apiblint.errors import ConfigError


def _write_pyproject(root: Path, body: str) -> None:
    (root / "pyproject.toml").write_text(dedent(body), encoding="utf-8")


def test_defaults() -> None:
    config = LintConfig()

    assert config.fuzz_factor == DEFAULT_FUZZ_FACTOR == 5
    assert config.context_size == DEFAULT_CONTEXT_SIZE == 2
    assert config.ignore_file_ext == ".apiblint"
    assert config.ignore_codes == ()
    assert config.jobs == default_parallel_jobs() >= 1
    assert config.validator.require_blueprint_name is True


def test_pyproject_section_is_read_with_kebab_case_keys(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        """
        [tool.apiblint]
        fuzz-factor = 3
        ignore-codes = "W6, W10"
        drafter-command = ["drafter", "-f", "json", "-u"]

        [tool.apiblint.validator]
        require_blueprint_name = false
        """,
    )

    config = build_config(root=tmp_path)

    assert config.fuzz_factor == 3
    assert config.ignore_codes == ("W6", "W10")
    assert config.drafter_command == ("drafter", "-f", "json", "-u")
    assert config.validator.require_blueprint_name is False


def test_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, "[tool.apiblint]\nfuzz-factor = 3\ncontext-size = 7\n")

    config = build_config({"fuzz_factor": 0, "context_size": None}, root=tmp_path)

    assert config.fuzz_factor == 0
    assert config.context_size == 7


def test_missing_file_or_section_yields_nothing(tmp_path: Path) -> None:
    assert load_pyproject_section(tmp_path) == {}

    _write_pyproject(tmp_path, "[project]\nname = 'demo'\n")

    assert load_pyproject_section(tmp_path) == {}


@pytest.mark.parametrize(
    "body",
    [
        pytest.param("[tool.apiblint\n", id="bad-toml"),
        pytest.param("[tool]\napiblint = 3\n", id="not-a-table"),
        pytest.param("[tool.apiblint]\nfuzz-factor = -1\n", id="negative-fuzz"),
        pytest.param("[tool.apiblint]\nunknown = 1\n", id="unknown-key"),
        pytest.param("[tool.apiblint]\nignore-file-ext = ''\n", id="empty-ext"),
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, body: str) -> None:
    _write_pyproject(tmp_path, body)

    with pytest.raises(ConfigError):
        build_config(root=tmp_path)
