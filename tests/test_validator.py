# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the drafter validator boundary."""

from __future__ import annotations

import json
import subprocess
from subprocess import CompletedProcess
from typing import Any

import pytest

from apiblint.errors import UnrecognizedResultShape, ValidatorError
from apiblint.validator import DrafterValidator, Validator, ValidatorOptions, interpret_result

ANNOTATION = {
    "element": "annotation",
    "meta": {"classes": {"element": "array", "content": [{"element": "string", "content": "warning"}]}},
    "attributes": {
        "code": {"element": "number", "content": 6},
        "sourceMap": {
            "element": "array",
            "content": [
                {
                    "element": "sourceMap",
                    "content": [
                        {
                            "element": "array",
                            "content": [
                                {
                                    "element": "number",
                                    "attributes": {"line": {"element": "number", "content": 3}, "column": 1},
                                    "content": 40,
                                },
                                {
                                    "element": "number",
                                    "attributes": {"line": 3, "column": {"element": "number", "content": 12}},
                                    "content": 11,
                                },
                            ],
                        },
                    ],
                },
            ],
        },
    },
    "content": "no value(s) specified",
}

PARSE_RESULT = {
    "element": "parseResult",
    "content": [{"element": "category", "content": []}, ANNOTATION],
}


class FakeRunner:
    """Stand-in for :func:`subprocess.run` recording each invocation."""

    def __init__(self, result: CompletedProcess[str] | Exception) -> None:
        self.result = result
        self.calls: list[tuple[list[str], dict[str, Any]]] = []

    def __call__(self, args: list[str], **kwargs: Any) -> CompletedProcess[str]:
        self.calls.append((args, kwargs))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> CompletedProcess[str]:
    return CompletedProcess(args=["drafter"], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.mark.parametrize("payload", [None, {}])
def test_empty_payload_means_clean(payload: Any) -> None:
    assert interpret_result(payload) is None


def test_parse_result_without_annotations_is_clean() -> None:
    assert interpret_result({"element": "parseResult", "content": [{"element": "category"}]}) is None


def test_annotations_become_raw_warnings() -> None:
    (warning,) = interpret_result(PARSE_RESULT)

    assert warning.code == "6"
    assert warning.description == "no value(s) specified"
    assert warning.source_map[0].start.line == 3
    assert warning.source_map[0].end.column == 12


@pytest.mark.parametrize(
    "payload",
    [
        pytest.param({"element": "category", "content": []}, id="other-element"),
        pytest.param([PARSE_RESULT], id="list"),
        pytest.param("parseResult", id="string"),
        pytest.param({"element": "parseResult", "content": "text"}, id="non-list-content"),
    ],
)
def test_unknown_shapes_are_rejected(payload: Any) -> None:
    with pytest.raises(UnrecognizedResultShape):
        interpret_result(payload)


def test_drafter_validator_satisfies_protocol() -> None:
    assert isinstance(DrafterValidator(), Validator)


def test_validate_pipes_document_on_stdin() -> None:
    runner = FakeRunner(_completed(json.dumps(PARSE_RESULT)))
    validator = DrafterValidator(runner=runner, timeout=30)

    warnings = validator.validate("FORMAT: 1A\n", ValidatorOptions())

    assert warnings is not None and len(warnings) == 1
    ((args, kwargs),) = runner.calls
    assert args[0].endswith("drafter")
    assert args[1:] == ["--format", "json", "--sourcemap"]
    assert kwargs["input"] == "FORMAT: 1A\n"
    assert kwargs["timeout"] == 30
    assert kwargs["check"] is False


@pytest.mark.parametrize(
    ("require", "expected_tail"),
    [(True, ["--sourcemap", "--require-name"]), (False, ["--format", "json", "--sourcemap"])],
)
def test_require_name_flag_follows_options(require: bool, expected_tail: list[str]) -> None:
    validator = DrafterValidator(require_name_flag="--require-name")

    args = validator.command_for(ValidatorOptions(require_blueprint_name=require))

    assert args[-len(expected_tail) :] == expected_tail


def test_require_name_without_flag_adds_nothing() -> None:
    args = DrafterValidator().command_for(ValidatorOptions(require_blueprint_name=True))

    assert args[-1] == "--sourcemap"


def test_empty_output_with_success_is_clean() -> None:
    validator = DrafterValidator(runner=FakeRunner(_completed("")))

    assert validator.validate("x", ValidatorOptions()) is None


@pytest.mark.parametrize(
    ("result", "message"),
    [
        pytest.param(FileNotFoundError("drafter"), "not found", id="missing"),
        pytest.param(subprocess.TimeoutExpired(["drafter"], 5), "timed out", id="timeout"),
        pytest.param(PermissionError("denied"), "could not be started", id="oserror"),
        pytest.param(
            UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
            "not valid text",
            id="undecodable-output",
        ),
        pytest.param(_completed("", returncode=1, stderr="crash"), "status 1: crash", id="failed"),
        pytest.param(_completed("{not json"), "invalid JSON", id="bad-json"),
    ],
)
def test_failures_become_validator_errors(result: CompletedProcess[str] | Exception, message: str) -> None:
    validator = DrafterValidator(runner=FakeRunner(result))

    with pytest.raises(ValidatorError, match=message):
        validator.validate("x", ValidatorOptions())


def test_unexpected_json_is_unrecognized() -> None:
    validator = DrafterValidator(runner=FakeRunner(_completed('{"element": "category"}')))

    with pytest.raises(UnrecognizedResultShape):
        validator.validate("x", ValidatorOptions())


def test_empty_command_is_rejected() -> None:
    with pytest.raises(ValueError):
        DrafterValidator(())
