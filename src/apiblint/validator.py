# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Boundary to the external API Blueprint validator."""

from __future__ import annotations

import json
import logging
import shutil

# Shell-free invocation of the drafter binary; the document is fed on stdin.
import subprocess  # nosec B404
from collections.abc import Callable, Mapping, Sequence
from subprocess import CompletedProcess
from typing import Any, Final, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from .errors import UnrecognizedResultShape, ValidatorError
from .models import RawWarning

PARSE_RESULT_ELEMENT: Final[str] = "parseResult"
ANNOTATION_ELEMENT: Final[str] = "annotation"
DEFAULT_DRAFTER_COMMAND: Final[tuple[str, ...]] = ("drafter", "--format", "json", "--sourcemap")

LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[..., CompletedProcess[str]]


class ValidatorOptions(BaseModel):
    """Options forwarded to the validator for every document."""

    model_config = ConfigDict(frozen=True)

    require_blueprint_name: bool = True


@runtime_checkable
class Validator(Protocol):
    """Callable boundary producing raw warnings for a document."""

    def validate(self, text: str, options: ValidatorOptions) -> list[RawWarning] | None:
        """Return raw warnings for ``text`` or ``None`` when it is clean.

        Raises:
            ValidatorError: If validation could not be performed.
            UnrecognizedResultShape: If the validator output has an unknown shape.
        """
        ...


def interpret_result(payload: Any) -> list[RawWarning] | None:
    """Translate a decoded validator payload into raw warnings.

    Args:
        payload: JSON-decoded validator output.

    Returns:
        list[RawWarning] | None: Annotations from a parse result, or ``None``
        when the payload is empty or the parse result carries no annotations.

    Raises:
        UnrecognizedResultShape: If ``payload`` is not a parse result element.
    """

    if payload is None or payload == {}:
        return None
    if not isinstance(payload, Mapping) or payload.get("element") != PARSE_RESULT_ELEMENT:
        raise UnrecognizedResultShape(f"unrecognised validator result: {_describe(payload)}")
    content = payload.get("content") or []
    if not isinstance(content, Sequence) or isinstance(content, str):
        raise UnrecognizedResultShape("parse result content is not a list of elements")
    warnings = [
        RawWarning.from_element(item)
        for item in content
        if isinstance(item, Mapping) and item.get("element") == ANNOTATION_ELEMENT
    ]
    return warnings or None


def _describe(payload: Any) -> str:
    if isinstance(payload, Mapping):
        return f"element {payload.get('element')!r}"
    return type(payload).__name__


class DrafterValidator:
    """Validate documents by piping them through the ``drafter`` command line tool."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_DRAFTER_COMMAND,
        *,
        require_name_flag: str | None = None,
        timeout: float | None = None,
        runner: CommandRunner = subprocess.run,
    ) -> None:
        """Create a validator bound to a drafter invocation.

        Args:
            command: Executable and arguments producing a JSON parse result on stdout.
            require_name_flag: Argument appended when blueprint names are required;
                ``None`` when the installed drafter has no such switch.
            timeout: Optional timeout in seconds for each invocation.
            runner: Callable compatible with :func:`subprocess.run`.
        """

        if not command:
            raise ValueError("drafter command must not be empty")
        self._command = tuple(command)
        self._require_name_flag = require_name_flag
        self._timeout = timeout
        self._runner = runner

    def command_for(self, options: ValidatorOptions) -> list[str]:
        """Return the argument vector used for ``options``."""

        executable = shutil.which(self._command[0]) or self._command[0]
        args = [executable, *self._command[1:]]
        if options.require_blueprint_name and self._require_name_flag:
            args.append(self._require_name_flag)
        return args

    def validate(self, text: str, options: ValidatorOptions) -> list[RawWarning] | None:
        """Run drafter over ``text`` and interpret its parse result.

        Args:
            text: Full document text.
            options: Validator options for the document.

        Returns:
            list[RawWarning] | None: Raw warnings, or ``None`` for a clean document.

        Raises:
            ValidatorError: If drafter is missing, times out, fails, or emits invalid JSON.
            UnrecognizedResultShape: If the JSON output is not a parse result.
        """

        args = self.command_for(options)
        LOGGER.debug("running validator: %s", " ".join(args))
        try:
            completed = self._runner(  # nosec B603 - argument vector comes from configuration
                args,
                input=text,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError as exc:
            raise ValidatorError(f"validator executable not found: {self._command[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ValidatorError(f"validator timed out after {exc.timeout} seconds") from exc
        except OSError as exc:
            raise ValidatorError(f"validator could not be started: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ValidatorError(f"validator output is not valid text: {exc}") from exc

        stdout = (completed.stdout or "").strip()
        if not stdout:
            if completed.returncode != 0:
                stderr = (completed.stderr or "").strip()
                raise ValidatorError(f"validator exited with status {completed.returncode}: {stderr}")
            return None
        try:
            payload = json.loads(stdout)
        except json.JSONDecodeError as exc:
            raise ValidatorError(f"validator produced invalid JSON: {exc}") from exc
        return interpret_result(payload)


__all__ = [
    "DEFAULT_DRAFTER_COMMAND",
    "DrafterValidator",
    "Validator",
    "ValidatorOptions",
    "interpret_result",
]
