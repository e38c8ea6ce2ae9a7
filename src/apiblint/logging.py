# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers and diagnostic logger configuration."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Final

from rich.text import Text

from .console import get_console_manager, resolve_color

TRACE: Final[int] = 5
PACKAGE_LOGGER: Final[str] = "apiblint"

logging.addLevelName(TRACE, "TRACE")


class LogLevel(str, Enum):
    """Verbosity levels accepted on the command line."""

    SILENT = "silent"
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def numeric(self) -> int:
        """Return the stdlib logging level for this verbosity."""

        return _NUMERIC_LEVELS[self]


_NUMERIC_LEVELS: Final[dict[LogLevel, int]] = {
    LogLevel.SILENT: logging.CRITICAL + 10,
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def configure_logging(level: LogLevel) -> logging.Logger:
    """Route package diagnostics to stderr at ``level``.

    Args:
        level: Requested verbosity; ``silent`` suppresses every record.

    Returns:
        logging.Logger: The configured package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not getattr(logger, "_apiblint_configured", False):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        setattr(logger, "_apiblint_configured", True)
    logger.setLevel(level.numeric)
    return logger


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(
    msg: str | Text,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = resolve_color(use_color)
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = msg if isinstance(msg, Text) else Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "LogLevel",
    "TRACE",
    "configure_logging",
    "emoji",
    "fail",
    "ok",
    "warn",
]
