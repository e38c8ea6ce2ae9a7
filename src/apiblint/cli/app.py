# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from .lint import lint_command

app = typer.Typer(
    name="apiblint",
    help="Lint API Blueprint documents against a recorded ignore baseline.",
    add_completion=False,
    no_args_is_help=True,
)
app.command(name="lint")(lint_command)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
