# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint command implementation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import typer

from ..batch import BatchSummary, lint_documents
from ..config import LintConfig, build_config
from ..console import get_console_manager, resolve_color
from ..discovery import discover_documents
from ..errors import ConfigError, DocumentNotFoundError
from ..ignores import write_ignore_file
from ..logging import LogLevel, configure_logging
from ..models import DocumentReport, DocumentStatus
from ..report import DocumentReportBuilder
from ..reporting.emitters import ConsoleReportSink
from ..reporting.summary import create_summary_panel
from .options import LintCLIOptions
from .shared import CLILogger, CLIServices


def lint_command(
    ctx: typer.Context,
    files: list[Path] = typer.Argument(..., metavar="FILES...", help="Blueprint files or directories to lint."),
    fuzzy_line_range: int | None = typer.Option(
        None,
        "--fuzzy-line-range",
        "-z",
        min=0,
        help=(
            "Tolerance, in lines, when matching warnings against the <blueprint-file>.apiblint ignore file, "
            "so small edits to the blueprint do not invalidate it. [default: 5]"
        ),
    ),
    context_lines: int | None = typer.Option(
        None,
        "--context-lines",
        "-c",
        min=0,
        help="Lines of context displayed above and below the highlighted lines. [default: 2]",
    ),
    ignore_codes: list[str] = typer.Option(
        [],
        "--ignore-codes",
        "-i",
        help="Warning code to ignore globally, e.g. W6; repeat the option or separate codes with commas.",
    ),
    log_level: LogLevel = typer.Option(LogLevel.INFO, "--log-level", "-l", case_sensitive=False),
    no_color: bool = typer.Option(False, "--no-color", "-n", help="Monochrome output only."),
    force_color: bool = typer.Option(
        False,
        "--force-color",
        "-f",
        help="Colour output even when no terminal is detected, e.g. when running as a pre-commit hook.",
    ),
    jobs: int | None = typer.Option(None, "--jobs", "-j", min=1, help="Documents linted concurrently."),
    update_baseline: bool = typer.Option(
        False,
        "--update-baseline",
        help="Record every warning found into each document's ignore file.",
    ),
    show_summary: bool = typer.Option(True, "--summary/--no-summary", help="Print batch totals at the end."),
) -> None:
    """Lint a set of API Blueprint (.apib) files."""

    options = LintCLIOptions(
        files=files,
        fuzzy_line_range=fuzzy_line_range,
        context_lines=context_lines,
        ignore_codes=ignore_codes,
        log_level=log_level,
        no_color=no_color,
        force_color=force_color,
        jobs=jobs,
        update_baseline=update_baseline,
        show_summary=show_summary,
    )
    services = ctx.obj if isinstance(ctx.obj, CLIServices) else CLIServices()
    raise typer.Exit(code=run_lint(options, services))


def run_lint(options: LintCLIOptions, services: CLIServices) -> int:
    """Lint the documents named by ``options`` and return the process exit code.

    Args:
        options: Parsed command line options.
        services: Injected validator factory and file I/O.

    Returns:
        int: Maximum per-document exit code.

    Raises:
        typer.BadParameter: If options conflict, configuration is invalid, or a path is missing.
    """

    if options.no_color and options.force_color:
        raise typer.BadParameter("--no-color and --force-color cannot be combined")
    diagnostics = configure_logging(options.log_level)
    config = _build_config(options)
    diagnostics.debug("configuration: %s", config.model_dump())

    color = resolve_color(config.color)
    logger = CLILogger(level=options.log_level, use_color=color)
    try:
        documents = discover_documents(options.files, config.extensions)
    except DocumentNotFoundError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not documents:
        logger.warn("No API Blueprint documents found")
        return 0

    builder = DocumentReportBuilder(config, services.validator_factory(config), reader=services.reader)
    console = get_console_manager().get(color=color, emoji=False)
    summary = BatchSummary()
    reports = lint_documents(
        documents,
        builder,
        ConsoleReportSink(console, color=color),
        summary=summary,
        jobs=config.jobs,
    )
    if summary.error_count:
        logger.fail(f"{summary.error_count} of {len(documents)} documents could not be linted")
    if options.update_baseline:
        _update_baselines(reports, services, logger)
    if options.show_summary:
        console.print(create_summary_panel(summary, color=color))
    return summary.exit_code


def _build_config(options: LintCLIOptions) -> LintConfig:
    try:
        return build_config(options.config_overrides(), root=Path.cwd())
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _update_baselines(reports: Sequence[DocumentReport], services: CLIServices, logger: CLILogger) -> None:
    for report in reports:
        if report.status not in {DocumentStatus.CLEAN, DocumentStatus.WARNINGS} or not report.outcomes:
            continue
        if report.ignore_file is None:
            continue
        count = write_ignore_file(report.ignore_file, report.warnings, services.writer)
        logger.ok(f"Recorded {count} ignore records in {report.ignore_file}")


__all__ = ["lint_command", "run_lint"]
