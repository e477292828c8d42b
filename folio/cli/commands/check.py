# folio/cli/commands/check.py
"""
Validate documents.

Usage:
    folio check                  # Check the configured content root
    folio check content/posts    # Check a directory
    folio check post.md          # Check a single file
    folio check --strict         # Warnings fail the run too

Exit code is 1 when any document fails to load or has an error-severity
issue (or any issue at all with --strict).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from folio.cli.context import CLIContext
from folio.cli.ui import ui
from folio.content.scanner import ContentScanner
from folio.logging.logger import get_logger
from folio.logging.tags import CLI
from folio.validation.issues import ValidationReport
from folio.validation.validator import DocumentValidator

logger = get_logger(__name__)


def _print_report(report: ValidationReport) -> None:
    for source, issues in report.by_source().items():
        ui.section(source)
        for issue in issues:
            line = f"[{issue.rule}] {issue.message}"
            if issue.is_error:
                ui.error(line)
            else:
                ui.warning(line)


def command(
    path: Optional[Path] = None,
    strict: bool = False,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    """Scan, validate and report."""
    ctx = CLIContext.load(config_path, verbose=verbose)
    root = ctx.resolve_root(path)

    scanner = ContentScanner(
        extensions=ctx.config.content.extensions,
        recursive=ctx.config.content.recursive,
    )
    try:
        scan = scanner.scan(root)
    except FileNotFoundError as e:
        ui.error(str(e))
        raise typer.Exit(1) from e

    validator = DocumentValidator.from_config(ctx.config.validation)
    report = validator.validate_scan(scan)

    _print_report(report)

    summary = (
        f"{report.checked} document(s) checked, "
        f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
    )
    failed = not report.ok or (strict and report.warnings)
    logger.debug(f"{CLI} check {root}: {summary}")

    if failed:
        ui.error(summary)
        raise typer.Exit(1)

    ui.success(summary)
