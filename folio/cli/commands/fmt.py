# folio/cli/commands/fmt.py
"""
Rewrite front matter in canonical form.

Usage:
    folio fmt                    # Rewrite every document under the content root
    folio fmt post.md            # Rewrite one file
    folio fmt --check            # Report files that would change, write nothing

Bodies are never touched. Files that fail to parse are reported and left
alone; the exit code is 1 if any did, or if --check found changes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from folio.cli.context import CLIContext
from folio.cli.ui import ui
from folio.content.frontmatter import parse_document, read_text
from folio.content.scanner import ContentScanner
from folio.content.serializer import render_document, write_document
from folio.core.exceptions import DocumentError
from folio.logging.logger import get_logger
from folio.logging.tags import CLI

logger = get_logger(__name__)


def command(
    path: Optional[Path] = None,
    check_only: bool = False,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    ctx = CLIContext.load(config_path, verbose=verbose)
    root = ctx.resolve_root(path)

    scanner = ContentScanner(
        extensions=ctx.config.content.extensions,
        recursive=ctx.config.content.recursive,
    )
    try:
        files, _ = scanner.discover(root)
    except FileNotFoundError as e:
        ui.error(str(e))
        raise typer.Exit(1) from e

    changed: list[Path] = []
    failed: list[Path] = []

    for file in files:
        try:
            original = read_text(file)
            document = parse_document(original, path=file)
        except DocumentError as e:
            ui.error(str(e))
            failed.append(file)
            continue

        if render_document(document) == original:
            continue

        changed.append(file)
        if check_only:
            ui.warning(f"would reformat {file}")
        else:
            write_document(document)
            ui.success(f"reformatted {file}")

    logger.debug(f"{CLI} fmt {root}: {len(changed)} changed, {len(failed)} failed")

    verb = "would be reformatted" if check_only else "reformatted"
    ui.info(f"{len(files)} file(s) seen, {len(changed)} {verb}, {len(failed)} failed")

    if failed or (check_only and changed):
        raise typer.Exit(1)
