# folio/cli/commands/listing.py
"""
List documents by publish date, newest first.

Usage:
    folio list
    folio list content/ --json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from folio.cli.context import CLIContext
from folio.cli.ui import ui
from folio.content.scanner import ContentScanner
from folio.core.document import ContentDocument


def sort_by_publish_date(documents: List[ContentDocument]) -> List[ContentDocument]:
    """Newest first; ties broken by path."""
    by_path = sorted(documents, key=lambda doc: doc.source)
    return sorted(by_path, key=lambda doc: doc.metadata.published_at, reverse=True)


def command(
    path: Optional[Path] = None,
    as_json: bool = False,
    config_path: Optional[Path] = None,
) -> None:
    ctx = CLIContext.load(config_path)
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

    documents = sort_by_publish_date(scan.documents)

    if as_json:
        payload = [
            {
                "path": doc.source,
                "title": doc.metadata.title,
                "publishDate": doc.metadata.publish_date.isoformat(),
                "categories": doc.metadata.categories or [],
            }
            for doc in documents
        ]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    rows = [
        (
            doc.metadata.publish_date.isoformat(),
            doc.metadata.title,
            " / ".join(doc.metadata.categories or []),
            doc.source,
        )
        for doc in documents
    ]
    ui.table(["Date", "Title", "Categories", "Path"], rows)

    for error in scan.errors:
        ui.warning(f"skipped {error.path}", detail=error.message)
