# folio/cli/commands/show.py
"""
Show one document's metadata.

Usage:
    folio show post.md           # Table view
    folio show post.md --json    # JSON on stdout
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from folio.cli.context import CLIContext
from folio.cli.ui import ui
from folio.content.frontmatter import load_document
from folio.core.document import ContentDocument
from folio.core.exceptions import DocumentError


def _as_json(document: ContentDocument) -> str:
    payload = {
        "path": document.source,
        "metadata": document.metadata.model_dump(mode="json", by_alias=True, exclude_none=True),
        "body_chars": len(document.body),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _rows(document: ContentDocument) -> list[tuple[str, str]]:
    meta = document.metadata
    flags = [name for name, value in meta.flags.model_dump().items() if value is True]
    rows = [
        ("title", meta.title),
        ("description", meta.description or ""),
        ("author", meta.author or ""),
        ("publishDate", meta.publish_date.isoformat()),
        ("categories", " / ".join(meta.categories or [])),
        ("tags", ", ".join(meta.tags or [])),
        ("heroImage", meta.hero_image or ""),
        ("flags", ", ".join(flags)),
    ]
    for key, value in meta.extra_fields().items():
        rows.append((f"{key} (ignored)", str(value)))
    rows.append(("body", f"{len(document.body)} chars"))
    return rows


def command(
    file: Path,
    as_json: bool = False,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    CLIContext.load(config_path, verbose=verbose)

    try:
        document = load_document(file)
    except DocumentError as e:
        ui.error(str(e))
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(_as_json(document))
        return

    ui.table(["Key", "Value"], _rows(document), title=document.source)
