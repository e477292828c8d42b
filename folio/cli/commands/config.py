# folio/cli/commands/config.py
"""
Configuration command.

Usage:
    folio config                # Show effective config as YAML
    folio config --json         # Output as JSON
    folio config --path         # Show where config is loaded from
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml

from folio.cli.context import CLIContext
from folio.cli.ui import ui


def command(
    show_path: bool = False,
    as_json: bool = False,
    config_path: Optional[Path] = None,
) -> None:
    ctx = CLIContext.load(config_path)

    if show_path:
        typer.echo(ctx.config_source)
        return

    data = ctx.config.model_dump()

    if as_json:
        typer.echo(json.dumps(data, indent=2))
        return

    ui.header("folio config", ctx.config_source)
    ui.yaml(yaml.safe_dump(data, sort_keys=False))
    if not ctx.has_user_config:
        ui.info("Using package defaults. Create .folio/config.yaml to override.")
