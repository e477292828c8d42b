# folio/cli/cli.py
"""
folio CLI - main application.

Commands:
    folio check     Validate every document under a content root
    folio show      Show one document's metadata
    folio fmt       Rewrite front matter in canonical form
    folio list      List documents, newest first
    folio config    Show the effective configuration
    folio version   Show the installed version

NOTE: Commands use lazy loading - imports only happen when a command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="folio",
    help="folio - front-matter tooling for Markdown content. Start with: folio check ./content",
    no_args_is_help=True,
    add_completion=False,
)

_CONFIG_HELP = "Extra config file, layered over .folio/config.yaml."


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("check")
def check(
    path: Optional[Path] = typer.Argument(None, help="File or directory (default: configured content root)."),
    strict: bool = typer.Option(False, "--strict", "-s", help="Fail on warnings too."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Validate documents against the acceptance checks."""
    from folio.cli.commands import check as mod

    mod.command(path=path, strict=strict, config_path=config_path, verbose=verbose)


@app.command("show")
def show(
    file: Path = typer.Argument(..., help="Document to show."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Show a document's metadata."""
    from folio.cli.commands import show as mod

    mod.command(file=file, as_json=as_json, config_path=config_path, verbose=verbose)


@app.command("fmt")
def fmt(
    path: Optional[Path] = typer.Argument(None, help="File or directory (default: configured content root)."),
    check_only: bool = typer.Option(False, "--check", help="Only report files that would change."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Rewrite front matter in canonical form."""
    from folio.cli.commands import fmt as mod

    mod.command(path=path, check_only=check_only, config_path=config_path, verbose=verbose)


@app.command("list")
def list_cmd(
    path: Optional[Path] = typer.Argument(None, help="File or directory (default: configured content root)."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """List documents by publish date, newest first."""
    from folio.cli.commands import listing as mod

    mod.command(path=path, as_json=as_json, config_path=config_path)


@app.command("config")
def config(
    show_path: bool = typer.Option(False, "--path", "-p", help="Show where config is loaded from."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """Show the effective configuration."""
    from folio.cli.commands import config as mod

    mod.command(show_path=show_path, as_json=as_json, config_path=config_path)


@app.command("version")
def version() -> None:
    """Show the installed version."""
    from folio import __version__

    typer.echo(f"folio {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
