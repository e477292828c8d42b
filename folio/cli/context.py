# folio/cli/context.py
"""
Central CLI context.

All configuration reading for CLI commands happens here. Commands call
CLIContext.load() and read typed values from it.

Config Loading Strategy:
    1. Package defaults (folio/config/default.yaml) - always loaded
    2. Workspace config (.folio/config.yaml) - overrides defaults
    3. --config FILE - overrides both
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import typer

from folio.config.loader import get_config_source, load_folio_config
from folio.config.schema import FolioConfig
from folio.core.exceptions import ConfigError
from folio.core.paths import FolioPaths
from folio.logging.logger import configure_logging, get_logger
from folio.logging.tags import CLI

from .ui import ui

logger = get_logger(__name__)


@dataclass
class CLIContext:
    """Typed configuration for a single CLI invocation."""

    config: FolioConfig = field(repr=False)
    config_source: str = ""
    has_user_config: bool = False

    @property
    def content_root(self) -> Path:
        return Path(self.config.content.root)

    @classmethod
    def load(cls, config_path: Optional[Path] = None, verbose: bool = False) -> "CLIContext":
        """
        Load config and configure logging.

        Exits with code 1 (after printing the problem) if config is invalid.
        """
        try:
            config = load_folio_config(config_path)
        except ConfigError as e:
            ui.error(str(e))
            raise typer.Exit(1) from e

        configure_logging("DEBUG" if verbose else config.logging.level)
        source = get_config_source(config_path)
        logger.debug(f"{CLI} Config source: {source}")

        return cls(
            config=config,
            config_source=source,
            has_user_config=config_path is not None or FolioPaths.config().exists(),
        )

    def resolve_root(self, path: Optional[Path]) -> Path:
        """Use the given path, or the configured content root."""
        return path if path is not None else self.content_root


__all__ = ["CLIContext"]
