# folio/core/paths.py
"""
Central path management for folio.

The workspace is the .folio directory in the current working directory,
or an override set for testing.

Usage:
    from folio.core.paths import FolioPaths

    config_path = FolioPaths.config()

    # Override workspace for testing
    FolioPaths.set_workspace("/tmp/test_folio")
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

WORKSPACE_DIRNAME = ".folio"
CONFIG_FILENAME = "config.yaml"


class FolioPaths:
    """
    Central path management.

    All methods are classmethods for static access.
    """

    _workspace_override: Optional[Path] = None

    @classmethod
    def set_workspace(cls, path: Optional[str | Path]) -> None:
        """
        Override the workspace root.

        Pass None to reset to default (CWD).
        """
        cls._workspace_override = None if path is None else Path(path)

    @classmethod
    def reset(cls) -> None:
        """Reset to default workspace (CWD). Useful in tests."""
        cls._workspace_override = None

    @classmethod
    def workspace(cls) -> Path:
        """The workspace directory. Default: {CWD}/.folio/"""
        if cls._workspace_override is not None:
            return cls._workspace_override
        return Path.cwd() / WORKSPACE_DIRNAME

    @classmethod
    def config(cls) -> Path:
        """Workspace config file: {workspace}/config.yaml"""
        return cls.workspace() / CONFIG_FILENAME

    @classmethod
    def defaults(cls) -> Path:
        """Bundled package defaults."""
        return Path(__file__).parent.parent / "config" / "default.yaml"


__all__ = ["FolioPaths"]
