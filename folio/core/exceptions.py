# folio/core/exceptions.py
"""
Error hierarchy for folio.

    FolioError
    ├── DocumentError               (carries source path + cause)
    │   ├── DocumentReadError
    │   ├── FrontMatterError
    │   │   └── MissingFrontMatterError
    │   ├── MetadataError
    │   └── DocumentValidationError
    └── ConfigError                 (carries config path)
        ├── ConfigNotFoundError
        ├── ConfigParseError
        └── ConfigValidationError
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

if TYPE_CHECKING:
    from folio.validation.issues import ValidationIssue


class FolioError(Exception):
    """Base class for every error raised by folio."""


# =============================================================================
# Document Errors
# =============================================================================


class DocumentError(FolioError):
    """A single content document could not be read, parsed or accepted."""

    def __init__(
        self,
        message: str,
        source: Optional[Union[str, Path]] = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.source = str(source) if source is not None else None
        self.cause = cause

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class DocumentReadError(DocumentError):
    """The file could not be read from disk."""


class FrontMatterError(DocumentError):
    """The metadata block is malformed (unclosed, invalid YAML, not a mapping)."""


class MissingFrontMatterError(FrontMatterError):
    """The document has no metadata block at all."""


class MetadataError(DocumentError):
    """The metadata block parsed, but does not match the document schema."""

    def __init__(
        self,
        message: str,
        source: Optional[Union[str, Path]] = None,
        errors: Optional[Sequence[str]] = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, source=source, cause=cause)
        self.errors: List[str] = list(errors or [])


class DocumentValidationError(DocumentError):
    """One or more acceptance checks failed."""

    def __init__(
        self,
        message: str,
        source: Optional[Union[str, Path]] = None,
        issues: Optional[Sequence["ValidationIssue"]] = None,
    ):
        super().__init__(message, source=source)
        self.issues = list(issues or [])


# =============================================================================
# Config Errors
# =============================================================================


class ConfigError(FolioError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""


__all__ = [
    "FolioError",
    "DocumentError",
    "DocumentReadError",
    "FrontMatterError",
    "MissingFrontMatterError",
    "MetadataError",
    "DocumentValidationError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
