# folio/core/__init__.py
"""
Folio core: the content document model, errors and paths.

Public API:
    - ContentDocument: one article (path + metadata + body)
    - DocumentMetadata: front-matter schema
    - PresentationFlags: boolean renderer toggles
    - FolioPaths: workspace and config locations
    - Exceptions: FolioError hierarchy
"""

from .document import (
    ContentDocument,
    DocumentMetadata,
    PresentationFlags,
    PublishDate,
    as_utc_datetime,
    parse_date_value,
)
from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    DocumentError,
    DocumentReadError,
    DocumentValidationError,
    FolioError,
    FrontMatterError,
    MetadataError,
    MissingFrontMatterError,
)
from .paths import FolioPaths

__all__ = [
    "ContentDocument",
    "DocumentMetadata",
    "PresentationFlags",
    "PublishDate",
    "as_utc_datetime",
    "parse_date_value",
    "FolioPaths",
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
