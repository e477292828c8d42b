"""
folio - front-matter tooling for Markdown content documents.

A content document is one article: a YAML metadata block fenced by
"---" lines, followed by an opaque body handed to a site renderer.

Quick Start:
    >>> from folio import load_document, DocumentValidator
    >>> doc = load_document("content/cybersecurity-101.md")
    >>> doc.metadata.title
    'Cybersecurity 101'
    >>> DocumentValidator().validate(doc)
    []

Architecture:
    folio/
    ├── core/          # Document model, errors, paths
    ├── content/       # Front-matter parsing, serialization, scanning
    ├── validation/    # Acceptance-check rules and validator
    ├── config/        # Layered YAML config (pydantic schema)
    ├── logging/       # Logger factory and tags
    └── cli/           # `folio` command line
"""

__version__ = "0.1.0"

from folio.config import FolioConfig, load_folio_config
from folio.content import (
    ContentScanner,
    ScanResult,
    dump_front_matter,
    extract_metadata,
    format_document,
    load_document,
    parse_document,
    render_document,
    split_front_matter,
    write_document,
)
from folio.core import (
    ConfigError,
    ContentDocument,
    DocumentError,
    DocumentMetadata,
    DocumentValidationError,
    FolioError,
    FrontMatterError,
    MetadataError,
    MissingFrontMatterError,
    PresentationFlags,
)
from folio.validation import (
    DocumentValidator,
    Severity,
    ValidationIssue,
    ValidationReport,
)

__all__ = [
    "__version__",
    # Model
    "ContentDocument",
    "DocumentMetadata",
    "PresentationFlags",
    # Reading / writing
    "split_front_matter",
    "extract_metadata",
    "parse_document",
    "load_document",
    "dump_front_matter",
    "render_document",
    "format_document",
    "write_document",
    "ContentScanner",
    "ScanResult",
    # Validation
    "DocumentValidator",
    "ValidationIssue",
    "ValidationReport",
    "Severity",
    # Config
    "FolioConfig",
    "load_folio_config",
    # Exceptions
    "FolioError",
    "DocumentError",
    "FrontMatterError",
    "MissingFrontMatterError",
    "MetadataError",
    "DocumentValidationError",
    "ConfigError",
]
