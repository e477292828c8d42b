# folio/content/__init__.py
"""
Reading and writing content documents.

Flow: file → frontmatter (split + parse) → ContentDocument → serializer → file
"""

from .frontmatter import (
    build_metadata,
    extract_metadata,
    load_document,
    parse_document,
    parse_front_matter,
    split_front_matter,
)
from .scanner import ContentScanner, ScanError, ScanResult
from .serializer import (
    dump_front_matter,
    format_document,
    metadata_to_dict,
    render_document,
    write_document,
)

__all__ = [
    "split_front_matter",
    "parse_front_matter",
    "build_metadata",
    "extract_metadata",
    "parse_document",
    "load_document",
    "dump_front_matter",
    "metadata_to_dict",
    "render_document",
    "format_document",
    "write_document",
    "ContentScanner",
    "ScanResult",
    "ScanError",
]
