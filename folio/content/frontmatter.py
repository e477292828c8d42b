# folio/content/frontmatter.py
"""
Front-matter parsing for content documents.

A document starts with a metadata block fenced by "---" lines, written in
YAML. Everything after the closing fence is the body and is kept verbatim:

    ---
    title: "Cybersecurity 101"
    publishDate: 2024-05-01
    ---
    # Heading...

Flow: raw text → split_front_matter() → parse_front_matter() → DocumentMetadata
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from folio.core.document import ContentDocument, DocumentMetadata
from folio.core.exceptions import (
    DocumentReadError,
    FrontMatterError,
    MetadataError,
    MissingFrontMatterError,
)
from folio.logging.logger import get_logger
from folio.logging.tags import PARSE

logger = get_logger(__name__)

OPENING_DELIMITER = "---"
CLOSING_DELIMITERS = ("---", "...")

_BOM = "\ufeff"
_LINE_SPLIT = re.compile(r"(?<=\n)")

Source = Optional[Union[str, Path]]


# =============================================================================
# Splitting
# =============================================================================


def split_front_matter(text: str, source: Source = None) -> Tuple[Optional[str], str]:
    """
    Split raw document text into (metadata block, body).

    The block is the text between the opening and closing fences, without
    the fences. The body is everything after the closing fence's line break.

    Returns:
        (None, text) when the first line is not an opening fence.

    Raises:
        FrontMatterError: If the block is opened but never closed.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]

    lines = _LINE_SPLIT.split(text)
    if not lines or lines[0].rstrip() != OPENING_DELIMITER:
        return None, text

    start = len(lines[0])
    pos = start
    for line in lines[1:]:
        if line.rstrip() in CLOSING_DELIMITERS:
            return text[start:pos], text[pos + len(line):]
        pos += len(line)

    raise FrontMatterError("metadata block is never closed", source=source)


# =============================================================================
# Parsing
# =============================================================================


def parse_front_matter(block: str, source: Source = None) -> Dict[str, Any]:
    """
    Parse a metadata block into a dictionary.

    Raises:
        FrontMatterError: On YAML syntax errors or a non-mapping root.
    """
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"invalid YAML in metadata block: {e}", source=source, cause=e) from e
    except ValueError as e:
        # PyYAML raises a bare ValueError for impossible timestamps (2024-02-30).
        raise FrontMatterError(f"invalid value in metadata block: {e}", source=source, cause=e) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise FrontMatterError(
            f"metadata block must be a mapping, got {type(data).__name__}",
            source=source,
        )

    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise FrontMatterError(f"metadata keys must be strings: {bad_keys!r}", source=source)

    return data


def _format_errors(error: ValidationError) -> List[str]:
    messages = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        messages.append(f"{location}: {err['msg']}")
    return messages


def build_metadata(data: Dict[str, Any], source: Source = None) -> DocumentMetadata:
    """
    Validate a parsed metadata mapping against the document schema.

    Raises:
        MetadataError: With one message per offending field.
    """
    try:
        return DocumentMetadata.model_validate(data)
    except ValidationError as e:
        errors = _format_errors(e)
        raise MetadataError(
            "invalid front matter: " + "; ".join(errors),
            source=source,
            errors=errors,
            cause=e,
        ) from e


def extract_metadata(text: str, source: Source = None) -> Tuple[DocumentMetadata, str]:
    """
    Extract (metadata, body) from raw document text.

    Raises:
        MissingFrontMatterError: If the text has no metadata block.
        FrontMatterError: If the block is malformed.
        MetadataError: If the block doesn't match the schema.
    """
    block, body = split_front_matter(text, source=source)
    if block is None:
        raise MissingFrontMatterError("document has no front matter block", source=source)

    data = parse_front_matter(block, source=source)
    metadata = build_metadata(data, source=source)

    extra = metadata.extra_fields()
    if extra:
        logger.debug(f"{PARSE} {source or '<string>'}: ignoring unrecognized keys {sorted(extra)}")

    return metadata, body


def parse_document(text: str, path: Source = None) -> ContentDocument:
    """Parse raw text into a ContentDocument whose identity is `path`."""
    metadata, body = extract_metadata(text, source=path)
    return ContentDocument(
        path=Path(path) if path is not None else None,
        metadata=metadata,
        body=body,
    )


# =============================================================================
# Files
# =============================================================================


def read_text(path: Union[str, Path]) -> str:
    """
    Read a document file as text.

    UTF-8 first, latin-1 as fallback. Line endings are kept as written.

    Raises:
        DocumentReadError: If the file cannot be read.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError:
        logger.warning(f"{PARSE} {p} is not valid UTF-8, falling back to latin-1")
        try:
            with p.open("r", encoding="latin-1", newline="") as f:
                return f.read()
        except OSError as e:
            raise DocumentReadError(f"failed to read file: {e}", source=p, cause=e) from e
    except OSError as e:
        raise DocumentReadError(f"failed to read file: {e}", source=p, cause=e) from e


def load_document(path: Union[str, Path]) -> ContentDocument:
    """Read and parse a document file."""
    p = Path(path)
    document = parse_document(read_text(p), path=p)
    logger.debug(f"{PARSE} Loaded {p} ({document.title!r})")
    return document


__all__ = [
    "OPENING_DELIMITER",
    "CLOSING_DELIMITERS",
    "split_front_matter",
    "parse_front_matter",
    "build_metadata",
    "extract_metadata",
    "parse_document",
    "read_text",
    "load_document",
]
