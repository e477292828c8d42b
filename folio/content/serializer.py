# folio/content/serializer.py
"""
Serialization of content documents back to text.

Writes the metadata block in a canonical form:
- keys in schema order (title, description, author, publishDate,
  categories, tags, heroImage, flags), then unrecognized keys as found
- absent optional keys omitted, flags omitted when nothing is switched on
- date-only publishDate as a YAML date, timestamps as ISO-8601 strings

Parsing the output yields an identical DocumentMetadata record.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from folio.content.frontmatter import CLOSING_DELIMITERS, OPENING_DELIMITER, parse_document
from folio.core.document import ContentDocument, DocumentMetadata
from folio.logging.logger import get_logger
from folio.logging.tags import SERIALIZE

logger = get_logger(__name__)

_OPTIONAL_KEYS = ("description", "author", "categories", "tags", "heroImage")

# Wide enough that long titles and descriptions are never folded.
_YAML_WIDTH = 4096


def metadata_to_dict(metadata: DocumentMetadata) -> Dict[str, Any]:
    """Convert metadata to the plain mapping written into the block."""
    data = metadata.model_dump(by_alias=True)

    for key in _OPTIONAL_KEYS:
        if data.get(key) is None:
            data.pop(key, None)

    if metadata.flags.is_default():
        data.pop("flags", None)

    publish_date = metadata.publish_date
    if isinstance(publish_date, datetime):
        data["publishDate"] = publish_date.isoformat()

    return data


def dump_front_matter(metadata: DocumentMetadata) -> str:
    """Render the fenced metadata block, including both delimiter lines."""
    text = yaml.safe_dump(
        metadata_to_dict(metadata),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=_YAML_WIDTH,
    )
    return f"{OPENING_DELIMITER}\n{text}{CLOSING_DELIMITERS[0]}\n"


def render_document(document: ContentDocument) -> str:
    """Render a full document: metadata block followed by the untouched body."""
    return dump_front_matter(document.metadata) + document.body


def format_document(text: str, source: Optional[Union[str, Path]] = None) -> str:
    """Parse raw text and return it with its metadata block in canonical form."""
    return render_document(parse_document(text, path=source))


def write_document(document: ContentDocument, path: Optional[Union[str, Path]] = None) -> Path:
    """
    Write a document to disk as UTF-8.

    Args:
        document: Document to write.
        path: Target file; defaults to the document's own path.

    Raises:
        ValueError: If neither `path` nor `document.path` is set.
    """
    target = Path(path) if path is not None else document.path
    if target is None:
        raise ValueError("document has no path; pass one explicitly")

    with target.open("w", encoding="utf-8", newline="") as f:
        f.write(render_document(document))

    logger.debug(f"{SERIALIZE} Wrote {target}")
    return target


__all__ = [
    "metadata_to_dict",
    "dump_front_matter",
    "render_document",
    "format_document",
    "write_document",
]
