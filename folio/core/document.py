# folio/core/document.py
"""
Core content document types.

A ContentDocument is one article: a front-matter metadata block followed
by an opaque body. The metadata schema is DocumentMetadata; the body is
never interpreted.

Flow: file → split_front_matter() → DocumentMetadata + body → ContentDocument
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

PublishDate = Union[datetime, date]

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date_value(text: str) -> PublishDate:
    """
    Parse an ISO-8601 date or timestamp string.

    Date-only strings stay dates; anything with a time part becomes a
    datetime. A trailing "Z" is read as UTC.

    Raises:
        ValueError: If the string is not a valid ISO-8601 date.
    """
    value = text.strip()
    if _DATE_ONLY.match(value):
        return date.fromisoformat(value)
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def as_utc_datetime(value: PublishDate) -> datetime:
    """Normalize a publish date to an aware UTC datetime (dates become midnight)."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


class PresentationFlags(BaseModel):
    """
    Boolean presentation toggles for the renderer.

    Unknown toggles are carried through as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    toc: bool = Field(default=False, description="Show table of contents")
    math: bool = Field(default=False, description="Render math")
    diagrams: bool = Field(default=False, description="Render diagrams")

    def is_default(self) -> bool:
        """True when nothing is switched on and no extra toggles exist."""
        return not (self.toc or self.math or self.diagrams or self.model_extra)


class DocumentMetadata(BaseModel):
    """
    Structured front matter of a content document.

    Field aliases are the only accepted keys for the metadata block
    (publishDate, heroImage). Any other spelling, including the Python
    attribute names, is an unrecognized key: kept as an extra field so a
    rewrite never drops it, but nothing reads it.

    Build from Python attribute names with from_fields().
    """

    model_config = ConfigDict(extra="allow")

    title: str
    description: Optional[str] = None
    author: Optional[str] = None
    publish_date: PublishDate = Field(..., alias="publishDate")
    categories: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    hero_image: Optional[str] = Field(default=None, alias="heroImage")
    flags: PresentationFlags = Field(default_factory=PresentationFlags)

    @field_validator("publish_date", mode="before")
    @classmethod
    def _parse_publish_date(cls, value: Any) -> Any:
        if isinstance(value, (datetime, date)):
            return value
        if isinstance(value, str):
            return parse_date_value(value)
        raise ValueError(f"expected a date, got {type(value).__name__}")

    @field_validator("categories", "tags", mode="before")
    @classmethod
    def _single_string_as_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("flags", mode="before")
    @classmethod
    def _null_flags(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def from_fields(cls, **fields: Any) -> "DocumentMetadata":
        """
        Construct from Python attribute names.

        Example:
            DocumentMetadata.from_fields(title="A", publish_date=date(2024, 5, 1))
        """
        data: Dict[str, Any] = {}
        for name, value in fields.items():
            info = cls.model_fields.get(name)
            data[info.alias if info is not None and info.alias else name] = value
        return cls.model_validate(data)

    @property
    def published_at(self) -> datetime:
        """publishDate as an aware UTC datetime, for sorting and comparisons."""
        return as_utc_datetime(self.publish_date)

    def extra_fields(self) -> Dict[str, Any]:
        """Unrecognized front-matter keys, in their original order."""
        return dict(self.model_extra or {})


@dataclass
class ContentDocument:
    """
    One published article.

    Identity is the file path; there is no separate ID field.
    The body is the text after the metadata block's closing delimiter.
    """

    path: Optional[Path]
    metadata: DocumentMetadata
    body: str

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def source(self) -> str:
        """Printable identity (path, or "<string>" for in-memory documents)."""
        return str(self.path) if self.path is not None else "<string>"

    def __repr__(self) -> str:
        return f"ContentDocument({self.source!r}, title={self.metadata.title!r})"


__all__ = [
    "PublishDate",
    "PresentationFlags",
    "DocumentMetadata",
    "ContentDocument",
    "parse_date_value",
    "as_utc_datetime",
]
