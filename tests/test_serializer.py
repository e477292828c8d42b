# tests/test_serializer.py
"""
Tests for folio.content.serializer.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from folio.content.frontmatter import extract_metadata, load_document, parse_document
from folio.content.serializer import (
    dump_front_matter,
    format_document,
    metadata_to_dict,
    render_document,
    write_document,
)
from folio.core.document import ContentDocument, DocumentMetadata, PresentationFlags

pytestmark = pytest.mark.tier1


def _reparse(metadata: DocumentMetadata) -> DocumentMetadata:
    reparsed, _ = extract_metadata(dump_front_matter(metadata))
    return reparsed


class TestDumpFrontMatter:
    def test_fenced_with_delimiters(self):
        text = dump_front_matter(DocumentMetadata.from_fields(title="A", publish_date=date(2024, 1, 1)))

        assert text.startswith("---\n")
        assert text.endswith("\n---\n")

    def test_canonical_key_order(self):
        meta = DocumentMetadata.model_validate(
            {
                "zzz": 1,
                "tags": ["b"],
                "title": "A",
                "categories": ["c"],
                "publishDate": "2024-01-01",
                "author": "me",
            }
        )

        assert list(metadata_to_dict(meta)) == ["title", "author", "publishDate", "categories", "tags", "zzz"]

    def test_absent_fields_and_default_flags_are_omitted(self):
        data = metadata_to_dict(DocumentMetadata.from_fields(title="A", publish_date=date(2024, 1, 1)))

        assert data == {"title": "A", "publishDate": date(2024, 1, 1)}

    def test_date_written_as_plain_date(self):
        text = dump_front_matter(DocumentMetadata.from_fields(title="A", publish_date=date(2024, 1, 1)))

        assert "publishDate: 2024-01-01\n" in text

    def test_datetime_written_as_iso_string(self):
        meta = DocumentMetadata.from_fields(
            title="A",
            publish_date=datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc),
        )

        assert "2024-01-01T08:30:00+00:00" in dump_front_matter(meta)


class TestRoundTrip:
    """Serializing metadata and parsing it again yields the same record."""

    def test_full_article(self, cybersecurity_text):
        metadata, _ = extract_metadata(cybersecurity_text)

        assert _reparse(metadata) == metadata

    def test_timestamp_and_extra_keys(self, python_projects_text):
        metadata, _ = extract_metadata(python_projects_text)

        assert _reparse(metadata) == metadata

    def test_naive_and_offset_datetimes(self):
        naive = DocumentMetadata.from_fields(title="A", publish_date=datetime(2024, 3, 4, 5, 6, 7))
        offset = DocumentMetadata.from_fields(
            title="A",
            publish_date=datetime(2024, 3, 4, 5, 6, 7, tzinfo=timezone(timedelta(hours=-5))),
        )

        assert _reparse(naive) == naive
        assert _reparse(offset) == offset

    def test_yaml_lookalike_strings_stay_strings(self):
        meta = DocumentMetadata.from_fields(
            title="yes",
            description="2024-01-01",
            author="null",
            publish_date=date(2024, 1, 1),
            tags=["true", "1.5", "# not a comment", "key: value"],
        )

        assert _reparse(meta) == meta

    def test_empty_collections_survive(self):
        meta = DocumentMetadata.from_fields(title="A", publish_date=date(2024, 1, 1), categories=[], tags=[])

        assert _reparse(meta) == meta

    def test_flags_and_unicode(self):
        meta = DocumentMetadata.from_fields(
            title="Sécurité 101: 入門",
            publish_date=date(2024, 1, 1),
            flags=PresentationFlags(toc=True, diagrams=True),
        )

        assert _reparse(meta) == meta
        assert "Sécurité" in dump_front_matter(meta)

    def test_long_description_is_not_folded(self):
        meta = DocumentMetadata.from_fields(title="A", description="word " * 60, publish_date=date(2024, 1, 1))

        assert _reparse(meta) == meta


class TestRenderDocument:
    def test_body_is_kept_verbatim(self, cybersecurity_text):
        doc = parse_document(cybersecurity_text)

        rendered = render_document(doc)

        assert rendered.endswith(doc.body)
        assert parse_document(rendered).body == doc.body

    def test_canonical_text_is_stable(self, cybersecurity_text):
        once = format_document(cybersecurity_text)

        assert format_document(once) == once

    def test_write_document(self, tmp_path, python_projects_text):
        doc = parse_document(python_projects_text, path=tmp_path / "post.md")

        written = write_document(doc)

        assert written == tmp_path / "post.md"
        assert load_document(written).metadata == doc.metadata

    def test_write_without_path_raises(self):
        doc = ContentDocument(
            path=None,
            metadata=DocumentMetadata.from_fields(title="A", publish_date=date(2024, 1, 1)),
            body="",
        )

        with pytest.raises(ValueError, match="no path"):
            write_document(doc)
