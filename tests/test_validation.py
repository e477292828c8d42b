# tests/test_validation.py
"""
Tests for the acceptance-check rules and DocumentValidator.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from folio.config.schema import ValidationConfig
from folio.content.frontmatter import parse_document
from folio.content.scanner import ContentScanner
from folio.core.document import ContentDocument, DocumentMetadata
from folio.core.exceptions import DocumentValidationError
from folio.validation import (
    PARSE_RULE,
    CategoriesShapeRule,
    DescriptionPresentRule,
    DocumentValidator,
    PublishDateRule,
    Rule,
    Severity,
    TagsUniqueRule,
    TitlePresentRule,
    default_rules,
)

pytestmark = pytest.mark.tier1

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_doc(**fields) -> ContentDocument:
    fields.setdefault("title", "A title")
    fields.setdefault("publish_date", date(2025, 6, 1))
    return ContentDocument(path=None, metadata=DocumentMetadata.from_fields(**fields), body="body")


# ---------------------------------------------------------
# Title
# ---------------------------------------------------------


class TestTitlePresentRule:
    def test_non_empty_title_passes(self):
        assert TitlePresentRule().check(make_doc()) == []

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_fails(self, title):
        issues = TitlePresentRule().check(make_doc(title=title))

        assert [issue.rule for issue in issues] == ["title-present"]


# ---------------------------------------------------------
# Publish date
# ---------------------------------------------------------


class TestPublishDateRule:
    def rule(self, days: int = 365) -> PublishDateRule:
        return PublishDateRule(max_future_days=days, clock=lambda: NOW)

    def test_past_date_passes(self):
        assert self.rule().check(make_doc(publish_date=date(2020, 1, 1))) == []

    def test_near_future_passes(self):
        assert self.rule().check(make_doc(publish_date=date(2026, 3, 1))) == []

    def test_far_future_fails(self):
        issues = self.rule().check(make_doc(publish_date=date(2030, 1, 1)))

        assert len(issues) == 1
        assert "2030-01-01" in issues[0].message
        assert issues[0].severity is Severity.ERROR

    def test_zero_days_means_not_after_now(self):
        rule = self.rule(days=0)

        assert rule.check(make_doc(publish_date=NOW)) == []
        assert rule.check(make_doc(publish_date=NOW + timedelta(minutes=1)))

    def test_naive_clock_is_read_as_utc(self):
        rule = PublishDateRule(max_future_days=0, clock=lambda: datetime(2026, 1, 1))

        assert rule.check(make_doc(publish_date=date(2025, 12, 31))) == []
        assert rule.check(make_doc(publish_date=datetime(2026, 1, 1, 0, 1, tzinfo=timezone.utc)))

    def test_naive_datetime_compared_as_utc(self):
        assert self.rule(days=0).check(make_doc(publish_date=datetime(2025, 12, 31, 23, 59))) == []


# ---------------------------------------------------------
# Categories
# ---------------------------------------------------------


class TestCategoriesShapeRule:
    def test_absent_categories_pass(self):
        assert CategoriesShapeRule().check(make_doc()) == []

    def test_ordered_categories_pass(self):
        assert CategoriesShapeRule().check(make_doc(categories=["Guides", "Cybersecurity"])) == []

    def test_empty_sequence_fails(self):
        issues = CategoriesShapeRule().check(make_doc(categories=[]))

        assert len(issues) == 1
        assert "empty" in issues[0].message

    def test_empty_entry_fails_with_index(self):
        issues = CategoriesShapeRule().check(make_doc(categories=["Guides", " "]))

        assert [issue.message for issue in issues] == ["categories[1] is empty"]


# ---------------------------------------------------------
# Tags
# ---------------------------------------------------------


class TestTagsUniqueRule:
    def test_absent_tags_pass(self):
        assert TagsUniqueRule().check(make_doc()) == []

    def test_empty_set_passes(self):
        assert TagsUniqueRule().check(make_doc(tags=[])) == []

    def test_distinct_tags_pass(self):
        assert TagsUniqueRule().check(make_doc(tags=["Cybersecurity", "Security Fundamentals"])) == []

    def test_case_insensitive_duplicate_fails(self):
        issues = TagsUniqueRule().check(make_doc(tags=["Python", "python", "PYTHON"]))

        # Reported once per duplicated tag, not once per repeat.
        assert len(issues) == 1
        assert "'python'" in issues[0].message
        assert "'Python'" in issues[0].message

    def test_case_sensitive_mode(self):
        rule = TagsUniqueRule(case_insensitive=False)

        assert rule.check(make_doc(tags=["Python", "python"])) == []
        assert rule.check(make_doc(tags=["python", "python"]))

    def test_empty_tag_fails(self):
        issues = TagsUniqueRule().check(make_doc(tags=["ok", ""]))

        assert [issue.message for issue in issues] == ["tags[1] is empty"]


# ---------------------------------------------------------
# Description (opt-in)
# ---------------------------------------------------------


class TestDescriptionPresentRule:
    def test_missing_description_is_a_warning(self):
        issues = DescriptionPresentRule().check(make_doc())

        assert len(issues) == 1
        assert issues[0].severity is Severity.WARNING
        assert not issues[0].is_error

    def test_present_description_passes(self):
        assert DescriptionPresentRule().check(make_doc(description="Summary")) == []


# ---------------------------------------------------------
# Rule sets
# ---------------------------------------------------------


class TestDefaultRules:
    def test_standard_rules(self):
        names = [rule.name for rule in default_rules()]

        assert names == ["title-present", "publish-date", "categories-shape", "tags-unique"]

    def test_config_enables_description_rule(self):
        rules = default_rules(ValidationConfig(require_description=True))

        assert rules[-1].name == "description-present"

    def test_config_is_passed_through(self):
        rules = default_rules(ValidationConfig(max_future_days=3, tag_case_insensitive=False))

        assert rules[1].max_future_days == 3
        assert rules[3].case_insensitive is False

    def test_rules_satisfy_protocol(self):
        for rule in default_rules(ValidationConfig(require_description=True)):
            assert isinstance(rule, Rule)


# ---------------------------------------------------------
# Validator
# ---------------------------------------------------------


class TestDocumentValidator:
    def test_sample_article_is_accepted(self, cybersecurity_text):
        doc = parse_document(cybersecurity_text, path="cyber.md")

        assert DocumentValidator().validate(doc) == []

    def test_issues_from_all_rules_are_collected(self):
        doc = make_doc(title=" ", categories=[], tags=["a", "A"])

        issues = DocumentValidator().validate(doc)

        assert {issue.rule for issue in issues} == {"title-present", "categories-shape", "tags-unique"}

    def test_unrecognized_keys_are_ignored(self):
        doc = parse_document("---\ntitle: A\npublishDate: 2024-01-01\nweird: [1, 2]\n---\nbody")

        assert DocumentValidator().validate(doc) == []

    def test_check_raises_on_errors(self):
        with pytest.raises(DocumentValidationError) as exc_info:
            DocumentValidator().check(make_doc(title=""))

        assert exc_info.value.issues[0].rule == "title-present"

    def test_check_ignores_warnings(self):
        validator = DocumentValidator([DescriptionPresentRule()])

        validator.check(make_doc())

    def test_validate_many(self):
        report = DocumentValidator().validate_many([make_doc(), make_doc(title="")])

        assert report.checked == 2
        assert len(report.errors) == 1
        assert not report.ok

    def test_validate_scan_reports_parse_failures(self, write_doc, cybersecurity_text):
        write_doc("good.md", cybersecurity_text)
        bad = write_doc("bad.md", "---\npublishDate: 2024-01-01\n---\nno title")
        write_doc("plain.md", "# no front matter")

        scan = ContentScanner().scan(bad.parent)
        report = DocumentValidator().validate_scan(scan)

        assert report.checked == 3
        assert [issue.rule for issue in report.issues] == [PARSE_RULE, PARSE_RULE]
        assert [issue.source for issue in report.issues] == sorted(issue.source for issue in report.issues)
        assert not report.ok

    def test_by_source_groups_issues(self):
        report = DocumentValidator().validate_many(
            [
                ContentDocument(path="a.md", metadata=make_doc(title="").metadata, body=""),
                ContentDocument(path="b.md", metadata=make_doc(tags=["x", "X"]).metadata, body=""),
            ]
        )

        assert set(report.by_source()) == {"a.md", "b.md"}
