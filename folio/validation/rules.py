# folio/validation/rules.py
"""
Acceptance-check rules for content documents.

Each rule inspects one document and returns the issues it finds.
Rules must be:
- Deterministic (same document and clock → same issues)
- Side-effect free
- Blind to unrecognized front-matter keys
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Protocol, runtime_checkable

from folio.config.schema import ValidationConfig
from folio.core.document import ContentDocument, as_utc_datetime
from folio.validation.issues import Severity, ValidationIssue


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@runtime_checkable
class Rule(Protocol):
    """Protocol for acceptance-check rules."""

    @property
    def name(self) -> str:
        """Unique rule name, shown in reports."""
        ...

    def check(self, document: ContentDocument) -> List[ValidationIssue]:
        ...


# =============================================================================
# Rules
# =============================================================================


@dataclass
class TitlePresentRule:
    """title must be non-empty."""

    name: str = field(default="title-present", init=False)

    def check(self, document: ContentDocument) -> List[ValidationIssue]:
        if not document.metadata.title.strip():
            return [ValidationIssue(document.source, self.name, "title is empty")]
        return []


@dataclass
class PublishDateRule:
    """
    publishDate must not lie in the far future.

    The date itself is already guaranteed to parse; this rule bounds it to
    at most `max_future_days` after now.
    """

    max_future_days: int = 365
    clock: Callable[[], datetime] = _utcnow
    name: str = field(default="publish-date", init=False)

    def check(self, document: ContentDocument) -> List[ValidationIssue]:
        limit = as_utc_datetime(self.clock()) + timedelta(days=self.max_future_days)
        published = document.metadata.published_at
        if published > limit:
            return [
                ValidationIssue(
                    document.source,
                    self.name,
                    f"publishDate {document.metadata.publish_date.isoformat()} is more than "
                    f"{self.max_future_days} days in the future",
                )
            ]
        return []


@dataclass
class CategoriesShapeRule:
    """categories, when present, is a non-empty sequence of non-empty strings."""

    name: str = field(default="categories-shape", init=False)

    def check(self, document: ContentDocument) -> List[ValidationIssue]:
        categories = document.metadata.categories
        if categories is None:
            return []
        if not categories:
            return [ValidationIssue(document.source, self.name, "categories is present but empty")]

        return [
            ValidationIssue(document.source, self.name, f"categories[{index}] is empty")
            for index, category in enumerate(categories)
            if not category.strip()
        ]


@dataclass
class TagsUniqueRule:
    """tags, when present, contain no empty values and no duplicates."""

    case_insensitive: bool = True
    name: str = field(default="tags-unique", init=False)

    def _key(self, tag: str) -> str:
        tag = tag.strip()
        return tag.casefold() if self.case_insensitive else tag

    def check(self, document: ContentDocument) -> List[ValidationIssue]:
        tags = document.metadata.tags
        if tags is None:
            return []

        issues: List[ValidationIssue] = []
        seen: dict[str, str] = {}
        reported: set[str] = set()

        for index, tag in enumerate(tags):
            if not tag.strip():
                issues.append(ValidationIssue(document.source, self.name, f"tags[{index}] is empty"))
                continue

            key = self._key(tag)
            if key in seen and key not in reported:
                reported.add(key)
                issues.append(
                    ValidationIssue(
                        document.source,
                        self.name,
                        f"duplicate tag {tag!r} (first seen as {seen[key]!r})",
                    )
                )
            seen.setdefault(key, tag)

        return issues


@dataclass
class DescriptionPresentRule:
    """Warn when a document has no description (used for previews/SEO)."""

    name: str = field(default="description-present", init=False)

    def check(self, document: ContentDocument) -> List[ValidationIssue]:
        description = document.metadata.description
        if description is None or not description.strip():
            return [
                ValidationIssue(
                    document.source,
                    self.name,
                    "description is missing",
                    severity=Severity.WARNING,
                )
            ]
        return []


# =============================================================================
# Rule Sets
# =============================================================================


def default_rules(
    config: Optional[ValidationConfig] = None,
    clock: Callable[[], datetime] = _utcnow,
) -> List[Rule]:
    """Build the standard rule set from validation config."""
    config = config or ValidationConfig()

    rules: List[Rule] = [
        TitlePresentRule(),
        PublishDateRule(max_future_days=config.max_future_days, clock=clock),
        CategoriesShapeRule(),
        TagsUniqueRule(case_insensitive=config.tag_case_insensitive),
    ]
    if config.require_description:
        rules.append(DescriptionPresentRule())
    return rules


__all__ = [
    "Rule",
    "TitlePresentRule",
    "PublishDateRule",
    "CategoriesShapeRule",
    "TagsUniqueRule",
    "DescriptionPresentRule",
    "default_rules",
]
