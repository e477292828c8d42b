# folio/validation/__init__.py
"""
Acceptance checks for content documents.

Public API:
    - DocumentValidator: runs rules over documents or a scan result
    - ValidationIssue / ValidationReport / Severity: result types
    - default_rules: the standard rule set built from config
"""

from .issues import Severity, ValidationIssue, ValidationReport
from .rules import (
    CategoriesShapeRule,
    DescriptionPresentRule,
    PublishDateRule,
    Rule,
    TagsUniqueRule,
    TitlePresentRule,
    default_rules,
)
from .validator import PARSE_RULE, DocumentValidator

__all__ = [
    "DocumentValidator",
    "PARSE_RULE",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "Rule",
    "TitlePresentRule",
    "PublishDateRule",
    "CategoriesShapeRule",
    "TagsUniqueRule",
    "DescriptionPresentRule",
    "default_rules",
]
