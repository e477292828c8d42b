# folio/validation/issues.py
"""
Result types for document acceptance checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class Severity(str, Enum):
    """How bad an issue is. Errors fail a check run; warnings only with --strict."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """
    One problem found in one document.

    Attributes:
        source: Document identity (its path)
        rule: Name of the rule that produced the issue
        message: Human-readable description
        severity: ERROR or WARNING
    """

    source: str
    rule: str
    message: str
    severity: Severity = Severity.ERROR

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        return f"{self.source}: [{self.rule}] {self.message}"


@dataclass
class ValidationReport:
    """Issues collected over a set of documents."""

    checked: int = 0
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if not issue.is_error]

    @property
    def ok(self) -> bool:
        """True when there are no error-severity issues."""
        return not self.errors

    def by_source(self) -> Dict[str, List[ValidationIssue]]:
        grouped: Dict[str, List[ValidationIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.source, []).append(issue)
        return grouped


__all__ = ["Severity", "ValidationIssue", "ValidationReport"]
