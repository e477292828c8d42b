# folio/validation/validator.py
"""
Document validator.

Runs the acceptance-check rules over one or many documents.

Typical usage:

    validator = DocumentValidator.from_config(config.validation)
    report = validator.validate_scan(scanner.scan("content/"))
    if not report.ok:
        ...
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from folio.config.schema import ValidationConfig
from folio.content.scanner import ScanResult
from folio.core.document import ContentDocument
from folio.core.exceptions import DocumentValidationError
from folio.logging.logger import get_logger
from folio.logging.tags import VALIDATION
from folio.validation.issues import ValidationIssue, ValidationReport
from folio.validation.rules import Rule, default_rules

logger = get_logger(__name__)

PARSE_RULE = "parse"


class DocumentValidator:
    """Applies a rule set to content documents."""

    def __init__(self, rules: Optional[Sequence[Rule]] = None) -> None:
        self.rules: List[Rule] = list(rules) if rules is not None else default_rules()

    @classmethod
    def from_config(cls, config: Optional[ValidationConfig] = None) -> "DocumentValidator":
        return cls(default_rules(config))

    # -----------------------------------------------------
    # Public API
    # -----------------------------------------------------
    def validate(self, document: ContentDocument) -> List[ValidationIssue]:
        """Return every issue found in one document (empty list = accepted)."""
        issues: List[ValidationIssue] = []
        for rule in self.rules:
            found = rule.check(document)
            if found:
                logger.debug(f"{VALIDATION} {document.source}: rule '{rule.name}' found {len(found)} issue(s)")
            issues.extend(found)
        return issues

    def check(self, document: ContentDocument) -> None:
        """
        Validate one document and raise if any error-severity issue is found.

        Raises:
            DocumentValidationError: Carrying the full issue list.
        """
        issues = self.validate(document)
        errors = [issue for issue in issues if issue.is_error]
        if errors:
            raise DocumentValidationError(
                "; ".join(f"[{issue.rule}] {issue.message}" for issue in errors),
                source=document.source,
                issues=issues,
            )

    def validate_many(self, documents: Iterable[ContentDocument]) -> ValidationReport:
        report = ValidationReport()
        for document in documents:
            report.checked += 1
            report.issues.extend(self.validate(document))

        logger.info(
            f"{VALIDATION} Checked {report.checked} documents: "
            f"{len(report.errors)} errors, {len(report.warnings)} warnings"
        )
        return report

    def validate_scan(self, scan: ScanResult) -> ValidationReport:
        """
        Validate a scan result.

        Files that failed to load are reported as 'parse' errors.
        """
        report = self.validate_many(scan.documents)
        for error in scan.errors:
            report.checked += 1
            report.issues.append(ValidationIssue(str(error.path), PARSE_RULE, error.message))
        report.issues.sort(key=lambda issue: issue.source)
        return report


__all__ = ["DocumentValidator", "PARSE_RULE"]
