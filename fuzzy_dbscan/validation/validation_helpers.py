import logging
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    code: str       # e.g., "EPS_RANGE", "PTS_RANGE", "NEGATIVE_PARAMETER"
    severity: str   # "error" | "warning"
    message: str


def has_errors(issues: List[ValidationIssue]) -> bool:
    return any(i.severity == "error" for i in issues)


def log_issues(issues: List[ValidationIssue], severity: str) -> bool:
    for issue in issues:
        (logging.error if issue.severity == severity else logging.warning)("%s: %s", issue.code, issue.message)
    return any(i.severity == severity for i in issues)
