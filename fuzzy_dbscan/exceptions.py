from __future__ import annotations

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from fuzzy_dbscan.validation.validation_helpers import ValidationIssue


class FuzzyDBSCANError(Exception):
    def __init__(self, code: str, message: str, context: str = ""):
        super().__init__(message)
        self.code = code
        self.context = context


class InvalidParametersError(FuzzyDBSCANError):
    """Raised before any computation when the fuzzy intervals are malformed."""

    def __init__(self, issues: List["ValidationIssue"]):
        message = "; ".join(issue.message for issue in issues)
        super().__init__(issues[0].code if issues else "INVALID_PARAMETERS", message)
        self.issues = list(issues)


class PointFormatError(FuzzyDBSCANError):
    """A host record could not be turned into a point."""
