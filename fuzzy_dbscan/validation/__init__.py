"""Parameter validation producing ValidationIssue records."""

from .validation_helpers import ValidationIssue, has_errors, log_issues
from .validate_parameters import ensure_valid_parameters, validate_parameters

__all__ = [
    "ValidationIssue",
    "has_errors",
    "log_issues",
    "ensure_valid_parameters",
    "validate_parameters",
]
