import math
import numbers
from typing import List

from fuzzy_dbscan.domain.model import FuzzyParameters
from fuzzy_dbscan.exceptions import InvalidParametersError
from fuzzy_dbscan.validation.validation_helpers import ValidationIssue, has_errors, log_issues

PARAMETER_NAMES = ("eps_min", "eps_max", "pts_min", "pts_max")


def validate_finite(params: FuzzyParameters) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for name in PARAMETER_NAMES:
        value = getattr(params, name)
        if not isinstance(value, numbers.Real) or isinstance(value, bool) or not math.isfinite(value):
            issues.append(ValidationIssue(name, "NON_FINITE_PARAMETER", "error", f"{name} must be a finite number, got {value!r}"))
    return issues


def validate_non_negative(params: FuzzyParameters) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for name in PARAMETER_NAMES:
        value = getattr(params, name)
        if value < 0:
            issues.append(ValidationIssue(name, "NEGATIVE_PARAMETER", "error", f"{name} must be non-negative, got {value}"))
    return issues


def validate_intervals(params: FuzzyParameters) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    if params.eps_min > params.eps_max:
        issues.append(ValidationIssue("eps_min", "EPS_RANGE", "error", f"eps_min ({params.eps_min}) must not exceed eps_max ({params.eps_max})"))
    if params.pts_min > params.pts_max:
        issues.append(ValidationIssue("pts_min", "PTS_RANGE", "error", f"pts_min ({params.pts_min}) must not exceed pts_max ({params.pts_max})"))
    if params.eps_max == 0:
        issues.append(ValidationIssue("eps_max", "ZERO_RADIUS", "warning", "eps_max is 0; only coincident points are neighbors"))
    return issues


def validate_parameters(params: FuzzyParameters) -> List[ValidationIssue]:
    issues = validate_finite(params)
    if issues:
        return issues
    issues.extend(validate_non_negative(params))
    issues.extend(validate_intervals(params))
    return issues


def ensure_valid_parameters(params: FuzzyParameters) -> None:
    """Raise a single InvalidParametersError listing every error found."""
    issues = validate_parameters(params)
    if has_errors(issues):
        raise InvalidParametersError([i for i in issues if i.severity == "error"])
    log_issues(issues, "error")
