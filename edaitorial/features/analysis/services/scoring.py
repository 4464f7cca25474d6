"""
Scoring

Severity-weighted deductions per category and the headline score, which is
the average of the category scores rather than a flat deduction over all
issues.
"""
import math
from typing import Dict, Iterable, Mapping, Optional, Union

from edaitorial.features.analysis.schemas.analysis import ScoreClass
from edaitorial.features.analysis.schemas.issue import CATEGORIES, IssueRecord, Severity
from edaitorial.features.analysis.services.classifier import classify_issue_type

MAX_SCORE = 100
MIN_SCORE = 0

SEVERITY_DEDUCTIONS: Dict[Severity, int] = {
    Severity.critical: 25,
    Severity.high: 15,
    Severity.medium: 10,
    Severity.low: 5,
}

# (threshold, class), checked top-down
SCORE_CLASS_THRESHOLDS = (
    (90, ScoreClass.excellent),
    (75, ScoreClass.good),
    (50, ScoreClass.fair),
    (25, ScoreClass.poor),
)


def clamp_score(score: Union[int, float]) -> int:
    return int(max(MIN_SCORE, min(MAX_SCORE, score)))


def round_half_up(value: float) -> int:
    """Round .5 away from zero, unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def severity_deduction(severity: Optional[Union[Severity, str]]) -> int:
    """Point deduction for a severity label; unknown or missing counts as Low."""
    if isinstance(severity, Severity):
        return SEVERITY_DEDUCTIONS[severity]
    try:
        return SEVERITY_DEDUCTIONS[Severity(severity)]
    except ValueError:
        return SEVERITY_DEDUCTIONS[Severity.low]


def calculate_category_scores(issues: Iterable[IssueRecord]) -> Dict[str, int]:
    """
    Start every category at 100 and subtract the deduction of each issue
    from its classified category. Always returns all five categories.
    """
    deductions = {category: 0 for category in CATEGORIES}

    for issue in issues:
        category = classify_issue_type(issue.type)
        deductions[category.value] += severity_deduction(issue.severity)

    return {
        category: clamp_score(MAX_SCORE - deduction)
        for category, deduction in deductions.items()
    }


def calculate_overall_score(category_scores: Mapping[str, Union[int, float]]) -> int:
    """Average of the category scores, rounded; an empty map scores 100."""
    if not category_scores:
        return MAX_SCORE

    average = sum(category_scores.values()) / len(category_scores)
    return clamp_score(round_half_up(average))


def get_score_class(score: int) -> ScoreClass:
    for threshold, score_class in SCORE_CLASS_THRESHOLDS:
        if score >= threshold:
            return score_class
    return ScoreClass.critical
