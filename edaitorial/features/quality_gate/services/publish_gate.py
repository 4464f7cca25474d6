import logging
from typing import List, Optional

from edaitorial.features.analysis.schemas.analysis import AnalysisResult
from edaitorial.features.analysis.schemas.issue import IssueRecord, Severity
from edaitorial.features.analysis.services.analyzer import ContentAnalyzer
from edaitorial.features.quality_gate.schemas.gate import GateDecision, IssueSummary
from edaitorial.platform.config import Settings
from edaitorial.platform.exceptions import PublishBlockedError

logger = logging.getLogger(__name__)

ISSUE_SUMMARY_LIMIT = 5

SEVERITY_RANK = {
    Severity.critical: 0,
    Severity.high: 1,
    Severity.medium: 2,
    Severity.low: 3,
}


def get_score_message(score: int) -> str:
    """Human-readable message based on score."""
    if score >= 90:
        return "Excellent! Your content meets high quality standards."
    elif score >= 75:
        return "Good content with minor improvements suggested."
    elif score >= 50:
        return "Fair content. Several improvements recommended."
    elif score >= 25:
        return "Needs work. Please review the suggestions below."
    else:
        return "Critical issues found. Please address them before publishing."


def summarize_issues(issues: List[IssueRecord], limit: int = ISSUE_SUMMARY_LIMIT) -> List[IssueSummary]:
    """Most severe issues first, backend order kept within a severity."""
    ranked = sorted(issues, key=lambda issue: SEVERITY_RANK[issue.severity])
    return [
        IssueSummary(
            description=issue.description,
            type=issue.type,
            severity=issue.severity.value,
        )
        for issue in ranked[:limit]
    ]


class PublishGate:
    """
    Synchronous check run before a content item is published.

    Compares the analyzer's overall score against MIN_SCORE and blocks the
    transition when BLOCK_PUBLISHING_BELOW_THRESHOLD is on.
    """

    def __init__(self, settings: Settings, analyzer: ContentAnalyzer):
        self.settings = settings
        self.analyzer = analyzer

    def applies_to(self, content_type: str) -> bool:
        if not self.settings.ENABLE_QUALITY_GATE:
            return False
        enabled_types = self.settings.ENABLED_CONTENT_TYPES
        return not enabled_types or content_type in enabled_types

    def evaluate(
        self,
        title: str,
        body: str,
        content_type: str = "article",
        available_nodes: Optional[List[str]] = None,
        url: str = "",
    ) -> GateDecision:
        min_score = self.settings.MIN_SCORE

        if not self.applies_to(content_type):
            return GateDecision(
                allowed=True,
                checked=False,
                passed=True,
                min_score=min_score,
                message=f"Quality gate does not apply to '{content_type}' content.",
            )

        result = self.analyzer.analyze(
            title, body, content_type, available_nodes=available_nodes, url=url)
        decision = self._decide(result, min_score)

        if decision.allowed:
            logger.info(
                f"Publish allowed: score={result.overall_score}, min_score={min_score}, "
                f"categories={result.category_scores}")
        else:
            logger.warning(
                f"Publish blocked: score={result.overall_score} below min_score={min_score}, "
                f"issues={len(result.issues)}")

        return decision

    def enforce(self, *args, **kwargs) -> GateDecision:
        """Like evaluate, but raise PublishBlockedError when not allowed."""
        decision = self.evaluate(*args, **kwargs)
        if not decision.allowed:
            raise PublishBlockedError(
                score=decision.score or 0,
                min_score=decision.min_score,
                issues=[issue.description for issue in decision.issues],
            )
        return decision

    def _decide(self, result: AnalysisResult, min_score: int) -> GateDecision:
        passed = result.overall_score >= min_score
        allowed = passed or not self.settings.BLOCK_PUBLISHING_BELOW_THRESHOLD

        return GateDecision(
            allowed=allowed,
            checked=True,
            passed=passed,
            score=result.overall_score,
            score_class=result.score_class,
            min_score=min_score,
            message=get_score_message(result.overall_score),
            category_scores=result.category_scores,
            issues=summarize_issues(result.issues),
        )
