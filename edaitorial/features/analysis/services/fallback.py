from typing import List

from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import Impact, IssueRecord, Severity
from edaitorial.platform.config import Settings


def rule_based_issues(content: ContentItem, settings: Settings) -> List[IssueRecord]:
    """
    Last tier of the fallback chain: title length and word count only.

    Never fails and never calls any external service.
    """
    issues = []

    title_length = len(content.title)
    if title_length < settings.MIN_TITLE_LENGTH or title_length > settings.MAX_TITLE_LENGTH:
        issues.append(IssueRecord(
            description=(
                f"Title length ({title_length} chars) not optimal "
                f"({settings.MIN_TITLE_LENGTH}-{settings.MAX_TITLE_LENGTH} recommended)"
            ),
            type="SEO",
            severity=Severity.medium,
            impact=Impact.medium,
        ))

    word_count = content.word_count
    if word_count < settings.MIN_WORD_COUNT:
        issues.append(IssueRecord(
            description=(
                f"Content is short ({word_count} words). "
                f"Aim for {settings.MIN_WORD_COUNT}+ words for better SEO."
            ),
            type="SEO",
            severity=Severity.low,
            impact=Impact.medium,
        ))

    return issues
