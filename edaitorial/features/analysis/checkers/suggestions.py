import re
from typing import Any, Dict, List, Optional, Tuple

from edaitorial.features.analysis.checkers.base import BaseChecker
from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import Category, Impact, IssueRecord, Severity
from edaitorial.features.analysis.utils.markup import parse_markup

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

HEADINGS_MIN_WORDS = 300
LISTS_MIN_WORDS = 500
IMAGES_MIN_WORDS = 500
MAX_AVERAGE_SENTENCE_WORDS = 25


def average_sentence_length(text: str, word_count: int) -> Optional[float]:
    sentences = [sentence for sentence in SENTENCE_SPLIT_RE.split(text) if sentence.strip()]
    if not sentences:
        return None
    return word_count / len(sentences)


def skipped_heading_level(levels: List[int]) -> Optional[Tuple[int, int]]:
    """First jump of more than one level down, e.g. (2, 4)."""
    previous = 0
    for level in levels:
        if previous and level > previous + 1:
            return previous, level
        previous = level
    return None


class SuggestionsChecker(BaseChecker):
    """Provides content improvement suggestions."""
    id = "suggestions"
    label = "Content Suggestions"
    description = "Provides AI-powered suggestions to improve content quality"
    category = Category.content
    weight = 30
    prompt_setting = "SUGGESTIONS_PROMPT"

    def prompt_values(self, content: ContentItem) -> Dict[str, Any]:
        return {
            "title": content.title,
            "body": content.body_text,
            "word_count": content.word_count,
        }

    def analyze_offline(self, content: ContentItem) -> List[IssueRecord]:
        body = content.body or ""
        if not body.strip():
            return [IssueRecord(
                description="No content body found",
                type="Content",
                severity=Severity.medium,
                impact=Impact.high,
            )]

        issues = []
        markup = parse_markup(body)
        word_count = content.word_count
        levels = markup.heading_levels

        if word_count > HEADINGS_MIN_WORDS and not any(level >= 2 for level in levels):
            issues.append(IssueRecord(
                description="No heading structure (use H2, H3, etc. for content hierarchy)",
                type="Content",
                severity=Severity.medium,
                impact=Impact.medium,
            ))

        h1_count = levels.count(1)
        if h1_count > 1:
            issues.append(IssueRecord(
                description=f"Multiple H1 tags found ({h1_count}) - should have only one per page",
                type="SEO",
                severity=Severity.high,
                impact=Impact.high,
            ))

        skipped = skipped_heading_level(levels)
        if skipped:
            issues.append(IssueRecord(
                description=f"Heading hierarchy skipped (H{skipped[0]} to H{skipped[1]})",
                type="Accessibility",
                severity=Severity.low,
                impact=Impact.low,
            ))

        average = average_sentence_length(content.body_text, word_count)
        if average is not None and average > MAX_AVERAGE_SENTENCE_WORDS:
            issues.append(IssueRecord(
                description=f"Average sentence length ({round(average, 1)} words) is too long for readability",
                type="Readability",
                severity=Severity.low,
                impact=Impact.medium,
            ))

        if word_count > LISTS_MIN_WORDS and not markup.list_count:
            issues.append(self._suggestion(
                "Suggestion: Consider using bullet points or numbered lists to organize information"))

        if word_count > IMAGES_MIN_WORDS and not markup.images:
            issues.append(self._suggestion(
                "Suggestion: Add images or visual content to make the page more engaging"))

        return issues

    @staticmethod
    def _suggestion(description: str) -> IssueRecord:
        return IssueRecord(
            description=description,
            type="Content",
            severity=Severity.low,
            impact=Impact.low,
        )
