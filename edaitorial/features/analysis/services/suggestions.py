from typing import Iterable, List

from edaitorial.features.analysis.schemas.analysis import Suggestion, SuggestionPriority
from edaitorial.features.analysis.schemas.issue import Category, IssueRecord
from edaitorial.features.analysis.services.classifier import classify_issue_type

CATEGORY_SUGGESTIONS = {
    Category.seo: Suggestion(
        text="Optimize your title and content for search engines.",
        priority=SuggestionPriority.high,
    ),
    Category.accessibility: Suggestion(
        text="Add alt text to images and use descriptive link text and headings so everyone can read your content.",
        priority=SuggestionPriority.high,
    ),
    Category.typos: Suggestion(
        text="Fix spelling errors to improve professionalism.",
        priority=SuggestionPriority.high,
    ),
    Category.links: Suggestion(
        text="Repair broken or empty links before publishing.",
        priority=SuggestionPriority.medium,
    ),
    Category.content: Suggestion(
        text="Improve the structure of your content with headings, lists and visuals.",
        priority=SuggestionPriority.low,
    ),
}


def get_banded_suggestion(score: int) -> Suggestion:
    if score >= 90:
        return Suggestion(
            text="Your content is excellent! Consider adding images or video to enhance engagement.",
            priority=SuggestionPriority.low,
        )
    elif score >= 75:
        return Suggestion(
            text="Good start! Review the issues below to reach excellent quality.",
            priority=SuggestionPriority.medium,
        )
    else:
        return Suggestion(
            text="Focus on addressing high-priority issues first for maximum impact.",
            priority=SuggestionPriority.high,
        )


def generate_suggestions(issues: Iterable[IssueRecord], score: int) -> List[Suggestion]:
    """One suggestion for the score band, then one per category present."""
    suggestions = [get_banded_suggestion(score)]

    present = {classify_issue_type(issue.type) for issue in issues}
    for category in Category:
        if category in present:
            suggestions.append(CATEGORY_SUGGESTIONS[category])

    return suggestions
