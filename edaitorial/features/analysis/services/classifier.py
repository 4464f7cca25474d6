from typing import Optional, Sequence, Tuple

from edaitorial.features.analysis.schemas.issue import Category

# Evaluated top-down, first match wins; anything unmatched is content
CATEGORY_KEYWORDS: Sequence[Tuple[Category, Tuple[str, ...]]] = (
    (Category.seo, ("seo",)),
    (Category.accessibility, ("accessibility", "wcag")),
    (Category.typos, ("typo", "spelling")),
    (Category.links, ("link", "broken")),
)


def classify_issue_type(issue_type: Optional[str]) -> Category:
    """
    Map an issue's free-text type onto one of the five scoring categories.

    Case-insensitive keyword containment, priority
    seo > accessibility > typos > links > content. Never fails.
    """
    if not issue_type:
        return Category.content

    normalized = str(issue_type).strip().lower()

    for category, keywords in CATEGORY_KEYWORDS:
        if normalized == category.value or any(keyword in normalized for keyword in keywords):
            return category

    return Category.content
