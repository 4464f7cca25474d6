from typing import List

from edaitorial.features.analysis.checkers.base import BaseChecker
from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import Category, Impact, IssueRecord, Severity
from edaitorial.features.analysis.utils.markup import parse_markup

POOR_LINK_TEXTS = ("click here", "here", "read more", "more")

MAX_READABLE_TITLE_LENGTH = 100


class AccessibilityChecker(BaseChecker):
    """WCAG-oriented checks on the content markup."""
    id = "accessibility"
    label = "Accessibility Checker"
    description = "Detects WCAG accessibility issues using AI"
    category = Category.accessibility
    weight = 15
    prompt_setting = "ACCESSIBILITY_PROMPT"

    def prompt_values(self, content: ContentItem):
        # Markup is kept: alt attributes and labels live in the tags
        return {
            "title": content.title,
            "body": content.body,
        }

    def analyze_offline(self, content: ContentItem) -> List[IssueRecord]:
        issues = []
        markup = parse_markup(content.body)

        missing_alt = sum(1 for image in markup.images if not image.get("alt", "").strip())
        if missing_alt > 0:
            issues.append(IssueRecord(
                description=f"{missing_alt} image(s) missing alt text",
                type="Accessibility",
                severity=Severity.high,
                impact=Impact.high,
            ))

        unlabelled = markup.unlabelled_controls()
        if unlabelled > 0:
            issues.append(IssueRecord(
                description=f"{unlabelled} form control(s) without labels",
                type="Accessibility",
                severity=Severity.medium,
                impact=Impact.medium,
            ))

        poor_links = [link["text"] for link in markup.links if link["text"].lower() in POOR_LINK_TEXTS]
        if poor_links:
            issues.append(IssueRecord(
                description=f"{len(poor_links)} link(s) with non-descriptive text (e.g. \"{poor_links[0]}\")",
                type="Accessibility",
                severity=Severity.low,
                impact=Impact.medium,
            ))

        if len(content.title) > MAX_READABLE_TITLE_LENGTH:
            issues.append(IssueRecord(
                description=f"Title is hard to read ({len(content.title)} chars)",
                type="WCAG readability",
                severity=Severity.low,
                impact=Impact.low,
            ))

        return issues
