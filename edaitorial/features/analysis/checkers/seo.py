from typing import Any, Dict, List

from edaitorial.features.analysis.checkers.base import BaseChecker
from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import Category, IssueRecord
from edaitorial.features.analysis.services.fallback import rule_based_issues


class SeoChecker(BaseChecker):
    """Performs comprehensive SEO analysis."""
    id = "seo"
    label = "SEO Checker"
    description = "Performs comprehensive SEO analysis using AI"
    category = Category.seo
    weight = 5
    prompt_setting = "SEO_PROMPT"
    # Its offline checks are the rule-based tier itself
    offline_in_fallback = False

    def prompt_values(self, content: ContentItem) -> Dict[str, Any]:
        return {
            "title": content.title,
            "body": content.body_text,
            "url": content.url,
        }

    def analyze_offline(self, content: ContentItem) -> List[IssueRecord]:
        return rule_based_issues(content, self.settings)
