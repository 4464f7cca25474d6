"""
Base class for content checkers.

A checker is a named source of findings for one category. With AI it
renders its prompt template and asks the checking backend; offline it
applies cheap heuristics that never touch the network.
"""
import logging
from typing import Any, Dict, List, Optional

from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import Category, IssueRecord
from edaitorial.features.analysis.schemas.outcome import CheckOutcome
from edaitorial.features.analysis.services.checking import request_issues
from edaitorial.features.analysis.utils.prompt import render_prompt
from edaitorial.platform.config import Settings
from edaitorial.platform.llm import ChatBackend

logger = logging.getLogger(__name__)


class BaseChecker:
    id: str = ""
    label: str = ""
    description: str = ""
    category: Category = Category.content
    weight: int = 0
    # Name of the Settings field holding this checker's prompt template
    prompt_setting: str = ""
    # Offline heuristics join the rule-based tier when RULE_BASED_CHECKERS is on
    offline_in_fallback: bool = True

    def __init__(self, settings: Settings, backend: Optional[ChatBackend] = None):
        self.settings = settings
        self.backend = backend

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} weight={self.weight}>"

    def is_enabled(self) -> bool:
        enabled = self.settings.ENABLED_CHECKERS
        # If no specific checkers are configured, all are enabled by default
        return not enabled or self.id in enabled

    @property
    def prompt_template(self) -> str:
        return getattr(self.settings, self.prompt_setting, "") or ""

    def prompt_values(self, content: ContentItem) -> Dict[str, Any]:
        return {
            "title": content.title,
            "body": content.body_text,
        }

    def build_prompt(self, content: ContentItem) -> str:
        return render_prompt(self.prompt_template, self.prompt_values(content))

    def analyze(self, content: ContentItem) -> CheckOutcome:
        """Ask the checking backend for this checker's findings."""
        if self.backend is None:
            return CheckOutcome.skipped("No checking backend configured", source=self.id)

        if not self.prompt_template.strip():
            logger.info(f"[{self.id}] Prompt template not configured, skipping")
            return CheckOutcome.skipped("Prompt template not configured", source=self.id)

        return request_issues(self.backend, self.build_prompt(content), source=self.id)

    def analyze_offline(self, content: ContentItem) -> List[IssueRecord]:
        """Rule-based findings, no network calls."""
        return []
