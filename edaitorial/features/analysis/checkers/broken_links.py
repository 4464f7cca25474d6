import re
from typing import Any, Dict, List

from edaitorial.features.analysis.checkers.base import BaseChecker
from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import Category, Impact, IssueRecord, Severity
from edaitorial.features.analysis.utils.markup import parse_markup

NODE_REF_RE = re.compile(r"^(?:internal:|entity:node/|/node/)(\d+)/?$")


class BrokenLinksChecker(BaseChecker):
    """Detects empty links and references to content that does not exist."""
    id = "broken_links"
    label = "Broken Links Checker"
    description = "Detects broken links using AI analysis"
    category = Category.links
    weight = 10
    prompt_setting = "BROKEN_LINKS_PROMPT"

    def prompt_values(self, content: ContentItem) -> Dict[str, Any]:
        # Markup is kept: the backend needs the hrefs
        return {
            "body": content.body,
            "available_nodes": content.available_nodes_sample(self.settings.AVAILABLE_NODES_LIMIT),
        }

    def analyze_offline(self, content: ContentItem) -> List[IssueRecord]:
        issues = []
        hrefs = parse_markup(content.body).hrefs
        if not hrefs:
            return issues

        empty_links = sum(1 for href in hrefs if not href.strip() or href.strip() == "#")
        if empty_links > 0:
            issues.append(IssueRecord(
                description=f"{empty_links} empty or hash-only link(s) detected",
                type="Links",
                severity=Severity.medium,
                impact=Impact.medium,
            ))

        broken = self._broken_node_references(hrefs, content.available_nodes)
        if broken:
            issues.append(IssueRecord(
                description=f"{len(broken)} link(s) to missing content: {', '.join(broken[:5])}",
                type="Broken link",
                severity=Severity.high,
                impact=Impact.high,
            ))

        return issues

    @staticmethod
    def _broken_node_references(hrefs: List[str], available_nodes: List[str]) -> List[str]:
        """Internal /node/X references absent from the known identifiers."""
        if not available_nodes:
            # Nothing to compare against, assume the references resolve
            return []

        known = set()
        for node in available_nodes:
            known.add(node)
            match = NODE_REF_RE.match(node)
            if match:
                known.add(match.group(1))

        broken = []
        for href in hrefs:
            match = NODE_REF_RE.match(href.strip())
            if match and match.group(1) not in known and href.strip() not in known:
                broken.append(href.strip())
        return broken
