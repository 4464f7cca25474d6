import re
from typing import Dict, List

from edaitorial.features.analysis.checkers.base import BaseChecker
from edaitorial.features.analysis.schemas.content import ContentItem
from edaitorial.features.analysis.schemas.issue import Category, Impact, IssueRecord, Severity

COMMON_TYPOS: Dict[str, str] = {
    "teh": "the",
    "recieve": "receive",
    "definately": "definitely",
    "goverment": "government",
    "alot": "a lot",
    "seperate": "separate",
    "occured": "occurred",
    "untill": "until",
}

# Function words that are almost never doubled on purpose; "had had" and
# "that that" are grammatical and stay out
DOUBLED_WORD_CANDIDATES = (
    "the", "a", "an", "and", "or", "but", "of", "to", "in", "on", "at",
    "for", "with", "from", "by", "as", "it", "we", "you", "this",
)

REPEATED_WORD_RE = re.compile(
    r"\b(" + "|".join(DOUBLED_WORD_CANDIDATES) + r")\s+\1\b", re.IGNORECASE)


def find_typos(text: str) -> List[str]:
    found = []
    for typo, correct in COMMON_TYPOS.items():
        if re.search(rf"\b{typo}\b", text, re.IGNORECASE):
            found.append(f"{typo} → {correct}")
    return found


class TyposChecker(BaseChecker):
    """Detects typos and spelling errors."""
    id = "typos"
    label = "Typos Checker"
    description = "Detects typos and spelling errors using AI"
    category = Category.typos
    weight = 20
    prompt_setting = "TYPOS_PROMPT"

    def analyze_offline(self, content: ContentItem) -> List[IssueRecord]:
        issues = []

        title_typos = find_typos(content.title)
        if title_typos:
            issues.append(IssueRecord(
                description="Possible typos in title: " + ", ".join(title_typos),
                type="Typos",
                severity=Severity.medium,
                impact=Impact.medium,
            ))

        body_text = content.body_text
        body_typos = find_typos(body_text)
        body_typos.extend(
            f"repeated word \"{word}\"" for word in REPEATED_WORD_RE.findall(body_text))
        if body_typos:
            issues.append(IssueRecord(
                description=f"{len(body_typos)} possible typos detected: " + ", ".join(body_typos[:5]),
                type="Typos",
                severity=Severity.high if len(body_typos) > 5 else Severity.medium,
                impact=Impact.medium,
            ))

        return issues
