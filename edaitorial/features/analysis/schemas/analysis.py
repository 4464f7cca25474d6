"""
Analysis Schemas

Output envelope returned by the content analyzer for one content item.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, computed_field

from edaitorial.features.analysis.schemas.issue import CATEGORIES, IssueRecord


class ScoreClass(str, Enum):
    """Five-band quality label derived from the overall score"""
    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"
    critical = "critical"


class SuggestionPriority(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class AnalysisSource(str, Enum):
    """Which tier of the fallback chain produced the issues"""
    batch = "batch"
    individual = "individual"
    rule_based = "rule_based"
    failed = "failed"


class Suggestion(BaseModel):
    text: str
    priority: SuggestionPriority


class AnalysisResult(BaseModel):
    overall_score: int = Field(ge=0, le=100)
    score_class: ScoreClass
    category_scores: Dict[str, int]
    issues: List[IssueRecord] = []
    suggestions: List[Suggestion] = []
    source: AnalysisSource
    fingerprint: Optional[str] = None
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        json_schema_extra = {
            "example": {
                "overall_score": 95,
                "score_class": "excellent",
                "category_scores": {
                    "seo": 75,
                    "accessibility": 100,
                    "typos": 100,
                    "links": 100,
                    "content": 100
                },
                "issues": [
                    {
                        "description": "Title length (12 chars) not optimal (30-60 recommended)",
                        "type": "SEO",
                        "severity": "Critical",
                        "impact": "High"
                    }
                ],
                "suggestions": [
                    {
                        "text": "Your content is excellent! Consider adding images or video to enhance engagement.",
                        "priority": "low"
                    }
                ],
                "source": "batch",
                "fingerprint": "5f1c...",
                "analyzed_at": "2026-10-19T10:30:00Z"
            }
        }

    @computed_field
    @property
    def grouped_issues(self) -> Dict[str, List[IssueRecord]]:
        """Issues grouped by their raw type string, in first-seen order."""
        grouped: Dict[str, List[IssueRecord]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.type or "Other", []).append(issue)
        return grouped

    @classmethod
    def failed(cls, fingerprint: Optional[str] = None) -> "AnalysisResult":
        """Fail-safe result: nothing could be analyzed, treat as not ready."""
        return cls(
            overall_score=0,
            score_class=ScoreClass.critical,
            category_scores={category: 0 for category in CATEGORIES},
            issues=[],
            suggestions=[],
            source=AnalysisSource.failed,
            fingerprint=fingerprint,
        )
