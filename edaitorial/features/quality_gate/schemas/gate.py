"""
Quality Gate Schemas

Decision returned to the editorial workflow before a content item moves to
the published state.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel

from edaitorial.features.analysis.schemas.analysis import ScoreClass


class IssueSummary(BaseModel):
    """Minimal issue line shown to the editor when publishing is blocked."""
    description: str
    type: str
    severity: str

    class Config:
        json_schema_extra = {
            "example": {
                "description": "Title length (12 chars) not optimal (30-60 recommended)",
                "type": "SEO",
                "severity": "Medium"
            }
        }


class GateDecision(BaseModel):
    allowed: bool
    # False when the gate was bypassed (disabled or content type not covered)
    checked: bool
    passed: bool
    score: Optional[int] = None
    score_class: Optional[ScoreClass] = None
    min_score: int
    message: str
    category_scores: Dict[str, int] = {}
    issues: List[IssueSummary] = []

    class Config:
        json_schema_extra = {
            "example": {
                "allowed": False,
                "checked": True,
                "passed": False,
                "score": 62,
                "score_class": "fair",
                "min_score": 80,
                "message": "Fair content. Several improvements recommended.",
                "category_scores": {
                    "seo": 40,
                    "accessibility": 85,
                    "typos": 70,
                    "links": 100,
                    "content": 15
                },
                "issues": []
            }
        }
