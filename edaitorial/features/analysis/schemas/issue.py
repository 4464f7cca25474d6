"""
Issue Schemas

The canonical shape of a single finding. Raw issue objects coming from the
checking backend are loosely typed; everything past `IssueRecord.from_raw`
carries values from the closed vocabularies below.
"""
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator


class Severity(str, Enum):
    """Issue severity levels, drive point deductions"""
    critical = "Critical"
    high = "High"
    medium = "Medium"
    low = "Low"


class Impact(str, Enum):
    """Informational impact level, does not affect scoring"""
    high = "High"
    medium = "Medium"
    low = "Low"


class Category(str, Enum):
    """Fixed partition used for sub-scoring"""
    seo = "seo"
    accessibility = "accessibility"
    typos = "typos"
    links = "links"
    content = "content"


CATEGORIES = [category.value for category in Category]

DEFAULT_DESCRIPTION = "Unknown issue"
DEFAULT_TYPE = "Content"

_SEVERITIES = {severity.value: severity for severity in Severity}
_IMPACTS = {impact.value: impact for impact in Impact}


class IssueRecord(BaseModel):
    """
    One detected problem for a single content item.

    Never mutated after creation, only aggregated.
    """
    model_config = ConfigDict(frozen=True)

    description: str = DEFAULT_DESCRIPTION
    type: str = DEFAULT_TYPE
    severity: Severity = Severity.low
    impact: Impact = Impact.low

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        if value is None:
            return DEFAULT_DESCRIPTION
        return value if isinstance(value, str) else str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> str:
        if value is None:
            return DEFAULT_TYPE
        return value if isinstance(value, str) else str(value)

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: Any) -> Severity:
        if isinstance(value, Severity):
            return value
        # Exact match only: "critical" or "urgent" fall back to Low
        return _SEVERITIES.get(value, Severity.low) if isinstance(value, str) else Severity.low

    @field_validator("impact", mode="before")
    @classmethod
    def _coerce_impact(cls, value: Any) -> Impact:
        if isinstance(value, Impact):
            return value
        return _IMPACTS.get(value, Impact.low) if isinstance(value, str) else Impact.low

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "IssueRecord":
        """Build a validated record from an untyped issue object."""
        return cls.model_validate({
            "description": raw.get("description"),
            "type": raw.get("type"),
            "severity": raw.get("severity"),
            "impact": raw.get("impact"),
        })
