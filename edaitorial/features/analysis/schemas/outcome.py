from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from edaitorial.features.analysis.schemas.issue import IssueRecord


class OutcomeStatus(str, Enum):
    ok = "ok"
    malformed = "malformed"
    unavailable = "unavailable"
    skipped = "skipped"


class CheckOutcome(BaseModel):
    """
    Result of one call to the checking backend (batch or single checker).

    `ok` with an empty issue list means "nothing found"; `malformed`,
    `unavailable` and `skipped` mean the call could not analyze the content.
    """
    status: OutcomeStatus
    issues: List[IssueRecord] = []
    source: str = ""
    error: Optional[str] = None

    @property
    def responded(self) -> bool:
        """The backend produced an answer, usable or not."""
        return self.status in (OutcomeStatus.ok, OutcomeStatus.malformed)

    @classmethod
    def ok(cls, issues: List[IssueRecord], source: str = "") -> "CheckOutcome":
        return cls(status=OutcomeStatus.ok, issues=issues, source=source)

    @classmethod
    def malformed(cls, error: str, source: str = "") -> "CheckOutcome":
        return cls(status=OutcomeStatus.malformed, source=source, error=error)

    @classmethod
    def unavailable(cls, error: str, source: str = "") -> "CheckOutcome":
        return cls(status=OutcomeStatus.unavailable, source=source, error=error)

    @classmethod
    def skipped(cls, reason: str, source: str = "") -> "CheckOutcome":
        return cls(status=OutcomeStatus.skipped, source=source, error=reason)
