"""
Exception types shared across the analysis engine.

Backend and cache errors are soft failures: the analyzer converts them into
outcomes and keeps going. Only `PublishBlockedError` is meant to reach the
caller, and only through `PublishGate.enforce`.
"""
from typing import List, Optional


class EdaitorialError(Exception):
    """Base class for every error raised by this package."""


class BackendError(EdaitorialError):
    """The checking backend could not produce a response."""


class BackendUnavailableError(BackendError):
    """The backend is unreachable, misconfigured or returned an API error."""


class BackendTimeoutError(BackendUnavailableError):
    """The backend did not answer within the configured timeout."""


class MalformedResponseError(EdaitorialError):
    """The backend answered, but not with a JSON array of issues."""

    def __init__(self, message: str, sample: str = ""):
        super().__init__(message)
        self.sample = sample


class CacheError(EdaitorialError):
    """The determinism cache could not be read or written."""


class PublishBlockedError(EdaitorialError):
    """Publishing was refused because the content scored below the threshold."""

    def __init__(self, score: int, min_score: int, issues: Optional[List[str]] = None):
        super().__init__(
            f"Content score {score}/100 is below the minimum of {min_score} required to publish")
        self.score = score
        self.min_score = min_score
        self.issues = issues or []
