from edaitorial.features.analysis.checkers.accessibility import AccessibilityChecker
from edaitorial.features.analysis.checkers.base import BaseChecker
from edaitorial.features.analysis.checkers.broken_links import BrokenLinksChecker
from edaitorial.features.analysis.checkers.registry import (
    CHECKER_REGISTRY,
    build_checkers,
    get_checkers_by_category,
)
from edaitorial.features.analysis.checkers.seo import SeoChecker
from edaitorial.features.analysis.checkers.suggestions import SuggestionsChecker
from edaitorial.features.analysis.checkers.typos import TyposChecker

__all__ = [
    "AccessibilityChecker",
    "BaseChecker",
    "BrokenLinksChecker",
    "CHECKER_REGISTRY",
    "SeoChecker",
    "SuggestionsChecker",
    "TyposChecker",
    "build_checkers",
    "get_checkers_by_category",
]
