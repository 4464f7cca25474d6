"""
Explicit checker registry.

Checkers are registered here at import time by id; there is no runtime
class scanning. Order of execution is ascending weight.
"""
from typing import Dict, List, Mapping, Optional, Type

from edaitorial.features.analysis.checkers.accessibility import AccessibilityChecker
from edaitorial.features.analysis.checkers.base import BaseChecker
from edaitorial.features.analysis.checkers.broken_links import BrokenLinksChecker
from edaitorial.features.analysis.checkers.seo import SeoChecker
from edaitorial.features.analysis.checkers.suggestions import SuggestionsChecker
from edaitorial.features.analysis.checkers.typos import TyposChecker
from edaitorial.platform.config import Settings
from edaitorial.platform.llm import ChatBackend

CHECKER_REGISTRY: Dict[str, Type[BaseChecker]] = {
    checker.id: checker
    for checker in (
        SeoChecker,
        BrokenLinksChecker,
        AccessibilityChecker,
        TyposChecker,
        SuggestionsChecker,
    )
}


def build_checkers(
    settings: Settings,
    backend: Optional[ChatBackend] = None,
    registry: Optional[Mapping[str, Type[BaseChecker]]] = None,
) -> List[BaseChecker]:
    """Instantiate every registered checker, sorted by weight then id."""
    registry = CHECKER_REGISTRY if registry is None else registry
    checkers = [checker_cls(settings, backend) for checker_cls in registry.values()]
    return sorted(checkers, key=lambda checker: (checker.weight, checker.id))


def get_checkers_by_category(
    registry: Optional[Mapping[str, Type[BaseChecker]]] = None,
) -> Dict[str, List[Type[BaseChecker]]]:
    registry = CHECKER_REGISTRY if registry is None else registry
    grouped: Dict[str, List[Type[BaseChecker]]] = {}
    for checker_cls in registry.values():
        grouped.setdefault(checker_cls.category.value, []).append(checker_cls)
    return grouped
