from typing import Optional

from edaitorial.features.analysis.schemas.analysis import AnalysisResult
from edaitorial.features.analysis.services.analyzer import ContentAnalyzer
from edaitorial.platform.cache import build_analysis_cache
from edaitorial.platform.config import Settings, get_settings
from edaitorial.platform.llm import OpenRouterBackend


def get_content_analyzer(settings: Optional[Settings] = None) -> ContentAnalyzer:
    """
    Wire a ContentAnalyzer from configuration.

    - No LLM_API_KEY → no backend, analysis runs the rule-based tier
    - REDIS_URL set → results cached in Redis, otherwise in process memory
    """
    settings = settings or get_settings()
    backend = OpenRouterBackend(settings) if settings.USE_AI and settings.LLM_API_KEY else None
    cache = build_analysis_cache(settings, AnalysisResult)
    return ContentAnalyzer(settings, backend=backend, cache=cache)
