"""
Determinism cache for analysis results.

Kept apart from any generic HTTP/query cache: its purpose is returning the
same result for unchanged content, since the backend is not deterministic.
Values are pydantic models; the Redis store needs the model class to read
them back.
"""
from typing import Optional, Protocol, Type

from pydantic import BaseModel

from edaitorial.platform.cache.memory import InMemoryAnalysisCache
from edaitorial.platform.cache.redis import RedisAnalysisCache
from edaitorial.platform.config import Settings


class AnalysisCache(Protocol):
    def get(self, fingerprint: str) -> Optional[BaseModel]:
        ...

    def set(self, fingerprint: str, result: BaseModel, ttl: int) -> None:
        ...


_memory_cache = InMemoryAnalysisCache()


def build_analysis_cache(settings: Settings, model: Type[BaseModel]) -> Optional[AnalysisCache]:
    """Redis when REDIS_URL is set, otherwise the process-wide memory store."""
    if not settings.CACHE_ANALYSIS_RESULTS:
        return None
    if settings.REDIS_URL:
        return RedisAnalysisCache.from_url(settings.REDIS_URL, model, key_prefix=settings.CACHE_KEY_PREFIX)
    return _memory_cache


__all__ = [
    "AnalysisCache",
    "InMemoryAnalysisCache",
    "RedisAnalysisCache",
    "build_analysis_cache",
]
