import logging
from typing import Optional, Type

import redis
from pydantic import BaseModel, ValidationError

from edaitorial.platform.exceptions import CacheError

logger = logging.getLogger(__name__)


class RedisAnalysisCache:
    """
    Fingerprint cache shared between processes through Redis.

    Entries are the JSON form of `model` stored with SETEX, so expiry is
    handled by Redis and concurrent writers are last-write-wins.
    """

    def __init__(self, client: redis.Redis, model: Type[BaseModel], key_prefix: str = "edaitorial:analysis:"):
        self.client = client
        self.model = model
        self.key_prefix = key_prefix

    @classmethod
    def from_url(
        cls, url: str, model: Type[BaseModel], key_prefix: str = "edaitorial:analysis:"
    ) -> "RedisAnalysisCache":
        return cls(redis.from_url(url, decode_responses=True), model, key_prefix=key_prefix)

    def _key(self, fingerprint: str) -> str:
        return f"{self.key_prefix}{fingerprint}"

    def get(self, fingerprint: str) -> Optional[BaseModel]:
        try:
            payload = self.client.get(self._key(fingerprint))
        except redis.RedisError as e:
            raise CacheError(f"Failed to read cache entry: {e}") from e

        if payload is None:
            return None

        try:
            return self.model.model_validate_json(payload)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable cache entry {fingerprint[:12]}: {e}")
            self.delete(fingerprint)
            return None

    def set(self, fingerprint: str, result: BaseModel, ttl: int) -> None:
        if ttl <= 0:
            return
        try:
            self.client.setex(self._key(fingerprint), ttl, result.model_dump_json())
        except redis.RedisError as e:
            raise CacheError(f"Failed to write cache entry: {e}") from e

    def delete(self, fingerprint: str) -> None:
        try:
            self.client.delete(self._key(fingerprint))
        except redis.RedisError as e:
            raise CacheError(f"Failed to delete cache entry: {e}") from e
