from threading import Lock
from time import monotonic
from typing import Callable, Dict, Optional, Tuple

from pydantic import BaseModel


class InMemoryAnalysisCache:
    """
    Process-wide fingerprint -> result model store with per-entry TTL.

    Reads and writes are serialized by a lock; concurrent writers for the
    same fingerprint resolve as last-write-wins.
    """

    def __init__(self, clock: Callable[[], float] = monotonic):
        self._entries: Dict[str, Tuple[float, BaseModel]] = {}
        self._lock = Lock()
        self._clock = clock

    def get(self, fingerprint: str) -> Optional[BaseModel]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(fingerprint)
            if entry is None:
                return None
            expires_at, result = entry
            if expires_at <= now:
                del self._entries[fingerprint]
                return None
            return result.model_copy(deep=True)

    def set(self, fingerprint: str, result: BaseModel, ttl: int) -> None:
        if ttl <= 0:
            return
        expires_at = self._clock() + ttl
        with self._lock:
            self._entries[fingerprint] = (expires_at, result.model_copy(deep=True))

    def delete(self, fingerprint: str) -> None:
        with self._lock:
            self._entries.pop(fingerprint, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
