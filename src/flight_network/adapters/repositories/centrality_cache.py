"""
In-memory centrality cache with a fixed TTL per entry.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from src.flight_network.schemas.centrality import NetworkAnalysisResult

logger = logging.getLogger(__name__)

DEFAULT_CENTRALITY_TTL = timedelta(minutes=30)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    data: NetworkAnalysisResult
    created_at: datetime


class InMemoryCentralityCache:
    """
    Per-process cache of centrality results.

    Entries expire ``ttl`` after they were stored; an expired entry is
    dropped on the next lookup. Thread-safe for concurrent access within
    a single process.

    Attributes:
        _entries: key -> CacheEntry.
        _ttl: Time-to-live for entries.
        _clock: Source of the current time (injectable for tests).
        _lock: Lock for thread-safe access.
    """

    def __init__(
        self,
        ttl: timedelta = DEFAULT_CENTRALITY_TTL,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def _expired(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.created_at > self._ttl

    def get(self, key: str) -> Optional[NetworkAnalysisResult]:
        """Get cached result or None on miss or expiry."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._expired(entry):
                logger.debug("Cache entry expired: %s", key)
                del self._entries[key]
                return None
            return entry.data

    def set(self, key: str, data: NetworkAnalysisResult) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(key=key, data=data, created_at=self._clock())

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def is_stale(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is None or self._expired(entry)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
