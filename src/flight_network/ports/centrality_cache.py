"""
Centrality Cache port interface.

Content-addressed cache for centrality results, keyed by a hash of the
route set.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from src.flight_network.schemas.centrality import NetworkAnalysisResult


class GraphNotInitializedError(Exception):
    """Raised when the graph cannot be built on first access."""

    pass


@runtime_checkable
class CentralityCache(Protocol):
    """
    Protocol for centrality result caches.

    All implementations must be thread-safe for concurrent access.
    """

    def get(self, key: str) -> Optional[NetworkAnalysisResult]:
        """
        Get cached result or None on miss.

        Expired entries are misses.
        """
        ...

    def set(self, key: str, data: NetworkAnalysisResult) -> None:
        """Store a result, resetting its age."""
        ...

    def invalidate(self, key: str) -> None:
        """Drop one entry."""
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...

    def is_stale(self, key: str) -> bool:
        """True if the key is absent or its TTL has expired."""
        ...
