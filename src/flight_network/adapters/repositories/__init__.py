"""
Repository adapters for graph snapshots and centrality results.
"""

from src.flight_network.adapters.repositories.centrality_cache import (
    CacheEntry,
    InMemoryCentralityCache,
)
from src.flight_network.adapters.repositories.network_graph_repo import (
    NetworkGraphRepository,
    NetworkSnapshot,
    compute_routes_version,
)

__all__ = [
    "CacheEntry",
    "InMemoryCentralityCache",
    "NetworkGraphRepository",
    "NetworkSnapshot",
    "compute_routes_version",
]
