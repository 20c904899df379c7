"""
Algorithm adapters for the flight network.
"""

from src.flight_network.adapters.algorithms.centrality_adapter import (
    compute_network_centrality,
)
from src.flight_network.adapters.algorithms.dijkstra_adapter import (
    DijkstraPathFinder,
)

__all__ = [
    "DijkstraPathFinder",
    "compute_network_centrality",
]
