"""
Port interfaces for the Flight Network.

Ports define the abstract interfaces (ABCs and Protocols) that services
use to talk to data sources, algorithms, caches and the background
worker. Adapters implement them.
"""

from src.flight_network.ports.centrality_cache import (
    CentralityCache,
    GraphNotInitializedError,
)
from src.flight_network.ports.centrality_worker import CentralityWorker
from src.flight_network.ports.network_data_provider import NetworkDataProvider
from src.flight_network.ports.path_finder import PathFinder

__all__ = [
    "CentralityCache",
    "CentralityWorker",
    "GraphNotInitializedError",
    "NetworkDataProvider",
    "PathFinder",
]
