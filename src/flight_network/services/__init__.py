"""
Domain services for the Flight Network.

Services orchestrate the interaction between ports (repositories,
algorithms, workers) and the domain logic.
"""

from src.flight_network.services.centrality_manager import (
    CentralityManager,
    centrality_cache_key,
)
from src.flight_network.services.network_analysis_service import (
    NetworkAnalysisService,
)
from src.flight_network.services.path_search_service import PathSearchService

__all__ = [
    "CentralityManager",
    "NetworkAnalysisService",
    "PathSearchService",
    "centrality_cache_key",
]
