"""
Network Analysis Service - structure and centrality of the current graph.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List

from src.flight_network.schemas.airport import Airport
from src.flight_network.schemas.centrality import NetworkAnalysisResult
from src.network_graph.analysis import (
    AirlinePerformance,
    GraphAnalysis,
    airline_performance,
    graph_analysis,
    is_connected,
)

if TYPE_CHECKING:
    from src.flight_network.adapters.repositories.network_graph_repo import (
        NetworkGraphRepository,
    )
    from src.flight_network.services.centrality_manager import CentralityManager

logger = logging.getLogger(__name__)


class NetworkAnalysisService:
    """
    Read-only analyses over the current graph snapshot.

    Attributes:
        _graph_repo: Repository providing the graph snapshot.
        _centrality: Manager for cached centrality computation.
    """

    def __init__(
        self,
        graph_repo: NetworkGraphRepository,
        centrality_manager: CentralityManager,
    ) -> None:
        self._graph_repo = graph_repo
        self._centrality = centrality_manager

    def get_graph_analysis(self) -> GraphAnalysis:
        return graph_analysis(self._graph_repo.get_graph())

    def is_connected(self) -> bool:
        connected = is_connected(self._graph_repo.get_graph())
        logger.debug("Network connected: %s", connected)
        return connected

    def get_airline_performance(self) -> Dict[str, AirlinePerformance]:
        return airline_performance(self._graph_repo.get_graph())

    def get_airports(self) -> List[Airport]:
        """Reference airports of the current dataset, in table order."""
        return list(self._graph_repo.get_snapshot().airports)

    def calculate_centrality(self) -> NetworkAnalysisResult:
        """
        Centrality of the current dataset.

        Raises:
            CentralityComputationError: If computation failed, fallback
                included.
        """
        snapshot = self._graph_repo.get_snapshot()
        return self._centrality.calculate_centrality(
            snapshot.routes, snapshot.airports, snapshot.airline_speeds
        )

    def preload_centrality(self, block: bool = True):
        snapshot = self._graph_repo.get_snapshot()
        return self._centrality.preload(
            snapshot.routes, snapshot.airports, snapshot.airline_speeds, block=block
        )
