"""
Shared fixtures for performance benchmarks.

Key design principle: Pre-load expensive resources (dataset, graph) once
at module scope, then benchmark only the hot paths.
"""

from typing import Generator

import pytest

from src.flight_network.adapters.algorithms.dijkstra_adapter import DijkstraPathFinder
from src.flight_network.adapters.data_providers.indonesia_provider import (
    IndonesiaNetworkProvider,
)
from src.flight_network.adapters.repositories.network_graph_repo import (
    NetworkGraphRepository,
    NetworkSnapshot,
)
from src.flight_network.application import FlightNetwork
from src.flight_network.config import NetworkSettings
from src.network_graph.graph import FlightGraph


@pytest.fixture(scope="module")
def data_provider() -> IndonesiaNetworkProvider:
    """Bundled dataset provider (module-scoped)."""
    return IndonesiaNetworkProvider()


@pytest.fixture(scope="module")
def preloaded_snapshot(data_provider: IndonesiaNetworkProvider) -> NetworkSnapshot:
    """
    Snapshot with the graph already built (module-scoped).

    The cold start (table validation + haversine + graph build) happens
    once here. All subsequent benchmarks use the built graph.
    """
    return NetworkGraphRepository(data_provider).get_snapshot()


@pytest.fixture(scope="module")
def preloaded_graph(preloaded_snapshot: NetworkSnapshot) -> FlightGraph:
    return preloaded_snapshot.graph


@pytest.fixture(scope="module")
def path_finder() -> DijkstraPathFinder:
    return DijkstraPathFinder()


@pytest.fixture(scope="module")
def warm_network() -> Generator[FlightNetwork, None, None]:
    """FlightNetwork with graph and centrality cache already warm."""
    network = FlightNetwork(settings=NetworkSettings(use_worker=False))
    network.preload(block=True)
    yield network
    network.shutdown()
