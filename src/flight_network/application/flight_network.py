"""
FlightNetwork - Public API for the flight network engine.

Acts as a Facade/Factory: wires the data provider, graph repository,
path finder and centrality manager together, and exposes the inbound
operations of the engine.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from datetime import timedelta
from functools import partial
from typing import Dict, Iterable, List, Mapping, Optional

from src.flight_network.adapters.algorithms.centrality_adapter import (
    compute_network_centrality,
)
from src.flight_network.adapters.algorithms.dijkstra_adapter import DijkstraPathFinder
from src.flight_network.adapters.data_providers.in_memory_provider import (
    InMemoryNetworkProvider,
)
from src.flight_network.adapters.data_providers.indonesia_provider import (
    IndonesiaNetworkProvider,
)
from src.flight_network.adapters.repositories.centrality_cache import (
    InMemoryCentralityCache,
)
from src.flight_network.adapters.repositories.network_graph_repo import (
    NetworkGraphRepository,
)
from src.flight_network.adapters.workers.thread_worker import ThreadCentralityWorker
from src.flight_network.config import NetworkSettings
from src.flight_network.ports.centrality_cache import CentralityCache
from src.flight_network.ports.centrality_worker import CentralityWorker
from src.flight_network.ports.network_data_provider import NetworkDataProvider
from src.flight_network.ports.path_finder import PathFinder
from src.flight_network.schemas.airport import (
    Airport,
    AirportInput,
    RouteInput,
    coerce_airports,
    coerce_routes,
)
from src.flight_network.schemas.centrality import NetworkAnalysisResult
from src.flight_network.schemas.path import PathResult
from src.flight_network.services.centrality_manager import CentralityManager
from src.flight_network.services.network_analysis_service import (
    NetworkAnalysisService,
)
from src.flight_network.services.path_search_service import PathSearchService
from src.network_graph.analysis import AirlinePerformance, GraphAnalysis
from src.network_graph.graph import FlightGraph

logger = logging.getLogger(__name__)


class FlightNetwork:
    """
    Public API for the flight network engine.

    Construct one per application, use it from any number of threads,
    and call ``shutdown()`` (or use it as a context manager) when done.

    Example usage:
        >>> with FlightNetwork() as network:
        ...     path = network.find_shortest_path("CGK", "DJJ")
        ...     print(path.path, round(path.total_distance))

    Attributes:
        _settings: Effective settings.
        _graph_repo: Graph snapshot repository.
        _centrality: Centrality manager (owns the worker).
        _paths: Path search service.
        _analysis: Network analysis service.
    """

    def __init__(
        self,
        data_provider: Optional[NetworkDataProvider] = None,
        routes: Optional[Iterable[RouteInput]] = None,
        airports: Optional[Iterable[AirportInput]] = None,
        airline_speeds: Optional[Mapping[str, float]] = None,
        settings: Optional[NetworkSettings] = None,
        path_finder: Optional[PathFinder] = None,
        centrality_cache: Optional[CentralityCache] = None,
        centrality_worker: Optional[CentralityWorker] = None,
        cache_ttl: Optional[timedelta] = None,
        worker_timeout: Optional[float] = None,
        default_speed: Optional[float] = None,
        use_worker: Optional[bool] = None,
    ) -> None:
        """
        Initialize the network with optional custom dependencies.

        Args:
            data_provider: Dataset source. Defaults to the bundled
                Indonesian network unless ``routes`` is given.
            routes: Explicit route records (wrapped in an in-memory provider).
            airports: Reference airports for ``routes``.
            airline_speeds: Speed table for ``routes``.
            settings: Base settings. Defaults to ``NetworkSettings.from_env()``.
            path_finder: Custom algorithm. Defaults to DijkstraPathFinder.
            centrality_cache: Custom cache. Defaults to an in-memory TTL cache.
            centrality_worker: Custom worker. Defaults to a thread worker
                when workers are enabled.
            cache_ttl: Overrides settings.cache_ttl.
            worker_timeout: Overrides settings.worker_timeout.
            default_speed: Overrides settings.default_speed.
            use_worker: Overrides settings.use_worker.
        """
        base = settings or NetworkSettings.from_env()
        self._settings = NetworkSettings(
            cache_ttl=cache_ttl if cache_ttl is not None else base.cache_ttl,
            worker_timeout=(
                worker_timeout if worker_timeout is not None else base.worker_timeout
            ),
            default_speed=default_speed if default_speed is not None else base.default_speed,
            use_worker=use_worker if use_worker is not None else base.use_worker,
            log_level=base.log_level,
        )

        # Initialize data provider
        if data_provider is not None:
            self._data_provider = data_provider
        elif routes is not None:
            self._data_provider = InMemoryNetworkProvider(
                routes=routes,
                airports=airports or (),
                airline_speeds=dict(airline_speeds or {}),
            )
        else:
            self._data_provider = IndonesiaNetworkProvider()

        self._graph_repo = NetworkGraphRepository(
            data_provider=self._data_provider,
            default_speed=self._settings.default_speed,
        )

        # Initialize centrality worker and manager
        compute = partial(
            compute_network_centrality, default_speed=self._settings.default_speed
        )
        worker = centrality_worker
        if worker is None and self._settings.use_worker:
            worker = ThreadCentralityWorker(compute=compute)

        self._centrality = CentralityManager(
            cache=(
                centrality_cache
                if centrality_cache is not None
                else InMemoryCentralityCache(ttl=self._settings.cache_ttl)
            ),
            worker=worker,
            timeout=self._settings.worker_timeout,
            default_speed=self._settings.default_speed,
        )

        self._path_finder = path_finder or DijkstraPathFinder()
        self._paths = PathSearchService(self._graph_repo, self._path_finder)
        self._analysis = NetworkAnalysisService(self._graph_repo, self._centrality)

        logger.info(
            "FlightNetwork initialized with %s data and %s algorithm (worker: %s)",
            self._data_provider.name,
            self._path_finder.name,
            "on" if worker is not None else "off",
        )

    # =========================================================================
    # Graph lifecycle
    # =========================================================================

    def build_graph(
        self,
        routes: Iterable[RouteInput],
        airports: Optional[Iterable[AirportInput]] = None,
        airline_speeds: Optional[Mapping[str, float]] = None,
    ) -> FlightGraph:
        """
        Replace the current dataset with an explicit route list.

        Args:
            routes: Route records or mappings.
            airports: Reference airports. None keeps the current ones.
            airline_speeds: Speed table. None keeps the current one.

        Returns:
            The newly built graph.
        """
        snapshot = self._graph_repo.load(
            coerce_routes(routes),
            coerce_airports(airports) if airports is not None else None,
            dict(airline_speeds) if airline_speeds is not None else None,
        )
        return snapshot.graph

    @property
    def graph(self) -> FlightGraph:
        return self._graph_repo.get_graph()

    @property
    def settings(self) -> NetworkSettings:
        return self._settings

    # =========================================================================
    # Path search
    # =========================================================================

    def find_shortest_path(self, start: str, end: str) -> Optional[PathResult]:
        return self._paths.find_shortest_path(start, end)

    def find_k_shortest_paths(self, start: str, end: str, k: int = 3) -> List[PathResult]:
        return self._paths.find_k_shortest_paths(start, end, k)

    # =========================================================================
    # Centrality
    # =========================================================================

    def calculate_centrality(
        self,
        routes: Optional[Iterable[RouteInput]] = None,
        airports: Optional[Iterable[AirportInput]] = None,
    ) -> NetworkAnalysisResult:
        """
        Centrality for a route set; the current dataset when routes is None.

        Raises:
            CentralityComputationError: If computation failed, fallback
                included.
        """
        if routes is None:
            return self._analysis.calculate_centrality()

        snapshot = self._graph_repo.get_snapshot()
        return self._centrality.calculate_centrality(
            routes,
            airports if airports is not None else snapshot.airports,
            snapshot.airline_speeds,
        )

    def preload(self, block: bool = True) -> Optional[Future]:
        """Warm the centrality cache for the current dataset."""
        return self._analysis.preload_centrality(block=block)

    def clear_centrality_cache(self) -> None:
        self._centrality.clear_cache()

    # =========================================================================
    # Structure
    # =========================================================================

    def get_graph_analysis(self) -> GraphAnalysis:
        return self._analysis.get_graph_analysis()

    def is_connected(self) -> bool:
        return self._analysis.is_connected()

    def get_airline_performance(self) -> Dict[str, AirlinePerformance]:
        return self._analysis.get_airline_performance()

    def get_airports(self) -> List[Airport]:
        return self._analysis.get_airports()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def shutdown(self) -> None:
        """Release the background worker and executors."""
        self._centrality.close()
        logger.info("FlightNetwork shut down")

    def __enter__(self) -> "FlightNetwork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
