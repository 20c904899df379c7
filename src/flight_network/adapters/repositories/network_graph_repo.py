"""
Network Graph Repository - one immutable graph snapshot per dataset.

The snapshot bundles the built FlightGraph with the records it was built
from. A new dataset means a new snapshot; the old one is never mutated,
so readers holding it keep a consistent view.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Tuple

from src.flight_network.ports.centrality_cache import GraphNotInitializedError
from src.flight_network.schemas.airport import Airport, RouteEdge
from src.network_graph.graph import DEFAULT_SPEED_KMH, FlightGraph, build_graph

if TYPE_CHECKING:
    from src.flight_network.ports.network_data_provider import NetworkDataProvider

logger = logging.getLogger(__name__)


def compute_routes_version(routes: Iterable[RouteEdge]) -> str:
    """Short content hash of a route list, order-sensitive."""
    payload = json.dumps([r.to_dict() for r in routes], sort_keys=True)
    return hashlib.md5(payload.encode()).hexdigest()[:12]


@dataclass(frozen=True)
class NetworkSnapshot:
    """
    A built graph plus the records behind it.

    Attributes:
        graph: Immutable flight graph.
        routes: Route list the graph was built from, in input order.
        airports: Reference airports.
        airline_speeds: Cruise speed per airline used for edges.
        built_at: Timestamp when the snapshot was built.
        version: Content hash of the routes.
    """

    graph: FlightGraph
    routes: Tuple[RouteEdge, ...]
    airports: Tuple[Airport, ...]
    airline_speeds: Dict[str, float]
    built_at: datetime
    version: str


class NetworkGraphRepository:
    """
    Lazily builds and holds the current NetworkSnapshot.

    First access builds from the data provider (cold start, blocking,
    double-checked under a lock). ``load`` swaps in a snapshot built from
    explicit routes; readers see either the old or the new snapshot.

    Usage:
        >>> repo = NetworkGraphRepository(IndonesiaNetworkProvider())
        >>> snapshot = repo.get_snapshot()
        >>> snapshot.graph
        FlightGraph(nodes=..., edges=...)
    """

    def __init__(
        self,
        data_provider: Optional[NetworkDataProvider] = None,
        default_speed: float = DEFAULT_SPEED_KMH,
    ) -> None:
        """
        Initialize the repository.

        Args:
            data_provider: Source for the initial dataset. Without one,
                the repository stays empty until ``load`` is called.
            default_speed: Cruise speed for airlines without a known speed.
        """
        self._provider = data_provider
        self._default_speed = default_speed
        self._snapshot: Optional[NetworkSnapshot] = None
        self._lock = threading.Lock()

    def get_snapshot(self) -> NetworkSnapshot:
        """
        Get the current snapshot, building it on first access.

        Raises:
            GraphNotInitializedError: If there is no provider and nothing
                was loaded, or the provider fails.
        """
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        with self._lock:
            # Double-check after acquiring lock
            if self._snapshot is not None:
                return self._snapshot

            if self._provider is None:
                raise GraphNotInitializedError(
                    "No data provider configured and no routes loaded"
                )

            try:
                self._snapshot = self._build(
                    routes=self._provider.get_routes(),
                    airports=self._provider.get_airports(),
                    airline_speeds=self._provider.get_airline_speeds(),
                )
            except Exception as e:
                logger.error("Cold start failed: %s", e)
                raise GraphNotInitializedError(
                    f"Failed to initialize flight graph: {e}"
                ) from e

            logger.info(
                "Initial graph loaded from %s: %d airports, %d edges",
                self._provider.name,
                len(self._snapshot.graph),
                self._snapshot.graph.edge_count,
            )
            return self._snapshot

    def get_graph(self) -> FlightGraph:
        return self.get_snapshot().graph

    def load(
        self,
        routes: Iterable[RouteEdge],
        airports: Optional[Iterable[Airport]] = None,
        airline_speeds: Optional[Dict[str, float]] = None,
    ) -> NetworkSnapshot:
        """
        Replace the current snapshot with one built from explicit routes.

        Args:
            routes: New route list.
            airports: Reference airports. None keeps the current ones
                (or the provider's when nothing is loaded yet).
            airline_speeds: Speed table. None keeps the current one.

        Returns:
            The new snapshot.
        """
        routes = list(routes)
        if airports is None or airline_speeds is None:
            current = self._current_or_provider()
            if airports is None:
                airports = current[0]
            if airline_speeds is None:
                airline_speeds = current[1]

        snapshot = self._build(routes, list(airports), airline_speeds)
        with self._lock:
            self._snapshot = snapshot
        logger.info(
            "Graph built: %d airports, %d edges (version %s)",
            len(snapshot.graph),
            snapshot.graph.edge_count,
            snapshot.version,
        )
        return snapshot

    def _current_or_provider(self) -> Tuple[Tuple[Airport, ...], Dict[str, float]]:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot.airports, snapshot.airline_speeds
        if self._provider is not None:
            return tuple(self._provider.get_airports()), self._provider.get_airline_speeds()
        return (), {}

    def _build(
        self,
        routes: Iterable[RouteEdge],
        airports: Iterable[Airport],
        airline_speeds: Dict[str, float],
    ) -> NetworkSnapshot:
        routes = tuple(routes)
        airports = tuple(airports)
        graph = build_graph(routes, airports, airline_speeds, self._default_speed)
        return NetworkSnapshot(
            graph=graph,
            routes=routes,
            airports=airports,
            airline_speeds=dict(airline_speeds),
            built_at=datetime.now(),
            version=compute_routes_version(routes),
        )

    def invalidate(self) -> None:
        """Drop the snapshot; the next access rebuilds from the provider."""
        with self._lock:
            self._snapshot = None

    @property
    def is_initialized(self) -> bool:
        return self._snapshot is not None

    @property
    def current_version(self) -> Optional[str]:
        snapshot = self._snapshot
        return snapshot.version if snapshot else None
