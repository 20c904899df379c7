"""
Flight network graph - adjacency list keyed by airport code.

The graph is undirected: every route adds a neighbor entry at both
endpoints, sharing one distance. Edge weights come from the haversine
distance between the airports' coordinates whenever both are known,
regardless of any distance declared on the route itself.

Built once per dataset and read-only afterwards. Alternate-path search
works on a RestrictedGraphView, never on the graph itself.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    AbstractSet,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Protocol,
    Set,
    Tuple,
)

from .haversine import airport_distance

logger = logging.getLogger(__name__)

# Cruise speed used when neither the route nor the airline table has one
DEFAULT_SPEED_KMH = 800.0

# Edge weight when coordinates are missing and the route declares no distance
FALLBACK_DISTANCE_KM = 1.0

EdgeKey = Tuple[str, str]


class AirportLike(Protocol):
    code: str
    name: str
    latitude: float
    longitude: float


class RouteLike(Protocol):
    departure_airport: str
    arrival_airport: str
    airline: str


@dataclass(frozen=True, slots=True)
class Neighbor:
    """
    One adjacency entry: an airport reachable over a single flight.

    Attributes:
        code: Neighbor airport code.
        distance: Edge weight in km.
        airline: Airline operating this edge.
        speed: Cruise speed in km/h used for travel time.
    """

    code: str
    distance: float
    airline: str
    speed: float

    @property
    def flight_time(self) -> float:
        """Travel time over this edge in minutes."""
        return self.distance / self.speed * 60


class FlightGraph:
    """
    Immutable undirected flight graph.

    Nodes keep the order in which they were first seen in the route list;
    neighbor entries keep route order. Both orders matter for tie-breaking
    in the search and ranking algorithms.

    A pair of airports served by several airlines has one neighbor entry
    per airline. Degree counts distinct neighbor airports.
    """

    __slots__ = ("_adjacency", "_airports")

    def __init__(
        self,
        adjacency: Mapping[str, Iterable[Neighbor]],
        airports: Optional[Mapping[str, AirportLike]] = None,
    ) -> None:
        self._adjacency: Mapping[str, Tuple[Neighbor, ...]] = MappingProxyType(
            {code: tuple(neighbors) for code, neighbors in adjacency.items()}
        )
        self._airports: Mapping[str, AirportLike] = MappingProxyType(
            dict(airports or {})
        )

    def __contains__(self, code: object) -> bool:
        return code in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        return f"FlightGraph(nodes={len(self)}, edges={self.edge_count})"

    @property
    def nodes(self) -> Tuple[str, ...]:
        """Airport codes in first-seen order."""
        return tuple(self._adjacency)

    @property
    def airports(self) -> Mapping[str, AirportLike]:
        """Reference airport records known to the graph (may be partial)."""
        return self._airports

    def neighbors(self, code: str) -> Tuple[Neighbor, ...]:
        """Adjacency entries of code; empty tuple for unknown codes."""
        return self._adjacency.get(code, ())

    def distinct_neighbors(self, code: str) -> List[str]:
        """Neighbor airport codes without airline duplicates, first-seen order."""
        return list(dict.fromkeys(n.code for n in self.neighbors(code)))

    def degree(self, code: str) -> int:
        """Number of distinct neighbor airports."""
        return len(self.distinct_neighbors(code))

    def airport_name(self, code: str) -> Optional[str]:
        airport = self._airports.get(code)
        return airport.name if airport is not None else None

    @property
    def edge_count(self) -> int:
        """Number of distinct undirected airport pairs."""
        return len(self.edge_list())

    def edge_list(self) -> List[Tuple[str, str, float]]:
        """
        Deduplicated undirected edges as (from, to, distance).

        The first adjacency entry seen for a pair provides the weight.
        """
        seen: Set[frozenset] = set()
        edges: List[Tuple[str, str, float]] = []
        for code, neighbors in self._adjacency.items():
            for neighbor in neighbors:
                pair = frozenset((code, neighbor.code))
                if pair in seen:
                    continue
                seen.add(pair)
                edges.append((code, neighbor.code, neighbor.distance))
        return edges

    def without_edges(self, edges: Iterable[EdgeKey]) -> "RestrictedGraphView":
        """Request-local view that forbids the given edges in both directions."""
        return RestrictedGraphView(self, edges)


class RestrictedGraphView:
    """
    Read-only view of a FlightGraph with some edges filtered out.

    Removing (u, v) forbids traversal in both directions, across every
    airline serving the pair. The underlying graph is not touched.
    """

    __slots__ = ("_graph", "_removed")

    def __init__(self, graph: FlightGraph, edges: Iterable[EdgeKey]) -> None:
        self._graph = graph
        removed: Set[EdgeKey] = set()
        for u, v in edges:
            removed.add((u, v))
            removed.add((v, u))
        self._removed: AbstractSet[EdgeKey] = frozenset(removed)

    def __contains__(self, code: object) -> bool:
        return code in self._graph

    def __len__(self) -> int:
        return len(self._graph)

    @property
    def nodes(self) -> Tuple[str, ...]:
        return self._graph.nodes

    @property
    def airports(self) -> Mapping[str, AirportLike]:
        return self._graph.airports

    @property
    def removed_edges(self) -> AbstractSet[EdgeKey]:
        return self._removed

    def neighbors(self, code: str) -> Tuple[Neighbor, ...]:
        return tuple(
            n for n in self._graph.neighbors(code) if (code, n.code) not in self._removed
        )


def _edge_distance(
    route: RouteLike,
    airports: Mapping[str, AirportLike],
) -> float:
    """Haversine distance when both endpoints are located, else declared/fallback."""
    origin = airports.get(route.departure_airport)
    destination = airports.get(route.arrival_airport)
    if origin is not None and destination is not None:
        return airport_distance(origin, destination)

    declared = getattr(route, "distance", None)
    if declared:
        return float(declared)
    return FALLBACK_DISTANCE_KM


def build_graph(
    routes: Iterable[RouteLike],
    airports: Iterable[AirportLike] = (),
    airline_speeds: Optional[Mapping[str, float]] = None,
    default_speed: float = DEFAULT_SPEED_KMH,
) -> FlightGraph:
    """
    Build an undirected FlightGraph from a flat route list.

    For each route both endpoints become nodes and each receives a
    neighbor entry for the other. An entry already present for the same
    (from, to, airline) is not added again, so duplicate input routes are
    harmless. Self-loop routes create the node but no edge.

    Unknown airport codes are not an error: the edge is stored with the
    route's declared distance, or FALLBACK_DISTANCE_KM without one.

    Args:
        routes: Objects with departure_airport, arrival_airport, airline and
            optional distance / speed attributes.
        airports: Reference airports with coordinates.
        airline_speeds: Mapping airline name -> cruise speed (km/h).
        default_speed: Speed when neither route nor table provides one.

    Returns:
        Immutable FlightGraph.
    """
    airport_index: Dict[str, AirportLike] = {a.code: a for a in airports}
    speeds = airline_speeds or {}

    adjacency: Dict[str, List[Neighbor]] = {}
    seen: Set[Tuple[str, str, str]] = set()
    route_count = 0

    for route in routes:
        route_count += 1
        origin = route.departure_airport
        destination = route.arrival_airport
        adjacency.setdefault(origin, [])
        adjacency.setdefault(destination, [])

        if origin == destination:
            logger.debug("Skipping self-loop route at %s", origin)
            continue

        speed = (
            getattr(route, "speed", None)
            or speeds.get(route.airline)
            or default_speed
        )
        distance = _edge_distance(route, airport_index)

        for a, b in ((origin, destination), (destination, origin)):
            key = (a, b, route.airline)
            if key in seen:
                continue
            seen.add(key)
            adjacency[a].append(
                Neighbor(code=b, distance=distance, airline=route.airline, speed=float(speed))
            )

    graph = FlightGraph(adjacency, airport_index)
    logger.debug(
        "Built graph from %d routes: %d airports, %d edges",
        route_count,
        len(graph),
        graph.edge_count,
    )
    return graph
