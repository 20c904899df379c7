"""
Single-pair shortest path over a FlightGraph.

Distance-weighted Dijkstra with a binary heap. Travel time is carried
along with the distance: each relaxation sets the neighbor's time to the
current time plus edge_distance / edge_speed * 60 minutes, so the time
reported is the time of the distance-optimal path, not a time-optimal one.

Tie-break: a neighbor's tentative state is replaced only by a strictly
lower distance, so the first relaxation reaching a given distance wins.
Heap entries with equal distance pop in push order.
"""

import heapq
import itertools
import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Set, Tuple

from .graph import Neighbor

logger = logging.getLogger(__name__)


class SearchableGraph(Protocol):
    """Anything with nodes and neighbor lookup: FlightGraph or a restricted view."""

    @property
    def nodes(self) -> Tuple[str, ...]: ...

    def __contains__(self, code: object) -> bool: ...

    def neighbors(self, code: str) -> Tuple[Neighbor, ...]: ...


@dataclass(frozen=True, slots=True)
class PathEdge:
    """The specific adjacency entry traversed between two consecutive airports."""

    origin: str
    destination: str
    distance: float
    airline: str
    speed: float

    @property
    def flight_time(self) -> float:
        return self.distance / self.speed * 60


@dataclass(frozen=True)
class GraphPath:
    """
    A path found in the graph.

    Invariant: len(edges) == len(nodes) - 1 and edges[i] joins
    nodes[i] -> nodes[i + 1].
    """

    nodes: Tuple[str, ...]
    edges: Tuple[PathEdge, ...]
    total_distance: float
    total_time: float

    def __post_init__(self) -> None:
        if len(self.edges) != max(len(self.nodes) - 1, 0):
            raise ValueError(
                f"Path with {len(self.nodes)} nodes must have "
                f"{max(len(self.nodes) - 1, 0)} edges, got {len(self.edges)}"
            )

    @classmethod
    def trivial(cls, code: str) -> "GraphPath":
        """Zero-length path from an airport to itself."""
        return cls(nodes=(code,), edges=(), total_distance=0.0, total_time=0.0)

    @property
    def airlines(self) -> Tuple[str, ...]:
        return tuple(edge.airline for edge in self.edges)

    def concat(self, other: "GraphPath") -> "GraphPath":
        """
        Join two paths sharing an endpoint (self ends where other starts).

        The shared node appears once in the result.
        """
        if self.nodes[-1] != other.nodes[0]:
            raise ValueError(
                f"Cannot join path ending at {self.nodes[-1]} "
                f"with path starting at {other.nodes[0]}"
            )
        return GraphPath(
            nodes=self.nodes + other.nodes[1:],
            edges=self.edges + other.edges,
            total_distance=self.total_distance + other.total_distance,
            total_time=self.total_time + other.total_time,
        )


def shortest_path(
    graph: SearchableGraph,
    start: str,
    end: str,
) -> Optional[GraphPath]:
    """
    Distance-shortest path from start to end.

    Args:
        graph: FlightGraph or RestrictedGraphView.
        start: Origin airport code.
        end: Destination airport code.

    Returns:
        GraphPath, or None when either endpoint is unknown or no path exists.
        start == end yields the trivial zero-cost path.
    """
    if start not in graph or end not in graph:
        logger.debug("Start or end airport not in graph: %s -> %s", start, end)
        return None

    if start == end:
        return GraphPath.trivial(start)

    distances: Dict[str, float] = {code: math.inf for code in graph.nodes}
    times: Dict[str, float] = {code: math.inf for code in graph.nodes}
    previous: Dict[str, Tuple[str, Neighbor]] = {}
    visited: Set[str] = set()

    distances[start] = 0.0
    times[start] = 0.0

    counter = itertools.count()
    pq: list[tuple[float, int, str]] = [(0.0, next(counter), start)]

    while pq:
        current_distance, _, current = heapq.heappop(pq)

        if current in visited or current_distance > distances[current]:
            continue
        visited.add(current)

        if current == end:
            break

        for neighbor in graph.neighbors(current):
            if neighbor.code in visited:
                continue

            new_distance = current_distance + neighbor.distance
            if new_distance < distances[neighbor.code]:
                distances[neighbor.code] = new_distance
                times[neighbor.code] = times[current] + neighbor.flight_time
                previous[neighbor.code] = (current, neighbor)
                heapq.heappush(pq, (new_distance, next(counter), neighbor.code))

    return _reconstruct(start, end, previous, distances, times)


def _reconstruct(
    start: str,
    end: str,
    previous: Dict[str, Tuple[str, Neighbor]],
    distances: Dict[str, float],
    times: Dict[str, float],
) -> Optional[GraphPath]:
    """Walk predecessor links back from end; None unless the walk reaches start."""
    nodes = [end]
    edges = []
    current = end

    while current != start and current in previous:
        prev_code, neighbor = previous[current]
        edges.append(
            PathEdge(
                origin=prev_code,
                destination=current,
                distance=neighbor.distance,
                airline=neighbor.airline,
                speed=neighbor.speed,
            )
        )
        nodes.append(prev_code)
        current = prev_code

    if nodes[-1] != start:
        logger.debug("No path found: %s -> %s", start, end)
        return None

    nodes.reverse()
    edges.reverse()
    return GraphPath(
        nodes=tuple(nodes),
        edges=tuple(edges),
        total_distance=distances[end],
        total_time=times[end],
    )
