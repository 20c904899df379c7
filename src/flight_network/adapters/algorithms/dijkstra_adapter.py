"""
Dijkstra Path Finder Adapter - Bridge between architecture and algorithm.

Wraps the network_graph search functions and converts GraphPath output
to PathResult schema objects with airport names filled in.
"""

import logging
from typing import List, Optional

from src.flight_network.ports.path_finder import PathFinder
from src.flight_network.schemas.path import PathResult, PathSegment
from src.network_graph.dijkstra import GraphPath, shortest_path
from src.network_graph.graph import FlightGraph
from src.network_graph.k_shortest import k_shortest_paths

logger = logging.getLogger(__name__)


class DijkstraPathFinder(PathFinder):
    """
    Adapter for the network_graph Dijkstra core.

    Stateless: the graph is passed per call, so one instance can serve
    any number of concurrent searches.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Distance-weighted Dijkstra"

    def find_shortest_path(
        self,
        graph: FlightGraph,
        start: str,
        end: str,
    ) -> Optional[PathResult]:
        path = shortest_path(graph, start, end)
        if path is None:
            logger.debug("No path between %s and %s", start, end)
            return None
        return self._to_path_result(graph, path)

    def find_k_shortest_paths(
        self,
        graph: FlightGraph,
        start: str,
        end: str,
        k: int = 3,
    ) -> List[PathResult]:
        paths = k_shortest_paths(graph, start, end, k)
        logger.debug("Found %d of %d requested paths %s -> %s", len(paths), k, start, end)
        return [self._to_path_result(graph, path) for path in paths]

    def _to_path_result(self, graph: FlightGraph, path: GraphPath) -> PathResult:
        """
        Convert a GraphPath to a PathResult.

        Args:
            graph: Graph the path was found in (for airport names).
            path: Search output.

        Returns:
            PathResult with one segment per traversed edge.
        """
        if len(path.nodes) == 1:
            return PathResult.trivial(path.nodes[0])

        segments = [
            PathSegment(
                segment_index=i,
                departure_airport=edge.origin,
                arrival_airport=edge.destination,
                distance=edge.distance,
                airline=edge.airline,
                speed=edge.speed,
                departure_name=graph.airport_name(edge.origin),
                arrival_name=graph.airport_name(edge.destination),
            )
            for i, edge in enumerate(path.edges)
        ]
        return PathResult.from_segments(
            path=path.nodes,
            segments=segments,
            total_distance=path.total_distance,
            total_time=path.total_time,
        )
