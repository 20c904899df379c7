"""
Path Finder port interface.

Defines the abstract contract for path search algorithms.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.flight_network.schemas.path import PathResult
from src.network_graph.graph import FlightGraph


class PathFinder(ABC):
    """
    Abstract interface for path search over a FlightGraph.

    Not-found is never an exception: an unknown airport or disconnected
    endpoints produce None / an empty list.

    Implementations:
    - DijkstraPathFinder: distance-weighted Dijkstra plus the
      edge-removal / hub K-shortest heuristic
    """

    @abstractmethod
    def find_shortest_path(
        self,
        graph: FlightGraph,
        start: str,
        end: str,
    ) -> Optional[PathResult]:
        """
        Find the distance-shortest path between two airports.

        Args:
            graph: Built flight graph.
            start: Origin airport code.
            end: Destination airport code.

        Returns:
            PathResult, or None if no path exists.
        """
        ...

    @abstractmethod
    def find_k_shortest_paths(
        self,
        graph: FlightGraph,
        start: str,
        end: str,
        k: int = 3,
    ) -> List[PathResult]:
        """
        Find up to k distinct paths, the shortest first.

        Raises:
            InvalidPathRequestError: If k is negative.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm identifier."""
        ...
