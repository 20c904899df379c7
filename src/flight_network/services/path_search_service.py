"""
Path Search Service - Domain orchestrator for path searches.

Coordinates the interaction between:
- NetworkGraphRepository (current graph snapshot)
- PathFinder (algorithm adapter)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, List, Optional

from src.flight_network.schemas.path import PathResult
from src.network_graph.exceptions import InvalidPathRequestError

if TYPE_CHECKING:
    from src.flight_network.adapters.repositories.network_graph_repo import (
        NetworkGraphRepository,
    )
    from src.flight_network.ports.path_finder import PathFinder

logger = logging.getLogger(__name__)


class PathSearchService:
    """
    Domain service for shortest and alternative path searches.

    Stateless and thread-safe: every search reads the current snapshot
    once and works on it to completion.

    Attributes:
        _graph_repo: Repository providing the graph snapshot.
        _path_finder: Algorithm adapter.
    """

    def __init__(
        self,
        graph_repo: NetworkGraphRepository,
        path_finder: PathFinder,
    ) -> None:
        self._graph_repo = graph_repo
        self._path_finder = path_finder

    def find_shortest_path(self, start: str, end: str) -> Optional[PathResult]:
        """
        Distance-shortest path from start to end.

        Returns:
            PathResult, or None for unknown airports or no connection.

        Raises:
            GraphNotInitializedError: If the graph cannot be loaded.
        """
        start_time = time.perf_counter()
        graph = self._graph_repo.get_graph()

        result = self._path_finder.find_shortest_path(graph, start, end)

        logger.info(
            "Shortest path search %s -> %s completed in %.3fms: %s",
            start,
            end,
            (time.perf_counter() - start_time) * 1000,
            "found" if result is not None else "no path",
        )
        return result

    def find_k_shortest_paths(self, start: str, end: str, k: int = 3) -> List[PathResult]:
        """
        Up to k alternative paths, the shortest first.

        Args:
            start: Origin airport code.
            end: Destination airport code.
            k: Maximum number of paths.

        Returns:
            Distinct paths; fewer than k when the network has no more.

        Raises:
            InvalidPathRequestError: If k is not a non-negative integer.
            GraphNotInitializedError: If the graph cannot be loaded.
        """
        if isinstance(k, bool) or not isinstance(k, int):
            raise InvalidPathRequestError("k", f"k must be an integer, got {k!r}")

        start_time = time.perf_counter()
        graph = self._graph_repo.get_graph()

        results = self._path_finder.find_k_shortest_paths(graph, start, end, k)

        logger.info(
            "K-shortest search %s -> %s (k=%d) completed in %.3fms: %d paths",
            start,
            end,
            k,
            (time.perf_counter() - start_time) * 1000,
            len(results),
        )
        return results
