"""
Alternative routes between two airports.

This is a best-effort heuristic, not Yen's algorithm. It has no
optimality guarantee beyond the first path, may return fewer than k
paths, and later paths are not guaranteed to be rank-ordered by cost.

Each round:
1. For every edge of the reference (shortest) path, search again with
   that edge forbidden in both directions.
2. If that yields nothing new, compose start -> hub -> end through the
   highest-degree airports.
3. Accept the cheapest new candidate.

Every round uses the original shortest path as reference, not the path
accepted last.

Hubs are ranked by distinct neighbor airports, the same degree the
centrality metrics use. Adjacency entries are not counted, so a pair
flown by several airlines does not lift an airport up the hub list.
"""

import logging
from typing import List

from .dijkstra import GraphPath, shortest_path
from .exceptions import InvalidPathRequestError
from .graph import FlightGraph

logger = logging.getLogger(__name__)

MAX_HUB_CANDIDATES = 10


def _is_duplicate(candidate: GraphPath, accepted: List[GraphPath]) -> bool:
    return any(existing.nodes == candidate.nodes for existing in accepted)


def _edge_removal_candidates(
    graph: FlightGraph,
    start: str,
    end: str,
    reference: GraphPath,
    accepted: List[GraphPath],
) -> List[GraphPath]:
    candidates: List[GraphPath] = []
    for edge in reference.edges:
        restricted = graph.without_edges([(edge.origin, edge.destination)])
        alternative = shortest_path(restricted, start, end)
        if alternative is None:
            continue
        if not _is_duplicate(alternative, accepted):
            logger.debug(
                "Alternative without %s-%s: %s",
                edge.origin,
                edge.destination,
                alternative.nodes,
            )
            candidates.append(alternative)
    return candidates


def hub_airports(graph: FlightGraph, limit: int = MAX_HUB_CANDIDATES) -> List[str]:
    """Highest-degree airports, stable for equal degree."""
    return sorted(graph.nodes, key=graph.degree, reverse=True)[:limit]


def _hub_candidates(
    graph: FlightGraph,
    start: str,
    end: str,
    accepted: List[GraphPath],
) -> List[GraphPath]:
    candidates: List[GraphPath] = []
    # Top hubs are picked first; start/end are skipped afterwards, so they
    # use up hub slots when they are hubs themselves.
    for hub in hub_airports(graph):
        if hub == start or hub == end:
            continue

        first_leg = shortest_path(graph, start, hub)
        second_leg = shortest_path(graph, hub, end)
        if first_leg is None or second_leg is None:
            continue
        if len(first_leg.nodes) < 2 or len(second_leg.nodes) < 2:
            continue

        combined = first_leg.concat(second_leg)
        if not _is_duplicate(combined, accepted):
            logger.debug("Alternative via hub %s: %s", hub, combined.nodes)
            candidates.append(combined)
    return candidates


def k_shortest_paths(
    graph: FlightGraph,
    start: str,
    end: str,
    k: int = 3,
) -> List[GraphPath]:
    """
    Up to k distinct paths from start to end, shortest first.

    Args:
        graph: Flight graph to search.
        start: Origin airport code.
        end: Destination airport code.
        k: Maximum number of paths.

    Returns:
        Paths deduplicated by node sequence; empty when no path exists.

    Raises:
        InvalidPathRequestError: If k is negative.
    """
    if k < 0:
        raise InvalidPathRequestError("k", f"k must be >= 0, got {k}")

    reference = shortest_path(graph, start, end)
    if reference is None:
        return []

    accepted: List[GraphPath] = [reference]

    while len(accepted) < k:
        candidates = _edge_removal_candidates(graph, start, end, reference, accepted)
        if not candidates:
            candidates = _hub_candidates(graph, start, end, accepted)

        if not candidates:
            logger.debug("No more alternative paths after %d", len(accepted))
            break

        # min() keeps the first of equally short candidates
        best = min(candidates, key=lambda p: p.total_distance)
        accepted.append(best)

    return accepted[:k]
