"""
Structural summaries of a FlightGraph: degrees, connectivity, airlines.
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, List

from .graph import FlightGraph


@dataclass(frozen=True)
class GraphAnalysis:
    node_count: int
    edge_count: int
    degrees: Dict[str, int]
    isolated_nodes: List[str]
    average_degree: float


@dataclass(frozen=True)
class AirlinePerformance:
    """
    Per-airline totals over adjacency entries.

    Every route is counted from both endpoints, so ``routes`` is twice the
    number of airport pairs the airline serves. The average is unaffected.
    """

    routes: int
    total_distance: float
    average_distance: float


def graph_analysis(graph: FlightGraph) -> GraphAnalysis:
    degrees = {code: graph.degree(code) for code in graph.nodes}
    edge_count = graph.edge_count
    node_count = len(graph)
    return GraphAnalysis(
        node_count=node_count,
        edge_count=edge_count,
        degrees=degrees,
        isolated_nodes=[code for code, degree in degrees.items() if degree == 0],
        average_degree=2 * edge_count / node_count if edge_count > 0 else 0.0,
    )


def is_connected(graph: FlightGraph) -> bool:
    """BFS from the first node; True if every node is reached. Empty graph is connected."""
    nodes = graph.nodes
    if not nodes:
        return True

    visited = {nodes[0]}
    queue = deque([nodes[0]])
    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor.code not in visited:
                visited.add(neighbor.code)
                queue.append(neighbor.code)

    return len(visited) == len(nodes)


def airline_performance(graph: FlightGraph) -> Dict[str, AirlinePerformance]:
    routes: Dict[str, int] = {}
    totals: Dict[str, float] = {}
    for code in graph.nodes:
        for neighbor in graph.neighbors(code):
            routes[neighbor.airline] = routes.get(neighbor.airline, 0) + 1
            totals[neighbor.airline] = totals.get(neighbor.airline, 0.0) + neighbor.distance

    return {
        airline: AirlinePerformance(
            routes=count,
            total_distance=totals[airline],
            average_distance=totals[airline] / count if count else 0.0,
        )
        for airline, count in routes.items()
    }
