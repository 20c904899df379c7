"""
Centrality Adapter - runs CentralityAnalyzer and builds the result model.

This is the unit of work shipped to the background worker, and the
synchronous fallback of the centrality manager.
"""

import logging
import time
from typing import Iterable, Mapping, Optional

from src.flight_network.schemas.airport import Airport, RouteEdge
from src.flight_network.schemas.centrality import (
    AirportCentrality,
    CentralityMetrics,
    CentralityRank,
    NetworkAnalysisResult,
    NetworkEdge,
    NetworkStats,
)
from src.network_graph.centrality import TOP_HUB_COUNT, CentralityAnalyzer
from src.network_graph.graph import DEFAULT_SPEED_KMH, build_graph

logger = logging.getLogger(__name__)


def compute_network_centrality(
    routes: Iterable[RouteEdge],
    airports: Iterable[Airport],
    airline_speeds: Optional[Mapping[str, float]] = None,
    default_speed: float = DEFAULT_SPEED_KMH,
) -> NetworkAnalysisResult:
    """
    Build the graph for a route set and compute its full centrality result.

    Airports without a reference record are named by their code.

    Args:
        routes: Route set to analyze.
        airports: Reference airports (coordinates drive edge weights).
        airline_speeds: Cruise speed per airline.
        default_speed: Speed when the airline is unknown.

    Returns:
        NetworkAnalysisResult with per-airport metrics and ranks, top hubs,
        network statistics and the edge list.
    """
    start_time = time.perf_counter()

    graph = build_graph(routes, airports, airline_speeds, default_speed)
    analyzer = CentralityAnalyzer(graph)
    report = analyzer.analyze()

    entries = {}
    for node in report.centralities:
        rank = report.ranks[node.code]
        entries[node.code] = AirportCentrality(
            code=node.code,
            name=graph.airport_name(node.code) or node.code,
            metrics=CentralityMetrics(
                degree=node.degree,
                betweenness=node.betweenness,
                closeness=node.closeness,
            ),
            rank=CentralityRank(
                degree=rank.degree,
                betweenness=rank.betweenness,
                closeness=rank.closeness,
                overall=rank.overall,
            ),
        )

    stats = report.stats
    result = NetworkAnalysisResult(
        airports=list(entries.values()),
        top_hubs=[entries[node.code] for node in report.top_hubs(TOP_HUB_COUNT)],
        network_stats=NetworkStats(
            total_nodes=stats.total_nodes,
            total_edges=stats.total_edges,
            average_degree=stats.average_degree,
            density=stats.density,
        ),
        edges=[
            NetworkEdge(departure_airport=a, arrival_airport=b, weight=w)
            for a, b, w in analyzer.edge_list()
        ],
    )

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        "Centrality computed for %d airports, %d edges in %.1fms",
        stats.total_nodes,
        stats.total_edges,
        elapsed_ms,
    )
    return result
