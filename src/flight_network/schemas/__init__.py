"""
Schema definitions for the Flight Network.

Dataclasses for in-process records, pandera DataFrameModels for tables at
the data boundary, pydantic models for results that get serialized.
"""

from .airport import (
    Airport,
    AirportDataFrame,
    AirportSchema,
    RouteDataFrame,
    RouteEdge,
    RouteSchema,
    airports_from_df,
    coerce_airports,
    coerce_routes,
    routes_from_df,
)
from .centrality import (
    AirportCentrality,
    CentralityMetrics,
    CentralityRank,
    NetworkAnalysisResult,
    NetworkEdge,
    NetworkStats,
    VisualizationNode,
)
from .messages import (
    CalculateCentralityRequest,
    CentralityErrorMessage,
    CentralityResultMessage,
    WorkerResponse,
    worker_response_adapter,
)
from .path import PathResult, PathSegment

__all__ = [
    # Airport / route records
    "Airport",
    "AirportDataFrame",
    "AirportSchema",
    "RouteDataFrame",
    "RouteEdge",
    "RouteSchema",
    "airports_from_df",
    "coerce_airports",
    "coerce_routes",
    "routes_from_df",
    # Paths
    "PathResult",
    "PathSegment",
    # Centrality
    "AirportCentrality",
    "CentralityMetrics",
    "CentralityRank",
    "NetworkAnalysisResult",
    "NetworkEdge",
    "NetworkStats",
    "VisualizationNode",
    # Worker protocol
    "CalculateCentralityRequest",
    "CentralityErrorMessage",
    "CentralityResultMessage",
    "WorkerResponse",
    "worker_response_adapter",
]
