"""
Centrality result schemas.

Pydantic models: results cross the background-worker boundary and the
HTTP API, so they are validated when built and serialize to plain JSON.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CentralityMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: int = Field(ge=0, description="Number of distinct neighbor airports")
    betweenness: float = Field(ge=0, description="Normalized hop-count betweenness")
    closeness: float = Field(ge=0, description="Reachable / total weighted distance")


class CentralityRank(BaseModel):
    """1-based ranks; for ``overall`` (mean of the three) lower is more central."""

    model_config = ConfigDict(frozen=True)

    degree: int = Field(ge=1)
    betweenness: int = Field(ge=1)
    closeness: int = Field(ge=1)
    overall: float = Field(ge=1)


class AirportCentrality(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    metrics: CentralityMetrics
    rank: CentralityRank


class NetworkStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_nodes: int = Field(ge=0)
    total_edges: int = Field(ge=0)
    average_degree: float = Field(ge=0)
    density: float = Field(ge=0)


class NetworkEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    departure_airport: str
    arrival_airport: str
    weight: float


class VisualizationNode(BaseModel):
    """Node attributes pre-scaled for drawing the network."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    degree: int
    betweenness: float
    closeness: float
    overall_rank: float
    size: float
    color_intensity: float


class NetworkAnalysisResult(BaseModel):
    """
    Centrality of every airport plus network-wide statistics.

    ``airports`` follows graph node order (first appearance in the route
    list); ``top_hubs`` holds the airports with the lowest overall rank.
    """

    model_config = ConfigDict(frozen=True)

    airports: List[AirportCentrality]
    top_hubs: List[AirportCentrality]
    network_stats: NetworkStats
    edges: List[NetworkEdge] = Field(default_factory=list)

    def get(self, code: str) -> Optional[AirportCentrality]:
        for airport in self.airports:
            if airport.code == code:
                return airport
        return None

    def visualization_nodes(self) -> List[VisualizationNode]:
        return [
            VisualizationNode(
                id=airport.code,
                name=airport.name,
                degree=airport.metrics.degree,
                betweenness=airport.metrics.betweenness,
                closeness=airport.metrics.closeness,
                overall_rank=airport.rank.overall,
                size=max(5, min(30, 5 + airport.metrics.degree * 2)),
                color_intensity=airport.metrics.betweenness,
            )
            for airport in self.airports
        ]
