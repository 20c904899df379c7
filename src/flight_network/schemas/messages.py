"""
Background worker protocol.

Requests go out as CALCULATE_CENTRALITY; a CENTRALITY_RESULT or
CENTRALITY_ERROR comes back. Both directions are validated here, so no
untyped payload crosses the worker boundary.
"""

from typing import Annotated, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from src.flight_network.schemas.airport import Airport, RouteEdge
from src.flight_network.schemas.centrality import NetworkAnalysisResult


class AirportRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    latitude: float
    longitude: float

    def to_airport(self) -> Airport:
        return Airport(**self.model_dump())


class RouteRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    departure_airport: str
    arrival_airport: str
    airline: str
    distance: Optional[float] = None
    speed: Optional[float] = None

    def to_route(self) -> RouteEdge:
        return RouteEdge(**self.model_dump())


class CalculateCentralityRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["CALCULATE_CENTRALITY"] = "CALCULATE_CENTRALITY"
    routes: List[RouteRecord]
    airports: List[AirportRecord]
    airline_speeds: Dict[str, float] = Field(default_factory=dict)

    @classmethod
    def create(
        cls,
        routes: List[RouteEdge],
        airports: List[Airport],
        airline_speeds: Optional[Mapping[str, float]] = None,
    ) -> "CalculateCentralityRequest":
        return cls(
            routes=[RouteRecord(**r.to_dict()) for r in routes],
            airports=[AirportRecord(**a.to_dict()) for a in airports],
            airline_speeds=dict(airline_speeds or {}),
        )


class CentralityResultMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["CENTRALITY_RESULT"] = "CENTRALITY_RESULT"
    payload: NetworkAnalysisResult
    success: Literal[True] = True


class CentralityErrorPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: str


class CentralityErrorMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["CENTRALITY_ERROR"] = "CENTRALITY_ERROR"
    payload: CentralityErrorPayload
    success: Literal[False] = False

    @classmethod
    def from_error(cls, error: str) -> "CentralityErrorMessage":
        return cls(payload=CentralityErrorPayload(error=error or "Unknown error"))


WorkerResponse = Annotated[
    Union[CentralityResultMessage, CentralityErrorMessage],
    Field(discriminator="type"),
]

worker_response_adapter: TypeAdapter[WorkerResponse] = TypeAdapter(WorkerResponse)
