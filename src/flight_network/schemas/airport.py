"""
Airport and route schemas.

Frozen dataclasses are the in-process records; pandera DataFrameModels
validate whole tables at the data-provider boundary.
"""

from dataclasses import asdict, dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series


@dataclass(frozen=True)
class Airport:
    """Immutable reference airport; identity is ``code``."""

    code: str
    name: str
    latitude: float
    longitude: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Airport":
        return cls(
            code=str(data["code"]),
            name=str(data.get("name") or data["code"]),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RouteEdge:
    """
    A declared route between two airports.

    Declared direction is kept for the record; the graph treats every
    route as undirected. ``distance`` is only used when the airports'
    coordinates are unknown. ``speed`` overrides the airline table.
    """

    departure_airport: str
    arrival_airport: str
    airline: str
    distance: Optional[float] = None
    speed: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RouteEdge":
        """Accepts both field names and the short from/to keys."""
        origin = data.get("departure_airport", data.get("from"))
        destination = data.get("arrival_airport", data.get("to"))
        if origin is None or destination is None:
            raise KeyError("departure_airport/arrival_airport")
        distance = data.get("distance")
        speed = data.get("speed")
        return cls(
            departure_airport=str(origin),
            arrival_airport=str(destination),
            airline=str(data["airline"]),
            distance=None if _is_missing(distance) else float(distance),
            speed=None if _is_missing(speed) else float(speed),
        )

    def to_dict(self) -> dict:
        return asdict(self)


RouteInput = Union[RouteEdge, Mapping[str, Any]]
AirportInput = Union[Airport, Mapping[str, Any]]


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value))


def coerce_routes(routes: Iterable[RouteInput]) -> List[RouteEdge]:
    return [r if isinstance(r, RouteEdge) else RouteEdge.from_mapping(r) for r in routes]


def coerce_airports(airports: Iterable[AirportInput]) -> List[Airport]:
    return [a if isinstance(a, Airport) else Airport.from_mapping(a) for a in airports]


class AirportSchema(pa.DataFrameModel):
    """Airport reference table."""

    code: Series[str] = pa.Field(
        nullable=False,
        unique=True,
        str_length={"min_value": 1},
        description="Airport code",
    )
    name: Series[str] = pa.Field(
        nullable=False,
        description="Human-readable airport name",
    )
    latitude: Series[float] = pa.Field(
        ge=-90,
        le=90,
        description="Latitude in decimal degrees",
    )
    longitude: Series[float] = pa.Field(
        ge=-180,
        le=180,
        description="Longitude in decimal degrees",
    )

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"


class RouteSchema(pa.DataFrameModel):
    """
    Route table. One row per (departure, arrival, airline) declaration.

    distance and speed are optional: distance is recomputed from airport
    coordinates when those are known, speed falls back to the airline table.
    """

    departure_airport: Series[str] = pa.Field(
        nullable=False,
        description="Departure airport IATA code",
    )
    arrival_airport: Series[str] = pa.Field(
        nullable=False,
        description="Arrival airport IATA code",
    )
    airline: Series[str] = pa.Field(
        nullable=False,
        description="Operating airline name",
    )
    distance: Optional[Series[float]] = pa.Field(
        nullable=True,
        ge=0,
        description="Declared distance in km",
    )
    speed: Optional[Series[float]] = pa.Field(
        nullable=True,
        gt=0,
        description="Cruise speed in km/h",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteSchema"


AirportDataFrame = DataFrame[AirportSchema]
RouteDataFrame = DataFrame[RouteSchema]


def airports_from_df(df: pd.DataFrame) -> List[Airport]:
    return [
        Airport(
            code=str(row.code),
            name=str(row.name),
            latitude=float(row.latitude),
            longitude=float(row.longitude),
        )
        for row in df.itertuples(index=False)
    ]


def routes_from_df(df: pd.DataFrame) -> List[RouteEdge]:
    records = df.to_dict(orient="records")
    return [RouteEdge.from_mapping(record) for record in records]
