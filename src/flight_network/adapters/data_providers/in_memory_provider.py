"""
In-memory data provider - records to validated DataFrames.
"""

import logging
from typing import Dict, Iterable, Optional

import pandas as pd

from src.flight_network.adapters.data_providers.frames import (
    airports_to_df,
    attach_haversine_distances,
    routes_to_df,
)
from src.flight_network.ports.network_data_provider import NetworkDataProvider
from src.flight_network.schemas.airport import (
    AirportDataFrame,
    AirportInput,
    AirportSchema,
    RouteDataFrame,
    RouteInput,
    RouteSchema,
    coerce_airports,
    coerce_routes,
)

logger = logging.getLogger(__name__)


class InMemoryNetworkProvider(NetworkDataProvider):
    """
    Data provider over records held in memory.

    Accepts Airport / RouteEdge instances or plain mappings (``from`` /
    ``to`` keys are accepted for routes). Tables are validated once, on
    construction.

    Attributes:
        _airports_df: Validated airport table.
        _routes_df: Validated route table, distances from coordinates.
        _airline_speeds: Cruise speed per airline name.
    """

    def __init__(
        self,
        routes: Iterable[RouteInput],
        airports: Iterable[AirportInput] = (),
        airline_speeds: Optional[Dict[str, float]] = None,
        name: str = "In-Memory",
    ) -> None:
        airports_df = airports_to_df(coerce_airports(airports))
        self._airports_df: pd.DataFrame = AirportSchema.validate(airports_df)

        routes_df = attach_haversine_distances(
            routes_to_df(coerce_routes(routes)), self._airports_df
        )
        self._routes_df: pd.DataFrame = RouteSchema.validate(routes_df)
        self._airline_speeds = dict(airline_speeds or {})
        self._name = name

        logger.debug(
            "%s provider: %d airports, %d routes",
            name,
            len(self._airports_df),
            len(self._routes_df),
        )

    def get_airports_df(self) -> AirportDataFrame:
        return self._airports_df

    def get_routes_df(self) -> RouteDataFrame:
        return self._routes_df

    def get_airline_speeds(self) -> Dict[str, float]:
        return dict(self._airline_speeds)

    @property
    def name(self) -> str:
        return self._name
