"""
Bundled data provider - the Indonesian domestic network.
"""

import logging
from typing import Dict, Optional

import pandas as pd

from src.flight_network.adapters.data_providers.frames import (
    AIRPORT_COLUMNS,
    attach_haversine_distances,
)
from src.flight_network.adapters.data_providers.indonesia_dataset import (
    AIRLINES,
    AIRPORTS,
    ROUTES_BY_AIRLINE,
)
from src.flight_network.ports.network_data_provider import NetworkDataProvider
from src.flight_network.schemas.airport import (
    AirportDataFrame,
    AirportSchema,
    RouteDataFrame,
    RouteSchema,
)

logger = logging.getLogger(__name__)


class IndonesiaNetworkProvider(NetworkDataProvider):
    """
    Default provider: 72 airports, nine carriers, routes per carrier.

    Routes are listed carrier by carrier in a fixed order, which fixes the
    graph's node and neighbor order. Route distances are the haversine
    distances between the endpoints, computed for the whole table at once.
    """

    def __init__(self) -> None:
        self._airports_df: Optional[pd.DataFrame] = None
        self._routes_df: Optional[pd.DataFrame] = None

    def get_airports_df(self) -> AirportDataFrame:
        if self._airports_df is None:
            df = pd.DataFrame(AIRPORTS, columns=AIRPORT_COLUMNS)
            self._airports_df = AirportSchema.validate(df)
        return self._airports_df

    def get_routes_df(self) -> RouteDataFrame:
        if self._routes_df is None:
            rows = [
                (origin, destination, AIRLINES[key][0])
                for key, pairs in ROUTES_BY_AIRLINE.items()
                for origin, destination in pairs
            ]
            df = pd.DataFrame(rows, columns=["departure_airport", "arrival_airport", "airline"])
            df["distance"] = float("nan")
            df["speed"] = float("nan")
            df = attach_haversine_distances(df, self.get_airports_df())
            self._routes_df = RouteSchema.validate(df)
            logger.info(
                "Loaded bundled network: %d airports, %d routes, %d airlines",
                len(self.get_airports_df()),
                len(self._routes_df),
                len(AIRLINES),
            )
        return self._routes_df

    def get_airline_speeds(self) -> Dict[str, float]:
        return {name: speed for name, speed in AIRLINES.values()}

    @property
    def name(self) -> str:
        return "Indonesia Domestic"
