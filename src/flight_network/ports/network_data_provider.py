"""
Network Data Provider port interface.

Defines the abstract contract for sources of airport and route tables.
Implementations handle the specifics of each backend (bundled data,
in-memory records, CSV files).
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from src.flight_network.schemas.airport import (
    Airport,
    AirportDataFrame,
    RouteDataFrame,
    RouteEdge,
    airports_from_df,
    routes_from_df,
)


class NetworkDataProvider(ABC):
    """
    Abstract interface for flight network data providers.

    Providers return validated DataFrames. Schema validation happens at
    the boundary (in the provider), not in the graph algorithms.

    Implementations:
    - IndonesiaNetworkProvider: bundled Indonesian domestic network
    - InMemoryNetworkProvider: lists of records, mostly for tests
    - CsvNetworkProvider: airports.csv / routes.csv / airlines.csv
    """

    @abstractmethod
    def get_airports_df(self) -> AirportDataFrame:
        """
        Return reference airports as a validated DataFrame.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @abstractmethod
    def get_routes_df(self) -> RouteDataFrame:
        """
        Return declared routes as a validated DataFrame.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @abstractmethod
    def get_airline_speeds(self) -> Dict[str, float]:
        """
        Return cruise speed in km/h per airline name.

        Airlines missing from the mapping fly at the default speed.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this data provider."""
        ...

    def get_airports(self) -> List[Airport]:
        """Airports as records, in table order."""
        return airports_from_df(self.get_airports_df())

    def get_routes(self) -> List[RouteEdge]:
        """Routes as records, in table order."""
        return routes_from_df(self.get_routes_df())
