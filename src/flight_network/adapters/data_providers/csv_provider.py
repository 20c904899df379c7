"""
CSV data provider - files to validated DataFrames.

Expected layout of the data directory:

    airports.csv   code,name,latitude,longitude
    routes.csv     departure_airport,arrival_airport,airline[,distance][,speed]
    airlines.csv   name,speed                       (optional)

``routes.csv`` may use ``from`` / ``to`` as column names instead.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

from src.flight_network.adapters.data_providers.frames import (
    AIRPORT_COLUMNS,
    attach_haversine_distances,
)
from src.flight_network.ports.network_data_provider import NetworkDataProvider
from src.flight_network.schemas.airport import (
    AirportDataFrame,
    AirportSchema,
    RouteDataFrame,
    RouteSchema,
)

logger = logging.getLogger(__name__)

AIRPORTS_FILE = "airports.csv"
ROUTES_FILE = "routes.csv"
AIRLINES_FILE = "airlines.csv"


class CsvNetworkProvider(NetworkDataProvider):
    """
    Data provider for a directory of CSV files.

    Files are read lazily on first access and cached for the lifetime of
    the provider.

    Attributes:
        _data_dir: Directory holding the CSV files.
        _airports_df: Cached airport table (lazy).
        _routes_df: Cached route table (lazy).
    """

    def __init__(self, data_dir: Union[str, Path]) -> None:
        """
        Initialize the CSV provider.

        Args:
            data_dir: Directory containing airports.csv and routes.csv.
        """
        self._data_dir = Path(data_dir)
        self._airports_df: Optional[pd.DataFrame] = None
        self._routes_df: Optional[pd.DataFrame] = None

    def _read(self, filename: str, **kwargs) -> pd.DataFrame:
        path = self._data_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")
        return pd.read_csv(path, **kwargs)

    def get_airports_df(self) -> AirportDataFrame:
        if self._airports_df is None:
            df = self._read(AIRPORTS_FILE, dtype={"code": str})
            self._airports_df = AirportSchema.validate(df[AIRPORT_COLUMNS])
            logger.info("Loaded %d airports from %s", len(self._airports_df), self._data_dir)
        return self._airports_df

    def get_routes_df(self) -> RouteDataFrame:
        if self._routes_df is None:
            df = self._read(ROUTES_FILE).rename(
                columns={"from": "departure_airport", "to": "arrival_airport"}
            )
            if "speed" not in df.columns:
                df["speed"] = float("nan")
            df = attach_haversine_distances(df, self.get_airports_df())
            self._routes_df = RouteSchema.validate(df)
            logger.info("Loaded %d routes from %s", len(self._routes_df), self._data_dir)
        return self._routes_df

    def get_airline_speeds(self) -> Dict[str, float]:
        path = self._data_dir / AIRLINES_FILE
        if not path.exists():
            return {}
        df = pd.read_csv(path)
        return {str(row.name): float(row.speed) for row in df.itertuples(index=False)}

    @property
    def name(self) -> str:
        return f"CSV ({self._data_dir})"

    @property
    def is_available(self) -> bool:
        return (self._data_dir / AIRPORTS_FILE).exists() and (
            self._data_dir / ROUTES_FILE
        ).exists()
