"""
Table helpers shared by the network data providers.
"""

import logging
from typing import Iterable

import numpy as np
import pandas as pd

from src.flight_network.schemas.airport import Airport, RouteEdge
from src.network_graph.haversine import haversine_distance_vectorized

logger = logging.getLogger(__name__)

AIRPORT_COLUMNS = ["code", "name", "latitude", "longitude"]
ROUTE_COLUMNS = ["departure_airport", "arrival_airport", "airline", "distance", "speed"]


def airports_to_df(airports: Iterable[Airport]) -> pd.DataFrame:
    return pd.DataFrame([a.to_dict() for a in airports], columns=AIRPORT_COLUMNS)


def routes_to_df(routes: Iterable[RouteEdge]) -> pd.DataFrame:
    df = pd.DataFrame([r.to_dict() for r in routes], columns=ROUTE_COLUMNS)
    df["distance"] = df["distance"].astype(float)
    df["speed"] = df["speed"].astype(float)
    return df


def attach_haversine_distances(
    routes_df: pd.DataFrame,
    airports_df: pd.DataFrame,
) -> pd.DataFrame:
    """
    Fill the ``distance`` column from airport coordinates.

    Routes whose endpoints both have coordinates get the great-circle
    distance; the rest keep whatever distance they declared (possibly NaN).
    Returns a new DataFrame, the input is not modified.

    Args:
        routes_df: Route table (departure_airport, arrival_airport, ...).
        airports_df: Airport table with code, latitude, longitude.

    Returns:
        Route table with the same rows and index.
    """
    result = routes_df.copy()
    if result.empty:
        if "distance" not in result.columns:
            result["distance"] = pd.Series(dtype=float)
        return result

    coords = airports_df.set_index("code")[["latitude", "longitude"]]
    origin = coords.reindex(result["departure_airport"].to_numpy())
    destination = coords.reindex(result["arrival_airport"].to_numpy())

    computed = haversine_distance_vectorized(
        origin["latitude"].to_numpy(),
        origin["longitude"].to_numpy(),
        destination["latitude"].to_numpy(),
        destination["longitude"].to_numpy(),
    )

    declared = (
        result["distance"].to_numpy(dtype=float)
        if "distance" in result.columns
        else np.full(len(result), np.nan)
    )
    result["distance"] = np.where(np.isnan(computed), declared, computed)

    missing = int(np.isnan(computed).sum())
    if missing:
        logger.debug("%d routes reference airports without coordinates", missing)
    return result
