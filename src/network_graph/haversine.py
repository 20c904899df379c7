"""
Great-circle distance between airports.

Scalar haversine is used by the graph builder for individual edges; the
vectorized variant computes a whole route table at once (data providers).
"""

import math
from typing import Protocol

import numpy as np

EARTH_RADIUS_KM = 6371.0


class HasCoordinates(Protocol):
    latitude: float
    longitude: float


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance in kilometers between two points.

    Args:
        lat1, lon1: First point in decimal degrees.
        lat2, lon2: Second point in decimal degrees.

    Returns:
        Distance in km on a sphere of radius EARTH_RADIUS_KM.

    Example:
        >>> haversine_distance(0.0, 0.0, 0.0, 0.0)
        0.0
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def airport_distance(origin: HasCoordinates, destination: HasCoordinates) -> float:
    """Distance in km between two objects exposing latitude/longitude."""
    return haversine_distance(
        origin.latitude,
        origin.longitude,
        destination.latitude,
        destination.longitude,
    )


def haversine_distance_vectorized(
    lat1: np.ndarray,
    lon1: np.ndarray,
    lat2: np.ndarray,
    lon2: np.ndarray,
) -> np.ndarray:
    """
    Element-wise haversine over numpy arrays.

    Same formula as haversine_distance, so results agree to float precision.
    NaN coordinates propagate to NaN distances.
    """
    lat1 = np.radians(np.asarray(lat1, dtype=np.float64))
    lon1 = np.radians(np.asarray(lon1, dtype=np.float64))
    lat2 = np.radians(np.asarray(lat2, dtype=np.float64))
    lon2 = np.radians(np.asarray(lon2, dtype=np.float64))

    a = (
        np.sin((lat2 - lat1) / 2) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    )
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
