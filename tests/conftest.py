"""
Shared fixtures: small synthetic networks with known answers.

Routes without airport records keep their declared distance, so these
graphs have exact, hand-checkable weights.
"""

from typing import Callable, List, Optional

import pytest

from src.flight_network.schemas.airport import Airport, RouteEdge
from src.network_graph.graph import FlightGraph, build_graph


def make_route(
    origin: str,
    destination: str,
    distance: Optional[float] = None,
    airline: str = "Test Air",
    speed: Optional[float] = None,
) -> RouteEdge:
    return RouteEdge(
        departure_airport=origin,
        arrival_airport=destination,
        airline=airline,
        distance=distance,
        speed=speed,
    )


@pytest.fixture
def route() -> Callable[..., RouteEdge]:
    """Factory for RouteEdge records."""
    return make_route


@pytest.fixture
def triangle_routes() -> List[RouteEdge]:
    """A-B-C-A, every edge 100 km."""
    return [
        make_route("A", "B", 100.0),
        make_route("B", "C", 100.0),
        make_route("C", "A", 100.0),
    ]


@pytest.fixture
def triangle_graph(triangle_routes) -> FlightGraph:
    return build_graph(triangle_routes)


@pytest.fixture
def star_routes() -> List[RouteEdge]:
    """Hub H with leaves L1..L5, every edge 10 km."""
    return [make_route("H", f"L{i}", 10.0) for i in range(1, 6)]


@pytest.fixture
def star_graph(star_routes) -> FlightGraph:
    return build_graph(star_routes)


@pytest.fixture
def line_routes() -> List[RouteEdge]:
    """A-B-C-D: exactly one simple path between any two airports."""
    return [
        make_route("A", "B", 10.0),
        make_route("B", "C", 10.0),
        make_route("C", "D", 10.0),
    ]


@pytest.fixture
def line_graph(line_routes) -> FlightGraph:
    return build_graph(line_routes)


@pytest.fixture
def square_routes() -> List[RouteEdge]:
    """A-B-D short side (2 km), A-C-D long side (4 km)."""
    return [
        make_route("A", "B", 1.0),
        make_route("B", "D", 1.0),
        make_route("A", "C", 2.0),
        make_route("C", "D", 2.0),
    ]


@pytest.fixture
def square_graph(square_routes) -> FlightGraph:
    return build_graph(square_routes)


@pytest.fixture
def java_bali_airports() -> List[Airport]:
    """Four real airports with coordinates."""
    return [
        Airport("CGK", "Soekarno-Hatta (Jakarta)", -6.1256, 106.6559),
        Airport("SUB", "Juanda (Surabaya)", -7.3796, 112.7870),
        Airport("DPS", "Ngurah Rai (Denpasar)", -8.7482, 115.1670),
        Airport("YIA", "New Yogyakarta Int'l (Kulon Progo)", -7.9056, 110.0560),
    ]


@pytest.fixture
def java_bali_routes() -> List[RouteEdge]:
    return [
        make_route("CGK", "SUB", airline="Garuda Indonesia"),
        make_route("CGK", "YIA", airline="Lion Air"),
        make_route("YIA", "SUB", airline="Lion Air"),
        make_route("SUB", "DPS", airline="Garuda Indonesia"),
        make_route("CGK", "DPS", airline="Batik Air"),
    ]


@pytest.fixture
def java_bali_speeds() -> dict:
    return {"Garuda Indonesia": 966.18, "Lion Air": 873.75, "Batik Air": 930.43}
