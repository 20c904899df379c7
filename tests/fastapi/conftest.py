"""
Fixtures for FastAPI endpoint tests.

The app's lifespan is skipped (TestClient used without ``with``); the
network dependency is overridden with a small Java-Bali network instead.
"""

import pytest
from fastapi.testclient import TestClient

from src.fastapi.network_api import app, get_network
from src.flight_network.application import FlightNetwork
from src.flight_network.config import NetworkSettings


@pytest.fixture
def java_bali_network(java_bali_routes, java_bali_airports, java_bali_speeds):
    network = FlightNetwork(
        routes=java_bali_routes,
        airports=java_bali_airports,
        airline_speeds=java_bali_speeds,
        settings=NetworkSettings(use_worker=False),
    )
    yield network
    network.shutdown()


@pytest.fixture
def override_network():
    """Install a network for the app's dependency; removed after the test."""

    def install(network):
        app.dependency_overrides[get_network] = lambda: network
        return TestClient(app)

    yield install
    app.dependency_overrides.pop(get_network, None)


@pytest.fixture
def client(override_network, java_bali_network) -> TestClient:
    return override_network(java_bali_network)
