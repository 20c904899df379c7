"""
Tests for network data providers.

Tests cover:
- InMemoryNetworkProvider validation and haversine distances
- IndonesiaNetworkProvider bundled dataset
- CsvNetworkProvider file loading and column aliases
"""

import math

import pandera as pa
import pytest

from src.flight_network.adapters.data_providers import (
    CsvNetworkProvider,
    InMemoryNetworkProvider,
    IndonesiaNetworkProvider,
)
from src.flight_network.adapters.data_providers.indonesia_dataset import (
    AIRLINES,
    ROUTES_BY_AIRLINE,
)
from src.flight_network.schemas.airport import Airport, RouteEdge
from src.network_graph.haversine import airport_distance


# =============================================================================
# IN-MEMORY PROVIDER
# =============================================================================


class TestInMemoryNetworkProvider:
    def test_distances_from_coordinates(self, java_bali_routes, java_bali_airports):
        provider = InMemoryNetworkProvider(java_bali_routes, java_bali_airports)
        routes = provider.get_routes()
        cgk, sub = java_bali_airports[0], java_bali_airports[1]

        assert len(routes) == 5
        assert routes[0].distance == pytest.approx(airport_distance(cgk, sub))

    def test_declared_distance_kept_without_coordinates(self, route, java_bali_airports):
        provider = InMemoryNetworkProvider(
            [route("CGK", "XXX", 123.0)], java_bali_airports
        )
        assert provider.get_routes()[0].distance == 123.0

    def test_coordinates_override_declared_distance(self, route, java_bali_airports):
        provider = InMemoryNetworkProvider([route("CGK", "SUB", 1.0)], java_bali_airports)
        assert provider.get_routes()[0].distance > 600

    def test_accepts_mappings(self):
        provider = InMemoryNetworkProvider(
            [{"from": "A", "to": "B", "airline": "X", "distance": 5}],
            [{"code": "A", "name": "Alpha", "latitude": 0, "longitude": 0}],
        )

        assert provider.get_routes() == [RouteEdge("A", "B", "X", distance=5.0)]
        assert provider.get_airports() == [Airport("A", "Alpha", 0.0, 0.0)]

    def test_invalid_airport_rejected(self, route):
        with pytest.raises(pa.errors.SchemaError):
            InMemoryNetworkProvider(
                [route("A", "B", 1.0)], [Airport("A", "Alpha", 95.0, 0.0)]
            )

    def test_speeds_and_name(self, route):
        provider = InMemoryNetworkProvider(
            [route("A", "B", 1.0)], airline_speeds={"Test Air": 500.0}, name="Fixture"
        )
        speeds = provider.get_airline_speeds()
        speeds["Other"] = 1.0

        assert provider.get_airline_speeds() == {"Test Air": 500.0}
        assert provider.name == "Fixture"

    def test_empty(self):
        provider = InMemoryNetworkProvider([])
        assert provider.get_routes() == []
        assert provider.get_airports() == []


# =============================================================================
# BUNDLED INDONESIA PROVIDER
# =============================================================================


class TestIndonesiaNetworkProvider:
    @pytest.fixture(scope="class")
    def provider(self):
        return IndonesiaNetworkProvider()

    def test_airports(self, provider):
        airports = provider.get_airports()

        assert len(airports) == 72
        assert len({a.code for a in airports}) == 72

    def test_route_count(self, provider):
        expected = sum(len(pairs) for pairs in ROUTES_BY_AIRLINE.values())
        assert len(provider.get_routes()) == expected

    def test_every_route_has_a_distance(self, provider):
        assert all(
            r.distance is not None and not math.isnan(r.distance)
            for r in provider.get_routes()
        )

    def test_routes_grouped_by_airline(self, provider):
        first = provider.get_routes()[0]
        assert first.airline == "Garuda Indonesia"
        assert first.speed is None

    def test_airline_speeds(self, provider):
        speeds = provider.get_airline_speeds()

        assert len(speeds) == len(AIRLINES)
        assert speeds["Garuda Indonesia"] == 966.18
        assert speeds["Wings Abadi Airlines"] == 505.0

    def test_tables_are_cached(self, provider):
        assert provider.get_routes_df() is provider.get_routes_df()

    def test_name(self, provider):
        assert provider.name == "Indonesia Domestic"


# =============================================================================
# CSV PROVIDER
# =============================================================================


@pytest.fixture
def csv_dir(tmp_path):
    (tmp_path / "airports.csv").write_text(
        "code,name,latitude,longitude\n"
        "CGK,Soekarno-Hatta,-6.1256,106.6559\n"
        "DPS,Ngurah Rai,-8.7482,115.1670\n"
    )
    (tmp_path / "routes.csv").write_text(
        "from,to,airline\n"
        "CGK,DPS,Garuda Indonesia\n"
        "DPS,LOP,Lion Air\n"
    )
    (tmp_path / "airlines.csv").write_text(
        "name,speed\n"
        "Garuda Indonesia,966.18\n"
    )
    return tmp_path


class TestCsvNetworkProvider:
    def test_loads_airports(self, csv_dir):
        airports = CsvNetworkProvider(csv_dir).get_airports()
        assert [a.code for a in airports] == ["CGK", "DPS"]

    def test_loads_routes_with_short_columns(self, csv_dir):
        routes = CsvNetworkProvider(csv_dir).get_routes()

        assert routes[0].departure_airport == "CGK"
        assert routes[0].arrival_airport == "DPS"
        assert routes[0].distance == pytest.approx(980, rel=0.05)

    def test_unknown_airport_has_no_distance(self, csv_dir):
        routes = CsvNetworkProvider(csv_dir).get_routes()
        assert routes[1].distance is None

    def test_airline_speeds(self, csv_dir):
        assert CsvNetworkProvider(csv_dir).get_airline_speeds() == {"Garuda Indonesia": 966.18}

    def test_airline_file_optional(self, csv_dir):
        (csv_dir / "airlines.csv").unlink()
        assert CsvNetworkProvider(csv_dir).get_airline_speeds() == {}

    def test_missing_routes_file(self, csv_dir):
        (csv_dir / "routes.csv").unlink()
        provider = CsvNetworkProvider(csv_dir)

        assert provider.is_available is False
        with pytest.raises(FileNotFoundError):
            provider.get_routes()

    def test_invalid_rows_rejected(self, csv_dir):
        (csv_dir / "airports.csv").write_text(
            "code,name,latitude,longitude\nCGK,Soekarno-Hatta,-96.0,106.6\n"
        )
        with pytest.raises(pa.errors.SchemaError):
            CsvNetworkProvider(csv_dir).get_airports()

    def test_name_mentions_directory(self, csv_dir):
        provider = CsvNetworkProvider(csv_dir)

        assert str(csv_dir) in provider.name
        assert provider.is_available is True
