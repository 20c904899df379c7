"""
Tests for algorithm adapters: DijkstraPathFinder and compute_network_centrality.

Java-Bali fixture distances (haversine, km):
    CGK-SUB 691.2, CGK-YIA 424.2, YIA-SUB 306.6, SUB-DPS 303.0, CGK-DPS 982.6
"""

import pytest

from src.flight_network.adapters.algorithms import (
    DijkstraPathFinder,
    compute_network_centrality,
)
from src.flight_network.schemas.centrality import NetworkAnalysisResult
from src.flight_network.schemas.path import PathResult
from src.network_graph.graph import build_graph


@pytest.fixture
def java_bali_graph(java_bali_routes, java_bali_airports, java_bali_speeds):
    return build_graph(java_bali_routes, java_bali_airports, java_bali_speeds)


@pytest.fixture
def finder():
    return DijkstraPathFinder()


# =============================================================================
# PATH FINDER
# =============================================================================


class TestDijkstraPathFinder:
    def test_direct_flight(self, finder, java_bali_graph):
        result = finder.find_shortest_path(java_bali_graph, "CGK", "DPS")

        assert isinstance(result, PathResult)
        assert result.path == ("CGK", "DPS")
        assert result.airlines == ("Batik Air",)
        assert result.total_distance == pytest.approx(982.6, abs=0.1)
        assert result.total_time == pytest.approx(result.total_distance / 930.43 * 60)

    def test_segment_names(self, finder, java_bali_graph):
        segment = finder.find_shortest_path(java_bali_graph, "CGK", "SUB").segments[0]

        assert segment.departure_name == "Soekarno-Hatta (Jakarta)"
        assert segment.arrival_name == "Juanda (Surabaya)"
        assert segment.speed == 966.18

    def test_segments_match_path(self, finder, java_bali_graph):
        result = finder.find_shortest_path(java_bali_graph, "YIA", "DPS")

        assert result.path == ("YIA", "SUB", "DPS")
        assert [s.segment_index for s in result.segments] == [0, 1]
        assert result.total_distance == pytest.approx(
            sum(s.distance for s in result.segments)
        )

    def test_same_airport(self, finder, java_bali_graph):
        result = finder.find_shortest_path(java_bali_graph, "SUB", "SUB")
        assert result == PathResult.trivial("SUB")

    def test_unknown_airport(self, finder, java_bali_graph):
        assert finder.find_shortest_path(java_bali_graph, "CGK", "XXX") is None

    def test_k_shortest(self, finder, java_bali_graph):
        results = finder.find_k_shortest_paths(java_bali_graph, "CGK", "DPS", k=3)

        assert [r.path for r in results] == [
            ("CGK", "DPS"),
            ("CGK", "SUB", "DPS"),
            ("CGK", "YIA", "SUB", "DPS"),
        ]
        assert results[2].airlines == ("Lion Air", "Lion Air", "Garuda Indonesia")

    def test_k_shortest_no_path(self, finder, java_bali_graph):
        assert finder.find_k_shortest_paths(java_bali_graph, "CGK", "XXX") == []

    def test_name(self, finder):
        assert finder.name == "Distance-weighted Dijkstra"


# =============================================================================
# CENTRALITY ADAPTER
# =============================================================================


class TestComputeNetworkCentrality:
    def test_java_bali(self, java_bali_routes, java_bali_airports, java_bali_speeds):
        result = compute_network_centrality(java_bali_routes, java_bali_airports, java_bali_speeds)

        assert isinstance(result, NetworkAnalysisResult)
        assert [a.code for a in result.airports] == ["CGK", "SUB", "YIA", "DPS"]
        assert result.get("CGK").name == "Soekarno-Hatta (Jakarta)"
        assert result.get("CGK").metrics.degree == 3
        assert result.network_stats.total_edges == 5
        assert result.network_stats.density == pytest.approx(5 / 6)
        assert len(result.edges) == 5

    def test_unknown_airports_named_by_code(self, star_routes):
        result = compute_network_centrality(star_routes, [])
        assert result.get("L1").name == "L1"

    def test_top_hubs(self, star_routes):
        result = compute_network_centrality(star_routes, [])

        assert len(result.top_hubs) == 5
        assert result.top_hubs[0].code == "H"
        assert result.top_hubs[0].rank.overall == 1.0

    def test_edge_weights_are_distances(self, triangle_routes):
        result = compute_network_centrality(triangle_routes, [])
        assert {e.weight for e in result.edges} == {100.0}

    def test_empty_route_set(self):
        result = compute_network_centrality([], [])

        assert result.airports == []
        assert result.top_hubs == []
        assert result.network_stats.total_nodes == 0
