"""
Tests for the alternative-path heuristic (edge removal, then hubs).
"""

import pytest

from src.network_graph.dijkstra import shortest_path
from src.network_graph.exceptions import InvalidPathRequestError
from src.network_graph.graph import build_graph
from src.network_graph.k_shortest import hub_airports, k_shortest_paths


class TestBasics:
    def test_single_simple_path_is_not_padded(self, line_graph):
        paths = k_shortest_paths(line_graph, "A", "D", 3)

        assert len(paths) == 1
        assert paths[0].nodes == ("A", "B", "C", "D")

    def test_first_result_is_the_shortest_path(self, square_graph):
        paths = k_shortest_paths(square_graph, "A", "D", 3)
        assert paths[0] == shortest_path(square_graph, "A", "D")

    def test_square_yields_both_sides_only(self, square_graph):
        paths = k_shortest_paths(square_graph, "A", "D", 3)

        assert [p.nodes for p in paths] == [("A", "B", "D"), ("A", "C", "D")]
        assert [p.total_distance for p in paths] == [2.0, 4.0]

    def test_results_are_distinct(self, triangle_graph):
        paths = k_shortest_paths(triangle_graph, "A", "C", 5)
        sequences = [p.nodes for p in paths]
        assert len(sequences) == len(set(sequences))

    @pytest.mark.parametrize("k", [1, 2, 3, 5])
    def test_never_more_than_k(self, triangle_graph, k):
        assert len(k_shortest_paths(triangle_graph, "A", "C", k)) <= k

    def test_k_zero_is_empty(self, triangle_graph):
        assert k_shortest_paths(triangle_graph, "A", "C", 0) == []

    def test_negative_k_rejected(self, triangle_graph):
        with pytest.raises(InvalidPathRequestError) as exc_info:
            k_shortest_paths(triangle_graph, "A", "C", -1)
        assert exc_info.value.parameter_name == "k"
        assert isinstance(exc_info.value, ValueError)

    def test_no_path_is_empty(self, route):
        graph = build_graph([route("A", "B", 1.0), route("C", "D", 1.0)])
        assert k_shortest_paths(graph, "A", "D", 3) == []

    def test_unknown_airport_is_empty(self, triangle_graph):
        assert k_shortest_paths(triangle_graph, "A", "Z", 3) == []


class TestEdgeRemoval:
    def test_triangle_alternative_goes_around(self, triangle_graph):
        paths = k_shortest_paths(triangle_graph, "A", "C", 2)

        assert [p.nodes for p in paths] == [("A", "C"), ("A", "B", "C")]
        assert paths[1].total_distance == 200.0

    def test_cheapest_candidate_accepted_first(self, route):
        # Shortest A-D is direct; removing it leaves two detours of different cost
        graph = build_graph(
            [
                route("A", "D", 5.0),
                route("A", "B", 4.0),
                route("B", "D", 4.0),
                route("A", "C", 2.0),
                route("C", "D", 4.0),
            ]
        )
        paths = k_shortest_paths(graph, "A", "D", 2)
        assert paths[1].nodes == ("A", "C", "D")


class TestHubFallback:
    def test_hub_composition_when_removal_finds_nothing(self, route):
        # A-B is the only A..B connection; H hangs off A. Removing A-B
        # disconnects B, so the hub heuristic composes A->H + H->A->B.
        graph = build_graph([route("A", "B", 10.0), route("A", "H", 3.0)])

        paths = k_shortest_paths(graph, "A", "B", 3)

        assert [p.nodes for p in paths] == [("A", "B"), ("A", "H", "A", "B")]
        assert paths[1].total_distance == 16.0
        assert len(paths[1].edges) == 3

    def test_hubs_ordered_by_degree_stable(self, route):
        graph = build_graph(
            [route("A", "B", 1.0), route("C", "B", 1.0), route("C", "D", 1.0), route("C", "E", 1.0)]
        )
        assert hub_airports(graph) == ["C", "B", "A", "D", "E"]

    def test_hubs_count_airports_not_airlines(self, route):
        graph = build_graph(
            [
                route("X", "Y", 1.0, airline="One"),
                route("X", "Y", 1.0, airline="Two"),
                route("X", "Y", 1.0, airline="Three"),
                route("Z", "P", 1.0),
                route("Z", "Q", 1.0),
            ]
        )
        assert hub_airports(graph)[0] == "Z"

    def test_hub_limit(self, star_graph):
        assert hub_airports(star_graph, limit=2) == ["H", "L1"]


class TestPathIntegrity:
    def test_every_path_follows_graph_edges(self, square_graph):
        for path in k_shortest_paths(square_graph, "A", "D", 3):
            assert path.nodes[0] == "A"
            assert path.nodes[-1] == "D"
            assert len(path.edges) == len(path.nodes) - 1
            assert path.total_distance == pytest.approx(
                sum(edge.distance for edge in path.edges)
            )
            for edge in path.edges:
                assert edge.destination in square_graph.distinct_neighbors(edge.origin)
