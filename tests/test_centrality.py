"""
Tests for CentralityAnalyzer: metrics, ranking and network statistics.
"""

import pytest

from src.network_graph.centrality import CentralityAnalyzer
from src.network_graph.dijkstra import shortest_path
from src.network_graph.graph import build_graph


# =============================================================================
# DEGREE
# =============================================================================


class TestDegree:
    def test_star_degrees(self, star_graph):
        degree = CentralityAnalyzer(star_graph).degree_centrality()

        assert degree["H"] == 5
        assert all(degree[f"L{i}"] == 1 for i in range(1, 6))

    def test_sum_is_twice_edge_count(self, square_graph):
        analyzer = CentralityAnalyzer(square_graph)
        degree = analyzer.degree_centrality()
        assert sum(degree.values()) == 2 * analyzer.network_stats().total_edges

    def test_multi_airline_pair_counts_once(self, route):
        graph = build_graph(
            [route("A", "B", 1.0, airline="X"), route("A", "B", 1.0, airline="Y")]
        )
        assert CentralityAnalyzer(graph).degree_centrality() == {"A": 1, "B": 1}


# =============================================================================
# BETWEENNESS
# =============================================================================


class TestBetweenness:
    def test_star_center_is_on_every_leaf_pair(self, star_graph):
        betweenness = CentralityAnalyzer(star_graph).betweenness_centrality()

        assert betweenness["H"] == pytest.approx(1.0)
        assert all(betweenness[f"L{i}"] == 0 for i in range(1, 6))

    def test_line_middle(self, route):
        graph = build_graph([route("A", "B", 1.0), route("B", "C", 1.0)])
        betweenness = CentralityAnalyzer(graph).betweenness_centrality()

        assert betweenness == pytest.approx({"A": 0.0, "B": 1.0, "C": 0.0})

    def test_split_between_equal_hop_paths(self, square_graph):
        betweenness = CentralityAnalyzer(square_graph).betweenness_centrality()
        # A-D has two 2-hop paths (via B, via C); B-C likewise (via A, via D)
        assert betweenness == pytest.approx({"A": 1 / 6, "B": 1 / 6, "C": 1 / 6, "D": 1 / 6})

    @pytest.mark.parametrize(
        "fixture", ["triangle_graph", "star_graph", "line_graph", "square_graph"]
    )
    def test_normalized_range(self, request, fixture):
        graph = request.getfixturevalue(fixture)
        values = CentralityAnalyzer(graph).betweenness_centrality().values()
        assert all(0.0 <= v <= 1.0 for v in values)

    def test_counts_hops_not_distance(self, route):
        # Weighted shortest A-B goes through C, but the hop-shortest is direct
        graph = build_graph(
            [route("A", "B", 100.0), route("A", "C", 1.0), route("C", "B", 1.0)]
        )

        assert shortest_path(graph, "A", "B").nodes == ("A", "C", "B")
        assert CentralityAnalyzer(graph).betweenness_centrality()["C"] == 0.0


# =============================================================================
# CLOSENESS
# =============================================================================


class TestCloseness:
    def test_star_values(self, star_graph):
        closeness = CentralityAnalyzer(star_graph).closeness_centrality()

        assert closeness["H"] == pytest.approx(5 / 50)
        assert closeness["L1"] == pytest.approx(5 / 90)

    def test_uses_weighted_distances(self, route):
        graph = build_graph(
            [route("A", "B", 100.0), route("A", "C", 1.0), route("C", "B", 1.0)]
        )
        closeness = CentralityAnalyzer(graph).closeness_centrality()
        # A reaches C at 1 and B at 2 (via C)
        assert closeness["A"] == pytest.approx(2 / 3)

    def test_unreachable_nodes_excluded(self, route):
        graph = build_graph([route("A", "B", 10.0), route("C", "D", 30.0)])
        closeness = CentralityAnalyzer(graph).closeness_centrality()

        assert closeness["A"] == pytest.approx(1 / 10)
        assert closeness["C"] == pytest.approx(1 / 30)

    def test_isolated_node_is_zero(self, route):
        graph = build_graph([route("A", "B", 10.0), route("Z", "Z", 1.0)])
        assert CentralityAnalyzer(graph).closeness_centrality()["Z"] == 0.0


# =============================================================================
# RANKING
# =============================================================================


class TestRanking:
    def test_star_center_ranks_first_everywhere(self, star_graph):
        report = CentralityAnalyzer(star_graph).analyze()
        rank = report.ranks["H"]

        assert (rank.degree, rank.betweenness, rank.closeness) == (1, 1, 1)
        assert rank.overall == 1.0

    def test_overall_is_mean_of_ranks(self, square_graph):
        report = CentralityAnalyzer(square_graph).analyze()
        for rank in report.ranks.values():
            assert rank.overall == pytest.approx(
                (rank.degree + rank.betweenness + rank.closeness) / 3
            )

    def test_ties_keep_node_order(self, star_graph):
        report = CentralityAnalyzer(star_graph).analyze()
        assert [report.ranks[f"L{i}"].degree for i in range(1, 6)] == [2, 3, 4, 5, 6]

    def test_ranks_are_a_permutation(self, square_graph):
        report = CentralityAnalyzer(square_graph).analyze()
        assert sorted(r.closeness for r in report.ranks.values()) == [1, 2, 3, 4]

    def test_top_hubs_lowest_overall_first(self, star_graph):
        hubs = CentralityAnalyzer(star_graph).analyze().top_hubs()

        assert len(hubs) == 5
        assert hubs[0].code == "H"

    def test_top_hubs_count(self, star_graph):
        assert len(CentralityAnalyzer(star_graph).analyze().top_hubs(2)) == 2


# =============================================================================
# NETWORK STATS
# =============================================================================


class TestNetworkStats:
    def test_star(self, star_graph):
        stats = CentralityAnalyzer(star_graph).network_stats()

        assert stats.total_nodes == 6
        assert stats.total_edges == 5
        assert stats.average_degree == pytest.approx(10 / 6)
        assert stats.density == pytest.approx(2 * 5 / (6 * 5))

    def test_triangle_is_complete(self, triangle_graph):
        assert CentralityAnalyzer(triangle_graph).network_stats().density == pytest.approx(1.0)

    def test_empty_graph(self):
        stats = CentralityAnalyzer(build_graph([])).network_stats()

        assert stats.total_nodes == 0
        assert stats.total_edges == 0
        assert stats.average_degree == 0.0
        assert stats.density == 0.0

    def test_single_node(self, route):
        stats = CentralityAnalyzer(build_graph([route("A", "A", 1.0)])).network_stats()
        assert stats.total_nodes == 1
        assert stats.density == 0.0

    def test_empty_graph_report(self):
        report = CentralityAnalyzer(build_graph([])).analyze()
        assert report.centralities == ()
        assert report.top_hubs() == []


class TestEdgeList:
    def test_edge_list_from_graph(self, triangle_graph):
        edges = CentralityAnalyzer(triangle_graph).edge_list()
        assert len(edges) == 3
        assert all(weight == 100.0 for _, _, weight in edges)
