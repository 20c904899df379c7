"""
Flight network performance benchmarks.

Measures:
- Graph build from the bundled route table
- Shortest and alternative path latency
- Centrality computation, cold and cached
"""

import pytest

from src.flight_network.adapters.algorithms.centrality_adapter import (
    compute_network_centrality,
)
from src.network_graph.centrality import CentralityAnalyzer
from src.network_graph.graph import build_graph


class TestGraphBuild:
    """Benchmark graph construction."""

    def test_build_bundled_graph(self, benchmark, preloaded_snapshot):
        graph = benchmark(
            build_graph,
            preloaded_snapshot.routes,
            preloaded_snapshot.airports,
            preloaded_snapshot.airline_speeds,
        )
        assert len(graph) == 62


class TestPathLatency:
    """Benchmark path searches on the preloaded graph."""

    def test_shortest_path(self, benchmark, preloaded_graph, path_finder):
        result = benchmark(path_finder.find_shortest_path, preloaded_graph, "BTJ", "MKQ")
        assert result is not None

    def test_k_shortest_paths(self, benchmark, preloaded_graph, path_finder):
        """Alternative paths run one search per removed edge, plus hub legs."""
        results = benchmark(
            path_finder.find_k_shortest_paths, preloaded_graph, "KNO", "TIM", 5
        )
        assert 1 <= len(results) <= 5


class TestCentralityLatency:
    """Benchmark centrality computation."""

    def test_analyzer_cold(self, benchmark, preloaded_graph):
        report = benchmark.pedantic(
            lambda: CentralityAnalyzer(preloaded_graph).analyze(),
            rounds=3,
            warmup_rounds=1,
        )
        assert report.stats.total_nodes == 62

    def test_full_result_cold(self, benchmark, preloaded_snapshot):
        result = benchmark.pedantic(
            compute_network_centrality,
            args=(
                preloaded_snapshot.routes,
                preloaded_snapshot.airports,
                preloaded_snapshot.airline_speeds,
            ),
            rounds=3,
            warmup_rounds=1,
        )
        assert len(result.airports) == 62

    def test_cached_lookup(self, benchmark, warm_network):
        """Cached calls hash the route list and hit the cache."""
        first = warm_network.calculate_centrality()
        result = benchmark(warm_network.calculate_centrality)
        assert result is first

    @pytest.mark.parametrize("k", [1, 3])
    def test_facade_paths(self, benchmark, warm_network, k):
        results = benchmark(warm_network.find_k_shortest_paths, "CGK", "DJJ", k)
        assert len(results) == k
