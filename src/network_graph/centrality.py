"""
Network centrality metrics for the flight graph.

Cost models differ between metrics:
- degree: number of distinct neighbor airports (raw count, not divided
  by n - 1);
- betweenness: Brandes' algorithm over UNWEIGHTED hops;
- closeness: Dijkstra over distance-weighted edges.

So an airport can sit on many fewest-hop routes (high betweenness) while
lying off the geographically shortest ones. Pathfinding uses distances.

Ranking: higher metric value = better rank (1 = most central); the
overall rank is the mean of the three ranks, so LOWER overall means more
central.
"""

import heapq
import itertools
import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .graph import FlightGraph

logger = logging.getLogger(__name__)

TOP_HUB_COUNT = 5


@dataclass(frozen=True, slots=True)
class NodeCentrality:
    code: str
    degree: int
    betweenness: float
    closeness: float


@dataclass(frozen=True, slots=True)
class NodeRank:
    degree: int
    betweenness: int
    closeness: int
    overall: float


@dataclass(frozen=True, slots=True)
class NetworkStats:
    total_nodes: int
    total_edges: int
    average_degree: float
    density: float


@dataclass(frozen=True)
class CentralityReport:
    """All metrics for all nodes, in graph node order."""

    centralities: Tuple[NodeCentrality, ...]
    ranks: Dict[str, NodeRank]
    stats: NetworkStats

    def top_hubs(self, count: int = TOP_HUB_COUNT) -> List[NodeCentrality]:
        """Airports with the lowest overall rank, stable for ties."""
        ordered = sorted(self.centralities, key=lambda c: self.ranks[c.code].overall)
        return ordered[:count]


class CentralityAnalyzer:
    """
    Computes centrality metrics over a simple view of a FlightGraph.

    Multi-airline edges collapse to one edge per airport pair; the first
    adjacency entry of a pair provides its weight.

    Attributes:
        _nodes: Node codes in graph order.
        _adjacency: code -> {neighbor code: distance}, insertion ordered.
    """

    def __init__(self, graph: FlightGraph) -> None:
        self._graph = graph
        self._nodes: List[str] = list(graph.nodes)
        self._adjacency: Dict[str, Dict[str, float]] = {code: {} for code in self._nodes}
        for code in self._nodes:
            for neighbor in graph.neighbors(code):
                self._adjacency[code].setdefault(neighbor.code, neighbor.distance)

    @property
    def nodes(self) -> List[str]:
        return list(self._nodes)

    def edge_list(self) -> List[Tuple[str, str, float]]:
        """Deduplicated undirected (from, to, weight) edges for drawing."""
        return self._graph.edge_list()

    def degree_centrality(self) -> Dict[str, int]:
        return {code: len(self._adjacency[code]) for code in self._nodes}

    def betweenness_centrality(self) -> Dict[str, float]:
        """
        Brandes' algorithm on hop-count shortest paths.

        Every unordered pair is reached once from each endpoint, so raw
        scores are halved before normalizing by (n-1)(n-2)/2. Results lie
        in [0, 1] for n > 2.
        """
        betweenness: Dict[str, float] = dict.fromkeys(self._nodes, 0.0)

        for source in self._nodes:
            stack: List[str] = []
            predecessors: Dict[str, List[str]] = {code: [] for code in self._nodes}
            sigma: Dict[str, float] = dict.fromkeys(self._nodes, 0.0)
            hops: Dict[str, int] = dict.fromkeys(self._nodes, -1)
            sigma[source] = 1.0
            hops[source] = 0

            queue = deque([source])
            while queue:
                v = queue.popleft()
                stack.append(v)
                for w in self._adjacency[v]:
                    if hops[w] < 0:
                        hops[w] = hops[v] + 1
                        queue.append(w)
                    if hops[w] == hops[v] + 1:
                        sigma[w] += sigma[v]
                        predecessors[w].append(v)

            delta: Dict[str, float] = dict.fromkeys(self._nodes, 0.0)
            while stack:
                w = stack.pop()
                for v in predecessors[w]:
                    delta[v] += sigma[v] / sigma[w] * (1 + delta[w])
                if w != source:
                    betweenness[w] += delta[w]

        n = len(self._nodes)
        scale = 0.5
        if n > 2:
            scale /= (n - 1) * (n - 2) / 2
        return {code: value * scale for code, value in betweenness.items()}

    def shortest_distances(self, source: str) -> Dict[str, float]:
        """Weighted distances from source; math.inf for unreachable nodes."""
        distances: Dict[str, float] = dict.fromkeys(self._nodes, math.inf)
        if source not in self._adjacency:
            return distances
        distances[source] = 0.0

        visited = set()
        counter = itertools.count()
        pq: List[Tuple[float, int, str]] = [(0.0, next(counter), source)]
        while pq:
            dist, _, current = heapq.heappop(pq)
            if current in visited:
                continue
            visited.add(current)
            for neighbor, weight in self._adjacency[current].items():
                if neighbor in visited:
                    continue
                new_distance = dist + weight
                if new_distance < distances[neighbor]:
                    distances[neighbor] = new_distance
                    heapq.heappush(pq, (new_distance, next(counter), neighbor))
        return distances

    def closeness_centrality(self) -> Dict[str, float]:
        """
        reachable / sum(distance to reachable) per node.

        Unreachable nodes are left out of both terms. Isolated nodes, and
        nodes whose reachable set is all at distance zero, score 0.
        """
        closeness: Dict[str, float] = {}
        for node in self._nodes:
            distances = self.shortest_distances(node)
            total = 0.0
            reachable = 0
            for target, dist in distances.items():
                if target != node and dist < math.inf:
                    total += dist
                    reachable += 1
            closeness[node] = reachable / total if reachable and total > 0 else 0.0
        return closeness

    def rank(
        self,
        degree: Dict[str, int],
        betweenness: Dict[str, float],
        closeness: Dict[str, float],
    ) -> Dict[str, NodeRank]:
        """1-based ranks per metric (descending value, stable); overall = mean."""

        def positions(values: Dict[str, float]) -> Dict[str, int]:
            ordered = sorted(self._nodes, key=lambda code: values[code], reverse=True)
            return {code: i + 1 for i, code in enumerate(ordered)}

        degree_rank = positions(degree)
        betweenness_rank = positions(betweenness)
        closeness_rank = positions(closeness)

        return {
            code: NodeRank(
                degree=degree_rank[code],
                betweenness=betweenness_rank[code],
                closeness=closeness_rank[code],
                overall=(
                    degree_rank[code] + betweenness_rank[code] + closeness_rank[code]
                )
                / 3,
            )
            for code in self._nodes
        }

    def network_stats(self) -> NetworkStats:
        """Counts, average degree 2|E|/|V| and density 2|E|/(|V|(|V|-1))."""
        total_nodes = len(self._nodes)
        total_degree = sum(len(neighbors) for neighbors in self._adjacency.values())
        total_edges = total_degree // 2

        average_degree = total_degree / total_nodes if total_nodes else 0.0
        density = (
            2 * total_edges / (total_nodes * (total_nodes - 1))
            if total_nodes > 1
            else 0.0
        )
        return NetworkStats(
            total_nodes=total_nodes,
            total_edges=total_edges,
            average_degree=average_degree,
            density=density,
        )

    def analyze(self) -> CentralityReport:
        """Compute every metric, rank and the network statistics."""
        logger.debug("Calculating centrality for %d nodes", len(self._nodes))

        degree = self.degree_centrality()
        betweenness = self.betweenness_centrality()
        closeness = self.closeness_centrality()
        ranks = self.rank(degree, betweenness, closeness)

        centralities = tuple(
            NodeCentrality(
                code=code,
                degree=degree[code],
                betweenness=betweenness[code],
                closeness=closeness[code],
            )
            for code in self._nodes
        )
        return CentralityReport(
            centralities=centralities,
            ranks=ranks,
            stats=self.network_stats(),
        )
