"""Shared fixtures for service tests."""

from concurrent.futures import Future
from typing import List, Optional

import pytest

from src.flight_network.ports.centrality_worker import CentralityWorker
from src.flight_network.schemas.centrality import NetworkAnalysisResult, NetworkStats
from src.flight_network.schemas.messages import CalculateCentralityRequest
from src.network_graph.exceptions import WorkerDispatchError


def make_result(total_nodes: int = 0) -> NetworkAnalysisResult:
    """Distinguishable placeholder result."""
    return NetworkAnalysisResult(
        airports=[],
        top_hubs=[],
        network_stats=NetworkStats(
            total_nodes=total_nodes, total_edges=0, average_degree=0, density=0
        ),
    )


class StubWorker(CentralityWorker):
    """
    Worker whose responses are driven by the test.

    Every submit returns a fresh Future kept in ``futures``; a ``respond``
    callable, when set, completes it immediately.
    """

    def __init__(self, respond=None) -> None:
        self.respond = respond
        self.requests: List[CalculateCentralityRequest] = []
        self.futures: List[Future] = []
        self.dispatch_error: Optional[str] = None
        self.available = True
        self.closed = False

    def submit(self, request: CalculateCentralityRequest) -> Future:
        if self.dispatch_error:
            raise WorkerDispatchError(self.dispatch_error)
        future: Future = Future()
        self.requests.append(request)
        self.futures.append(future)
        if self.respond is not None:
            try:
                future.set_result(self.respond(request))
            except Exception as e:
                future.set_exception(e)
        return future

    @property
    def is_available(self) -> bool:
        return self.available

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def stub_worker() -> StubWorker:
    return StubWorker()


@pytest.fixture
def result_factory():
    return make_result
